"""Lookup — поиск по E-series: диапазоны, ближайшие значения, допуски.

Строится поверх каталога (eseries.core.domain.catalog):
    erange → nearest → comparators; tolerance зависит только от каталога.
"""

from .comparators import (
    find_greater_than,
    find_greater_than_or_equal,
    find_less_than,
    find_less_than_or_equal,
)
from .erange import erange, open_erange
from .nearest import (
    NEAREST_FEW_ALLOWED,
    NEAREST_WINDOW_EXPONENT,
    find_nearest,
    find_nearest_few,
    nearest_n,
)
from .tolerance import (
    ToleranceLimits,
    lower_tolerance_limit,
    tolerance_limits,
    upper_tolerance_limit,
)

__all__ = [
    # RangeGenerator
    "erange",
    "open_erange",
    # NearestFinder
    "NEAREST_FEW_ALLOWED",
    "NEAREST_WINDOW_EXPONENT",
    "nearest_n",
    "find_nearest",
    "find_nearest_few",
    # Comparators
    "find_greater_than",
    "find_greater_than_or_equal",
    "find_less_than",
    "find_less_than_or_equal",
    # ToleranceCalculator
    "ToleranceLimits",
    "lower_tolerance_limit",
    "upper_tolerance_limit",
    "tolerance_limits",
]
