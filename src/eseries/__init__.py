"""
eseries — E-series preferred values (IEC 60063)

Lookup and derivation operations over the E3..E192 preferred-value series:
base values, tolerances, nearest values, directional search, ranges across
decades and tolerance limits.
"""

from eseries.core.domain import (
    ESeries,
    QueryKind,
    QueryResult,
    SeriesRecord,
    resolve,
    series_keys,
    series_record,
    tolerance,
    values,
)
from eseries.core.errors import ESeriesError, NotFoundError, ValidationError
from eseries.core.math import MINIMUM_E_VALUE, round_sig
from eseries.eng import eng_string
from eseries.lookup import (
    ToleranceLimits,
    erange,
    find_greater_than,
    find_greater_than_or_equal,
    find_less_than,
    find_less_than_or_equal,
    find_nearest,
    find_nearest_few,
    lower_tolerance_limit,
    open_erange,
    tolerance_limits,
    upper_tolerance_limit,
)

__version__ = "1.0.0"

__all__ = [
    # Catalog
    "ESeries",
    "SeriesRecord",
    "resolve",
    "series_keys",
    "series_record",
    "tolerance",
    "values",
    # Ranges
    "MINIMUM_E_VALUE",
    "erange",
    "open_erange",
    # Nearest / comparators
    "find_nearest",
    "find_nearest_few",
    "find_greater_than",
    "find_greater_than_or_equal",
    "find_less_than",
    "find_less_than_or_equal",
    # Tolerance
    "ToleranceLimits",
    "lower_tolerance_limit",
    "upper_tolerance_limit",
    "tolerance_limits",
    # Formatting
    "round_sig",
    "eng_string",
    # Results
    "QueryKind",
    "QueryResult",
    # Errors
    "ESeriesError",
    "NotFoundError",
    "ValidationError",
]
