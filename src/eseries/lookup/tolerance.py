"""
ToleranceCalculator — Границы допуска номинального значения

Чистая арифметика над таблицей допусков каталога:
    lower = value - value × tolerance
    upper = value + value × tolerance
"""

from typing import NamedTuple

from eseries.core.domain.catalog import tolerance
from eseries.core.domain.series import ESeries


class ToleranceLimits(NamedTuple):
    """Нижняя и верхняя границы допуска."""

    lower: float
    upper: float


def lower_tolerance_limit(series_key: ESeries, value: float) -> float:
    """
    Нижняя граница допуска номинального значения.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Номинальное значение

    Returns:
        value × (1 - tolerance)

    Raises:
        NotFoundError: Если серия не существует
    """
    return value - value * tolerance(series_key)


def upper_tolerance_limit(series_key: ESeries, value: float) -> float:
    """
    Верхняя граница допуска номинального значения.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Номинальное значение

    Returns:
        value × (1 + tolerance)

    Raises:
        NotFoundError: Если серия не существует
    """
    return value + value * tolerance(series_key)


def tolerance_limits(series_key: ESeries, value: float) -> ToleranceLimits:
    """
    Нижняя и верхняя границы допуска номинального значения.

    Examples:
        >>> tolerance_limits(ESeries.E12, 100)
        ToleranceLimits(lower=90.0, upper=110.0)
    """
    return ToleranceLimits(
        lower_tolerance_limit(series_key, value),
        upper_tolerance_limit(series_key, value),
    )
