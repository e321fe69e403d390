"""
Comparators — Направленный поиск E-значений

Наименьшее значение больше (или равное) и наибольшее значение меньше
(или равное) заданного. Все функции берут три ближайших кандидата
(find_nearest_few(..., 3)) и сканируют их в нужном направлении.

Исчерпание кандидатов при корректном окне поиска недостижимо:
NotFoundError здесь означает нарушение инварианта окна, а не
штатный исход, и логируется как ошибка.
"""

import logging
from typing import Callable, Iterable

from eseries.core.domain.series import ESeries
from eseries.core.errors import NotFoundError
from eseries.lookup.nearest import find_nearest_few

logger = logging.getLogger(__name__)


def _first_matching(
    candidates: Iterable[float],
    predicate: Callable[[float], bool],
    series_key: ESeries,
    value: float,
    relation: str,
) -> float:
    for candidate in candidates:
        if predicate(candidate):
            return candidate

    logger.error(
        "search window exhausted: no candidate %s %r in E%s", relation, value, int(series_key)
    )
    raise NotFoundError(
        f"Could not find a value {relation} {value} in the E{int(series_key)} series"
    )


def find_greater_than_or_equal(series_key: ESeries, value: float) -> float:
    """
    Наименьшее значение серии, большее или равное value.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Целевое значение

    Returns:
        Наименьшее значение >= value

    Raises:
        ValidationError: Если value вне допустимого диапазона
        NotFoundError: Если серия не существует
    """
    candidates = find_nearest_few(series_key, value, 3)
    return _first_matching(
        candidates, lambda c: c >= value, series_key, value, "greater than or equal to"
    )


def find_greater_than(series_key: ESeries, value: float) -> float:
    """
    Наименьшее значение серии, строго большее value.

    Examples:
        >>> find_greater_than(ESeries.E12, 42)
        47.0
    """
    candidates = find_nearest_few(series_key, value, 3)
    return _first_matching(candidates, lambda c: c > value, series_key, value, "greater than")


def find_less_than_or_equal(series_key: ESeries, value: float) -> float:
    """
    Наибольшее значение серии, меньшее или равное value.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Целевое значение

    Returns:
        Наибольшее значение <= value

    Raises:
        ValidationError: Если value вне допустимого диапазона
        NotFoundError: Если серия не существует
    """
    candidates = find_nearest_few(series_key, value, 3)
    return _first_matching(
        reversed(candidates), lambda c: c <= value, series_key, value, "less than or equal to"
    )


def find_less_than(series_key: ESeries, value: float) -> float:
    """
    Наибольшее значение серии, строго меньшее value.

    Examples:
        >>> find_less_than(ESeries.E12, 42)
        39.0
    """
    candidates = find_nearest_few(series_key, value, 3)
    return _first_matching(reversed(candidates), lambda c: c < value, series_key, value, "less than")
