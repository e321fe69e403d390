"""
NearestFinder — Ближайшие E-значения

Поиск ближайших к произвольному значению предпочтительных значений:
1. Безопасное окно [value / scale^1.5, value * scale^1.5], где scale —
   geometric_scale серии (максимальное отношение соседних значений)
2. Генерация кандидатов окна через erange
3. Выбор num ближайших по абсолютному расстоянию

Ширина окна гарантирует минимум три реальных кандидата независимо от
положения value относительно границ декад.
"""

import logging
from typing import Final, Sequence

from eseries.core.domain.catalog import series_record
from eseries.core.domain.series import ESeries
from eseries.core.errors import ValidationError
from eseries.lookup.erange import erange

logger = logging.getLogger(__name__)

# Показатель степени geometric_scale для полуширины окна поиска
NEAREST_WINDOW_EXPONENT: Final[float] = 1.5

# Допустимое количество ближайших значений
NEAREST_FEW_ALLOWED: Final[tuple[int, ...]] = (1, 2, 3)


def nearest_n(candidates: Sequence[float], value: float, n: int) -> list[float]:
    """
    n ближайших к value кандидатов.

    Сортировка по абсолютному расстоянию стабильная: при равном
    расстоянии сохраняется исходный порядок кандидатов.

    Args:
        candidates: Кандидаты (любой порядок)
        value: Целевое значение
        n: Количество значений

    Returns:
        Не более n кандидатов, отсортированных по возрастанию

    Examples:
        >>> nearest_n([33, 39, 47, 56], 42, 2)
        [39, 47]
    """
    by_distance = sorted(candidates, key=lambda candidate: abs(candidate - value))
    return sorted(by_distance[:n])


def find_nearest_few(series_key: ESeries, value: float, num: int = 3) -> list[float]:
    """
    Несколько ближайших к value значений серии.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Целевое значение
        num: Количество значений: 1, 2 или 3

    Returns:
        Список из num значений по возрастанию

    Raises:
        ValidationError: Если num не 1, 2 или 3, или value вне
            допустимого диапазона (NaN/Inf, слишком малое)
        NotFoundError: Если серия не существует

    Examples:
        >>> find_nearest_few(ESeries.E12, 42)
        [33.0, 39.0, 47.0]
    """
    if num not in NEAREST_FEW_ALLOWED:
        raise ValidationError(f"num {num} is not 1, 2 or 3")

    half_width = series_record(series_key).geometric_scale**NEAREST_WINDOW_EXPONENT
    start = value / half_width
    stop = value * half_width
    logger.debug(
        "nearest window for %s around %r: [%r, %r]", series_key, value, start, stop
    )

    candidates = erange(series_key, start, stop)
    return nearest_n(candidates, value, num)


def find_nearest(series_key: ESeries, value: float) -> float:
    """
    Ближайшее к value значение серии.

    Args:
        series_key: E-series ключ, например ESeries.E24
        value: Целевое значение

    Returns:
        Значение серии, ближайшее к value

    Raises:
        ValidationError: Если value вне допустимого диапазона
        NotFoundError: Если серия не существует

    Examples:
        >>> find_nearest(ESeries.E12, 42)
        39.0
        >>> find_nearest(ESeries.E24, 42)
        43.0
    """
    return find_nearest_few(series_key, value, 1)[0]
