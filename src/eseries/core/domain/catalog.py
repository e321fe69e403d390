"""
SeriesCatalog — Статический каталог E-series

Единственный источник базовых значений и допусков.
Каталог строится один раз при импорте и далее только читается:
MappingProxyType поверх frozen SeriesRecord, поэтому конкурентный
доступ на чтение из нескольких потоков безопасен без блокировок.

Значения E48/E96/E192 (в таблицах IEC 60063 трёхзначные: 100, 105, ...)
хранятся нормализованными в ту же декаду [10, 100): 10.0, 10.5, ...
с significant_figures=3.
"""

from types import MappingProxyType
from typing import Final, Mapping

from eseries.core.domain.series import ESeries, SeriesRecord
from eseries.core.errors import NotFoundError

# =============================================================================
# БАЗОВЫЕ ЗНАЧЕНИЯ (одна декада)
# =============================================================================

E3_VALUES: Final[tuple[float, ...]] = (10, 22, 47)

E6_VALUES: Final[tuple[float, ...]] = (10, 15, 22, 33, 47, 68)

E12_VALUES: Final[tuple[float, ...]] = (10, 12, 15, 18, 22, 27, 33, 39, 47, 56, 68, 82)

E24_VALUES: Final[tuple[float, ...]] = (
    10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
    33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91,
)  # fmt: skip

E48_VALUES: Final[tuple[float, ...]] = (
    10.0, 10.5, 11.0, 11.5, 12.1, 12.7, 13.3, 14.0, 14.7, 15.4, 16.2, 16.9,
    17.8, 18.7, 19.6, 20.5, 21.5, 22.6, 23.7, 24.9, 26.1, 27.4, 28.7, 30.1,
    31.6, 33.2, 34.8, 36.5, 38.3, 40.2, 42.2, 44.2, 46.4, 48.7, 51.1, 53.6,
    56.2, 59.0, 61.9, 64.9, 68.1, 71.5, 75.0, 78.7, 82.5, 86.6, 90.9, 95.3,
)  # fmt: skip

E96_VALUES: Final[tuple[float, ...]] = (
    10.0, 10.2, 10.5, 10.7, 11.0, 11.3, 11.5, 11.8, 12.1, 12.4, 12.7, 13.0,
    13.3, 13.7, 14.0, 14.3, 14.7, 15.0, 15.4, 15.8, 16.2, 16.5, 16.9, 17.4,
    17.8, 18.2, 18.7, 19.1, 19.6, 20.0, 20.5, 21.0, 21.5, 22.1, 22.6, 23.2,
    23.7, 24.3, 24.9, 25.5, 26.1, 26.7, 27.4, 28.0, 28.7, 29.4, 30.1, 30.9,
    31.6, 32.4, 33.2, 34.0, 34.8, 35.7, 36.5, 37.4, 38.3, 39.2, 40.2, 41.2,
    42.2, 43.2, 44.2, 45.3, 46.4, 47.5, 48.7, 49.9, 51.1, 52.3, 53.6, 54.9,
    56.2, 57.6, 59.0, 60.4, 61.9, 63.4, 64.9, 66.5, 68.1, 69.8, 71.5, 73.2,
    75.0, 76.8, 78.7, 80.6, 82.5, 84.5, 86.6, 88.7, 90.9, 93.1, 95.3, 97.6,
)  # fmt: skip

E192_VALUES: Final[tuple[float, ...]] = (
    10.0, 10.1, 10.2, 10.4, 10.5, 10.6, 10.7, 10.9, 11.0, 11.1, 11.3, 11.4,
    11.5, 11.7, 11.8, 12.0, 12.1, 12.3, 12.4, 12.6, 12.7, 12.9, 13.0, 13.2,
    13.3, 13.5, 13.7, 13.8, 14.0, 14.2, 14.3, 14.5, 14.7, 14.9, 15.0, 15.2,
    15.4, 15.6, 15.8, 16.0, 16.2, 16.4, 16.5, 16.7, 16.9, 17.2, 17.4, 17.6,
    17.8, 18.0, 18.2, 18.4, 18.7, 18.9, 19.1, 19.3, 19.6, 19.8, 20.0, 20.3,
    20.5, 20.8, 21.0, 21.3, 21.5, 21.8, 22.1, 22.3, 22.6, 22.9, 23.2, 23.4,
    23.7, 24.0, 24.3, 24.6, 24.9, 25.2, 25.5, 25.8, 26.1, 26.4, 26.7, 27.1,
    27.4, 27.7, 28.0, 28.4, 28.7, 29.1, 29.4, 29.8, 30.1, 30.5, 30.9, 31.2,
    31.6, 32.0, 32.4, 32.8, 33.2, 33.6, 34.0, 34.4, 34.8, 35.2, 35.7, 36.1,
    36.5, 37.0, 37.4, 37.9, 38.3, 38.8, 39.2, 39.7, 40.2, 40.7, 41.2, 41.7,
    42.2, 42.7, 43.2, 43.7, 44.2, 44.8, 45.3, 45.9, 46.4, 47.0, 47.5, 48.1,
    48.7, 49.3, 49.9, 50.5, 51.1, 51.7, 52.3, 53.0, 53.6, 54.2, 54.9, 55.6,
    56.2, 56.9, 57.6, 58.3, 59.0, 59.7, 60.4, 61.2, 61.9, 62.6, 63.4, 64.2,
    64.9, 65.7, 66.5, 67.3, 68.1, 69.0, 69.8, 70.6, 71.5, 72.3, 73.2, 74.1,
    75.0, 75.9, 76.8, 77.7, 78.7, 79.6, 80.6, 81.6, 82.5, 83.5, 84.5, 85.6,
    86.6, 87.6, 88.7, 89.8, 90.9, 92.0, 93.1, 94.2, 95.3, 96.5, 97.6, 98.8,
)  # fmt: skip

# =============================================================================
# ДОПУСКИ
# =============================================================================

TOLERANCE: Final[Mapping[ESeries, float]] = MappingProxyType(
    {
        ESeries.E3: 0.4,
        ESeries.E6: 0.2,
        ESeries.E12: 0.1,
        ESeries.E24: 0.05,
        ESeries.E48: 0.02,
        ESeries.E96: 0.01,
        ESeries.E192: 0.005,
    }
)


# =============================================================================
# КАТАЛОГ
# =============================================================================


def _build_catalog() -> Mapping[ESeries, SeriesRecord]:
    """Построение read-only каталога (вызывается один раз при импорте)."""
    tables = {
        ESeries.E3: (E3_VALUES, 2),
        ESeries.E6: (E6_VALUES, 2),
        ESeries.E12: (E12_VALUES, 2),
        ESeries.E24: (E24_VALUES, 2),
        ESeries.E48: (E48_VALUES, 3),
        ESeries.E96: (E96_VALUES, 3),
        ESeries.E192: (E192_VALUES, 3),
    }
    return MappingProxyType(
        {
            key: SeriesRecord(
                key=key,
                base_values=base_values,
                tolerance=TOLERANCE[key],
                significant_figures=significant_figures,
            )
            for key, (base_values, significant_figures) in tables.items()
        }
    )


CATALOG: Final[Mapping[ESeries, SeriesRecord]] = _build_catalog()


def _available_names() -> str:
    return ", ".join(key.name for key in ESeries)


# =============================================================================
# ДОСТУП К КАТАЛОГУ
# =============================================================================


def series_record(series_key: ESeries) -> SeriesRecord:
    """
    Запись каталога для серии.

    Args:
        series_key: E-series ключ, например ESeries.E24

    Returns:
        Immutable SeriesRecord

    Raises:
        NotFoundError: Если серия не существует
    """
    record = CATALOG.get(series_key)
    if record is None:
        raise NotFoundError(
            f"E-series {series_key} not found. "
            f"Available E-series keys are {_available_names()}"
        )
    return record


def values(series_key: ESeries) -> list[float]:
    """
    Базовые значения серии.

    Args:
        series_key: E-series ключ, например ESeries.E24

    Returns:
        Новый список (копия) значений одной декады в [10, 100)

    Raises:
        NotFoundError: Если серия не существует

    Examples:
        >>> values(ESeries.E6)
        [10.0, 15.0, 22.0, 33.0, 47.0, 68.0]
    """
    return list(series_record(series_key).base_values)


def tolerance(series_key: ESeries) -> float:
    """
    Номинальный допуск серии.

    Args:
        series_key: E-series ключ, например ESeries.E24

    Returns:
        Доля между нулём и единицей (0.1 означает допуск 10%)

    Raises:
        NotFoundError: Если серия не существует
    """
    return series_record(series_key).tolerance


def series_keys() -> list[ESeries]:
    """Все ключи E-series по возрастанию количества значений."""
    return sorted(CATALOG)


def resolve(name: str) -> ESeries:
    """
    ESeries по имени, без учёта регистра.

    Args:
        name: Имя серии, например 'E24' или 'e24'

    Returns:
        ESeries

    Raises:
        NotFoundError: Если серии с таким именем нет
    """
    try:
        return ESeries[name.strip().upper()]
    except KeyError:
        raise NotFoundError(
            f"E-series with name {name!r} not found. "
            f"Available E-series keys are {_available_names()}"
        ) from None
