"""
Тесты для RangeGenerator (erange / open_erange)

Проверяемые инварианты:
1. erange(id, 10, 100) == values(id) (тождество на базовой декаде)
2. Диапазоны через несколько декад, дробные и экстремальные порядки
3. Граница stop: точное совпадение включается, кроме stop == 100
4. Результат по возрастанию, без дубликатов, только значения каталога × 10^k
5. Валидация: NaN/Inf, < MINIMUM_E_VALUE, start > stop
"""

import math

import pytest

from eseries.core.domain.catalog import values
from eseries.core.domain.series import ESeries
from eseries.core.errors import NotFoundError, ValidationError
from eseries.core.math.numerical_safeguards import MINIMUM_E_VALUE, round_sig
from eseries.lookup.erange import erange, open_erange

# =============================================================================
# ТЕСТЫ: базовая декада
# =============================================================================


class TestBaseDecade:
    """erange внутри декады [10, 100]."""

    @pytest.mark.parametrize("series_key", list(ESeries))
    def test_identity_at_base_decade(self, series_key):
        assert erange(series_key, 10, 100) == values(series_key)

    def test_unaligned_bounds(self):
        assert erange(ESeries.E12, 25, 70) == [27, 33, 39, 47, 56, 68]

    def test_bounds_on_values_inclusive(self):
        assert erange(ESeries.E12, 27, 68) == [27, 33, 39, 47, 56, 68]

    def test_empty_range(self):
        """Между 13 и 14 нет значений E12."""
        assert erange(ESeries.E12, 13, 14) == []

    def test_single_point_range(self):
        assert erange(ESeries.E12, 10, 10) == [10]
        assert erange(ESeries.E12, 47, 47) == [47]

    def test_single_point_between_values(self):
        assert erange(ESeries.E12, 42, 42) == []


# =============================================================================
# ТЕСТЫ: несколько декад и экстремальные порядки
# =============================================================================


class TestAcrossDecades:
    """erange через границы декад."""

    def test_kilo_decade_includes_stop(self):
        result = erange(ESeries.E12, 1000, 10000)
        assert result == [
            1000, 1200, 1500, 1800, 2200, 2700, 3300, 3900, 4700, 5600, 6800, 8200, 10000,
        ]  # fmt: skip

    def test_sub_unit_values(self):
        result = erange(ESeries.E6, 0.01, 0.1)
        assert result == [0.01, 0.015, 0.022, 0.033, 0.047, 0.068, 0.1]

    def test_spanning_three_decades(self):
        result = erange(ESeries.E3, 1, 1000)
        assert result == [1, 2.2, 4.7, 10, 22, 47, 100, 220, 470, 1000]

    def test_e48_three_significant_figures(self):
        result = erange(ESeries.E48, 1000, 1200)
        assert result == [1000, 1050, 1100, 1150]

    @pytest.mark.parametrize("exponent", [-3, 0, 2, 5])
    @pytest.mark.parametrize("series_key", list(ESeries))
    def test_full_decade_includes_both_bounds(self, series_key, exponent):
        """Полная декада (кроме [10, 100]) содержит n + 1 значение."""
        start = float(f"1e{exponent}")
        stop = float(f"1e{exponent + 1}")
        result = erange(series_key, start, stop)
        assert len(result) == series_key.value + 1
        assert result[0] == start
        assert result[-1] == stop

    def test_astronomically_large(self):
        result = erange(ESeries.E24, 1e200, 1e201)
        assert len(result) == 25
        assert result[0] == 1e200
        assert result[1] == 1.1e200
        assert result[-2] == 9.1e200
        assert result[-1] == 1e201

    def test_astronomically_small(self):
        result = erange(ESeries.E3, 1e-200, 1e-199)
        assert result == [1e-200, 2.2e-200, 4.7e-200, 1e-199]

    def test_minimum_value_accepted(self):
        result = erange(ESeries.E12, MINIMUM_E_VALUE, MINIMUM_E_VALUE)
        assert result == [MINIMUM_E_VALUE]


# =============================================================================
# ТЕСТЫ: граница stop == 100
# =============================================================================


class TestStopBoundary:
    """Унаследованное исключение точного совпадения со stop == 100."""

    def test_exact_stop_included(self):
        assert erange(ESeries.E12, 82, 1000)[-1] == 1000
        assert erange(ESeries.E12, 39, 47)[-1] == 47

    def test_exact_stop_100_excluded(self):
        assert erange(ESeries.E12, 82, 100) == [82]

    def test_single_point_100_is_empty(self):
        assert erange(ESeries.E12, 100, 100) == []

    def test_100_included_when_not_stop(self):
        assert 100 in erange(ESeries.E12, 82, 120)


# =============================================================================
# ТЕСТЫ: свойства результата
# =============================================================================


class TestResultProperties:
    """Порядок, уникальность и происхождение значений."""

    @pytest.mark.parametrize(
        "series_key, start, stop",
        [
            (ESeries.E12, 0.5, 5e5),
            (ESeries.E24, 3.3e-9, 4.7e-6),
            (ESeries.E96, 0.5, 5e5),
            (ESeries.E192, 1e12, 1e14),
        ],
    )
    def test_ascending_unique_and_in_bounds(self, series_key, start, stop):
        result = erange(series_key, start, stop)
        assert result
        assert all(a < b for a, b in zip(result, result[1:]))
        assert all(start <= x <= stop for x in result)

    @pytest.mark.parametrize("series_key", [ESeries.E12, ESeries.E96])
    def test_values_are_scaled_catalog_values(self, series_key):
        base = set(values(series_key))
        for x in erange(series_key, 0.5, 5e5):
            shift = math.floor(math.log10(x)) - 1
            normalized = round_sig(x / 10.0**shift, 3)
            assert normalized in base


# =============================================================================
# ТЕСТЫ: open_erange
# =============================================================================


class TestOpenErange:
    """open_erange: полуоткрытый диапазон [start, stop)."""

    def test_excludes_stop(self):
        assert open_erange(ESeries.E12, 1000, 10000)[-1] == 8200
        assert open_erange(ESeries.E12, 10, 47) == [10, 12, 15, 18, 22, 27, 33, 39]

    def test_keeps_start(self):
        assert open_erange(ESeries.E12, 47, 68) == [47, 56]

    def test_base_decade(self):
        assert open_erange(ESeries.E24, 10, 100) == values(ESeries.E24)

    def test_validates_like_erange(self):
        with pytest.raises(ValidationError):
            open_erange(ESeries.E12, 10, 1)


# =============================================================================
# ТЕСТЫ: валидация
# =============================================================================


class TestValidation:
    """erange: невалидные аргументы."""

    def test_inverted_range_raises(self):
        with pytest.raises(ValidationError, match="must be less than or equal to stop value"):
            erange(ESeries.E12, 100, 10)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_start_raises(self, bad):
        with pytest.raises(ValidationError, match="Start value .* is not finite"):
            erange(ESeries.E12, bad, 100)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_stop_raises(self, bad):
        with pytest.raises(ValidationError, match="Stop value .* is not finite"):
            erange(ESeries.E12, 10, bad)

    @pytest.mark.parametrize("bad", [1e-201, 0.0, -10.0])
    def test_too_small_start_raises(self, bad):
        with pytest.raises(ValidationError, match="too small"):
            erange(ESeries.E12, bad, 100)

    def test_too_small_stop_raises(self):
        with pytest.raises(ValidationError, match="stop value must be greater"):
            erange(ESeries.E12, 1e-200, 1e-205)

    def test_non_finite_stop_reported_before_small_start(self):
        with pytest.raises(ValidationError, match="Stop value inf is not finite"):
            erange(ESeries.E12, 0, float("inf"))

    def test_unknown_series_raises(self):
        with pytest.raises(NotFoundError):
            erange(999, 10, 100)
