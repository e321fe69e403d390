"""
Тесты для Comparators (gt / ge / lt / le)

Проверяемые инварианты:
1. gt/lt строго больше/меньше, ge/le включают точное совпадение
2. Результат — соседнее значение серии, не дальше
3. Работа через границы декад
4. Исчерпание кандидатов → NotFoundError + лог уровня ERROR
"""

import logging

import pytest

from eseries.core.domain.series import ESeries
from eseries.core.errors import NotFoundError, ValidationError
from eseries.lookup import comparators
from eseries.lookup.comparators import (
    find_greater_than,
    find_greater_than_or_equal,
    find_less_than,
    find_less_than_or_equal,
)

# =============================================================================
# ТЕСТЫ: значения между элементами серии
# =============================================================================


class TestBetweenValues:
    """Целевое значение не входит в серию."""

    def test_greater_than(self):
        assert find_greater_than(ESeries.E12, 42) == 47
        assert find_greater_than(ESeries.E24, 42) == 43

    def test_less_than(self):
        assert find_less_than(ESeries.E12, 42) == 39
        assert find_less_than(ESeries.E24, 42) == 39

    def test_or_equal_variants_match_strict(self):
        assert find_greater_than_or_equal(ESeries.E12, 42) == 47
        assert find_less_than_or_equal(ESeries.E12, 42) == 39

    def test_kilo_decade(self):
        assert find_greater_than(ESeries.E12, 4200) == 4700
        assert find_less_than(ESeries.E12, 4200) == 3900


# =============================================================================
# ТЕСТЫ: значения серии
# =============================================================================


class TestOnSeriesValues:
    """Целевое значение входит в серию."""

    def test_or_equal_returns_value_itself(self):
        assert find_greater_than_or_equal(ESeries.E12, 47) == 47
        assert find_less_than_or_equal(ESeries.E12, 47) == 47

    def test_strict_steps_to_neighbour(self):
        assert find_greater_than(ESeries.E12, 47) == 56
        assert find_less_than(ESeries.E12, 47) == 39

    @pytest.mark.parametrize("x", [0.01, 1.5, 22, 6800, 1e6])
    def test_or_equal_idempotent(self, x):
        assert find_greater_than_or_equal(ESeries.E6, x) == x
        assert find_less_than_or_equal(ESeries.E6, x) == x


# =============================================================================
# ТЕСТЫ: границы декад
# =============================================================================


class TestAcrossDecades:
    """Поиск через границу декады."""

    def test_greater_than_crosses_up(self):
        assert find_greater_than(ESeries.E12, 8.5) == 10
        assert find_greater_than(ESeries.E12, 82) == 100

    def test_less_than_crosses_down(self):
        assert find_less_than(ESeries.E12, 10.5) == 10
        assert find_less_than(ESeries.E12, 100) == 82

    def test_e3_wide_gaps(self):
        assert find_greater_than(ESeries.E3, 48) == 100
        assert find_less_than(ESeries.E3, 100) == 47


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestComparatorErrors:
    """Невалидные значения и исчерпание кандидатов."""

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            find_greater_than(ESeries.E12, float("nan"))

    def test_unknown_series_raises(self):
        with pytest.raises(NotFoundError):
            find_less_than(99, 42)

    def test_exhausted_candidates_raise_and_log(self, monkeypatch, caplog):
        """Если окно не дало подходящего кандидата — NotFoundError."""
        monkeypatch.setattr(comparators, "find_nearest_few", lambda *args: [33.0, 39.0])

        with caplog.at_level(logging.ERROR, logger="eseries.lookup.comparators"):
            with pytest.raises(NotFoundError, match="greater than 42 in the E12 series"):
                find_greater_than(ESeries.E12, 42)

        assert "search window exhausted" in caplog.text
