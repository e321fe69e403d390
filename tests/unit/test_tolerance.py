"""
Тесты для ToleranceCalculator

lower = value × (1 - tolerance), upper = value × (1 + tolerance)
"""

import pytest

from eseries.core.domain.series import ESeries
from eseries.core.errors import NotFoundError
from eseries.lookup.tolerance import (
    ToleranceLimits,
    lower_tolerance_limit,
    tolerance_limits,
    upper_tolerance_limit,
)


class TestToleranceLimits:
    """Границы допуска номинального значения."""

    def test_e12_exact_limits(self):
        assert tolerance_limits(ESeries.E12, 100) == (90.0, 110.0)

    def test_named_fields(self):
        limits = tolerance_limits(ESeries.E24, 100)
        assert isinstance(limits, ToleranceLimits)
        assert limits.lower == 95.0
        assert limits.upper == 105.0

    @pytest.mark.parametrize(
        "series_key, value, lower, upper",
        [
            (ESeries.E3, 4700, 2820, 6580),
            (ESeries.E6, 33, 26.4, 39.6),
            (ESeries.E48, 1000, 980, 1020),
            (ESeries.E96, 1e-6, 0.99e-6, 1.01e-6),
            (ESeries.E192, 1000, 995, 1005),
        ],
    )
    def test_limits_per_series(self, series_key, value, lower, upper):
        assert lower_tolerance_limit(series_key, value) == pytest.approx(lower)
        assert upper_tolerance_limit(series_key, value) == pytest.approx(upper)

    def test_pair_matches_single_limits(self):
        limits = tolerance_limits(ESeries.E96, 4.99e3)
        assert limits.lower == lower_tolerance_limit(ESeries.E96, 4.99e3)
        assert limits.upper == upper_tolerance_limit(ESeries.E96, 4.99e3)

    def test_limits_bracket_value(self):
        lower, upper = tolerance_limits(ESeries.E12, 0.047)
        assert lower < 0.047 < upper

    def test_unknown_series_raises(self):
        with pytest.raises(NotFoundError):
            tolerance_limits(10, 100)
        with pytest.raises(NotFoundError):
            lower_tolerance_limit(ESeries.E12 + 1, 100)
