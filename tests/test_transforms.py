# Tests for mortgage_rate_dashboard/indicators/transforms.py

import math

import pytest

from mortgage_rate_dashboard.indicators.transforms import (
    ValueRange,
    annual_inflation_rate,
    delta,
    estimate_15_year_rate,
    estimate_rate,
    monthly_inflation_rate,
    moving_average,
    normalize,
    percent_change,
    round_fixed,
    value_range,
    volatility,
)


class TestRounding:
    def test_half_up_on_exact_ties(self):
        assert round_fixed(0.125, 2) == 0.13
        assert round_fixed(2.5, 0) == 3.0

    def test_sign_preserved(self):
        assert round_fixed(-0.125, 2) == -0.13

    def test_uses_stored_binary_value(self):
        # 1.005 and 2.675 are stored slightly below the decimal literal
        assert round_fixed(1.005, 2) == 1.0
        assert round_fixed(2.675, 2) == 2.67

    def test_large_magnitudes_round_without_error(self):
        assert estimate_rate(1e27, 1.8) == 1e27
        assert percent_change(1.0, 1e-30) == pytest.approx(1e30)
        assert round_fixed(-1e40, 4) == -1e40

    def test_non_finite_passes_through(self):
        assert round_fixed(float("inf"), 2) == float("inf")
        assert math.isnan(round_fixed(float("nan"), 2))


class TestRateEstimates:
    def test_estimate_rate(self):
        assert estimate_rate(4.25, 1.8) == 6.05

    def test_estimate_15_year_rate(self):
        assert estimate_15_year_rate(4.25, 1.8) == 5.65

    @pytest.mark.parametrize("yld,spread", [(3.87, 1.9), (4.5, 2.4), (0.62, 1.2), (5.01, 3.0)])
    def test_estimates_match_rounded_sum(self, yld, spread):
        assert estimate_rate(yld, spread) == round_fixed(yld + spread, 2)
        assert estimate_15_year_rate(yld, spread) == round_fixed(yld + spread - 0.4, 2)


class TestChanges:
    def test_delta(self):
        assert delta(4.30, 4.25) == 0.05
        assert delta(4.25, 4.30) == -0.05

    def test_percent_change(self):
        assert percent_change(4.30, 4.25) == 0.0118

    @pytest.mark.parametrize("current", [0.0, 4.3, -2.0])
    def test_percent_change_zero_previous(self, current):
        assert percent_change(current, 0) == 0

    def test_annual_inflation_rate(self):
        assert annual_inflation_rate(313.0, 301.0) == 3.99
        assert annual_inflation_rate(313.0, 0) == 0

    def test_monthly_inflation_rate(self):
        assert monthly_inflation_rate(313.0, 312.0) == 0.321
        assert monthly_inflation_rate(313.0, 0) == 0


class TestSeriesStatistics:
    def test_moving_average(self):
        assert moving_average([1, 2, 3, 4, 5], 3) == [2.0, 3.0, 4.0]

    def test_moving_average_rounds_exact_ties_up(self):
        # 0.125 and 0.375 are exact in binary
        assert moving_average([0.25, 0.0, 0.75], 2) == [0.13, 0.38]

    def test_moving_average_length(self):
        values = [4.1, 4.2, 4.0, 4.3, 4.4, 4.2, 4.1]
        assert len(moving_average(values, 4)) == len(values) - 4 + 1

    @pytest.mark.parametrize("window", [0, -1, 6])
    def test_moving_average_bad_window(self, window):
        assert moving_average([1, 2, 3, 4, 5], window) == []

    def test_volatility(self):
        assert volatility([1, 2, 3, 4, 5]) == 1.581

    @pytest.mark.parametrize("values", [[], [5]])
    def test_volatility_short_series(self, values):
        assert volatility(values) == 0

    def test_value_range(self):
        assert value_range([4.2, 3.9, 4.8]) == ValueRange(3.9, 4.8)
        assert value_range([]) == ValueRange(0.0, 0.0)

    def test_normalize(self):
        assert normalize([1, 2, 3]) == [0.0, 0.5, 1.0]

    def test_normalize_bounds(self):
        result = normalize([4.21, 3.87, 4.95, 4.02, 4.4])
        assert all(0 <= v <= 1 for v in result)
        assert min(result) == 0.0
        assert max(result) == 1.0

    def test_normalize_flat_series(self):
        assert normalize([5, 5, 5]) == [0, 0, 0]
