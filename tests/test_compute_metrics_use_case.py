"""Tests for ComputeCropMetricsUseCase."""

import pytest
from cropstats.domain.entities.crop_record import CropRecord
from cropstats.domain.entities.value_option import ValueOption
from cropstats.domain.use_cases.compute_crop_metrics import (
    ComputeCropMetricsUseCase,
    harvests_per_period,
    unit_profit,
)


def test_unit_profit():
    """Profit is sell minus base and may be negative."""
    assert unit_profit(35, 20) == 15
    assert unit_profit(40, 60) == -20


@pytest.mark.parametrize("days", range(1, 30))
def test_harvests_per_period(days):
    """Harvest counts are floored."""
    assert harvests_per_period(28, days) == 28 // days
    assert harvests_per_period(7, days) == 7 // days


def test_compute_parsnip():
    """Test every metric for a short-growing crop."""
    use_case = ComputeCropMetricsUseCase()
    metrics = use_case.execute(CropRecord("Parsnip", 20, 35, 4, "Spring"), plot_size=72)

    assert metrics.profit == 15
    assert metrics.profit_per_plot == 15 * 72
    assert metrics.harvests_per_season == 7
    assert metrics.season_profit == 105
    assert metrics.season_profit_per_plot == 105 * 72
    assert metrics.harvests_per_week == 1
    assert metrics.week_profit == 15
    assert metrics.week_profit_per_plot == 15 * 72
    assert metrics.days_per_harvest == 4


def test_compute_cauliflower_with_plot_size():
    """Harvest interval longer than a week gives zero weekly profit."""
    use_case = ComputeCropMetricsUseCase()
    metrics = use_case.execute(CropRecord("Cauliflower", 80, 175, 12, "Spring"), plot_size=10)

    assert metrics.season_profit == 190
    assert metrics.season_profit_per_plot == 1900
    assert metrics.week_profit == 0
    assert metrics.value_for(ValueOption.SEASON_PER_PLOT) == 1900


def test_compute_negative_profit():
    """Losses propagate through the season and plot metrics."""
    use_case = ComputeCropMetricsUseCase()
    metrics = use_case.execute(CropRecord("GreenBean", 60, 40, 10, "Spring"), plot_size=2)

    assert metrics.profit == -20
    assert metrics.season_profit == -40
    assert metrics.season_profit_per_plot == -80


def test_compute_custom_calendar():
    """Season and week lengths are configurable."""
    use_case = ComputeCropMetricsUseCase(season_length_days=30, week_length_days=10)
    metrics = use_case.execute(CropRecord("Wheat", 10, 25, 4, "Summer"), plot_size=1)

    assert metrics.harvests_per_season == 7
    assert metrics.harvests_per_week == 2
