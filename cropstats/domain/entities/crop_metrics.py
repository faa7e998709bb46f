"""Crop metrics entity."""

from dataclasses import dataclass
from typing import Dict

from .value_option import ValueOption


@dataclass(frozen=True)
class CropMetrics:
    """Derived statistics for one crop at a given plot size."""

    profit: int
    profit_per_plot: int
    season_profit: int
    season_profit_per_plot: int
    week_profit: int
    week_profit_per_plot: int
    days_per_harvest: int
    harvests_per_season: int
    harvests_per_week: int

    def value_for(self, option: ValueOption) -> int:
        """Get the metric a value option asks for."""
        return self.to_dict()[option.value]

    def to_dict(self) -> Dict[str, int]:
        """Metrics keyed by their clean-output name."""
        return {
            ValueOption.PROFIT.value: self.profit,
            ValueOption.PROFIT_PER_PLOT.value: self.profit_per_plot,
            ValueOption.SEASON.value: self.season_profit,
            ValueOption.SEASON_PER_PLOT.value: self.season_profit_per_plot,
            ValueOption.WEEK.value: self.week_profit,
            ValueOption.WEEK_PER_PLOT.value: self.week_profit_per_plot,
            ValueOption.HARVEST.value: self.days_per_harvest,
        }
