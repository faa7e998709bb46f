"""Use case for computing crop profitability metrics."""

import logging
from ..entities.crop_metrics import CropMetrics
from ..entities.crop_record import CropRecord
from ...config.settings import CALENDAR_SETTINGS

logger = logging.getLogger(__name__)


def unit_profit(sell_price: int, base_price: int) -> int:
    """Profit from one planted unit, negative when the seed costs more."""
    return sell_price - base_price


def harvests_per_period(period_days: int, days_per_harvest: int) -> int:
    """Number of whole harvests in a period, truncated toward zero."""
    return int(period_days / days_per_harvest)


class ComputeCropMetricsUseCase:
    """Use case to derive per-unit, per-plot, season and week statistics."""

    def __init__(
        self,
        season_length_days: int = CALENDAR_SETTINGS["season_length_days"],
        week_length_days: int = CALENDAR_SETTINGS["week_length_days"],
    ):
        """
        Initialize use case.

        Args:
            season_length_days: Days in one in-game season (default: 28)
            week_length_days: Days in one in-game week (default: 7)
        """
        self.season_length_days = season_length_days
        self.week_length_days = week_length_days

    def execute(self, record: CropRecord, plot_size: int) -> CropMetrics:
        """
        Execute the use case.

        Args:
            record: Complete crop record (non-zero harvest interval)
            plot_size: Planting slots per plot

        Returns:
            CropMetrics for the record
        """
        profit = unit_profit(record.sell_price, record.base_price)
        per_season = harvests_per_period(self.season_length_days, record.days_per_harvest)
        per_week = harvests_per_period(self.week_length_days, record.days_per_harvest)

        season_profit = per_season * profit
        week_profit = per_week * profit

        logger.debug(
            f"{record.name}: profit={profit}, harvests/season={per_season}, "
            f"harvests/week={per_week}"
        )
        return CropMetrics(
            profit=profit,
            profit_per_plot=profit * plot_size,
            season_profit=season_profit,
            season_profit_per_plot=season_profit * plot_size,
            week_profit=week_profit,
            week_profit_per_plot=week_profit * plot_size,
            days_per_harvest=record.days_per_harvest,
            harvests_per_season=per_season,
            harvests_per_week=per_week,
        )
