"""Value option enumeration."""

from enum import Enum


class ValueOption(str, Enum):
    """Statistics a user can request, keyed by their clean-output name.

    Declaration order is the order metrics are printed in.
    """

    PROFIT = "profit"
    PROFIT_PER_PLOT = "profit_p"
    SEASON = "season"
    SEASON_PER_PLOT = "season_p"
    WEEK = "week"
    WEEK_PER_PLOT = "week_p"
    HARVEST = "harvest"

    @property
    def label(self) -> str:
        """Label used in verbose output."""
        labels = {
            ValueOption.PROFIT: "Profit:",
            ValueOption.PROFIT_PER_PLOT: "Plot profit:",
            ValueOption.SEASON: "Season:",
            ValueOption.SEASON_PER_PLOT: "Season plot:",
            ValueOption.WEEK: "Week:",
            ValueOption.WEEK_PER_PLOT: "Week plot:",
            ValueOption.HARVEST: "Harvest time:",
        }
        return labels[self]

    @property
    def is_currency(self) -> bool:
        """Whether the value is an amount of money."""
        return self is not ValueOption.HARVEST
