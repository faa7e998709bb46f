"""Preference set entity."""

from dataclasses import dataclass, field
from typing import FrozenSet, List

from ...config.settings import DEFAULT_PLOT_SIZE
from .season import Season
from .value_option import ValueOption


@dataclass(frozen=True)
class PreferenceSet:
    """Options parsed from the command line, read-only afterwards."""

    values: FrozenSet[ValueOption] = field(default_factory=frozenset)
    seasons: FrozenSet[Season] = field(default_factory=frozenset)  # empty = no filter
    plot_size: int = DEFAULT_PLOT_SIZE
    clean_output: bool = False

    def __post_init__(self):
        if self.plot_size < 1:
            raise ValueError(f"Plot size must be at least 1, got {self.plot_size}")

    @property
    def requested_values(self) -> List[ValueOption]:
        """Requested value options in output order."""
        return [option for option in ValueOption if option in self.values]

    def accepts_season(self, season: str) -> bool:
        """Check whether a record's season passes the season filter."""
        if not self.seasons:
            return True
        return any(season == requested.value for requested in self.seasons)
