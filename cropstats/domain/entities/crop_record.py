"""Crop record entity."""

from dataclasses import dataclass
from typing import Sequence

from ...config.settings import INPUT_SETTINGS


def _to_int(field: str) -> int:
    try:
        return int(field)
    except ValueError:
        return 0


@dataclass(frozen=True)
class CropRecord:
    """One row of the crop table."""

    name: str
    base_price: int  # seed cost
    sell_price: int  # value of one harvested unit
    days_per_harvest: int
    season: str  # free text, usually one of the Season labels or "N/A"

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "CropRecord":
        """
        Build a record from whitespace-separated table fields.

        Missing trailing fields are read as empty/zero and fields past the
        fifth are ignored. Non-integer numbers are read as zero.

        Args:
            fields: Split table line

        Returns:
            CropRecord (possibly incomplete)
        """
        padded = list(fields[: INPUT_SETTINGS["field_count"]])
        padded += [""] * (INPUT_SETTINGS["field_count"] - len(padded))
        name, base_price, sell_price, days_per_harvest, season = padded
        return cls(
            name=name,
            base_price=_to_int(base_price),
            sell_price=_to_int(sell_price),
            days_per_harvest=_to_int(days_per_harvest),
            season=season,
        )

    @property
    def is_complete(self) -> bool:
        """True once every value needed for the statistics is known."""
        return (
            self.base_price != 0
            and self.sell_price != 0
            and self.days_per_harvest != 0
            and self.season != INPUT_SETTINGS["unavailable_season"]
        )

    def __str__(self) -> str:
        return f"{self.name} - {self.season}"
