"""Domain entities."""

from .season import Season
from .value_option import ValueOption
from .crop_record import CropRecord
from .crop_metrics import CropMetrics
from .preference_set import PreferenceSet

__all__ = [
    "Season",
    "ValueOption",
    "CropRecord",
    "CropMetrics",
    "PreferenceSet",
]
