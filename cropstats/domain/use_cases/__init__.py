"""Use cases - core business operations."""

from .filter_crop_records import FilterCropRecordsUseCase
from .compute_crop_metrics import ComputeCropMetricsUseCase
from .format_crop_stats import FormatCropStatsUseCase

__all__ = [
    "FilterCropRecordsUseCase",
    "ComputeCropMetricsUseCase",
    "FormatCropStatsUseCase",
]
