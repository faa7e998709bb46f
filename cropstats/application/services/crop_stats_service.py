"""Service driving the crop statistics pipeline."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
import pandas as pd

from ...domain.entities.crop_metrics import CropMetrics
from ...domain.entities.crop_record import CropRecord
from ...domain.entities.preference_set import PreferenceSet
from ...domain.repositories.crop_repository import CropRepository
from ...domain.use_cases.compute_crop_metrics import ComputeCropMetricsUseCase
from ...domain.use_cases.filter_crop_records import FilterCropRecordsUseCase
from ...domain.use_cases.format_crop_stats import GROWING_KEY, FormatCropStatsUseCase

logger = logging.getLogger(__name__)


class CropStatsService:
    """Streams records from a repository through filter, metrics and formatting."""

    def __init__(self, crop_repo: CropRepository, preferences: PreferenceSet):
        self.crop_repo = crop_repo
        self.preferences = preferences

        self.filter_uc = FilterCropRecordsUseCase(preferences)
        self.compute_uc = ComputeCropMetricsUseCase()
        self.format_uc = FormatCropStatsUseCase(clean_output=preferences.clean_output)

    def iter_stats(self) -> Iterator[Tuple[CropRecord, CropMetrics]]:
        """Yield (record, metrics) pairs in table order."""
        records = self.filter_uc.execute(self.crop_repo.iter_records())
        for record in records:
            yield record, self.compute_uc.execute(record, self.preferences.plot_size)

    @staticmethod
    def export_row(record: CropRecord, metrics: CropMetrics) -> Dict[str, Any]:
        """Flatten a record and all of its metrics into one CSV row."""
        return {
            "name": record.name,
            GROWING_KEY: record.season,
            "base_price": record.base_price,
            "sell_price": record.sell_price,
            "days_per_harvest": record.days_per_harvest,
            **metrics.to_dict(),
        }

    def run(
        self,
        write: Callable[[str], None] = print,
        export_path: Optional[Path] = None,
    ) -> int:
        """
        Process the whole table.

        Args:
            write: Called with each output line as soon as it is ready
            export_path: Optional CSV file receiving every reported record

        Returns:
            Number of records reported
        """
        options = self.preferences.requested_values
        rows: List[Dict[str, Any]] = []
        reported = 0

        for record, metrics in self.iter_stats():
            for line in self.format_uc.execute(record, metrics, options):
                write(line)
            reported += 1
            if export_path is not None:
                rows.append(self.export_row(record, metrics))

        logger.info(f"Reported {reported} crop records")

        if export_path is not None:
            self.export(rows, export_path)
        return reported

    @staticmethod
    def export(rows: List[Dict[str, Any]], export_path: Path) -> None:
        """Write exported rows to CSV."""
        export_path = Path(export_path)
        export_path.parent.mkdir(parents=True, exist_ok=True)
        columns = [
            "name",
            GROWING_KEY,
            "base_price",
            "sell_price",
            "days_per_harvest",
            "profit",
            "profit_p",
            "season",
            "season_p",
            "week",
            "week_p",
            "harvest",
        ]
        df = pd.DataFrame(rows, columns=columns)
        df.to_csv(export_path, index=False)
        logger.info(f"Exported {len(df)} crop records to {export_path}")
