"""Use case for filtering crop records."""

import logging
from typing import Iterable, Iterator
from ..entities.crop_record import CropRecord
from ..entities.preference_set import PreferenceSet

logger = logging.getLogger(__name__)


class FilterCropRecordsUseCase:
    """Use case to drop incomplete records and records outside the season filter."""

    def __init__(self, preferences: PreferenceSet):
        """
        Initialize use case.

        Args:
            preferences: Parsed command-line preferences
        """
        self.preferences = preferences

    def accepts(self, record: CropRecord) -> bool:
        """Check whether a single record should be reported."""
        if not record.is_complete:
            logger.debug(f"Skipping incomplete record: {record.name or '<blank>'}")
            return False
        if not self.preferences.accepts_season(record.season):
            logger.debug(f"Skipping {record.name}: season {record.season} not requested")
            return False
        return True

    def execute(self, records: Iterable[CropRecord]) -> Iterator[CropRecord]:
        """
        Execute the use case.

        Args:
            records: Records in table order

        Returns:
            Lazy iterator over the accepted records, order preserved
        """
        return (record for record in records if self.accepts(record))
