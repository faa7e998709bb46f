"""Whitespace-separated crop table repository implementation."""

import logging
from typing import Iterable, Iterator

from ...config.settings import INPUT_SETTINGS
from ...domain.entities.crop_record import CropRecord
from ...domain.repositories.crop_repository import CropRepository

logger = logging.getLogger(__name__)


class TextCropRepository(CropRepository):
    """Repository reading crop records from a hand-edited text table.

    Columns are ``name base_price sell_price days_per_harvest season``
    separated by runs of whitespace. Lines starting with ``#`` are comments.
    """

    def __init__(self, lines: Iterable[str]):
        """
        Initialize repository.

        Args:
            lines: Table lines, e.g. an open file or sys.stdin
        """
        self.lines = lines
        self.lines_read = 0

    @staticmethod
    def is_comment(line: str) -> bool:
        """Check whether a table line is a comment."""
        return line.startswith(INPUT_SETTINGS["comment_marker"])

    def iter_records(self) -> Iterator[CropRecord]:
        """Parse records lazily, one line at a time."""
        for line in self.lines:
            self.lines_read += 1
            if self.is_comment(line):
                logger.debug(f"Skipping comment on line {self.lines_read}")
                continue
            yield CropRecord.from_fields(line.split())
