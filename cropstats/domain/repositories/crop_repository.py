"""Crop repository interface."""

from abc import ABC, abstractmethod
from typing import Iterator
from ..entities.crop_record import CropRecord


class CropRepository(ABC):
    """Abstract source of crop table records."""

    @abstractmethod
    def iter_records(self) -> Iterator[CropRecord]:
        """
        Yield crop records in table order.

        Comment lines are skipped; incomplete records are still yielded.

        Returns:
            Iterator of CropRecord entities
        """
        pass
