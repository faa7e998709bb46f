"""Repository interfaces."""

from .crop_repository import CropRepository

__all__ = [
    "CropRepository",
]
