"""Concrete repository implementations."""

from .text_crop_repository import TextCropRepository

__all__ = [
    "TextCropRepository",
]
