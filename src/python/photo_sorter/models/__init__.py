"""Data models for photo-sorter."""

from photo_sorter.models.enums import FileFormat, RelocationMode, SiblingMatch, YearSource
from photo_sorter.models.photo import CaptureMetadata, Destination, PhotoFile, SiblingSet

__all__ = [
    "CaptureMetadata",
    "Destination",
    "FileFormat",
    "PhotoFile",
    "RelocationMode",
    "SiblingMatch",
    "SiblingSet",
    "YearSource",
]
