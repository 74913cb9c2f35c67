"""
Exception hierarchy for photo-sorter.

Everything below SourceDirectoryError and ConfigError is a per-file error:
the organizer logs it against the offending path and moves on to the next
file. SourceDirectoryError aborts the whole run.
"""

from pathlib import Path
from typing import Optional


class PhotoSorterError(Exception):
    """Base exception for all photo-sorter errors."""
    pass


class ConfigError(PhotoSorterError):
    """Raised when the configuration file is missing or invalid."""
    pass


class SourceDirectoryError(PhotoSorterError):
    """Raised when the source directory cannot be resolved or listed."""
    pass


class PhotoError(PhotoSorterError):
    """
    Base class for errors tied to a single photo file.

    Attributes:
        path: The file being processed when the error occurred
        reason: Human readable cause
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class FileOpenError(PhotoError):
    """Raised when a file cannot be opened for reading."""
    pass


class MetadataDecodeError(PhotoError):
    """Raised when embedded metadata cannot be decoded."""
    pass


class MissingTagError(PhotoError):
    """
    Raised when a required tag is absent.

    Attributes:
        tag: Name of the missing tag
    """

    def __init__(self, path: Path, tag: str, reason: Optional[str] = None):
        super().__init__(path, reason or f"missing required tag '{tag}'")
        self.tag = tag


class TimestampParseError(PhotoError):
    """Raised when the DateTime tag does not match YYYY:MM:DD HH:MM:SS."""
    pass


class DirectoryCreateError(PhotoError):
    """Raised when the destination directory tree cannot be created."""
    pass


class RelocationError(PhotoError):
    """Raised when a copy or move fails."""
    pass
