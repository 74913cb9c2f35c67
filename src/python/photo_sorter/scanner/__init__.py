"""Scanner module for listing photo files and reading their metadata."""

from photo_sorter.scanner.directory import list_entries, list_photo_files
from photo_sorter.scanner.exif import extract_capture_metadata, read_capture_metadata
from photo_sorter.scanner.patterns import extract_stem, is_sibling_name

__all__ = [
    "extract_capture_metadata",
    "extract_stem",
    "is_sibling_name",
    "list_entries",
    "list_photo_files",
    "read_capture_metadata",
]
