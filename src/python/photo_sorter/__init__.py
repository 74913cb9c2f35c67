"""
PhotoSorter - sort a flat directory of photos by camera, year and quarter.

Each photo's embedded EXIF Model and DateTime tags decide where it goes:

    <destination>/<camera model>/<year>/Q<quarter>/<original filename>

Usage:
    from pathlib import Path
    from photo_sorter import SorterSettings, organize_directory

    settings = SorterSettings(destination_root=Path("/photos/library"))
    result = organize_directory(Path("/photos/card-dump"), settings)
    print(result)
"""

from photo_sorter.__version__ import __version__
from photo_sorter.config import SorterSettings, get_settings, load_config
from photo_sorter.destination import (
    build_destination,
    classify_quarter,
    ensure_directory,
    sanitize_model,
)
from photo_sorter.models import (
    CaptureMetadata,
    Destination,
    FileFormat,
    PhotoFile,
    RelocationMode,
    SiblingMatch,
    SiblingSet,
    YearSource,
)
from photo_sorter.organizer import OrganizationResult, organize_directory, process_photo
from photo_sorter.relocator import copy_file, find_siblings, move_file, move_with_siblings, relocate
from photo_sorter.scanner import extract_capture_metadata, list_photo_files

__all__ = [
    "__version__",
    # Config
    "SorterSettings",
    "get_settings",
    "load_config",
    # Models
    "CaptureMetadata",
    "Destination",
    "FileFormat",
    "PhotoFile",
    "RelocationMode",
    "SiblingMatch",
    "SiblingSet",
    "YearSource",
    # Pipeline
    "build_destination",
    "classify_quarter",
    "copy_file",
    "ensure_directory",
    "extract_capture_metadata",
    "find_siblings",
    "list_photo_files",
    "move_file",
    "move_with_siblings",
    "OrganizationResult",
    "organize_directory",
    "process_photo",
    "relocate",
    "sanitize_model",
]
