"""
Directory listing for the top level of a source directory.

Scanning is deliberately flat: subdirectories are reported by list_entries
but never descended into, and list_photo_files drops them.
"""

import logging
from pathlib import Path
from typing import List

from photo_sorter.errors import SourceDirectoryError
from photo_sorter.models.photo import PhotoFile
from photo_sorter.scanner.patterns import is_hidden_file

logger = logging.getLogger(__name__)


def list_entries(directory: Path) -> List[Path]:
    """
    List the top-level entries of a directory, sorted by name.

    Args:
        directory: Directory to list

    Returns:
        Sorted list of entry paths (files and subdirectories)

    Raises:
        SourceDirectoryError: If the directory does not exist, is not a
            directory, or cannot be read
    """
    directory = Path(directory)

    if not directory.exists():
        raise SourceDirectoryError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise SourceDirectoryError(f"Not a directory: {directory}")

    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise SourceDirectoryError(f"Error reading directory {directory}: {e}") from e


def list_photo_files(directory: Path, skip_hidden: bool = True) -> List[PhotoFile]:
    """
    List regular files at the top level of a directory.

    Args:
        directory: Directory to scan
        skip_hidden: If True, skip dotfiles

    Returns:
        Sorted list of PhotoFile entries

    Raises:
        SourceDirectoryError: If the directory cannot be listed
    """
    files = []

    for path in list_entries(directory):
        if path.is_dir():
            logger.debug("Skipping directory: %s", path)
            continue

        if not path.is_file():
            continue

        if skip_hidden and is_hidden_file(path.name):
            logger.debug("Skipping hidden file: %s", path)
            continue

        files.append(PhotoFile.from_path(path))

    return files

