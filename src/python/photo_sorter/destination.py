"""
Destination path derivation: <base>/<model>/<year>/Q<quarter>.

classify_quarter and build_destination are pure. Directory creation is
the separate ensure_directory step, run by the organizer right before a
file is written.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from photo_sorter.errors import DirectoryCreateError

DEFAULT_UNKNOWN_MODEL = "UnknownCamera"

# Path separators, characters reserved on Windows/SMB shares and control characters
_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def classify_quarter(month: int, now: Optional[datetime] = None) -> Tuple[int, int]:
    """
    Map a calendar month to (year, quarter).

    The year is the year of `now`, not of the photo. Pass `now` to pin the
    clock; it defaults to the current wall-clock time.

    Args:
        month: Calendar month, 1-12
        now: Reference time for the year

    Returns:
        Tuple of (year, quarter)

    Raises:
        ValueError: If month is not in 1..12

    Examples:
        >>> classify_quarter(5, datetime(2024, 1, 1))
        (2024, 2)
        >>> classify_quarter(12, datetime(2024, 1, 1))
        (2024, 4)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")

    year = (now or datetime.now()).year

    if month <= 3:
        return year, 1
    if month <= 6:
        return year, 2
    if month <= 9:
        return year, 3
    return year, 4


def build_destination(base_dir: Path, model: str, year: int, quarter: int) -> Path:
    """
    Compose the destination directory for a photo.

    The model is used verbatim; run it through sanitize_model first when it
    comes from file metadata.

    Example:
        >>> build_destination(Path("/photos"), "Canon", 2021, 2)
        PosixPath('/photos/Canon/2021/Q2')
    """
    return Path(base_dir) / model / f"{year}" / f"Q{quarter}"


def sanitize_model(model: Optional[str], fallback: str = DEFAULT_UNKNOWN_MODEL) -> str:
    """
    Make a camera model string safe to use as a single directory name.

    Unsafe characters become "_", surrounding dots and spaces are removed,
    and an empty result falls back to `fallback`.

    Examples:
        >>> sanitize_model("Canon EOS 5D Mark III")
        'Canon EOS 5D Mark III'
        >>> sanitize_model("../etc/passwd")
        '_etc_passwd'
        >>> sanitize_model("")
        'UnknownCamera'
    """
    if not model:
        return fallback

    cleaned = _UNSAFE_CHARS.sub("_", model).strip(". ")

    if not cleaned.strip("_"):
        return fallback

    return cleaned


def ensure_directory(path: Path) -> Path:
    """
    Create a directory and all its parents; succeed if it already exists.

    Raises:
        DirectoryCreateError: If the directory cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path, f"cannot create directory: {e}") from e
    return path
