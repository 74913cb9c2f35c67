"""
EXIF metadata extraction for photo files.

Only two tags matter for sorting:
- Model: camera model name, used as the top-level destination directory
- DateTime: capture timestamp in the fixed EXIF format "YYYY:MM:DD HH:MM:SS"

Decoding is split by format, as Pillow cannot read most RAW containers:
- RAW files (CR2, CR3, NEF, DNG, etc.) and HEIC/HEIF: exifread
- Standard formats (JPEG, PNG, WebP): Pillow

Every failure is raised as a PhotoError subclass so the caller can log it
against the file and continue. Nothing here retries or substitutes defaults.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

import exifread
from PIL import Image

from photo_sorter.errors import (
    FileOpenError,
    MetadataDecodeError,
    MissingTagError,
    TimestampParseError,
)
from photo_sorter.models.enums import FileFormat
from photo_sorter.models.photo import CaptureMetadata

logger = logging.getLogger(__name__)

EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"

MODEL_TAG = "Model"
DATETIME_TAG = "DateTime"

# IFD0 tag ids used by Pillow's getexif()
PILLOW_TAG_IDS = {
    MODEL_TAG: 272,
    DATETIME_TAG: 306,
}

# Key names produced by exifread.process_file()
EXIFREAD_TAG_KEYS = {
    MODEL_TAG: "Image Model",
    DATETIME_TAG: "Image DateTime",
}


def extract_capture_metadata(file_path: Path) -> CaptureMetadata:
    """
    Open a photo and read its capture metadata.

    Args:
        file_path: Path to the photo file

    Returns:
        CaptureMetadata with the camera model and capture timestamp

    Raises:
        FileOpenError: If the file cannot be opened
        MetadataDecodeError: If no EXIF block can be decoded
        MissingTagError: If the DateTime tag is absent
        TimestampParseError: If DateTime is not "YYYY:MM:DD HH:MM:SS"

    Example:
        >>> meta = extract_capture_metadata(Path("/photos/IMG_1234.CR2"))
        >>> print(meta.model, meta.captured_at)
    """
    file_path = Path(file_path)
    try:
        handle = open(file_path, "rb")
    except OSError as e:
        raise FileOpenError(file_path, str(e)) from e

    with handle:
        return read_capture_metadata(handle, file_path)


def read_capture_metadata(handle: BinaryIO, file_path: Union[str, Path]) -> CaptureMetadata:
    """
    Decode capture metadata from an already open binary handle.

    The handle must be positioned at the start of the file. file_path is
    used to pick the decoder (by extension) and for error messages.
    """
    file_path = Path(file_path)
    file_format = FileFormat.from_filename(file_path.name)

    if file_format.needs_exifread:
        tags = _read_tags_with_exifread(handle, file_path)
    else:
        tags = _read_tags_with_pillow(handle, file_path)

    model = _clean_string(tags.get(MODEL_TAG)) or ""
    if not model:
        logger.debug("No %s tag in %s", MODEL_TAG, file_path)

    raw_datetime = _clean_string(tags.get(DATETIME_TAG))
    if not raw_datetime:
        raise MissingTagError(file_path, DATETIME_TAG)

    return CaptureMetadata(
        model=model,
        captured_at=parse_exif_datetime(raw_datetime, file_path),
    )


def parse_exif_datetime(value: str, file_path: Optional[Path] = None) -> datetime:
    """
    Parse an EXIF timestamp.

    Args:
        value: Timestamp string, e.g. "2025:01:01 12:30:45"
        file_path: File the value came from (for the error message)

    Returns:
        Naive datetime

    Raises:
        TimestampParseError: If the value does not match the EXIF format
    """
    try:
        return datetime.strptime(str(value).strip(), EXIF_DATETIME_FORMAT)
    except (ValueError, TypeError) as e:
        raise TimestampParseError(
            file_path or Path(""), f"cannot parse date '{value}': {e}"
        ) from e


def _read_tags_with_exifread(handle: BinaryIO, file_path: Path) -> Dict[str, Optional[str]]:
    """
    Read Model/DateTime with exifread (RAW and HEIC files).

    Returns:
        Dictionary keyed by MODEL_TAG and DATETIME_TAG
    """
    try:
        tags = exifread.process_file(handle, details=False)
    except Exception as e:
        raise MetadataDecodeError(file_path, f"exifread failed: {e}") from e

    if not tags:
        raise MetadataDecodeError(file_path, "no EXIF data found")

    return {
        name: _tag_to_string(tags.get(key))
        for name, key in EXIFREAD_TAG_KEYS.items()
    }


def _read_tags_with_pillow(handle: BinaryIO, file_path: Path) -> Dict[str, Optional[str]]:
    """
    Read Model/DateTime with Pillow (JPEG, PNG, WebP).

    Returns:
        Dictionary keyed by MODEL_TAG and DATETIME_TAG
    """
    try:
        with Image.open(handle) as img:
            exif_data = img.getexif()
            values = {
                name: exif_data.get(tag_id) if exif_data else None
                for name, tag_id in PILLOW_TAG_IDS.items()
            }
    except Exception as e:
        raise MetadataDecodeError(file_path, f"Pillow failed: {e}") from e

    if not exif_data:
        raise MetadataDecodeError(file_path, "no EXIF data found")

    return {name: _tag_to_string(value) for name, value in values.items()}


def _tag_to_string(value) -> Optional[str]:
    """Convert a tag value (plain string, bytes or exifread IfdTag) to str."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _clean_string(value: Optional[str]) -> Optional[str]:
    """
    Clean and normalize a string value from EXIF.

    Removes trailing nulls and surrounding whitespace.

    Returns:
        Cleaned string or None
    """
    if value is None:
        return None

    value = str(value).strip().rstrip("\x00").strip()

    return value or None
