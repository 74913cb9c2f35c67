"""Enumerations for photo-sorter models."""

from enum import Enum
from pathlib import Path


class FileFormat(Enum):
    """
    Known file formats for photo files.

    Grouped by type:
    - RAW formats: Camera-specific raw files
    - Standard formats: Common image formats
    - Metadata formats: Sidecar and metadata files
    - Video formats: Clips that often sit next to photos
    """
    # RAW formats
    CR2 = "cr2"      # Canon RAW 2
    CR3 = "cr3"      # Canon RAW 3
    NEF = "nef"      # Nikon RAW
    ARW = "arw"      # Sony RAW
    DNG = "dng"      # Adobe Digital Negative
    RAF = "raf"      # Fujifilm RAW
    ORF = "orf"      # Olympus RAW
    RW2 = "rw2"      # Panasonic RAW

    # Standard image formats
    JPEG = "jpg"
    PNG = "png"
    TIFF = "tiff"
    HEIC = "heic"
    HEIF = "heif"
    WEBP = "webp"

    # Metadata/sidecar formats
    XMP = "xmp"
    THM = "thm"

    # Video formats
    MP4 = "mp4"
    MOV = "mov"
    AVI = "avi"

    UNKNOWN = "unknown"

    @classmethod
    def from_extension(cls, extension: str) -> "FileFormat":
        """
        Get FileFormat from a file extension.

        Args:
            extension: File extension (with or without leading dot)

        Returns:
            The matching FileFormat, or UNKNOWN if not recognized
        """
        ext = extension.lower().lstrip(".")

        if ext in {"jpg", "jpeg"}:
            return cls.JPEG
        if ext in {"tif", "tiff"}:
            return cls.TIFF

        for fmt in cls:
            if fmt.value == ext:
                return fmt

        return cls.UNKNOWN

    @classmethod
    def from_filename(cls, filename: str) -> "FileFormat":
        """
        Get FileFormat from a filename or file path.

        Examples:
            >>> FileFormat.from_filename("photo.jpg")
            <FileFormat.JPEG: 'jpg'>
            >>> FileFormat.from_filename("/photos/IMG_1234.CR2")
            <FileFormat.CR2: 'cr2'>
        """
        return cls.from_extension(Path(filename).suffix)

    @property
    def is_raw(self) -> bool:
        """Check if this format is a RAW format (TIFF-based containers included)."""
        return self in (
            FileFormat.CR2, FileFormat.CR3, FileFormat.NEF,
            FileFormat.ARW, FileFormat.DNG, FileFormat.RAF,
            FileFormat.ORF, FileFormat.RW2, FileFormat.TIFF
        )

    @property
    def is_image(self) -> bool:
        """Check if this format is a viewable image format."""
        return self in (
            FileFormat.JPEG, FileFormat.PNG,
            FileFormat.HEIC, FileFormat.HEIF, FileFormat.WEBP
        ) or self.is_raw

    @property
    def is_sidecar(self) -> bool:
        """Check if this format is a sidecar/metadata format."""
        return self in (FileFormat.XMP, FileFormat.THM)

    @property
    def needs_exifread(self) -> bool:
        """Formats Pillow cannot decode without plugins."""
        return self.is_raw or self in (FileFormat.HEIC, FileFormat.HEIF)


class RelocationMode(Enum):
    """
    How a photo is put into its destination directory.

    - COPY: Stream bytes to the destination, leave the source in place
    - MOVE: Rename the source to the destination
    - MOVE_WITH_SIBLINGS: Rename the source and every sibling sharing its stem
    """
    COPY = "copy"
    MOVE = "move"
    MOVE_WITH_SIBLINGS = "move-siblings"


class SiblingMatch(Enum):
    """
    How sibling files are recognized.

    - STEM: Name equals the stem or continues with "." after it
    - PREFIX: Name merely starts with the stem (IMG_001 also catches IMG_0010)
    """
    STEM = "stem"
    PREFIX = "prefix"


class YearSource(Enum):
    """
    Where the year directory comes from.

    - CLOCK: The current wall-clock year at run time
    - CAPTURE: The year of the photo's DateTime tag
    """
    CLOCK = "clock"
    CAPTURE = "capture"
