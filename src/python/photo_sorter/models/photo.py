"""
Transient value types flowing through the sorting pipeline.

A PhotoFile is discovered by the directory walker, its CaptureMetadata is
read once, a Destination is derived from it, and the file (plus any
SiblingSet members) is relocated. Nothing here outlives a single file's
pipeline run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List

from photo_sorter.destination import build_destination
from photo_sorter.models.enums import FileFormat, SiblingMatch


@dataclass
class PhotoFile:
    """
    A file-system entry picked up from the source directory.

    Attributes:
        path: Absolute path to the file
        name: Filename including extension
        stem: Filename without its last extension
        extension: Last extension, lowercase with leading dot
        format: Detected file format
    """
    path: Path
    name: str
    stem: str
    extension: str
    format: FileFormat = FileFormat.UNKNOWN

    @classmethod
    def from_path(cls, path: Path) -> "PhotoFile":
        """Create a PhotoFile from a path (no file-system access)."""
        path = Path(path)
        return cls(
            path=path,
            name=path.name,
            stem=path.stem,
            extension=path.suffix.lower(),
            format=FileFormat.from_filename(path.name),
        )


@dataclass
class CaptureMetadata:
    """
    Metadata read from a photo's embedded EXIF block.

    Attributes:
        model: Camera model, empty string when the Model tag is absent
        captured_at: Parsed DateTime tag
    """
    model: str
    captured_at: datetime

    @property
    def has_model(self) -> bool:
        return bool(self.model)


@dataclass(frozen=True)
class Destination:
    """
    Destination directory for a photo: base / model / year / Q<quarter>.
    """
    base_dir: Path
    model: str
    year: int
    quarter: int

    @property
    def path(self) -> Path:
        return build_destination(self.base_dir, self.model, self.year, self.quarter)

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class SiblingSet:
    """
    Files in one directory that share a photo's stem.

    Attributes:
        directory: Directory that was listed
        stem: The primary file's stem
        match: Matching rule used
        members: Sorted paths of matching files (primary included)
    """
    directory: Path
    stem: str
    match: SiblingMatch = SiblingMatch.STEM
    members: List[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.members]
