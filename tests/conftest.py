"""Pytest configuration and shared fixtures."""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest
from PIL import Image as PILImage

from photo_sorter.config import SorterSettings

MODEL_TAG_ID = 272
DATETIME_TAG_ID = 306


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding the unsorted photos."""
    path = tmp_path / "source"
    path.mkdir()
    return path.resolve()


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Destination base directory (not created up front)."""
    return tmp_path / "library"


@pytest.fixture
def fixed_now() -> datetime:
    """A wall-clock time far away from any capture date used in tests."""
    return datetime(2030, 6, 15, 12, 0, 0)


@pytest.fixture
def clock(fixed_now: datetime) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture
def settings(library_dir: Path) -> SorterSettings:
    """Default settings pointed at the temporary library."""
    return SorterSettings(destination_root=library_dir)


@pytest.fixture
def make_photo() -> Callable[..., Path]:
    """
    Factory writing a small JPEG with EXIF Model/DateTime tags.

    Pass model=None or taken=None to leave the tag out; with both None the
    file has no EXIF block at all.
    """
    def _make(
        path: Path,
        model: Optional[str] = "Canon EOS R5",
        taken: Optional[str] = "2021:05:03 10:00:00",
        color: str = "red",
    ) -> Path:
        img = PILImage.new("RGB", (16, 16), color=color)
        exif = PILImage.Exif()
        if model is not None:
            exif[MODEL_TAG_ID] = model
        if taken is not None:
            exif[DATETIME_TAG_ID] = taken

        if len(exif):
            img.save(path, format="JPEG", exif=exif)
        else:
            img.save(path, format="JPEG")
        return path

    return _make
