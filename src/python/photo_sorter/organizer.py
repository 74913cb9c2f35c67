"""
Module for sorting a directory of photos into camera/year/quarter folders.

For each top-level file of the source directory, in name order (images
first in move-siblings mode):

    extract metadata -> classify quarter -> build path -> create dirs -> relocate

A failure at any step is logged against the file and the run moves on to
the next file. Only a source directory that cannot be listed stops the run.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from photo_sorter.config import SorterSettings
from photo_sorter.destination import (
    classify_quarter,
    ensure_directory,
    sanitize_model,
)
from photo_sorter.errors import PhotoError
from photo_sorter.models.enums import RelocationMode, YearSource
from photo_sorter.models.photo import CaptureMetadata, Destination, PhotoFile
from photo_sorter.relocator import relocate
from photo_sorter.scanner.directory import list_photo_files
from photo_sorter.scanner.exif import extract_capture_metadata

logger = logging.getLogger(__name__)


class OrganizationResult:
    """Track results of a sorting run."""

    def __init__(self):
        self.files_processed = 0
        self.files_relocated = 0
        self.files_skipped = 0
        self.relocations: List[Tuple[Path, Path]] = []
        self.errors: List[Tuple[Path, str]] = []

    def add_relocation(self, source: Path, target: Path):
        self.relocations.append((source, target))
        self.files_relocated += 1

    def add_error(self, file_path: Path, error: str):
        self.errors.append((file_path, error))
        self.files_skipped += 1

    def clear_errors(self, file_path: Path):
        """Drop earlier errors for a file that has since been relocated."""
        stale = [entry for entry in self.errors if entry[0] == file_path]
        for entry in stale:
            self.errors.remove(entry)
        self.files_skipped -= len(stale)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def __str__(self):
        return (
            f"Processed {self.files_processed} files. "
            f"Relocated {self.files_relocated} files. "
            f"Skipped {self.files_skipped} files. "
            f"Errors: {len(self.errors)}"
        )


def organize_directory(
    source_dir: Path,
    settings: Optional[SorterSettings] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> OrganizationResult:
    """
    Sort the files at the top level of source_dir into the library.

    Args:
        source_dir: Directory to scan for photos (not recursed)
        settings: Run settings; defaults apply when None
        clock: Returns "now"; only consulted when the year comes from the clock

    Returns:
        OrganizationResult with stats and per-file errors

    Raises:
        SourceDirectoryError: If source_dir cannot be listed
    """
    settings = settings or SorterSettings()
    clock = clock or datetime.now
    result = OrganizationResult()

    source_dir = Path(source_dir).expanduser().resolve()
    logger.info("Scanning source directory: %s", source_dir)

    files = list_photo_files(source_dir, skip_hidden=settings.skip_hidden)
    logger.info("Found %d files to process", len(files))

    if settings.mode is RelocationMode.MOVE_WITH_SIBLINGS:
        # Primaries first, so sidecars travel with their photo instead of
        # failing on their own
        files = sorted(files, key=_processing_rank)

    # One clock reading per run keeps every file of a run in the same year
    now = clock()

    for photo in files:
        if any(source == photo.path for source, _ in result.relocations):
            # Already handled along with an earlier sibling
            logger.debug("Already relocated: %s", photo.path)
            continue

        logger.debug("Processing %s (%s)", photo.name, photo.format.value)
        process_photo(photo.path, settings, result, now)

    return result


def _processing_rank(photo: PhotoFile) -> int:
    """Images sort before other files, sidecars last. The sort is stable."""
    if photo.format.is_image:
        return 0
    if photo.format.is_sidecar:
        return 2
    return 1


def process_photo(
    file_path: Path,
    settings: SorterSettings,
    result: OrganizationResult,
    now: Optional[datetime] = None,
):
    """
    Run the full pipeline for a single file, recording the outcome in result.

    PhotoError subclasses are caught here, logged with the file path and
    counted as skipped. Anything else propagates.
    """
    result.files_processed += 1

    try:
        metadata = extract_capture_metadata(file_path)
        destination = plan_destination(file_path, metadata, settings, now)

        if not settings.dry_run:
            ensure_directory(destination.path)

        outcome = relocate(
            file_path,
            destination.path,
            mode=settings.mode,
            match=settings.sibling_match,
            dry_run=settings.dry_run,
        )
    except PhotoError as e:
        logger.error("Error processing %s: %s", file_path, e.reason)
        result.add_error(file_path, e.reason)
        return

    for source, target in outcome.relocated:
        result.clear_errors(source)
        result.add_relocation(source, target)

    result.files_skipped += len(outcome.in_place)

    for source, error in outcome.failed:
        result.add_error(source, error)


def plan_destination(
    file_path: Path,
    metadata: CaptureMetadata,
    settings: SorterSettings,
    now: Optional[datetime] = None,
) -> Destination:
    """
    Derive the destination directory for a photo from its metadata.

    No file-system access happens here.
    """
    if not metadata.has_model:
        logger.warning(
            "No camera model in %s, using '%s'", file_path, settings.unknown_model
        )

    model = sanitize_model(metadata.model, fallback=settings.unknown_model)
    if metadata.has_model and model != metadata.model:
        logger.debug("Sanitized camera model %r -> %r", metadata.model, model)

    year, quarter = classify_quarter(metadata.captured_at.month, now)
    if settings.year_source is YearSource.CAPTURE:
        year = metadata.captured_at.year

    return Destination(
        base_dir=settings.destination_root,
        model=model,
        year=year,
        quarter=quarter,
    )
