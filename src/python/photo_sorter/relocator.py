"""
Module for copying and moving photo files into their destination.

Three modes are supported (see RelocationMode):
- copy: stream the bytes, the source stays where it is
- move: a single rename, which fails across volumes
- move-siblings: rename the file and every sibling sharing its stem

Sibling moves are best effort: every sibling is moved independently and a
failure is recorded without stopping the others. There is no rollback.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Tuple

from photo_sorter.errors import RelocationError
from photo_sorter.models.enums import RelocationMode, SiblingMatch
from photo_sorter.models.photo import SiblingSet
from photo_sorter.scanner.patterns import extract_stem, is_sibling_name

logger = logging.getLogger(__name__)


class RelocationOutcome:
    """Files relocated (or planned, in a dry run) for one primary file."""

    def __init__(self):
        self.relocated: List[Tuple[Path, Path]] = []
        self.in_place: List[Path] = []
        self.failed: List[Tuple[Path, str]] = []

    def add_relocated(self, source: Path, target: Path):
        self.relocated.append((source, target))

    def add_failure(self, source: Path, error: str):
        self.failed.append((source, error))

    def add_in_place(self, source: Path):
        self.in_place.append(source)

    @property
    def ok(self) -> bool:
        return not self.failed

    def __str__(self):
        return f"Relocated {len(self.relocated)} files. Failed: {len(self.failed)}"


def is_same_file(source: Path, target: Path) -> bool:
    """Check whether target already is source (same path, or a link to it)."""
    try:
        return os.path.samefile(source, target)
    except OSError:
        # Target (or source) does not exist
        return False


def copy_file(source: Path, target: Path) -> Path:
    """
    Copy source to target, truncating target if it exists.

    A failure part way through can leave a truncated target behind.

    Raises:
        RelocationError: If source and target are the same file, or either
            file cannot be opened, or the copy fails
    """
    if is_same_file(source, target):
        raise RelocationError(source, f"copy to {target} failed: same file")

    try:
        with open(source, "rb") as src, open(target, "wb") as dst:
            shutil.copyfileobj(src, dst)
    except OSError as e:
        raise RelocationError(source, f"copy to {target} failed: {e}") from e
    return target


def move_file(source: Path, target: Path) -> Path:
    """
    Move source to target with a single rename.

    Source and target must be on the same volume; a cross-device rename
    is reported as an error rather than falling back to copy + delete.

    Raises:
        RelocationError: If the rename fails
    """
    try:
        Path(source).rename(target)
    except OSError as e:
        raise RelocationError(source, f"move to {target} failed: {e}") from e
    return Path(target)


def find_siblings(
    directory: Path,
    stem: str,
    match: SiblingMatch = SiblingMatch.STEM,
) -> SiblingSet:
    """
    List the files in directory that belong to the capture `stem`.

    The directory is listed fresh on each call so files moved by an
    earlier sibling run are not picked up again.

    Args:
        directory: Directory holding the primary file
        stem: Stem of the primary file
        match: Sibling matching rule

    Returns:
        SiblingSet with sorted members

    Raises:
        RelocationError: If the directory cannot be listed
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise RelocationError(directory, f"cannot list siblings: {e}") from e

    members = [
        path for path in entries
        if not path.is_dir() and is_sibling_name(path.name, stem, match)
    ]
    return SiblingSet(directory=directory, stem=stem, match=match, members=members)


def move_with_siblings(
    primary: Path,
    target_dir: Path,
    match: SiblingMatch = SiblingMatch.STEM,
    dry_run: bool = False,
) -> RelocationOutcome:
    """
    Move a primary file and all its siblings into target_dir.

    Each file keeps its name. Failures are logged and collected; they do
    not stop the remaining siblings.

    Returns:
        RelocationOutcome with the moved pairs and the failures
    """
    primary = Path(primary)
    outcome = RelocationOutcome()
    siblings = find_siblings(primary.parent, extract_stem(primary.name), match)

    if len(siblings) > 1:
        logger.debug("Siblings of %s: %s", primary.name, ", ".join(siblings.names))

    for source in siblings:
        target = Path(target_dir) / source.name

        if is_same_file(source, target):
            logger.info("Already in place: %s", source)
            outcome.add_in_place(source)
            continue

        if dry_run:
            logger.info("[DRY RUN] Move: %s -> %s", source, target)
            outcome.add_relocated(source, target)
            continue

        try:
            move_file(source, target)
        except RelocationError as e:
            logger.error("Failed to move %s: %s", source, e.reason)
            outcome.add_failure(source, e.reason)
            continue

        logger.info("Moved: %s -> %s", source, target)
        outcome.add_relocated(source, target)

    return outcome


def relocate(
    source: Path,
    target_dir: Path,
    mode: RelocationMode = RelocationMode.COPY,
    match: SiblingMatch = SiblingMatch.STEM,
    dry_run: bool = False,
) -> RelocationOutcome:
    """
    Put source (and, for move-siblings, its siblings) into target_dir.

    Single-file modes raise on failure; the sibling mode collects failures
    in the returned outcome instead. A file whose destination is the file
    itself (an already sorted library) is left alone and listed in
    `in_place`.

    Args:
        source: Primary file
        target_dir: Existing destination directory (not needed in a dry run)
        mode: Copy, move or move with siblings
        match: Sibling matching rule for move-siblings
        dry_run: If True, only log and return the planned pairs

    Returns:
        RelocationOutcome

    Raises:
        RelocationError: If a copy or single move fails
    """
    source = Path(source)

    if mode is RelocationMode.MOVE_WITH_SIBLINGS:
        return move_with_siblings(source, target_dir, match, dry_run=dry_run)

    outcome = RelocationOutcome()
    target = Path(target_dir) / source.name
    verb = "Copy" if mode is RelocationMode.COPY else "Move"

    if is_same_file(source, target):
        logger.info("Already in place: %s", source)
        outcome.add_in_place(source)
        return outcome

    if dry_run:
        logger.info("[DRY RUN] %s: %s -> %s", verb, source, target)
        outcome.add_relocated(source, target)
        return outcome

    if mode is RelocationMode.COPY:
        copy_file(source, target)
    else:
        move_file(source, target)

    logger.info("%s: %s -> %s", "Copied" if mode is RelocationMode.COPY else "Moved", source, target)
    outcome.add_relocated(source, target)
    return outcome
