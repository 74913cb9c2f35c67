"""
Command-line interface for photo-sorter.

Usage:
    photo-sorter /path/to/source
    photo-sorter /path/to/source /path/to/library --mode move-siblings
    photo-sorter /path/to/source --dry-run --config photo_sorter.yaml

Per-file failures are logged and listed at the end but do not change the
exit status. A source directory that cannot be read, or a broken config
file, exits with status 1.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from photo_sorter.__version__ import __version__
from photo_sorter.config import get_settings
from photo_sorter.errors import ConfigError, SourceDirectoryError
from photo_sorter.models.enums import RelocationMode, SiblingMatch, YearSource
from photo_sorter.organizer import organize_directory
from photo_sorter.utils import format_pair, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-sorter",
        description="Sort photos into <destination>/<camera model>/<year>/Q<quarter> folders.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Source directory to scan for photos (top level only)",
    )
    parser.add_argument(
        "destination",
        type=Path,
        nargs="?",
        help="Destination base directory (default: destination_root from config, or ~/Pictures)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in RelocationMode],
        help="copy leaves the source in place; move renames; move-siblings also moves files sharing the base name",
    )
    parser.add_argument(
        "--sibling-match",
        choices=[m.value for m in SiblingMatch],
        help="How sibling files are recognized in move-siblings mode (default: stem)",
    )
    parser.add_argument(
        "--year-from-capture",
        action="store_const",
        const=YearSource.CAPTURE.value,
        dest="year_source",
        help="Use the photo's capture year instead of the current year",
    )
    parser.add_argument(
        "--unknown-model",
        help="Directory name for photos without a camera model (default: UnknownCamera)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_const",
        const=True,
        help="Do not create directories or touch files; only print actions",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log output to this file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings(
            args.config,
            destination_root=args.destination,
            mode=args.mode,
            sibling_match=args.sibling_match,
            year_source=args.year_source,
            unknown_model=args.unknown_model,
            dry_run=args.dry_run,
            log_file=args.log_file,
            log_level="DEBUG" if args.verbose else None,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, settings.log_file)

    print(f"Sorting '{args.source}' into '{settings.destination_root}' ({settings.mode.value})...")
    if settings.dry_run:
        print("DRY RUN: No files will be touched.")

    try:
        result = organize_directory(args.source, settings)
    except SourceDirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nSorting complete:")
    print(result)

    if args.verbose:
        for source, target in result.relocations:
            print(f"  {format_pair(source, target)}")

    if result.has_errors:
        print("\nErrors encountered:")
        for path, error in result.errors:
            print(f"  {path}: {error}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
