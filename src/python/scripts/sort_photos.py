#!/usr/bin/env python3
"""
Script to sort photos into camera/year/quarter directories.

Usage:
    python sort_photos.py /path/to/source [/path/to/library] [--mode move] [--dry-run]
"""

import sys
from pathlib import Path

# Ensure we can import the package if running from source
src_path = Path(__file__).resolve().parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from photo_sorter.cli import main

if __name__ == "__main__":
    sys.exit(main())
