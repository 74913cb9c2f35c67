"""
Filename rules for recognizing sibling files.

Siblings are files that belong to the same capture, e.g. a RAW file, its
JPEG preview and an XMP sidecar:

    IMG_0001.CR2, IMG_0001.JPG, IMG_0001.CR2.xmp, IMG_0001.xmp

They all share the stem of the primary file ("IMG_0001" for IMG_0001.CR2).
"""

from pathlib import Path

from photo_sorter.models.enums import SiblingMatch


def extract_stem(filename: str) -> str:
    """
    Return the filename without its last extension.

    Examples:
        >>> extract_stem("IMG_0001.CR2")
        'IMG_0001'
        >>> extract_stem("IMG_0001.CR2.xmp")
        'IMG_0001.CR2'
        >>> extract_stem("README")
        'README'
    """
    return Path(filename).stem


def is_sibling_name(filename: str, stem: str, match: SiblingMatch = SiblingMatch.STEM) -> bool:
    """
    Check whether filename belongs to the capture identified by stem.

    STEM matching accepts the bare stem or the stem followed by one or more
    extensions, so "IMG_01" matches "IMG_01.CR2" and "IMG_01.CR2.xmp" but not
    "IMG_010.JPG". PREFIX matching accepts any name starting with the stem,
    which also catches "IMG_010.JPG".

    Args:
        filename: Candidate filename (no directory part)
        stem: Stem of the primary file
        match: Matching rule

    Returns:
        True if filename is a sibling
    """
    if not stem:
        return False

    if match is SiblingMatch.PREFIX:
        return filename.startswith(stem)

    return filename == stem or filename.startswith(stem + ".")


def is_hidden_file(filename: str) -> bool:
    """Dotfiles such as .DS_Store are never photos."""
    return filename.startswith(".")

