#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for reading Day One exports.

Functions:
    find_journal_files: Discover journal JSON files in an export directory
    journal_name_from_path: Percent-decode a journal file name
    build_attachment_lookup: Map attachment content-hashes to file names

Usage:
    from dayone2md.utils.fs import find_journal_files, journal_name_from_path

    for path in find_journal_files(Path("/exports/day1")):
        print(journal_name_from_path(path))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List
from urllib.parse import unquote_plus

# --- Local imports ---
from dayone2md.core.paths import JOURNAL_GLOB


def find_journal_files(directory: Path, pattern: str = JOURNAL_GLOB) -> List[Path]:
    """Find journal files directly inside the export directory, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def journal_name_from_path(path: Path) -> str:
    """
    Derive the journal name from its export file name.

    Day One percent-encodes journal titles in file names, with ``+`` or
    ``%20`` for spaces.

    Examples:
        >>> journal_name_from_path(Path("Journal%20A.json"))
        'Journal A'
    """
    return unquote_plus(path.stem)


def build_attachment_lookup(photos_dir: Path) -> Dict[str, str]:
    """
    Map each attachment's content-hash to its path inside ``photos_dir``.

    Attachments are stored as ``<md5>.<ext>``; the file stem is the
    content-hash. Only files directly inside ``photos_dir`` are listed.

    Args:
        photos_dir: Copied attachment directory

    Returns:
        Dictionary of content-hash to relative path (e.g. ``{"abc": "abc.jpg"}``)
    """
    if not photos_dir.is_dir():
        return {}
    return {
        path.stem: path.relative_to(photos_dir).as_posix()
        for path in sorted(photos_dir.iterdir())
        if path.is_file()
    }
