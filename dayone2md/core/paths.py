#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and fixed names for dayone2md.

The export layout:
    <export>/
    ├── <Journal Name>.json   # one per journal, percent-encoded name
    └── photos/               # attachments named <md5>.<ext>

The output layout:
    <output>/
    ├── photos/               # copy of the export's photos directory
    └── <Journal Name>/
        └── <uuid>.md
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ---- Export layout ----
JOURNAL_GLOB = "*.json"
PHOTOS_DIR_NAME = "photos"
ENTRIES_KEY = "entries"

# ---- Notes ----
NOTE_SUFFIX = ".md"
MOMENT_SCHEME = "dayone-moment://"
# Relative path from a journal directory to the copied photos directory
PHOTOS_LINK_PREFIX = f"../{PHOTOS_DIR_NAME}/"

# ---- Archive staging ----
UNZIP_DIR_SUFFIX = "-day1-unzip-"

# ---- Logs ----
LOG_DIR_ENVVAR = "DAYONE2MD_LOG_DIR"
LOG_DIR = Path.home() / ".dayone2md" / "logs"
