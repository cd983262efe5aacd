"""
dayone2md
=========

Convert Day One JSON exports into folders of Markdown notes.

Main Components:
    - pipeline: Archive staging, entry extraction and the CLI
    - builders: Attachment directory copying
    - core: Logging, exceptions, paths, temporary files
    - dataclasses: The DayOneEntry model
    - utils: Filesystem and Markdown helpers

Example Usage:
    >>> from pathlib import Path
    >>> from dayone2md import convert_export
    >>> stats = convert_export(Path("Export.zip"), Path("notes"))
    >>> stats.summary()
"""

__version__ = "1.0.0"

from dayone2md.pipeline.json2md import convert_export, convert_journal, extract_entry

__all__ = [
    "convert_export",
    "convert_journal",
    "extract_entry",
]
