#!/usr/bin/env python3
"""
json2md.py
-------------------
Convert a Day One JSON export into one Markdown note per entry.

    <export>/                       <output>/
    ├── <Journal>.json       →      ├── <Journal>/
    │                               │   └── <uuid>.md
    └── photos/              →      └── photos/

Every note starts with a block-quoted metadata header (tags first, then
the entry's other non-empty fields), a blank line, and the entry text with
``(dayone-moment://<id>)`` references pointing into ``../photos/``.

Every run rewrites all notes; any failure aborts the conversion.

Programmatic API:
    from dayone2md.pipeline.json2md import convert_export, convert_journal
    stats = convert_export(input_path, output_dir, logger)
    stats = convert_journal(journal_path, output_dir, attachments, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

# --- Local imports ---
from dayone2md.builders.attachments import AttachmentBuilder, AttachmentStats
from dayone2md.core.cli import ConversionStats
from dayone2md.core.exceptions import ExportFormatError
from dayone2md.core.logging_manager import ConversionLogger, safe_logger
from dayone2md.core.paths import ENTRIES_KEY, PHOTOS_DIR_NAME
from dayone2md.dataclasses.dayone_entry import DayOneEntry
from dayone2md.pipeline.archive import staged_export
from dayone2md.utils.fs import find_journal_files, journal_name_from_path


# --- Entries ---
def extract_entry(
    data: Mapping[str, Any],
    output_dir: Path,
    attachments: Optional[Mapping[str, str]] = None,
    logger: Optional[ConversionLogger] = None,
) -> Path:
    """
    Write one entry as ``<output_dir>/<uuid>.md``.

    Args:
        data: Entry record from the export (not modified)
        output_dir: Journal output directory (must exist)
        attachments: Content-hash → copied path lookup, if photos were copied
        logger: Optional logger

    Returns:
        Path of the written note

    Raises:
        EntryValidationError: If the entry has no uuid
    """
    entry = DayOneEntry.from_dict(data)
    output_path = output_dir / entry.filename

    output_path.write_text(entry.to_markdown(attachments), encoding="utf-8")

    safe_logger(logger).log_info(f"Extracted {entry.uuid} to {output_dir}")
    return output_path


def load_entries(journal_path: Path) -> List[Dict[str, Any]]:
    """
    Read the entry records from a journal export file.

    Raises:
        ExportFormatError: If the file is not JSON, has no ``entries`` key,
            or holds non-object entries
    """
    try:
        data = json.loads(journal_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ExportFormatError(f"Cannot read {journal_path.name}: {e}") from e

    if not isinstance(data, dict) or ENTRIES_KEY not in data:
        raise ExportFormatError(f"{journal_path.name}: missing '{ENTRIES_KEY}' key")

    entries = data[ENTRIES_KEY]
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ExportFormatError(f"{journal_path.name}: '{ENTRIES_KEY}' must be a list of objects")

    return entries


# --- Journals ---
def convert_journal(
    journal_path: Path,
    output_dir: Path,
    attachments: Optional[Mapping[str, str]] = None,
    logger: Optional[ConversionLogger] = None,
) -> ConversionStats:
    """
    Convert one journal file into ``<output_dir>/<journal name>/``.

    Args:
        journal_path: ``<name>.json`` export file
        output_dir: Output root
        attachments: Content-hash → copied path lookup
        logger: Optional logger

    Returns:
        ConversionStats for this journal

    Raises:
        ExportFormatError: If the journal file is malformed
        EntryValidationError: If an entry has no uuid
    """
    stats = ConversionStats()
    journal_name = journal_name_from_path(journal_path)
    journal_dir = output_dir / journal_name
    journal_dir.mkdir(parents=True, exist_ok=True)

    entries = load_entries(journal_path)
    safe_logger(logger).log_operation(
        "journal_start", {"journal": journal_name, "entries": len(entries)}
    )

    for data in entries:
        try:
            extract_entry(data, journal_dir, attachments, logger)
        except Exception as e:
            safe_logger(logger).log_error(
                e,
                {
                    "operation": "extract_entry",
                    "journal": journal_name,
                    "uuid": data.get("uuid"),
                },
            )
            raise
        stats.entries_written += 1

    stats.journals_processed = 1
    safe_logger(logger).log_operation(
        "journal_complete", {"journal": journal_name, "stats": stats.summary()}
    )
    return stats


# --- Attachments ---
def copy_attachments(
    input_dir: Path,
    output_dir: Path,
    logger: Optional[ConversionLogger] = None,
) -> AttachmentStats:
    """
    Copy ``<input_dir>/photos`` to ``<output_dir>/photos`` and index it.

    Raises:
        AttachmentCopyError: If copying fails
    """
    builder = AttachmentBuilder(
        source_dir=input_dir / PHOTOS_DIR_NAME,
        dest_dir=output_dir / PHOTOS_DIR_NAME,
        logger=logger,
    )
    return builder.build()


# --- Exports ---
def convert_directory(
    input_dir: Path,
    output_dir: Path,
    logger: Optional[ConversionLogger] = None,
) -> ConversionStats:
    """
    Convert an extracted export directory.

    Attachments are copied first unless ``input_dir`` and ``output_dir``
    are the same directory, in which case references are left unresolved.
    """
    total_stats = ConversionStats()
    output_dir.mkdir(parents=True, exist_ok=True)

    attachments: Optional[Dict[str, str]] = None
    if input_dir.resolve() != output_dir.resolve():
        attachment_stats = copy_attachments(input_dir, output_dir, logger)
        if attachment_stats.copied:
            attachments = attachment_stats.lookup
            total_stats.attachments_copied = attachment_stats.files_available
    else:
        safe_logger(logger).log_info("Input and output are the same, skipping photos")

    journal_files = find_journal_files(input_dir)
    if not journal_files:
        safe_logger(logger).log_warning(f"No journal files found in {input_dir}")

    for journal_path in journal_files:
        total_stats.merge(convert_journal(journal_path, output_dir, attachments, logger))

    return total_stats


def convert_export(
    input_path: Path,
    output_dir: Path,
    logger: Optional[ConversionLogger] = None,
) -> ConversionStats:
    """
    Convert a Day One export (directory or zip archive) to Markdown notes.

    Args:
        input_path: Export directory or zip archive
        output_dir: Output root, created if absent
        logger: Optional logger

    Returns:
        ConversionStats with journals, entries and attachments counts

    Raises:
        ArchiveExtractionError: If the archive cannot be staged
        AttachmentCopyError: If photos cannot be copied
        ExportFormatError: If a journal file is malformed
        EntryValidationError: If an entry has no uuid
    """
    input_path = input_path.expanduser().resolve()
    output_dir = output_dir.expanduser().resolve()

    safe_logger(logger).log_operation(
        "convert_export_start", {"input": str(input_path), "output": str(output_dir)}
    )

    with staged_export(input_path, logger) as export_dir:
        stats = convert_directory(export_dir, output_dir, logger)

    safe_logger(logger).log_operation(
        "convert_export_complete", {"stats": stats.summary()}
    )
    return stats


def preview_export(
    input_path: Path,
    logger: Optional[ConversionLogger] = None,
) -> Dict[str, int]:
    """
    List journals and their entry counts without writing anything.

    Returns:
        Journal name → number of entries, in processing order

    Raises:
        ArchiveExtractionError: If the archive cannot be staged
        ExportFormatError: If a journal file is malformed
    """
    input_path = input_path.expanduser().resolve()
    with staged_export(input_path, logger) as export_dir:
        return {
            journal_name_from_path(path): len(load_entries(path))
            for path in find_journal_files(export_dir)
        }
