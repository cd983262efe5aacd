#!/usr/bin/env python3
"""
archive.py
----------
Stage a Day One export for reading.

Day One exports arrive either as a zip archive or as an already
extracted directory. ``staged_export`` yields a directory in both cases;
an archive is unpacked into a temporary directory that is removed when
the context exits, on success or failure.

Programmatic API:
    from dayone2md.pipeline.archive import staged_export

    with staged_export(Path("export.zip"), logger) as export_dir:
        ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

# --- Local imports ---
from dayone2md.core.exceptions import ArchiveExtractionError
from dayone2md.core.logging_manager import ConversionLogger, safe_logger
from dayone2md.core.paths import UNZIP_DIR_SUFFIX
from dayone2md.core.temporal_files import TemporalFileManager


def extract_archive(
    archive_path: Path,
    dest_dir: Path,
    logger: Optional[ConversionLogger] = None,
) -> None:
    """
    Unpack a zip archive into ``dest_dir``.

    Raises:
        ArchiveExtractionError: If the file is not a zip or extraction fails
    """
    if not zipfile.is_zipfile(archive_path):
        raise ArchiveExtractionError(f"Not a zip archive: {archive_path}")

    safe_logger(logger).log_operation(
        "archive_extract_start", {"archive": str(archive_path), "dest": str(dest_dir)}
    )

    try:
        with zipfile.ZipFile(archive_path) as zf:
            zf.extractall(dest_dir)
            count = len(zf.namelist())
    except (OSError, zipfile.BadZipFile) as e:
        safe_logger(logger).log_error(
            e, {"operation": "extract_archive", "archive": str(archive_path)}
        )
        raise ArchiveExtractionError(f"unzip failed for {archive_path}: {e}") from e

    safe_logger(logger).log_operation(
        "archive_extract_complete", {"archive": archive_path.name, "members": count}
    )


@contextmanager
def staged_export(
    input_path: Path,
    logger: Optional[ConversionLogger] = None,
) -> Iterator[Path]:
    """
    Yield a directory holding the export layout.

    Args:
        input_path: Export directory or zip archive
        logger: Optional logger

    Yields:
        ``input_path`` itself for a directory, else a temporary extraction directory

    Raises:
        ArchiveExtractionError: If the input is missing or cannot be extracted
    """
    if input_path.is_dir():
        yield input_path
        return

    if not input_path.exists():
        raise ArchiveExtractionError(f"Input path not found: {input_path}")

    with TemporalFileManager() as temp_manager:
        unzip_dir = temp_manager.create_temp_dir(
            prefix=f"{input_path.stem}{UNZIP_DIR_SUFFIX}"
        )
        extract_archive(input_path, unzip_dir, logger)
        safe_logger(logger).log_debug(f"Extracted {input_path.name} to {unzip_dir}")
        yield unzip_dir
