#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the dayone2md project.

Every exception here is fatal for a conversion run: the CLI reports it
and exits with a non-zero status. Notes already written stay on disk.

Exception Hierarchy:
    Exception (built-in)
    ├── ConversionError - Base for all export conversion errors
    │   ├── ArchiveExtractionError - Input archive could not be staged
    │   ├── AttachmentCopyError - Photo directory copy failures
    │   └── ExportFormatError - Malformed journal JSON files
    ├── EntryValidationError - Entry missing required fields
    └── TemporalFileError - Temporary file management errors

Usage:
    from dayone2md.core.exceptions import ConversionError, EntryValidationError

    try:
        convert_export(input_path, output_dir)
    except EntryValidationError as e:
        logger.error(f"Invalid entry: {e}")
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
"""


class ConversionError(Exception):
    """
    Base exception for export conversion errors.

    Catch this to handle any failure of the archive → Markdown pipeline,
    or catch specific subclasses for more granular error handling.

    See Also:
        ArchiveExtractionError, AttachmentCopyError, ExportFormatError
    """

    pass


class ArchiveExtractionError(ConversionError):
    """
    Exception for input staging failures.

    Raised when the input path is neither an export directory nor a
    readable zip archive, or when extraction fails midway.

    Examples:
        >>> raise ArchiveExtractionError("Not a zip archive: export.tar")
        >>> raise ArchiveExtractionError("Input path not found: ~/export.zip")
    """

    pass


class AttachmentCopyError(ConversionError):
    """
    Exception for attachment directory copy failures.

    Raised when copying the export's photos directory into the output
    directory fails (permissions, disk space, unreadable source).

    Examples:
        >>> raise AttachmentCopyError("Failed to copy photos: disk full")
    """

    pass


class ExportFormatError(ConversionError):
    """
    Exception for malformed journal export files.

    Raised when a journal JSON file cannot be parsed, lacks the
    top-level ``entries`` key, or holds entries that are not objects.

    Examples:
        >>> raise ExportFormatError("Journal.json: missing 'entries' key")
    """

    pass


class EntryValidationError(Exception):
    """
    Exception for entry-specific validation failures.

    Raised when a journal entry lacks a usable ``uuid``, which is needed
    for the output file name.

    Examples:
        >>> raise EntryValidationError("Entry missing required field: 'uuid'")
    """

    pass


class TemporalFileError(Exception):
    """
    Exception for temporary file management errors.

    Raised when temporary directories for archive extraction cannot be
    created.

    Examples:
        >>> raise TemporalFileError("Cannot create temp dir: /tmp not writable")
    """

    pass
