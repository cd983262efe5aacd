#!/usr/bin/env python3
"""
temporal_files.py
--------------------
Temporary directory management for archive staging.

Directories created through the manager are tracked and removed when the
context exits, whether the conversion succeeded or raised.

Usage:
    from dayone2md.core.temporal_files import TemporalFileManager

    with TemporalFileManager() as temp_manager:
        unzip_dir = temp_manager.create_temp_dir(prefix="export-day1-unzip-")
        # ... extract and convert ...
    # Automatic cleanup on context exit
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from .exceptions import TemporalFileError


class TemporalFileManager:
    """
    Manages temporary directories with automatic cleanup.

    Attributes:
        base_dir: Parent directory for created temporary directories
        active_dirs: Directories created and not yet removed
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        """
        Initialize temporal file manager.

        Args:
            base_dir: Base directory for temporary files. Uses system temp if None.
        """
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self.active_dirs: List[Path] = []

    def create_temp_dir(self, prefix: str = "dayone2md_") -> Path:
        """
        Create a temporary directory and track it for cleanup.

        Args:
            prefix: Directory prefix

        Returns:
            Path to the temporary directory

        Raises:
            TemporalFileError: If directory creation fails
        """
        try:
            temp_dir = Path(tempfile.mkdtemp(prefix=prefix, dir=self.base_dir))
        except OSError as e:
            raise TemporalFileError(f"Failed to create temporary directory: {e}") from e
        self.active_dirs.append(temp_dir)
        return temp_dir

    def cleanup(self) -> Dict[str, int]:
        """
        Remove all tracked temporary directories.

        Returns:
            Dictionary with cleanup statistics
        """
        cleanup_stats = {"dirs_removed": 0, "errors": 0}

        for temp_dir in self.active_dirs[:]:
            try:
                if temp_dir.exists():
                    shutil.rmtree(temp_dir)
                    cleanup_stats["dirs_removed"] += 1
                self.active_dirs.remove(temp_dir)
            except OSError:
                cleanup_stats["errors"] += 1

        return cleanup_stats

    def __enter__(self) -> "TemporalFileManager":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Optional[Any],
    ) -> None:
        """Context manager exit with automatic cleanup."""
        del exc_type, exc_val, exc_tb
        self.cleanup()
