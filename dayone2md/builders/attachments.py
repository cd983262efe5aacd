#!/usr/bin/env python3
"""
attachments.py
-------------------
Copy a Day One export's photos directory into the output directory.

Handles:
- Merging <export>/photos/ into <output>/photos/
- Building the content-hash → copied path lookup used to rewrite
  dayone-moment:// references

Usage:
    builder = AttachmentBuilder(
        source_dir=Path("export/photos"),
        dest_dir=Path("notes/photos"),
        logger=logger,
    )
    stats = builder.build()
    stats.lookup["deadbeef"]  # "deadbeef.jpg"
"""
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, Optional

from dayone2md.builders.base import BaseBuilder, BuilderStats
from dayone2md.core.exceptions import AttachmentCopyError
from dayone2md.core.logging_manager import ConversionLogger
from dayone2md.utils.fs import build_attachment_lookup


class AttachmentStats(BuilderStats):
    """Track attachment copy results and hold the resulting lookup."""

    def __init__(self) -> None:
        super().__init__()
        self.copied: bool = False
        self.lookup: Dict[str, str] = {}

    @property
    def files_available(self) -> int:
        return len(self.lookup)

    def summary(self) -> str:
        action = "copied" if self.copied else "no source directory"
        return (
            f"{action}, {self.files_available} attachments available "
            f"in {self.duration():.2f}s"
        )


class AttachmentBuilder(BaseBuilder):
    """
    Mirror an attachment directory and index it by content-hash.

    A missing source directory is not an error: nothing is copied and the
    lookup stays empty. Existing files in the destination are kept.

    Attributes:
        source_dir: Export attachment directory (may not exist)
        dest_dir: Destination attachment directory
        logger: Optional logger for operations
    """

    def __init__(
        self,
        source_dir: Path,
        dest_dir: Path,
        logger: Optional[ConversionLogger] = None,
    ):
        super().__init__(logger)
        self.source_dir = source_dir
        self.dest_dir = dest_dir

    def _copy_tree(self) -> None:
        """
        Raises:
            AttachmentCopyError: If any file fails to copy
        """
        try:
            self.dest_dir.parent.mkdir(parents=True, exist_ok=True)
            shutil.copytree(self.source_dir, self.dest_dir, dirs_exist_ok=True)
        except (OSError, shutil.Error) as e:
            self._log_error(
                e,
                {
                    "operation": "copy_attachments",
                    "source": str(self.source_dir),
                    "dest": str(self.dest_dir),
                },
            )
            raise AttachmentCopyError(
                f"Failed to copy {self.source_dir} to {self.dest_dir}: {e}"
            ) from e

    def build(self) -> AttachmentStats:
        """
        Copy the attachment directory and build the lookup.

        Returns:
            AttachmentStats with the content-hash lookup

        Raises:
            AttachmentCopyError: If copying fails
        """
        stats = AttachmentStats()

        if not self.source_dir.is_dir():
            self._log_debug(f"No attachment directory at {self.source_dir}")
            return stats

        self._log_operation(
            "attachments_copy_start",
            {"source": str(self.source_dir), "dest": str(self.dest_dir)},
        )

        self._copy_tree()
        stats.copied = True
        stats.lookup = build_attachment_lookup(self.dest_dir)

        self._log_operation("attachments_copy_complete", {"stats": stats.summary()})

        return stats
