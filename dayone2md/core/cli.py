#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for dayone2md commands.

Functions:
    setup_logger: Initialize ConversionLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ConversionStats: Journal → Markdown conversion statistics

Usage:
    from dayone2md.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "dayone2md")
    stats = ConversionStats()
    stats.entries_written += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from dayone2md.core.logging_manager import ConversionLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Path, component_name: str, verbose: bool = False
) -> ConversionLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a ConversionLogger for the component. Verbose mode echoes progress
    (INFO records) to the console as well.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging
        verbose: Lower the console threshold to INFO

    Returns:
        Configured ConversionLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ConversionLogger(
        operations_log_dir,
        component_name=component_name,
        console_level=logging.INFO if verbose else logging.WARNING,
    )


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        journals_processed: Number of journal files converted
        start_time: Operation start timestamp
    """
    journals_processed: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.journals_processed < 0:
            raise ValueError(
                f"journals_processed must be non-negative, got {self.journals_processed}"
            )

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.journals_processed} journals processed, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "journals_processed": self.journals_processed,
            "duration": self.duration(),
        }


@dataclass
class ConversionStats(OperationStats):
    """
    Statistics for a Day One export conversion.

    Attributes:
        entries_written: Number of Markdown notes written
        attachments_copied: Number of files in the copied photos directory
    """
    entries_written: int = 0
    attachments_copied: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.entries_written < 0:
            raise ValueError(f"entries_written must be non-negative, got {self.entries_written}")
        if self.attachments_copied < 0:
            raise ValueError(
                f"attachments_copied must be non-negative, got {self.attachments_copied}"
            )

    def merge(self, other: ConversionStats) -> None:
        """Add the counters of a per-journal run into this one."""
        self.journals_processed += other.journals_processed
        self.entries_written += other.entries_written
        self.attachments_copied += other.attachments_copied

    def summary(self) -> str:
        """Get formatted summary with entry metrics."""
        return (
            f"{self.journals_processed} journals processed, "
            f"{self.entries_written} entries written, "
            f"{self.attachments_copied} attachments copied, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_written": self.entries_written,
            "attachments_copied": self.attachments_copied,
        })
        return d
