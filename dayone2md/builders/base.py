#!/usr/bin/env python3
"""
base.py
-------------------
Base classes for builders in the dayone2md project.

Provides:
- BuilderStats: Abstract base class for tracking build statistics
- BaseBuilder: Abstract base class for builder implementations
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from dayone2md.core.logging_manager import ConversionLogger, safe_logger


class BuilderStats(ABC):
    """
    Abstract base class for tracking builder statistics.

    Attributes:
        start_time: Timestamp when processing started
    """

    def __init__(self) -> None:
        self.start_time: datetime = datetime.now()

    def duration(self) -> float:
        """Get elapsed time since initialization, in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    @abstractmethod
    def summary(self) -> str:
        """Get a human-readable summary of build statistics."""
        pass


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Subclasses implement build(); the _log_* helpers route through
    safe_logger so the logger stays optional.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[ConversionLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> BuilderStats:
        """
        Execute the build process.

        Returns:
            BuilderStats subclass instance with build results
        """
        pass

    def _log_operation(
        self, operation: str, details: Optional[dict] = None
    ) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str) -> None:
        safe_logger(self.logger).log_debug(message)

    def _log_error(self, error: Exception, context: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_error(error, context or {})
