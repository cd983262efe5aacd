"""
Builders package for dayone2md.

- AttachmentBuilder: Copy the export's photos directory and index it

All builders follow the common interface defined by the base classes.
"""

from dayone2md.builders.attachments import AttachmentBuilder, AttachmentStats
from dayone2md.builders.base import BaseBuilder, BuilderStats

__all__ = [
    "AttachmentBuilder",
    "AttachmentStats",
    "BaseBuilder",
    "BuilderStats",
]
