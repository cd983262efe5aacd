"""
dataclasses package
-------------------
Dataclass definitions for Day One journal entries.

- DayOneEntry: One entry from a Day One JSON export
"""
from dayone2md.dataclasses.dayone_entry import DayOneEntry

__all__ = ["DayOneEntry"]
