#!/usr/bin/env python3
"""
md.py
-------------------
Markdown formatting helpers for Day One notes.

Functions:
    format_meta_value: Render a metadata value, or None when it is empty
    hashtag_line: Render a tag list as a single ``#tag`` line
    blockquote_block: Render metadata lines as a block-quoted header
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from typing import Any, Iterable, List, Optional


def format_meta_value(value: Any) -> Optional[str]:
    """
    Render a metadata value as note text.

    ``None``, ``False``, numeric zero, ``""``, ``[]`` and ``{}`` are empty
    and yield None. Lists and mappings become compact JSON with newlines
    escaped; everything else is rendered as plain text.

    Args:
        value: Any value decoded from the export JSON

    Returns:
        Rendered text, or None if the field should be omitted

    Examples:
        >>> format_meta_value(0) is None
        True
        >>> format_meta_value({"city": "Paris"})
        '{"city":"Paris"}'
    """
    if value is None or value is False:
        return None
    if value is True:
        return "true"
    if isinstance(value, (int, float)):
        return None if value == 0 else str(value)
    if isinstance(value, (list, tuple, dict)):
        if not value:
            return None
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        return text.replace("\n", "\\n")
    text = str(value)
    return text or None


def hashtag_line(tags: Iterable[Any]) -> str:
    """Join tags as ``#a  #b`` (two spaces between tags)."""
    return "  ".join(f"#{tag}" for tag in tags)


def blockquote_block(lines: List[str]) -> str:
    """
    Render metadata lines as ``> line`` with a trailing Markdown soft break.

    Returns an empty string for an empty list.
    """
    return "".join(f"> {line}  \n" for line in lines)
