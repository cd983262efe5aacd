#!/usr/bin/env python3
"""
dayone_entry.py
-------------------

Defines the DayOneEntry dataclass representing one journal entry parsed
from a Day One JSON export.

Each DayOneEntry instance contains:
- uuid (output file name)
- text (Markdown body, with dayone-moment:// photo references)
- tags
- photos (attachment records used to resolve references)
- metadata (every other field, in export order)

``richText`` is dropped on construction and never rendered.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# ---- Local imports ----
from dayone2md.core.exceptions import EntryValidationError
from dayone2md.core.paths import MOMENT_SCHEME, NOTE_SUFFIX, PHOTOS_LINK_PREFIX
from dayone2md.utils import md


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
MOMENT_PATTERN = re.compile(r"\(" + re.escape(MOMENT_SCHEME) + r"(\S*)\)")
"""Inline photo reference: ``(dayone-moment://<photo identifier>)``."""

DROPPED_FIELDS = ("richText",)


# ----- Dataclass -----
@dataclass
class DayOneEntry:
    """
    Represents a single Day One journal entry.

    Attributes:
        uuid (str): Entry identifier, used as the note file name.
        text (str): Entry body in Markdown.
        tags (List[str]): Tags, rendered as the first metadata line.
        photos (List[dict]): Photo records with ``identifier`` and ``md5``.
        metadata (Dict[str, Any]): Remaining fields in export order,
            ``photos`` included.
    """

    # ---- Attributes ----
    uuid: str
    text: str = ""
    tags: List[Any] = field(default_factory=list)
    photos: List[Dict[str, Any]] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    _photo_index: Optional[Dict[str, Dict[str, Any]]] = field(
        default=None, init=False, repr=False, compare=False
    )

    # ---- Public constructors ----
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DayOneEntry:
        """
        Build an entry from a decoded export record.

        Works on a copy, so ``data`` is left untouched.

        Raises:
            EntryValidationError: If ``uuid`` is missing or not a non-empty string
        """
        fields = dict(data)

        uuid = fields.pop("uuid", None)
        if not isinstance(uuid, str) or not uuid:
            raise EntryValidationError(
                f"Entry missing required field 'uuid' (got {uuid!r})"
            )

        text = fields.pop("text", None) or ""
        for key in DROPPED_FIELDS:
            fields.pop(key, None)

        tags = fields.pop("tags", None) or []
        photos = fields.get("photos") or []

        return cls(
            uuid=uuid,
            text=str(text),
            tags=list(tags),
            photos=list(photos),
            metadata=fields,
        )

    # ---- Properties ----
    @property
    def filename(self) -> str:
        return f"{self.uuid}{NOTE_SUFFIX}"

    @property
    def photo_index(self) -> Dict[str, Dict[str, Any]]:
        """Photo records keyed by identifier, built on first use."""
        if self._photo_index is None:
            self._photo_index = {
                photo.get("identifier"): photo
                for photo in self.photos
                if isinstance(photo, Mapping)
            }
        return self._photo_index

    # ---- Reference resolution ----
    def resolve_moment(
        self, identifier: str, attachments: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Resolve a photo identifier to a link relative to the journal directory.

        identifier → photo record → ``md5`` → copied attachment path. When
        any step is missing the identifier itself is used as the path.

        Args:
            identifier: Token from ``(dayone-moment://<identifier>)``
            attachments: Content-hash to copied path lookup, if any

        Returns:
            Link target such as ``../photos/<md5>.jpg``
        """
        path = None
        if attachments:
            md5 = self.photo_index.get(identifier, {}).get("md5")
            if md5:
                path = attachments.get(md5)

        if path is None:
            logger.debug(f"Unresolved photo reference {identifier} in {self.uuid}")
            path = identifier

        return f"{PHOTOS_LINK_PREFIX}{path}"

    def render_body(self, attachments: Optional[Mapping[str, str]] = None) -> str:
        """Return the body with every photo reference rewritten."""
        return MOMENT_PATTERN.sub(
            lambda m: f"({self.resolve_moment(m.group(1), attachments)})",
            self.text,
        )

    # ---- Serialization ----
    def metadata_lines(self) -> List[str]:
        """
        Build the metadata block, tags first, then fields in export order.

        Empty values (see ``format_meta_value``) are skipped.
        """
        lines: List[str] = []
        if self.tags:
            lines.append(md.hashtag_line(self.tags))

        for key, value in self.metadata.items():
            formatted = md.format_meta_value(value)
            if formatted is None:
                continue
            lines.append(f"{key}: {formatted}")

        return lines

    def to_markdown(self, attachments: Optional[Mapping[str, str]] = None) -> str:
        """
        Generate the note: block-quoted metadata, a blank line, then the body.
        """
        return (
            md.blockquote_block(self.metadata_lines())
            + "\n"
            + self.render_body(attachments)
        )
