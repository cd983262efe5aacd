"""
conftest.py
-----------
Shared pytest fixtures for dayone2md tests.

Provides fixtures for:
- Building Day One export directories and zip archives
- Sample entry records
"""
import json
import zipfile
from pathlib import Path

import pytest


# ----- Sample Entry Fixtures -----

@pytest.fixture
def minimal_entry():
    """Entry with only the fields that never reach the metadata block."""
    return {"uuid": "u1", "text": "hi", "richText": "{\"meta\":{}}"}


@pytest.fixture
def photo_entry():
    """Entry referencing one photo that exists in the export."""
    return {
        "uuid": "P1",
        "text": "see (dayone-moment://abc)",
        "photos": [{"identifier": "abc", "md5": "deadbeef", "type": "jpeg"}],
    }


@pytest.fixture
def full_entry():
    """Entry with tags after other fields and a mix of empty metadata."""
    return {
        "uuid": "F1",
        "creationDate": "2024-01-15T08:30:00Z",
        "starred": False,
        "duration": 0,
        "isPinned": True,
        "location": {"placeName": "Cafe X", "localityName": "Montreal"},
        "text": "Morning pages.",
        "richText": "ignored",
        "weather": {},
        "editingTime": 12.5,
        "tags": ["writing", "coffee"],
        "timeZone": "",
        "people": [],
        "creationDevice": None,
    }


# ----- Export Fixtures -----

@pytest.fixture
def make_export(tmp_path):
    """
    Factory building an export directory.

    Usage:
        export_dir = make_export({"Journal%20A": [entry, ...]}, photos=["deadbeef.jpg"])
    """

    def _make(journals, photos=None, name="export"):
        export_dir = tmp_path / name
        export_dir.mkdir()
        for journal_name, entries in journals.items():
            payload = {"metadata": {"version": "1.0"}, "entries": entries}
            (export_dir / f"{journal_name}.json").write_text(
                json.dumps(payload), encoding="utf-8"
            )
        if photos is not None:
            photos_dir = export_dir / "photos"
            photos_dir.mkdir()
            for photo in photos:
                (photos_dir / photo).write_bytes(b"\xff\xd8\xff" + photo.encode())
        return export_dir

    return _make


@pytest.fixture
def make_archive(tmp_path):
    """Factory zipping an export directory's contents at the archive root."""

    def _zip(export_dir: Path, name="Export.zip"):
        archive_path = tmp_path / name
        with zipfile.ZipFile(archive_path, "w") as zf:
            for path in sorted(export_dir.rglob("*")):
                zf.write(path, path.relative_to(export_dir).as_posix())
        return archive_path

    return _zip
