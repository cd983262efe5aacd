"""
Tests for the json2md conversion pipeline.
"""
import json
from pathlib import Path

import pytest

from dayone2md.core.exceptions import EntryValidationError, ExportFormatError
from dayone2md.pipeline.json2md import (
    convert_directory,
    convert_export,
    convert_journal,
    extract_entry,
    load_entries,
    preview_export,
)


class TestExtractEntry:
    """Test writing a single note."""

    def test_writes_uuid_named_note(self, tmp_path, minimal_entry):
        path = extract_entry(minimal_entry, tmp_path)

        assert path == tmp_path / "u1.md"
        assert path.read_text(encoding="utf-8") == "\nhi"

    def test_resolves_references_with_lookup(self, tmp_path, photo_entry):
        path = extract_entry(photo_entry, tmp_path, {"deadbeef": "deadbeef.jpg"})
        assert "see (../photos/deadbeef.jpg)" in path.read_text(encoding="utf-8")

    def test_missing_uuid(self, tmp_path):
        with pytest.raises(EntryValidationError):
            extract_entry({"text": "no id"}, tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestLoadEntries:
    """Test journal file parsing."""

    def test_missing_entries_key(self, tmp_path):
        path = tmp_path / "Journal.json"
        path.write_text(json.dumps({"metadata": {}}))

        with pytest.raises(ExportFormatError, match="entries"):
            load_entries(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "Journal.json"
        path.write_text("{not json")

        with pytest.raises(ExportFormatError):
            load_entries(path)

    def test_non_object_entries(self, tmp_path):
        path = tmp_path / "Journal.json"
        path.write_text(json.dumps({"entries": ["u1"]}))

        with pytest.raises(ExportFormatError):
            load_entries(path)


class TestConvertJournal:
    """Test converting one journal file."""

    def test_writes_into_decoded_journal_dir(self, make_export, tmp_path):
        export_dir = make_export(
            {"Journal%20A": [{"uuid": "u1", "text": "hi", "tags": ["x", "y"]}]}
        )
        output = tmp_path / "output"

        stats = convert_journal(export_dir / "Journal%20A.json", output)

        note = output / "Journal A" / "u1.md"
        assert note.read_text(encoding="utf-8") == "> #x  #y  \n\nhi"
        assert stats.entries_written == 1
        assert stats.journals_processed == 1

    def test_empty_journal_creates_directory(self, make_export, tmp_path):
        export_dir = make_export({"Empty": []})
        stats = convert_journal(export_dir / "Empty.json", tmp_path / "out")

        assert (tmp_path / "out" / "Empty").is_dir()
        assert stats.entries_written == 0

    def test_bad_entry_aborts_but_keeps_written_notes(self, make_export, tmp_path):
        export_dir = make_export(
            {"Journal": [{"uuid": "ok", "text": "first"}, {"text": "no id"}]}
        )
        output = tmp_path / "out"

        with pytest.raises(EntryValidationError):
            convert_journal(export_dir / "Journal.json", output)

        assert (output / "Journal" / "ok.md").exists()


class TestConvertDirectory:
    """Test converting an extracted export."""

    def test_copies_photos_and_resolves(self, make_export, photo_entry, tmp_path):
        export_dir = make_export({"Journal": [photo_entry]}, photos=["deadbeef.jpg"])
        output = tmp_path / "out"

        stats = convert_directory(export_dir, output)

        assert (output / "photos" / "deadbeef.jpg").is_file()
        body = (output / "Journal" / "P1.md").read_text(encoding="utf-8")
        assert body.endswith("\n\nsee (../photos/deadbeef.jpg)")
        assert stats.attachments_copied == 1
        assert stats.entries_written == 1

    def test_no_photos_directory(self, make_export, photo_entry, tmp_path):
        export_dir = make_export({"Journal": [photo_entry]})
        output = tmp_path / "out"

        stats = convert_directory(export_dir, output)

        assert not (output / "photos").exists()
        body = (output / "Journal" / "P1.md").read_text(encoding="utf-8")
        assert body.endswith("see (../photos/abc)")
        assert stats.attachments_copied == 0

    def test_in_place_skips_photo_copy(self, make_export, photo_entry):
        export_dir = make_export({"Journal": [photo_entry]}, photos=["deadbeef.jpg"])

        stats = convert_directory(export_dir, export_dir)

        body = (export_dir / "Journal" / "P1.md").read_text(encoding="utf-8")
        assert body.endswith("see (../photos/abc)")
        assert stats.attachments_copied == 0

    def test_multiple_journals(self, make_export, tmp_path):
        export_dir = make_export(
            {
                "Work": [{"uuid": "w1", "text": "a"}, {"uuid": "w2", "text": "b"}],
                "Home": [{"uuid": "h1", "text": "c"}],
            }
        )
        stats = convert_directory(export_dir, tmp_path / "out")

        assert stats.journals_processed == 2
        assert stats.entries_written == 3
        assert {p.name for p in (tmp_path / "out" / "Work").iterdir()} == {"w1.md", "w2.md"}

    def test_missing_entries_key_is_fatal(self, tmp_path):
        export_dir = tmp_path / "export"
        export_dir.mkdir()
        (export_dir / "Broken.json").write_text(json.dumps({"metadata": {}}))

        with pytest.raises(ExportFormatError):
            convert_directory(export_dir, tmp_path / "out")


class TestConvertExport:
    """Test the full conversion entry point."""

    def test_zip_and_directory_give_identical_notes(
        self, make_export, make_archive, full_entry, photo_entry, tmp_path
    ):
        export_dir = make_export(
            {"Journal%20A": [full_entry, photo_entry]}, photos=["deadbeef.jpg"]
        )
        archive = make_archive(export_dir)

        convert_export(export_dir, tmp_path / "from_dir")
        convert_export(archive, tmp_path / "from_zip")

        for name in ("F1.md", "P1.md"):
            from_dir = (tmp_path / "from_dir" / "Journal A" / name).read_bytes()
            from_zip = (tmp_path / "from_zip" / "Journal A" / name).read_bytes()
            assert from_dir == from_zip

    def test_repeated_runs_are_identical(self, make_export, full_entry, tmp_path):
        export_dir = make_export({"Journal": [full_entry]})

        convert_export(export_dir, tmp_path / "first")
        convert_export(export_dir, tmp_path / "second")

        first = (tmp_path / "first" / "Journal" / "F1.md").read_bytes()
        second = (tmp_path / "second" / "Journal" / "F1.md").read_bytes()
        assert first == second

    def test_relative_paths_resolved(self, make_export, tmp_path, monkeypatch):
        make_export({"Journal": [{"uuid": "u1", "text": "hi"}]})
        monkeypatch.chdir(tmp_path)

        convert_export(Path("export"), Path("out"))

        assert (tmp_path / "out" / "Journal" / "u1.md").exists()


class TestPreviewExport:
    """Test dry-run listing."""

    def test_counts_entries_without_writing(self, make_export, tmp_path):
        export_dir = make_export(
            {"Journal%20A": [{"uuid": "u1"}, {"uuid": "u2"}], "B": []}
        )

        assert preview_export(export_dir) == {"B": 0, "Journal A": 2}
        assert not (export_dir / "Journal A").exists()
