"""
Tests for directory listing.
"""

import os
import tempfile
from pathlib import Path

import pytest

from fileserver.files import EntryKind, InternalError, ListEntry, list_entries


class TestListEntries:
    """Test listing immediate children of a directory."""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory for tests."""
        with tempfile.TemporaryDirectory(prefix="fileserver_list_test_") as temp_dir:
            yield Path(temp_dir)

    @pytest.fixture
    def test_structure(self, temp_dir):
        """Create a mix of files and directories."""
        (temp_dir / "notes.txt").write_text("hello")
        (temp_dir / "b.bin").write_bytes(b"\x00\x01")
        (temp_dir / "photos").mkdir()
        (temp_dir / "archive").mkdir()
        # Nested content must not show up in the parent listing
        (temp_dir / "photos" / "cat.jpg").write_bytes(b"jpg")
        return temp_dir

    @pytest.mark.asyncio
    async def test_lists_every_child_with_kind(self, test_structure):
        entries = await list_entries(str(test_structure))

        assert {(e.name, e.kind) for e in entries} == {
            ("notes.txt", EntryKind.FILE),
            ("b.bin", EntryKind.FILE),
            ("photos", EntryKind.DIRECTORY),
            ("archive", EntryKind.DIRECTORY),
        }

    @pytest.mark.asyncio
    async def test_display_tags(self, test_structure):
        entries = await list_entries(str(test_structure))
        displays = {e.display for e in entries}

        assert "[DIR] photos" in displays
        assert "[DIR] archive" in displays
        assert "[FILE] notes.txt" in displays
        assert "[FILE] b.bin" in displays

    @pytest.mark.asyncio
    async def test_sorted_by_tagged_string(self, test_structure):
        unsorted = await list_entries(str(test_structure))
        entries = await list_entries(str(test_structure), sort=True)

        assert [e.display for e in entries] == [
            "[DIR] archive",
            "[DIR] photos",
            "[FILE] b.bin",
            "[FILE] notes.txt",
        ]
        assert {e.display for e in entries} == {e.display for e in unsorted}

    @pytest.mark.asyncio
    async def test_sort_uses_code_point_order(self, temp_dir):
        (temp_dir / "Zeta").mkdir()
        (temp_dir / "Alpha.txt").write_text("")
        (temp_dir / "beta").mkdir()

        entries = await list_entries(str(temp_dir), sort=True)

        # Code point order: uppercase before lowercase
        assert [e.display for e in entries] == [
            "[DIR] Zeta",
            "[DIR] beta",
            "[FILE] Alpha.txt",
        ]

    @pytest.mark.asyncio
    async def test_empty_directory(self, temp_dir):
        assert await list_entries(str(temp_dir)) == []

    @pytest.mark.asyncio
    async def test_symlink_to_directory_is_listed_as_directory(self, temp_dir):
        (temp_dir / "real").mkdir()
        (temp_dir / "link").symlink_to(temp_dir / "real")

        entries = await list_entries(str(temp_dir), sort=True)

        assert [e.display for e in entries] == ["[DIR] link", "[DIR] real"]

    @pytest.mark.asyncio
    async def test_default_path_is_working_directory(self, temp_dir, monkeypatch):
        (temp_dir / "here.txt").write_text("")
        monkeypatch.chdir(temp_dir)

        entries = await list_entries()

        assert entries == [ListEntry(name="here.txt", kind=EntryKind.FILE)]

    @pytest.mark.asyncio
    async def test_undecodable_name_is_replaced(self, temp_dir):
        with open(os.path.join(os.fsencode(temp_dir), b"bad\xff.txt"), "wb"):
            pass
        (temp_dir / "good.txt").write_text("")

        entries = await list_entries(str(temp_dir), sort=True)

        assert [e.display for e in entries] == [
            "[FILE] bad\ufffd.txt",
            "[FILE] good.txt",
        ]

    @pytest.mark.asyncio
    async def test_nonexistent_directory(self, temp_dir):
        with pytest.raises(InternalError) as exc_info:
            await list_entries(str(temp_dir / "missing"))

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_path_is_a_file(self, temp_dir):
        (temp_dir / "file.txt").write_text("")

        with pytest.raises(InternalError):
            await list_entries(str(temp_dir / "file.txt"))
