"""Tests for the filesystem note storage."""

import tempfile
from pathlib import Path

import pytest

from folgezettel.adapters.fs_storage import FsStorage


def test_list_filenames_recursive():
    """Test listing markdown names across folders, skipping hidden ones."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "sub").mkdir()
        (root / ".trash").mkdir()
        (root / "1.md").write_text("")
        (root / "sub" / "1A Child.md").write_text("")
        (root / ".trash" / "1B.md").write_text("")
        (root / "image.png").write_text("")

        storage = FsStorage(root)

        assert sorted(storage.list_filenames()) == ["1.md", "1A Child.md"]
        assert storage.find("1A Child.md") == Path("sub/1A Child.md")
        assert storage.find("1B.md") is None


def test_missing_root():
    storage = FsStorage(Path("/nonexistent/vault/path"))
    assert storage.list_filenames() == []


def test_create_refuses_overwrite():
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = FsStorage(Path(tmpdir))

        storage.create(Path("deep/1.md"), "first")
        assert storage.read_text(Path("deep/1.md")) == "first"
        assert storage.exists(Path("deep/1.md"))

        with pytest.raises(FileExistsError):
            storage.create(Path("deep/1.md"), "second")
        assert storage.read_text(Path("deep/1.md")) == "first"


def test_abspath():
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = FsStorage(Path(tmpdir))
        assert storage.abspath(Path("1.md")) == (Path(tmpdir) / "1.md").absolute()
