from pathlib import Path
from typing import Protocol, Any


class NoteStorage(Protocol):
    """
    Markdown files under one vault root. Paths are relative to that root;
    notes may live in nested folders.
    """

    def list_filenames(self) -> list[str]:
        pass

    def find(self, filename: str) -> Path | None:
        pass

    def exists(self, path: Path) -> bool:
        pass

    def read_text(self, path: Path) -> str:
        pass

    def write_text(self, path: Path, contents: str) -> None:
        pass

    def create(self, path: Path, contents: str) -> None:
        """Create a new file; FileExistsError if something is already there."""

    def abspath(self, path: Path) -> Path:
        pass


class FrontmatterCodec(Protocol):
    def encode(self, meta: dict[str, Any]) -> str:
        pass

    def header(self, zid: str, title: str | None = None, parent: str | None = None) -> str:
        pass
