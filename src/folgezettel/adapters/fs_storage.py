from pathlib import Path
from ..core.ports import NoteStorage


class FsStorage(NoteStorage):
    def __init__(self, root: Path):
        self.root = root

    def _path(self, path: Path) -> Path:
        return self.root / path

    def _notes(self) -> list[Path]:
        if not self.root.exists():
            return []
        return sorted(
            p for p in self.root.rglob("*.md")
            if p.is_file() and not any(part.startswith(".") for part in p.relative_to(self.root).parts)
        )

    def list_filenames(self) -> list[str]:
        return [p.name for p in self._notes()]

    def find(self, filename: str) -> Path | None:
        for p in self._notes():
            if p.name == filename:
                return p.relative_to(self.root)
        return None

    def exists(self, path: Path) -> bool:
        return self._path(path).is_file()

    def read_text(self, path: Path) -> str:
        return self._path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, contents: str) -> None:
        self._path(path).write_text(contents, encoding="utf-8")

    def create(self, path: Path, contents: str) -> None:
        p = self._path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        # "x" mode refuses to clobber an existing note
        with open(p, "x", encoding="utf-8") as f:
            f.write(contents)

    def abspath(self, path: Path) -> Path:
        return self._path(path).absolute()
