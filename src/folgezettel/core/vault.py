from collections.abc import Callable, Sequence
from pathlib import Path

from . import ids
from .model import CreatedNote, ZettelId
from .ports import FrontmatterCodec, NoteStorage

Derive = Callable[[ZettelId, Sequence[str]], ZettelId]


class NoteNotFoundError(FileNotFoundError):
    pass


class ZettelIdNotFoundError(ValueError):
    pass


class ParentNotFoundError(LookupError):
    pass


class ZettelVault:
    """
    Applies the ID algebra to the notes of one vault.

    Every derivation works on a fresh snapshot of the vault's filenames.
    """

    def __init__(
        self,
        storage: NoteStorage,
        frontmatter: FrontmatterCodec | None = None,
        title_separator: str = " ",
    ):
        self.storage = storage
        self.frontmatter = frontmatter
        self.title_separator = title_separator

    def filenames(self) -> list[str]:
        return self.storage.list_filenames()

    def zettel_id_of(self, path: Path) -> ZettelId:
        if not self.storage.exists(path):
            raise NoteNotFoundError(f"Note {path} not found; save it first")
        zid = ids.find_zettel_id(path.name)
        if zid is None:
            raise ZettelIdNotFoundError(
                f"{path.name} is not named with a zettel ID prefix"
            )
        return zid

    def create_child(self, path: Path, **kwargs) -> CreatedNote:
        return self._create(path, ids.next_child_id, **kwargs)

    def create_sibling(self, path: Path, **kwargs) -> CreatedNote:
        return self._create(path, ids.next_sibling_id, **kwargs)

    def create_next(self, path: Path, **kwargs) -> CreatedNote:
        return self._create(path, ids.next_id, **kwargs)

    def _create(
        self,
        path: Path,
        derive: Derive,
        title: str | None = None,
        body: str = "",
        link: bool = False,
    ) -> CreatedNote:
        zid = self.zettel_id_of(path)
        new_id = derive(zid, self.filenames())

        name = new_id
        if title:
            name += self.title_separator + title
        new_path = path.parent / f"{name}.md"

        contents = ""
        if self.frontmatter is not None:
            contents = self.frontmatter.header(new_id, title, ids.parent_id(new_id) or None)
        contents += body

        self.storage.create(new_path, contents)
        if link:
            self.add_link(path, new_id)
        return CreatedNote(id=new_id, path=new_path, source=path)

    def add_link(self, path: Path, zid: ZettelId) -> None:
        """Append a ``[[zid]]`` wiki link on its own line."""
        text = self.storage.read_text(path)
        if text and not text.endswith("\n"):
            text += "\n"
        self.storage.write_text(path, f"{text}[[{zid}]]\n")

    def parent_of(self, path: Path) -> Path:
        """Path of the note whose ID is the parent of the note at path."""
        zid = self.zettel_id_of(path)
        pid = ids.parent_id(zid)
        if not pid:
            raise ParentNotFoundError(f"{zid} is a top-level zettel")
        for name in self.filenames():
            if ids.parse_id(name) == pid:
                found = self.storage.find(name)
                if found is not None:
                    return found
        raise ParentNotFoundError(f"Parent file for {pid} not found")
