"""Zettel ID algebra.

IDs alternate digit and letter runs, e.g. ``1A2b``. Every function here is
pure and total: an empty string stands for "no ID" / "root level".
"""

import re
from collections.abc import Iterable

from .model import Suffix, ZettelId, format_decimal

_RUN = re.compile(r"[0-9]+|[a-zA-Z]+")
_TRAILING = re.compile(r"(?:[0-9]+|[a-zA-Z]+)$")
_ID = re.compile(r"[0-9a-zA-Z]+")
_BARE_NAME = re.compile(r"[0-9a-zA-Z]+\.md")
_NON_WORD = re.compile(r"\W+", re.ASCII)


def tokenize(text: str) -> list[Suffix]:
    """Split text into its leading alternating digit/letter runs.

    Stops at the first character that is neither a digit nor an ASCII letter.
    """
    runs = []
    pos = 0
    while True:
        m = _RUN.match(text, pos)
        if not m:
            return runs
        runs.append(_suffix(m.group(0)))
        pos = m.end()


def _suffix(run: str) -> Suffix:
    return Suffix(kind="digits" if run.isdigit() else "letters", text=run)


def trailing_suffix(zid: ZettelId) -> Suffix | None:
    m = _TRAILING.search(zid)
    return _suffix(m.group(0)) if m else None


def parse_id(filename: str) -> ZettelId:
    """
    Extract the zettel ID from a filename.

    ``42.md`` -> ``42``; ``42 My Title.md`` -> ``42``; ``1a-draft.md`` -> ``1a``.
    Returns an empty string when the name starts with a non-word character.
    """
    if _BARE_NAME.fullmatch(filename):
        return filename[: -len(".md")]
    return _NON_WORD.split(filename)[0]


def find_zettel_id(filename: str) -> ZettelId | None:
    """Like parse_id, but None unless the result is a well-formed ID."""
    zid = parse_id(filename)
    return zid if _ID.fullmatch(zid) else None


def parent_id(zid: ZettelId) -> ZettelId:
    """Drop the trailing run: ``1a2`` -> ``1a``, ``1a`` -> ``1``, ``1`` -> ``""``."""
    last = trailing_suffix(zid)
    if last is None:
        return zid
    return zid[: -len(last.text)]


def encode_letters(index: int, upper: bool = False) -> str:
    """Bijective base-26: 1 -> a, 26 -> z, 27 -> aa, 53 -> ba."""
    first = ord("A") if upper else ord("a")
    out = []
    while index > 0:
        index, rem = divmod(index - 1, 26)
        out.append(chr(first + rem))
    return "".join(reversed(out))


def child_id(parent: ZettelId, index: int) -> ZettelId:
    """Build the ID of the index-th child of parent.

    Letter-terminated parents get numeric children. Otherwise the children
    are letters, upper-case when the parent equals its own upper-case form
    (so purely numeric and empty parents get ``A``, ``B``, ...).
    """
    last = trailing_suffix(parent)
    if last is not None and last.kind == "letters":
        return parent + format_decimal(index)
    return parent + encode_letters(index, upper=parent == parent.upper())


def child_index(parent: ZettelId, filename: str) -> int:
    """Index of the child of parent that filename names (0 for the parent itself)."""
    zid = parse_id(filename)
    if not zid.startswith(parent):
        return 0
    runs = tokenize(zid[len(parent):])
    return runs[0].index if runs else 0


def next_child_id(parent: ZettelId, filenames: Iterable[str]) -> ZettelId:
    """
    Next unused child ID under parent.

    Filenames starting with ``parent + " "`` are the parent's own titled note
    and never count as children.
    """
    highest = max(
        (
            child_index(parent, name)
            for name in filenames
            if name.startswith(parent) and not name.startswith(parent + " ")
        ),
        default=0,
    )
    return child_id(parent, highest + 1)


def next_sibling_id(zid: ZettelId, filenames: Iterable[str]) -> ZettelId:
    """
    Next unused sibling of zid.

    zid itself always counts as taken. Root-level IDs have the empty parent,
    so their siblings are built from ``""``.
    """
    return next_child_id(parent_id(zid), [*filenames, zid + ".md"])


def starts_new_run(zid: ZettelId) -> bool:
    """True when zid ends in ``a``/``A``, or in a ``1`` right after a letter."""
    last = trailing_suffix(zid)
    if last is None:
        return False
    if last.kind == "letters":
        return last.text[-1] in "aA"
    before = zid[: -len(last.text)]
    return last.text == "1" and trailing_suffix(before) is not None


def next_id(zid: ZettelId, filenames: Iterable[str]) -> ZettelId:
    """
    Next ID in depth-first order.

    Takes the next sibling only when that sibling would open a fresh run,
    otherwise descends to the next child of zid.
    """
    filenames = list(filenames)
    candidate = next_sibling_id(zid, filenames)
    if starts_new_run(candidate):
        return candidate
    return next_child_id(zid, filenames)
