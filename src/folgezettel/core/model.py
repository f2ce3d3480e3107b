from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

ZettelId = str

# int()/str() refuse very long decimal strings, so convert in chunks
_CHUNK = 1000


def parse_decimal(text: str) -> int:
    acc = 0
    for i in range(0, len(text), _CHUNK):
        chunk = text[i : i + _CHUNK]
        acc = acc * 10 ** len(chunk) + int(chunk)
    return acc


def format_decimal(n: int) -> str:
    base = 10 ** _CHUNK
    chunks = []
    while n >= base:
        n, rem = divmod(n, base)
        chunks.append(f"{rem:0{_CHUNK}d}")
    return str(n) + "".join(reversed(chunks))


@dataclass(frozen=True)
class Suffix:
    kind: str  # "digits" or "letters"
    text: str

    @property
    def index(self) -> int:
        """1-based child index encoded by this run (a == A == 1, aa == 27)."""
        if self.kind == "digits":
            return parse_decimal(self.text)
        acc = 0
        for ch in self.text.lower():
            acc = acc * 26 + ord(ch) - ord("a") + 1
        return acc


@dataclass(frozen=True)
class CreatedNote:
    id: ZettelId
    path: Path  # relative to the vault root
    source: Path  # note the new one was derived from
