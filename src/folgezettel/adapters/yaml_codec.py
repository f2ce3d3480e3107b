from typing import Any

import yaml

from ..core.model import ZettelId
from ..core.ports import FrontmatterCodec


class YamlFrontmatter(FrontmatterCodec):
    """Header for freshly created notes; the filename stays the source of truth for the ID."""

    def encode(self, meta: dict[str, Any]) -> str:
        if not meta:
            return ""
        dumped = yaml.safe_dump(
            meta, sort_keys=False, allow_unicode=True, explicit_start=True
        )
        return f"{dumped}---\n"

    def header(self, zid: ZettelId, title: str | None = None, parent: ZettelId | None = None) -> str:
        meta: dict[str, Any] = {"id": zid}
        if title:
            meta["title"] = title
        if parent:
            meta["parent"] = parent
        return self.encode(meta)
