"""Configuration loader for fz.toml."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore


@dataclass
class VaultConfig:
    """Vault-specific configuration."""
    root: Path


@dataclass
class NewNoteConfig:
    """Defaults for `fz new`."""
    frontmatter: bool = False
    link: bool = False
    title_separator: str = " "


@dataclass
class FzConfig:
    """Complete folgezettel configuration."""
    vault: VaultConfig
    new: NewNoteConfig


def _title_separator(value: Any) -> str:
    """The separator must end the ID, i.e. start with a non-word character."""
    sep = str(value)
    if not sep or re.match(r"\w", sep, re.ASCII):
        raise ValueError(
            f"Invalid title_separator {sep!r}: must start with a non-word character"
        )
    return sep


def load_config(config_path: Path | None = None, vault_path: Path | None = None) -> FzConfig:
    """
    Load configuration from fz.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/fz.toml
    3. vault_path/fz.toml

    Missing keys fall back to defaults; a missing file means all defaults.
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "fz.toml")
    if vault_path:
        search_paths.append(vault_path / "fz.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    vault_data = toml_data.get("vault", {})
    vault_config = VaultConfig(
        root=Path(vault_data.get("root", vault_path or Path("."))),
    )

    new_data = toml_data.get("new", {})
    new_config = NewNoteConfig(
        frontmatter=bool(new_data.get("frontmatter", False)),
        link=bool(new_data.get("link", False)),
        title_separator=_title_separator(new_data.get("title_separator", " ")),
    )

    return FzConfig(vault=vault_config, new=new_config)
