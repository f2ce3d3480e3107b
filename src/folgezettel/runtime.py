"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_storage import FsStorage
from .adapters.yaml_codec import YamlFrontmatter
from .config import FzConfig, load_config
from .core.vault import ZettelVault


@dataclass
class Runtime:
    """Container for all wired components."""
    vault: ZettelVault
    storage: FsStorage
    config: FzConfig


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
    frontmatter: bool | None = None,
) -> Runtime:
    """Build and wire all components for a vault."""
    config = load_config(config_path=config_path, vault_path=vault_path)

    # CLI args win over config values
    if vault_path is None:
        vault_path = config.vault.root
    if frontmatter is None:
        frontmatter = config.new.frontmatter

    storage = FsStorage(vault_path)
    vault = ZettelVault(
        storage,
        frontmatter=YamlFrontmatter() if frontmatter else None,
        title_separator=config.new.title_separator,
    )

    return Runtime(vault=vault, storage=storage, config=config)
