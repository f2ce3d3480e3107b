"""CLI for folgezettel - hierarchical zettel IDs for a folder of Markdown notes."""

import argparse
import json
import os
import platform
import subprocess
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .core import ids
from .runtime import build_runtime


def _emit(args: argparse.Namespace, zid: str, **extra: Any) -> None:
    if args.json:
        print(json.dumps({"id": zid, **extra}, indent=2))
    else:
        print(zid)


def _note_path(raw: str, rt: Any) -> Path:
    """Turn a NOTE argument into a path relative to the vault root."""
    p = Path(raw)
    if p.is_absolute():
        return p.resolve().relative_to(rt.storage.root.resolve())
    if not rt.storage.exists(p) and len(p.parts) == 1:
        # bare filename: look it up anywhere in the vault
        found = rt.storage.find(p.name)
        if found is not None:
            return found
    return p


def _edit(path: Path) -> None:
    editor = os.environ.get("EDITOR", "vi")
    subprocess.run([editor, str(path)])


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Print the zettel ID a filename carries."""
    name = Path(args.filename).name
    zid = ids.find_zettel_id(name)
    if zid is None:
        print(f"No zettel ID in {name}", file=sys.stderr)
        return 1
    _emit(args, zid, filename=name)
    return 0


def cmd_parent(args: argparse.Namespace, rt: Any) -> int:
    """Print the parent ID (empty at root level)."""
    _emit(args, ids.parent_id(args.id), child=args.id)
    return 0


def cmd_child(args: argparse.Namespace, rt: Any) -> int:
    """Print the next free child ID."""
    _emit(args, ids.next_child_id(args.id, rt.vault.filenames()), parent=args.id)
    return 0


def cmd_sibling(args: argparse.Namespace, rt: Any) -> int:
    """Print the next free sibling ID."""
    _emit(args, ids.next_sibling_id(args.id, rt.vault.filenames()), sibling=args.id)
    return 0


def cmd_next(args: argparse.Namespace, rt: Any) -> int:
    """Print the next ID in depth-first order."""
    _emit(args, ids.next_id(args.id, rt.vault.filenames()), previous=args.id)
    return 0


def cmd_new(args: argparse.Namespace, rt: Any) -> int:
    """Create a child, sibling or next note next to NOTE."""
    creators = {
        "child": rt.vault.create_child,
        "sibling": rt.vault.create_sibling,
        "next": rt.vault.create_next,
    }
    link = args.link if args.link is not None else rt.config.new.link

    source = _note_path(args.note, rt)
    created = creators[args.kind](
        source, title=args.title, body=args.body, link=link
    )
    abspath = rt.storage.abspath(created.path)

    if args.json:
        print(json.dumps({
            "id": created.id,
            "path": str(abspath),
            "source": str(created.source),
            "linked": link,
        }, indent=2))
    elif not args.quiet:
        print(abspath)

    if args.edit:
        _edit(abspath)
    return 0


def cmd_open_parent(args: argparse.Namespace, rt: Any) -> int:
    """Print (or open) the parent note of NOTE."""
    parent = rt.vault.parent_of(_note_path(args.note, rt))
    abspath = rt.storage.abspath(parent)
    if args.edit:
        _edit(abspath)
    elif args.json:
        print(json.dumps({"path": str(abspath)}, indent=2))
    else:
        print(abspath)
    return 0


def _version() -> str:
    return (
        f"folgezettel {__version__} "
        f"(python {platform.python_version()}, platform {platform.platform()})"
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fz", description="Folgezettel ID tool"
    )
    parser.add_argument("--version", action="version", version=_version())
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/fz.toml, vault/fz.toml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to vault directory (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    parser_parse = subparsers.add_parser("parse", help="Extract the zettel ID from a filename")
    parser_parse.add_argument("filename", help="Note filename, e.g. '1a2 Title.md'")

    parser_parent = subparsers.add_parser("parent", help="Print the parent ID")
    parser_parent.add_argument("id", help="Zettel ID")

    for name, help_text in (
        ("child", "Print the next free child ID"),
        ("sibling", "Print the next free sibling ID"),
        ("next", "Print the next ID in depth-first order"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("id", help="Zettel ID")

    parser_new = subparsers.add_parser("new", help="Create a new zettel note")
    parser_new.add_argument("kind", choices=["child", "sibling", "next"])
    parser_new.add_argument("note", help="Current note (path or filename inside the vault)")
    parser_new.add_argument("--title", help="Title appended to the new filename")
    parser_new.add_argument("--body", default="", help="Initial note body")
    parser_new.add_argument(
        "--link", action=argparse.BooleanOptionalAction, default=None,
        help="Append a [[id]] link to the current note (default: from config)",
    )
    parser_new.add_argument(
        "--frontmatter", action=argparse.BooleanOptionalAction, default=None,
        help="Write YAML frontmatter into the new note (default: from config)",
    )
    parser_new.add_argument("--edit", action="store_true", help="Open the new note in $EDITOR")

    parser_open_parent = subparsers.add_parser("open-parent", help="Locate the parent note")
    parser_open_parent.add_argument("note", help="Current note (path or filename inside the vault)")
    parser_open_parent.add_argument("--edit", action="store_true", help="Open it in $EDITOR")

    args = parser.parse_args(argv)

    rt = build_runtime(
        vault_path=args.vault,
        config_path=args.config,
        frontmatter=getattr(args, "frontmatter", None),
    )

    handlers = {
        "parse": cmd_parse,
        "parent": cmd_parent,
        "child": cmd_child,
        "sibling": cmd_sibling,
        "next": cmd_next,
        "new": cmd_new,
        "open-parent": cmd_open_parent,
    }

    handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
