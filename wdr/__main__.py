"""Entry point for the wdr CLI."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .log import enable_debug_logging, logger
from .persistence import BookmarkStore

_err = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def _report(prefix: str, exc: Exception) -> int:
    """Print *prefix*: *exc* to stderr and return the failure exit status."""
    logger.debug("%s", prefix, exc_info=True)
    _err.print(f"[red]{escape(prefix)}:[/red] {escape(str(exc))}")
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wdr",
        description="Bookmark working directories and recall them by name.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"wdr {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug details to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    add = sub.add_parser("add", help="Bookmark the current directory")
    add.add_argument("name", help="Name to save the directory under")
    sub.add_parser("list", help="List all bookmarks, newest first")
    find = sub.add_parser("find", help="Print the directory saved under NAME")
    find.add_argument("name", help="Bookmark name to look up")
    sub.add_parser("pop", help="Remove the newest bookmark and print its directory")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run wdr and return the process exit status."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        enable_debug_logging()

    try:
        store = BookmarkStore.from_environment()
    except (OSError, RuntimeError) as exc:
        return _report("Failed to determine bookmark file path", exc)

    if args.command == "add":
        try:
            store.add(args.name)
        except (OSError, ValueError) as exc:
            return _report("Failed to add bookmark", exc)

    elif args.command == "list":
        try:
            bookmarks = store.list_all()
        except OSError as exc:
            return _report("Error listing bookmarks", exc)
        for bm in bookmarks:
            print(bm.to_line())

    elif args.command == "find":
        try:
            found = store.find(args.name)
        except OSError as exc:
            return _report("Error finding bookmark", exc)
        print(found if found is not None else "Bookmark not found.")

    elif args.command == "pop":
        try:
            popped = store.pop()
        except OSError as exc:
            return _report("Error popping bookmark", exc)
        print(popped if popped is not None else "No bookmarks to pop.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
