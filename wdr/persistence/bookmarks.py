"""Bookmark persistence store."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..constants import DELIM
from ..log import logger
from ..platform import resolve_store_location
from ._base import LineStore


@dataclass(frozen=True)
class Bookmark:
    """A remembered directory: a user-chosen *name* and the *path* it points to."""

    name: str
    path: str

    @classmethod
    def from_line(cls, line: str) -> Bookmark | None:
        """Parse ``name|path``; lines without the delimiter give None.

        Only the first delimiter splits, so the path may contain ``|``.
        """
        name, sep, path = line.partition(DELIM)
        if not sep:
            return None
        return cls(name, path)

    def to_line(self) -> str:
        return f"{self.name}{DELIM}{self.path}"


def _check_bookmark(name: str, path: str) -> None:
    if not name:
        raise ValueError("Bookmark name must not be empty.")
    if DELIM in name:
        raise ValueError(f"Bookmark name must not contain {DELIM!r}: {name!r}")
    if "\n" in name or "\r" in name:
        raise ValueError(f"Bookmark name must be a single line: {name!r}")
    if "\n" in path or "\r" in path:
        raise ValueError(f"Bookmark path must be a single line: {path!r}")


class BookmarkStore(LineStore):
    """Directory bookmarks, one ``name|path`` per line, oldest first on disk.

    In memory the list is newest first: ``load()`` reverses file order and
    ``save()`` reverses it back.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> BookmarkStore:
        """Build a store at the location resolved from *environ* (default ``os.environ``)."""
        return cls(resolve_store_location(environ))

    def load(self) -> list[Bookmark]:
        """Load every bookmark, newest first.  Lines without ``|`` are skipped."""
        bookmarks: list[Bookmark] = []
        skipped = 0
        for line in self.read_lines():
            bm = Bookmark.from_line(line)
            if bm is None:
                skipped += 1
                continue
            bookmarks.append(bm)
        if skipped:
            logger.debug("skipped %d unparsable line(s) in %s", skipped, self.path)
        bookmarks.reverse()
        return bookmarks

    def save(self, bookmarks: Sequence[Bookmark]) -> None:
        """Rewrite the file from a newest-first list (written oldest first)."""
        self.write_lines(bm.to_line() for bm in reversed(bookmarks))

    def add(self, name: str) -> None:
        """Bookmark the current working directory under *name*.

        Appends a single line; existing content is not read.
        """
        path = str(Path.cwd())
        _check_bookmark(name, path)
        self.append_line(Bookmark(name, path).to_line())

    def list_all(self) -> list[Bookmark]:
        """All bookmarks for display, newest first."""
        return self.load()

    def find(self, name: str) -> str | None:
        """Return the path of the most recently added bookmark called *name*."""
        for bm in self.load():
            if bm.name == name:
                return bm.path
        return None

    def pop(self) -> str | None:
        """Remove the newest bookmark and return its path (None when empty)."""
        try:
            bookmarks = self.load()
        except FileNotFoundError:
            return None
        if not bookmarks:
            return None
        newest = bookmarks.pop(0)
        self.save(bookmarks)
        return newest.path
