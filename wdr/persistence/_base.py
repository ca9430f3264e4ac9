"""Base line-oriented persistence store."""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

from ..log import logger


class LineStore:
    """Plain-text file store holding one record per line.

    Reads propagate ``OSError`` (a missing file is an error, an empty
    file is not).  Appends never truncate.  Full rewrites go through a
    temporary file beside the real file (symlinks are followed) and
    ``os.replace``, so a failed rewrite leaves the previous content in
    place.  When that directory is not writable the file is rewritten in
    place instead.  There is no locking: concurrent writers from
    different processes can still lose updates.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def read_lines(self) -> list[str]:
        """Return every line in the file without its ``\\n`` or ``\\r\\n``.

        Lines are decoded one at a time; a line that isn't valid UTF-8 is
        dropped rather than failing the whole read.
        """
        lines: list[str] = []
        undecodable = 0
        with open(self.path, "rb") as fh:
            for raw in fh:
                if raw.endswith(b"\n"):
                    raw = raw[:-2] if raw.endswith(b"\r\n") else raw[:-1]
                try:
                    lines.append(raw.decode("utf-8"))
                except UnicodeDecodeError:
                    undecodable += 1
        if undecodable:
            logger.debug("skipped %d undecodable line(s) in %s", undecodable, self.path)
        return lines

    def append_line(self, line: str) -> None:
        """Append *line* plus a newline, creating the file if needed."""
        with open(self.path, "a", encoding="utf-8", newline="\n") as fh:
            fh.write(line + "\n")
        logger.debug("appended 1 line to %s", self.path)

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the whole file with *lines*, each newline-terminated."""
        target = self.path.resolve() if self.path.is_symlink() else self.path
        text = "".join(line + "\n" for line in lines)
        try:
            tmp = tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="\n",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            )
        except PermissionError:
            logger.debug("cannot create temp file beside %s, writing in place", target)
            with open(target, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(text)
            return

        try:
            with tmp:
                tmp.write(text)
            if target.exists():
                shutil.copymode(target, tmp.name)
            os.replace(tmp.name, target)
        except BaseException:
            try:
                os.unlink(tmp.name)
            except OSError:
                logger.debug("failed to remove temp file %s", tmp.name, exc_info=True)
            raise
        logger.debug("rewrote %s with %d line(s)", target, text.count("\n"))
