"""Filesystem locations used by wdr.

Nothing here is cached: the override variable is consulted on every
call so callers (and tests) can change it within one process.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .constants import BM_ENV, BM_FILENAME
from .log import logger


def home_dir() -> Path | None:
    """Return the user's home directory, or None if it can't be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        logger.debug("home directory unavailable", exc_info=True)
        return None


def current_dir() -> Path | None:
    """Return the working directory, or None if it no longer exists."""
    try:
        return Path.cwd()
    except OSError:
        logger.debug("working directory unavailable", exc_info=True)
        return None


def resolve_store_location(
    environ: Mapping[str, str] | None = None,
    *,
    home: Path | None = None,
    cwd: Path | None = None,
) -> Path:
    """Return the path of the bookmarks file.

    Lookup order:
      1. ``$WDC_BOOKMARK_FILE``, verbatim (may be relative or missing)
      2. ``<home>/.bookmarks``
      3. ``<cwd>/.bookmarks``
      4. ``.bookmarks``

    *home* and *cwd* default to the live values; pass them to pin the
    fallbacks.
    """
    env = os.environ if environ is None else environ
    override = env.get(BM_ENV)
    if override:
        logger.debug("bookmark file from %s: %s", BM_ENV, override)
        return Path(override)

    base = home if home is not None else home_dir()
    if base is None:
        base = cwd if cwd is not None else current_dir()
    if base is None:
        return Path(BM_FILENAME)
    return base / BM_FILENAME
