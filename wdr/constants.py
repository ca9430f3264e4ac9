"""Shared constants for wdr."""

from __future__ import annotations

# Environment variable that overrides the bookmarks file location.
BM_ENV = "WDC_BOOKMARK_FILE"

# File name used under the home (or current) directory.
BM_FILENAME = ".bookmarks"

# Separates the bookmark name from its path on each line.
DELIM = "|"
