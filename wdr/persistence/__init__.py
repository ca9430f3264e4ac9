"""Persistence layer – each store owns its file path, data format, and I/O."""

from ._base import LineStore
from .bookmarks import Bookmark, BookmarkStore

__all__ = [
    "Bookmark",
    "BookmarkStore",
    "LineStore",
]
