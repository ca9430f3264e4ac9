"""Shared test fixtures for the wdr test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from wdr.constants import BM_ENV
from wdr.persistence import BookmarkStore


@pytest.fixture
def bookmark_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``WDC_BOOKMARK_FILE`` at a fresh (not yet created) file."""
    path = tmp_path / ".test_bookmarks"
    monkeypatch.setenv(BM_ENV, str(path))
    return path


@pytest.fixture
def store(bookmark_file: Path) -> BookmarkStore:
    return BookmarkStore(bookmark_file)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into a scratch directory that add() will record."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path

