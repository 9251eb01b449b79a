"""Shared fixtures for newsdesk tests."""

from pathlib import Path

import pytest

from newsdesk.storage import SQLiteArticleStore


@pytest.fixture
def store(tmp_path: Path) -> SQLiteArticleStore:
    """Fresh SQLite store in a temporary directory."""
    return SQLiteArticleStore(tmp_path / "cache" / "articles.db")
