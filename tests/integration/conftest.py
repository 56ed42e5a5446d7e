"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real SQLite database file.
These fixtures build on the root conftest.py database fixtures.
"""

from pathlib import Path

import pytest

from notestore.core.config import get_settings


@pytest.fixture
def database_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point DATABASE_URL at a fresh SQLite file for this test.

    The application engine is built lazily from configuration, so code
    under test picks the file up on first use.

    Usage:
        def test_cli(database_file):
            runner.invoke(app, ["db", "init"])
            assert database_file.exists()
    """
    path = tmp_path / "notes.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
