"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_result() -> MagicMock:
    """
    Mock database query result.

    Use this to mock the result of session.execute().

    Usage:
        def test_query(mock_db_session, mock_db_result):
            mock_db_result.scalars.return_value.first.return_value = Note(id=1)
    """
    result = MagicMock()
    result.rowcount = 0
    result.scalars = MagicMock()
    result.scalars.return_value.all = MagicMock(return_value=[])
    result.scalars.return_value.first = MagicMock(return_value=None)
    return result


@pytest.fixture
def mock_db_session(mock_db_result: MagicMock) -> AsyncMock:
    """
    Mock database session for unit tests.

    session.execute() returns mock_db_result.

    Usage:
        def test_repository(mock_db_session: AsyncMock):
            repo = NoteRepository(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.merge = AsyncMock(side_effect=lambda instance: instance)
    session.execute = AsyncMock(return_value=mock_db_result)
    session.get = AsyncMock(return_value=None)
    session.add = MagicMock()
    session.no_autoflush = MagicMock()
    return session


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                ...
                mock_logger.debug.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger
