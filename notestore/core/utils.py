"""
Core Utilities.

Shared utility functions used across the package.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values are stored timezone-naive and assumed to be UTC,
    which keeps SQLite and PostgreSQL behaviour identical.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
