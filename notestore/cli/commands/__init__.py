"""
CLI Commands.

Organized by domain/feature area.
"""

from notestore.cli.commands.db import app as db_app
from notestore.cli.commands.notes import app as notes_app

__all__ = [
    "db_app",
    "notes_app",
]
