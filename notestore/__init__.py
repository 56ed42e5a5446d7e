"""
notestore.

Data-access layer for a note-taking application.

- core/: Configuration, logging, database sessions, pagination, exceptions
- models/: SQLAlchemy models for notes and tags
- repositories/: NoteStore contract and its SQLAlchemy implementation
- cli/: Operator command-line interface (Typer + Rich)
"""

__version__ = "0.1.0"
