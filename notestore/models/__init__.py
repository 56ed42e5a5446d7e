"""
Database Models.

Importing this package registers every table on Base.metadata.
"""

from notestore.models.base import Base
from notestore.models.note import Note, note_tags
from notestore.models.tag import Tag

__all__ = ["Base", "Note", "Tag", "note_tags"]
