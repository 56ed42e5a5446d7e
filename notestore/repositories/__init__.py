"""Repositories: data access for notes and tags."""

from notestore.repositories.note import NoteRepository, NoteStore

__all__ = ["NoteRepository", "NoteStore"]
