"""
Note Repository.

Data access layer for notes and tags. NoteStore is the contract callers
depend on; NoteRepository implements it over an injected AsyncSession.

Each method is one independent round-trip. Nothing is cached between
calls, and SQLAlchemy errors (StorageError) propagate unchanged.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from sqlalchemy import Column, delete, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from notestore.core.exceptions import NotFoundError
from notestore.core.logging import get_logger
from notestore.core.utils import utc_now
from notestore.models.note import Note, note_tags
from notestore.models.tag import Tag
from notestore.repositories.base import BaseRepository

logger = get_logger(__name__)

_ORM_MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


def _column_default(column: Column) -> Any:
    """Scalar default of a column, or None."""
    if column.default is not None and column.default.is_scalar:
        return column.default.arg
    return None


class NoteStore(ABC):
    """Contract for note and tag persistence."""

    @abstractmethod
    async def create_note(self, note: Note) -> Note:
        """Persist a new note and return it with its generated id."""
        ...

    @abstractmethod
    async def get_notes(self) -> list[Note]:
        """Return every live note."""
        ...

    @abstractmethod
    async def get_notes_with_pagination(self, page: int, page_size: int) -> list[Note]:
        """Return one page of live notes."""
        ...

    @abstractmethod
    async def get_note_by_id(self, note_id: int) -> Note | None:
        """Return the live note with this id, or None."""
        ...

    @abstractmethod
    async def update_note_by_id(self, note: Note) -> Note:
        """Save every field of the note under its id."""
        ...

    @abstractmethod
    async def delete_note_by_id(self, note_id: int) -> bool:
        """Soft-delete the note with this id."""
        ...

    @abstractmethod
    async def delete_all_notes(self) -> None:
        """Physically remove every note and tag."""
        ...

    @abstractmethod
    async def get_notes_by_tag(self, tag: str, page: int, page_size: int) -> list[Note]:
        """Return one page of live notes carrying the tag."""
        ...

    @abstractmethod
    async def get_all_tags(self) -> list[Tag]:
        """Return every tag."""
        ...

    @abstractmethod
    async def get_tags_by_name(self, name: str) -> list[Tag]:
        """Return the tag rows matching a name."""
        ...

    async def require_note_by_id(self, note_id: int) -> Note:
        """
        Get a live note with its tags.

        Raises:
            NotFoundError: If no live note has this id
        """
        note = await self.get_note_by_id(note_id)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        return note


class NoteRepository(BaseRepository[Note], NoteStore):
    """
    SQLAlchemy implementation of NoteStore.

    Soft-deleted notes (deleted_at set) are invisible to every read.
    delete_all_notes is the only operation that removes rows physically.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def _resolve_tags(self, tags: Iterable[Tag]) -> list[Tag]:
        """Swap tags for their stored rows by name, creating unknown ones."""
        resolved: dict[str, Tag] = {}
        for tag in tags:
            if tag.name not in resolved:
                resolved[tag.name] = await self.session.merge(tag)
        return list(resolved.values())

    def _live_notes(self):
        return select(Note).where(Note.deleted_at.is_(None))

    async def create_note(self, note: Note) -> Note:
        """
        Insert a note together with its tag associations.

        Tags are matched to existing rows by name; unknown names are
        inserted alongside the note.

        Returns:
            The same note, with id populated
        """
        note.tags = await self._resolve_tags(note.tags)
        self.session.add(note)
        await self.session.flush()
        logger.debug("Note created", note_id=note.id, tags=note.tag_names)
        return note

    async def get_notes(self) -> list[Note]:
        """Get all live notes in storage order."""
        return await self._fetch_all(self._live_notes())

    async def get_notes_with_pagination(self, page: int, page_size: int) -> list[Note]:
        """
        Get one page of live notes ordered by id.

        Args:
            page: 1-based page number (0 is treated as 1)
            page_size: Rows per page, clamped to 1..100 (<= 0 means 10)

        Returns:
            At most page_size notes starting at (page - 1) * page_size
        """
        stmt = self._paginated(self._live_notes().order_by(Note.id), page, page_size)
        return await self._fetch_all(stmt)

    async def get_note_by_id(self, note_id: int) -> Note | None:
        """
        Get a live note with its tags.

        Returns:
            The note, or None when no row matches or the note is soft-deleted
        """
        logger.debug("Retrieve note by id", note_id=note_id)
        return await self._fetch_one_or_none(
            self._live_notes().where(Note.id == note_id)
        )

    async def update_note_by_id(self, note: Note) -> Note:
        """
        Save a note under its id.

        The stored row is overwritten field by field: attributes never set
        on the given note are written as their column defaults and a missing
        tag collection clears the tags. created_at and updated_at stay under
        ORM control. The id is not checked first: saving an id that has no
        row inserts one.

        A note already attached to this session is saved as it stands.

        Returns:
            The session-bound note that was saved
        """
        logger.debug("Update note by id", note_id=note.id)
        values = inspect(note).dict
        with self.session.no_autoflush:
            tags = await self._resolve_tags(values.get("tags", []))
            if note in self.session:
                saved = note
            else:
                saved = await self._row_for_save(note.id)
                for attr in inspect(Note).column_attrs:
                    if attr.key not in _ORM_MANAGED_COLUMNS:
                        default = _column_default(attr.columns[0])
                        setattr(saved, attr.key, values.get(attr.key, default))
            saved.tags = tags
        await self.session.flush()
        return saved

    async def _row_for_save(self, note_id: int | None) -> Note:
        """Load the row a save overwrites, or stage a new one."""
        saved = await self.session.get(Note, note_id) if note_id is not None else None
        if saved is None:
            saved = Note(id=note_id)
            self.session.add(saved)
        return saved

    async def delete_note_by_id(self, note_id: int) -> bool:
        """
        Soft-delete a note by stamping deleted_at.

        Returns:
            True if a live note was marked, False otherwise
        """
        result = await self.session.execute(
            update(Note)
            .where(Note.id == note_id)
            .where(Note.deleted_at.is_(None))
            .values(deleted_at=utc_now())
        )
        logger.debug("Delete note by id", note_id=note_id, marked=result.rowcount)
        return result.rowcount > 0

    async def delete_all_notes(self) -> None:
        """
        Physically delete every association, note and tag.

        Soft-deleted notes are removed too. Meant for test teardown only.
        """
        await self.session.execute(delete(note_tags))
        await self.session.execute(delete(Note))
        await self.session.execute(delete(Tag))
        logger.debug("Deleted all notes and tags")

    async def get_notes_by_tag(self, tag: str, page: int, page_size: int) -> list[Note]:
        """
        Get one page of live notes associated with a tag.

        The tag filter is a set of note ids from note_tags, so each note
        appears once however many association rows match.

        Args:
            tag: Tag name
            page: 1-based page number
            page_size: Rows per page, clamped as for get_notes_with_pagination

        Returns:
            Distinct notes ordered by id, with tags loaded
        """
        logger.debug("Get notes by tag", tag=tag, page=page, page_size=page_size)
        tagged_ids = select(note_tags.c.note_id).where(note_tags.c.tag_name == tag)
        stmt = self._live_notes().where(Note.id.in_(tagged_ids)).order_by(Note.id)
        return await self._fetch_all(self._paginated(stmt, page, page_size))

    async def get_tags_by_name(self, name: str) -> list[Tag]:
        """Get the tag rows matching a name (zero or one)."""
        return await self._fetch_all(select(Tag).where(Tag.name == name))

    async def get_all_tags(self) -> list[Tag]:
        """Get every tag ordered by name."""
        return await self._fetch_all(select(Tag).order_by(Tag.name))
