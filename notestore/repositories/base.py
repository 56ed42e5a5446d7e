"""
Base Repository.

Base class for all repositories with the query plumbing they share.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from notestore.core.pagination import paginate
from notestore.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository holding the injected session.

    Subclasses should set the model class:

        class NoteRepository(BaseRepository[Note]):
            model = Note

    Every helper is a single round-trip. Errors raised by the session are
    not caught here.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _fetch_all(self, stmt: Select[Any]) -> list[Any]:
        """Execute a select and return every scalar row."""
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _fetch_one_or_none(self, stmt: Select[Any]) -> Any | None:
        """Execute a select and return the first scalar row, or None."""
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    @staticmethod
    def _paginated(stmt: Select[Any], page: int, page_size: int) -> Select[Any]:
        """Apply the clamped OFFSET/LIMIT for the requested page."""
        params = paginate(page, page_size)
        return stmt.offset(params.offset).limit(params.limit)
