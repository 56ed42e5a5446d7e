"""
Note Model.

Database model for notes and the note_tags association table.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notestore.models.base import Base, SoftDeleteMixin, TimestampMixin
from notestore.models.tag import Tag

note_tags = Table(
    "note_tags",
    Base.metadata,
    Column("note_id", Integer, ForeignKey("notes.id"), primary_key=True),
    Column("tag_name", String(100), ForeignKey("tags.name"), primary_key=True),
)


class Note(SoftDeleteMixin, TimestampMixin, Base):
    """
    Note database model.

    The integer id is generated by the database on insert. Tags are
    loaded with a second SELECT ... IN query whenever notes are loaded,
    because async sessions cannot lazy-load on attribute access.

    Tags only cascade on merge: a Tag appended to a note is not added to
    the session until the repository has matched it to a stored row.
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    tags: Mapped[list[Tag]] = relationship(
        secondary=note_tags,
        lazy="selectin",
        cascade="merge",
        order_by=Tag.name,
    )

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
