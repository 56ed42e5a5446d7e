"""
Tag Model.

A tag is identified by its name alone.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from notestore.models.base import Base


class Tag(Base):
    """Tag database model, keyed by name."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)

    def __repr__(self) -> str:
        return f"<Tag(name={self.name!r})>"
