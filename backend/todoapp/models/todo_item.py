"""TodoItem ORM - a single todo record.

Invariants:
    - id is an integer primary key assigned by the database, never reused
    - title is non-nullable, at most 100 chars (validated before it gets here)
    - is_completed defaults to False

Design Decisions:
    - sqlite_autoincrement: plain INTEGER PRIMARY KEY reuses max(id)+1 after the
      newest row is deleted; AUTOINCREMENT keeps ids strictly increasing
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from todoapp.core.validate_title import MAX_TITLE_LENGTH
from todoapp.db.base import Base


class TodoItem(Base):
    """Todo record - mutated only by toggle, destroyed only by delete."""
    __tablename__ = "todo_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(MAX_TITLE_LENGTH), nullable=False,
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    def __repr__(self) -> str:
        return f"<TodoItem {self.id}: {self.title!r} done={self.is_completed}>"
