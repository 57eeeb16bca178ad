"""Todo Store - SQLAlchemy implementation of the TodoRepository protocol.

Invariants:
    - list_todos returns insertion order (ids are strictly increasing)
    - Every operation is total: unknown ids yield None/False, never raise
    - Ids outside the 64-bit INTEGER range are unknown without touching the database
    - toggle flips is_completed from the STORED value, ignoring caller expectations
    - Each mutation commits before returning (no cross-request transactions)

Design Decisions:
    - One store per AsyncSession: route dependency builds it per request, tests
      bind it to a fresh in-memory engine (no ambient global store)
    - Titles arrive already sanitized: validation lives at the API boundary
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todoapp.core.domain_types import TodoId
from todoapp.models.todo_item import TodoItem

logger = logging.getLogger(__name__)

MIN_TODO_ID = -(2 ** 63)
MAX_TODO_ID = 2 ** 63 - 1


class TodoStore:
    """Item store over an async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_todos(self) -> list[TodoItem]:
        result = await self.db.execute(select(TodoItem).order_by(TodoItem.id))
        return list(result.scalars().all())

    async def create(self, title: str) -> TodoItem:
        todo = TodoItem(title=title, is_completed=False)
        self.db.add(todo)
        await self.db.commit()
        await self.db.refresh(todo)
        logger.info(f"Created todo {todo.id}", extra={"todo_id": todo.id})
        return todo

    async def find(self, todo_id: TodoId) -> TodoItem | None:
        if not MIN_TODO_ID <= todo_id <= MAX_TODO_ID:
            return None
        return await self.db.get(TodoItem, todo_id)

    async def toggle(self, todo_id: TodoId) -> TodoItem | None:
        """Flip completion. Returns the updated item, or None if unknown."""
        todo = await self.find(todo_id)
        if todo is None:
            return None
        todo.is_completed = not todo.is_completed
        await self.db.commit()
        await self.db.refresh(todo)
        logger.info(
            f"Toggled todo {todo_id} to is_completed={todo.is_completed}",
            extra={"todo_id": todo_id},
        )
        return todo

    async def delete(self, todo_id: TodoId) -> bool:
        """Remove the item. Returns False when nothing was removed."""
        todo = await self.find(todo_id)
        if todo is None:
            logger.info(
                f"Delete of unknown todo {todo_id} ignored",
                extra={"todo_id": todo_id},
            )
            return False
        await self.db.delete(todo)
        await self.db.commit()
        logger.info(f"Deleted todo {todo_id}", extra={"todo_id": todo_id})
        return True
