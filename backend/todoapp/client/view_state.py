"""View State Controller - client-side mirror of the todo list.

Invariants:
    - phase is PENDING exactly while at least one request is in flight, IDLE otherwise
    - A successful mutation clears the error, then re-fetches the FULL list
    - A failed mutation leaves todos untouched and records the error message
    - Editing the draft title clears the error
    - add() applies the title policy locally first; a rejected title never hits the network

Design Decisions:
    - Full re-fetch after every mutation instead of patching from the PUT/POST
      result: converges on server truth after any single-user sequence
    - No optimistic update, no cancellation, no debouncing
"""

import logging
from typing import Any, Awaitable

from todoapp.client.todo_client import TodoApiClient
from todoapp.core.domain_types import ViewPhase
from todoapp.core.errors import ResourceNotFoundError, TodoAppError
from todoapp.core.validate_title import check_title
from todoapp.schemas.todo import TodoResponse

logger = logging.getLogger(__name__)


class TodoViewState:
    """Holds the list, the draft title and the last error for one view."""

    def __init__(self, api: TodoApiClient):
        self.api = api
        self.todos: list[TodoResponse] = []
        self.title: str = ""
        self.error: str | None = None
        self._in_flight = 0

    @property
    def phase(self) -> ViewPhase:
        return ViewPhase.PENDING if self._in_flight else ViewPhase.IDLE

    def set_title(self, text: str) -> None:
        self.error = None
        self.title = text

    async def refresh(self) -> bool:
        """Replace the mirror with the server's list. False on failure."""
        ok, todos = await self._attempt(self.api.list_todos())
        if not ok:
            return False
        self.todos = todos
        return True

    async def add(self) -> bool:
        check = check_title(self.title)
        if not check.ok:
            self.error = check.message
            return False
        ok, _ = await self._attempt(self.api.create_todo(check.title))
        if not ok:
            return False
        self.error = None
        self.title = ""
        return await self.refresh()

    async def toggle(self, todo_id: int) -> bool:
        displayed = self.find(todo_id)
        if displayed is None:
            self.error = ResourceNotFoundError("Todo", str(todo_id)).message
            return False
        ok, _ = await self._attempt(
            self.api.toggle_todo(todo_id, displayed.is_completed),
        )
        if not ok:
            return False
        self.error = None
        return await self.refresh()

    async def delete(self, todo_id: int) -> bool:
        ok, _ = await self._attempt(self.api.delete_todo(todo_id))
        if not ok:
            return False
        self.error = None
        return await self.refresh()

    def find(self, todo_id: int) -> TodoResponse | None:
        return next((t for t in self.todos if t.id == todo_id), None)

    def render(self) -> list[str]:
        """Plain-text rendering: error banner, then one line per todo."""
        lines = [f"! {self.error}"] if self.error else []
        for todo in self.todos:
            mark = "x" if todo.is_completed else " "
            lines.append(f"[{mark}] {todo.id}. {todo.title}")
        return lines

    async def _attempt(self, call: Awaitable) -> tuple[bool, Any]:
        """Await one request, recording any failure as the view error."""
        self._in_flight += 1
        try:
            result = await call
        except TodoAppError as e:
            logger.warning(f"View request failed: {e.message}", extra={"error_code": e.code})
            self.error = e.message
            return False, None
        finally:
            self._in_flight -= 1
        return True, result
