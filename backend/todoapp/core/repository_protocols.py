"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Store operations are total: absence is None/False, never an exception
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; callers in the shell await them
"""

from typing import Protocol

from todoapp.core.domain_types import TodoId


class TodoLike(Protocol):
    """Structural contract for todo records passed across layers."""
    id: int
    title: str
    is_completed: bool


class TodoRepository(Protocol):
    """Contract for the item store - implemented by services/todo_store.py."""
    async def list_todos(self) -> list[TodoLike]: ...
    async def create(self, title: str) -> TodoLike: ...
    async def find(self, todo_id: TodoId) -> TodoLike | None: ...
    async def toggle(self, todo_id: TodoId) -> TodoLike | None: ...
    async def delete(self, todo_id: TodoId) -> bool: ...
