"""Todo Routes - list, get, create, toggle and delete over /api/todo.

Invariants:
    - Title is sanitized and validated by Pydantic before reaching the route handler
    - PUT checks path id == body id BEFORE touching the store (400 IdMismatchError)
    - PUT on an unknown id is 404; DELETE on an unknown id is still 204
    - Store injected via Depends(get_todo_store), never imported as module state

Design Decisions:
    - Toggle negates the stored value; the client's isCompleted is only compared
      and logged, so a stale client cannot force a value it never saw
    - PUT answers with the updated item (clients may patch locally instead of re-listing)
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from todoapp.core.domain_types import TodoId
from todoapp.core.repository_protocols import TodoRepository
from todoapp.core.errors import ErrorContext, IdMismatchError, ResourceNotFoundError
from todoapp.infrastructure.database import get_db
from todoapp.schemas.todo import TodoCreate, TodoResponse, TodoToggle
from todoapp.services.todo_store import TodoStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todo", tags=["todo"])


def get_todo_store(db: AsyncSession = Depends(get_db)) -> TodoRepository:
    """FastAPI dependency - one store per request session."""
    return TodoStore(db)


def _not_found(todo_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Todo", str(todo_id), context=ErrorContext(todo_id=todo_id),
    )


@router.get("", response_model=list[TodoResponse])
async def list_todos(store: TodoRepository = Depends(get_todo_store)):
    """All todos in insertion order."""
    return await store.list_todos()


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: int, store: TodoRepository = Depends(get_todo_store)):
    todo = await store.find(TodoId(todo_id))
    if todo is None:
        raise _not_found(todo_id)
    return todo


@router.post(
    "", response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate,
    response: Response,
    store: TodoRepository = Depends(get_todo_store),
):
    """Create a todo from an already-sanitized title."""
    todo = await store.create(body.title)
    response.headers["Location"] = f"{router.prefix}/{todo.id}"
    return todo


@router.put("/{todo_id}", response_model=TodoResponse)
async def toggle_todo(
    todo_id: int,
    body: TodoToggle,
    store: TodoRepository = Depends(get_todo_store),
):
    """Flip completion of one todo."""
    if body.id != todo_id:
        raise IdMismatchError(todo_id, body.id)
    todo = await store.toggle(TodoId(todo_id))
    if todo is None:
        raise _not_found(todo_id)
    if body.is_completed is not None and body.is_completed != todo.is_completed:
        logger.warning(
            f"Stale toggle for todo {todo_id}: client asked "
            f"isCompleted={body.is_completed}, stored value is now {todo.is_completed}",
            extra={"todo_id": todo_id},
        )
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: int, store: TodoRepository = Depends(get_todo_store)):
    """Idempotent delete."""
    await store.delete(TodoId(todo_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
