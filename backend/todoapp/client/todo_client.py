"""Todo API Client - async httpx wrapper translating API calls into typed results.

Invariants:
    - Transport failures (no HTTP response) raise NetworkError
    - Error envelopes are mapped back onto core/errors.py: VALIDATION_ERROR ->
      TitleValidationError, ID_MISMATCH -> IdMismatchError, 404 ->
      ResourceNotFoundError, anything else -> UnexpectedResponseError carrying
      the server's status and code
    - A malformed envelope never escapes as anything but a TodoAppError
    - toggle_todo sends the DESIRED next value: not <currently displayed value>
    - No timeout, no retry: a failure surfaces immediately

Design Decisions:
    - Same Pydantic schemas as the server: the wire contract lives in one place
    - The client never sanitizes; advisory validation belongs to the view controller
"""

import logging

import httpx
from pydantic import ValidationError

from todoapp.config import get_settings
from todoapp.core.errors import (
    IdMismatchError,
    NetworkError,
    ResourceNotFoundError,
    TitleValidationError,
    TodoAppError,
    UnexpectedResponseError,
)
from todoapp.schemas.todo import TodoResponse

logger = logging.getLogger(__name__)

API_PATH = "/api/todo"


class TodoApiClient:
    """Client for the /api/todo resource."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or get_settings().api_base_url
        self._http = httpx.AsyncClient(
            base_url=self.base_url, transport=transport, timeout=None,
        )

    async def __aenter__(self) -> "TodoApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ─── Operations ─────────────────────────────────────────────

    async def list_todos(self) -> list[TodoResponse]:
        response = await self._send("GET", API_PATH, action="fetch todos")
        return self._parse(response, "fetch todos", many=True)

    async def get_todo(self, todo_id: int) -> TodoResponse:
        response = await self._send(
            "GET", f"{API_PATH}/{todo_id}", action="fetch todo", todo_id=todo_id,
        )
        return self._parse(response, "fetch todo")

    async def create_todo(self, title: str) -> TodoResponse:
        response = await self._send(
            "POST", API_PATH, action="add todo", json={"title": title},
        )
        return self._parse(response, "add todo")

    async def toggle_todo(self, todo_id: int, is_completed: bool) -> TodoResponse:
        """Request the negation of `is_completed`, the value currently displayed."""
        response = await self._send(
            "PUT", f"{API_PATH}/{todo_id}",
            action="update todo",
            todo_id=todo_id,
            json={"id": todo_id, "isCompleted": not is_completed},
        )
        return self._parse(response, "update todo")

    async def delete_todo(self, todo_id: int) -> None:
        await self._send(
            "DELETE", f"{API_PATH}/{todo_id}", action="delete todo", todo_id=todo_id,
        )

    # ─── Plumbing ───────────────────────────────────────────────

    async def _send(
        self,
        method: str,
        path: str,
        action: str,
        todo_id: int | None = None,
        json: dict | None = None,
    ) -> httpx.Response:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.warning(
                f"Failed to {action}: {e.__class__.__name__}: {e}",
                extra={"method": method, "path": path, "todo_id": todo_id},
            )
            raise NetworkError(f"Failed to {action}: server unreachable") from e
        if not response.is_success:
            raise _error_from_response(
                response, action, todo_id, body_id=(json or {}).get("id"),
            )
        return response

    @staticmethod
    def _parse(response: httpx.Response, action: str, many: bool = False):
        try:
            payload = response.json()
            if many:
                return [TodoResponse.model_validate(item) for item in payload]
            return TodoResponse.model_validate(payload)
        except (ValueError, TypeError, ValidationError) as e:
            raise UnexpectedResponseError(
                f"Failed to {action}: malformed response", response.status_code,
            ) from e


def _error_from_response(
    response: httpx.Response,
    action: str,
    todo_id: int | None,
    body_id: int | None = None,
) -> TodoAppError:
    """Map a non-2xx response onto the shared error taxonomy."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    envelope = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(envelope, dict):
        envelope = {}
    code = envelope.get("code")
    message = envelope.get("message") or f"Failed to {action}"

    logger.warning(
        f"Failed to {action}: HTTP {response.status_code} {code or ''}".rstrip(),
        extra={"status_code": response.status_code, "error_code": code, "todo_id": todo_id},
    )

    if code == "VALIDATION_ERROR":
        details = envelope.get("details")
        first = details[0] if isinstance(details, list) and details else None
        if not isinstance(first, dict):
            first = {}
        return TitleValidationError(
            first.get("message", message),
            first.get("type", "invalid"),
            field=str(first.get("field", "title")).rsplit(".", 1)[-1],
        )
    if code == "ID_MISMATCH" and todo_id is not None:
        return IdMismatchError(todo_id, body_id)
    if response.status_code == 404 and todo_id is not None:
        return ResourceNotFoundError("Todo", str(todo_id))
    return UnexpectedResponseError(
        message, response.status_code, code=code or "UNEXPECTED_RESPONSE",
    )
