"""Todo API Client - wire calls and error normalization.

Invariants:
    - toggle_todo sends the negation of the displayed value
    - Transport failures become NetworkError (no status code)
    - Server envelopes map onto TitleValidationError / IdMismatchError /
      ResourceNotFoundError / UnexpectedResponseError
    - Envelopes of the wrong shape still surface as a TodoAppError
"""

import json

import httpx
import pytest

from todoapp.client.todo_client import TodoApiClient
from todoapp.core.errors import (
    IdMismatchError,
    NetworkError,
    ResourceNotFoundError,
    TitleValidationError,
    TodoAppError,
    UnexpectedResponseError,
)


def _mock_client(handler) -> TodoApiClient:
    return TodoApiClient(base_url="http://test", transport=httpx.MockTransport(handler))


# --- Against the real app -----------------------------------------------------

async def test_create_then_list(api):
    created = await api.create_todo("Buy milk")
    assert created.id == 1
    assert created.is_completed is False

    todos = await api.list_todos()
    assert [(t.id, t.title, t.is_completed) for t in todos] == [(1, "Buy milk", False)]


async def test_get_todo(api):
    await api.create_todo("Buy milk")
    assert (await api.get_todo(1)).title == "Buy milk"


async def test_toggle_uses_displayed_value(api):
    await api.create_todo("Buy milk")
    toggled = await api.toggle_todo(1, is_completed=False)
    assert toggled.is_completed is True


async def test_delete_is_idempotent(api):
    await api.create_todo("Buy milk")
    await api.delete_todo(1)
    await api.delete_todo(1)
    assert await api.list_todos() == []


async def test_blank_title_raises_title_validation_error(api):
    with pytest.raises(TitleValidationError) as exc:
        await api.create_todo("   ")
    assert exc.value.reason == "empty_title"
    assert exc.value.field == "title"
    assert exc.value.message == "Title is required."


async def test_toggle_unknown_raises_not_found(api):
    with pytest.raises(ResourceNotFoundError) as exc:
        await api.toggle_todo(8, is_completed=False)
    assert exc.value.resource_id == "8"


# --- Against a mock transport -------------------------------------------------

async def test_toggle_request_body_negates_displayed_value():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": 5, "title": "t", "isCompleted": False})

    async with _mock_client(handler) as api:
        await api.toggle_todo(5, is_completed=True)

    assert seen == {
        "method": "PUT",
        "path": "/api/todo/5",
        "body": {"id": 5, "isCompleted": False},
    }


async def test_connection_failure_raises_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _mock_client(handler) as api:
        with pytest.raises(NetworkError) as exc:
            await api.list_todos()
    assert exc.value.http_status is None
    assert exc.value.message == "Failed to fetch todos: server unreachable"


async def test_server_error_envelope_raises_unexpected_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={
            "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
        })

    async with _mock_client(handler) as api:
        with pytest.raises(UnexpectedResponseError) as exc:
            await api.delete_todo(1)
    assert exc.value.http_status == 500
    assert exc.value.code == "INTERNAL_ERROR"


async def test_non_json_error_uses_action_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    async with _mock_client(handler) as api:
        with pytest.raises(UnexpectedResponseError) as exc:
            await api.create_todo("Buy milk")
    assert exc.value.message == "Failed to add todo"


async def test_malformed_success_body_raises_unexpected_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"title": "no id"}])

    async with _mock_client(handler) as api:
        with pytest.raises(UnexpectedResponseError):
            await api.list_todos()


async def test_id_mismatch_envelope_raises_id_mismatch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={
            "error": {"code": "ID_MISMATCH", "message": "Path id 1 does not match body id 1"},
        })

    async with _mock_client(handler) as api:
        with pytest.raises(IdMismatchError) as exc:
            await api.toggle_todo(1, is_completed=False)
    assert exc.value.http_status == 400
    assert (exc.value.path_id, exc.value.body_id) == (1, 1)


@pytest.mark.parametrize("body", [
    {"error": "oops"},
    ["not", "an", "object"],
    {"error": {"code": "VALIDATION_ERROR", "details": ["bad"]}},
    {"error": {"code": "VALIDATION_ERROR", "details": "bad"}},
])
async def test_wrongly_shaped_envelope_stays_in_error_taxonomy(body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json=body)

    async with _mock_client(handler) as api:
        with pytest.raises(TodoAppError) as exc:
            await api.create_todo("Buy milk")
    assert exc.value.http_status == 400
