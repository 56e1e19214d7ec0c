"""API Gateway proxy responses."""

from http import HTTPStatus
from typing import Any

from pydantic import TypeAdapter

from ..application.dtos import TodoResponseDTO

_todo_list_adapter = TypeAdapter(list[TodoResponseDTO])

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def location(todo_id: str) -> str:
    return f"/todo/{todo_id}"


def todo_response(
    todo: TodoResponseDTO,
    status_code: int = HTTPStatus.OK,
    with_location: bool = False,
) -> dict[str, Any]:
    """Serialize a single todo, optionally with a Location header."""
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if with_location:
        headers["Location"] = location(todo.id)
    return {
        "statusCode": int(status_code),
        "headers": headers,
        "body": todo.model_dump_json(),
    }


def todo_list_response(todos: list[TodoResponseDTO]) -> dict[str, Any]:
    """Serialize a list of todos as a JSON array."""
    return {
        "statusCode": int(HTTPStatus.OK),
        "headers": {"Content-Type": JSON_CONTENT_TYPE},
        "body": _todo_list_adapter.dump_json(todos).decode("utf-8"),
    }


def status_response(status_code: int) -> dict[str, Any]:
    """Respond with the bare reason phrase, e.g. ``Not Found``."""
    status = HTTPStatus(status_code)
    return {
        "statusCode": status.value,
        "headers": {"Content-Type": TEXT_CONTENT_TYPE},
        "body": status.phrase,
    }
