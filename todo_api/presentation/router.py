"""
Request router for API Gateway proxy events.

Dispatches on HTTP method and the ``id`` path parameter:

- GET without id lists all todos, GET with id fetches one
- POST creates a todo
- PUT and DELETE require an id
- any other method is rejected with 405
"""

from collections.abc import Callable
from http import HTTPStatus
from typing import Any
from uuid import uuid4

import structlog

from ..application.dtos import CreateTodoDTO, UpdateTodoDTO, parse_payload
from ..application.exceptions import (
    BadRequestError,
    MethodNotAllowedError,
    TodoApiError,
)
from ..application.services import TodoService
from ..infrastructure.logging import Timer, bind_invocation
from .responses import (
    status_response,
    todo_list_response,
    todo_response,
)

logger = structlog.get_logger()

Event = dict[str, Any]
Response = dict[str, Any]


def _section(event: Event, *keys: str) -> dict[str, Any]:
    """Walk nested event objects, treating anything that is not a dict as empty."""
    value: Any = event
    for key in keys:
        value = value.get(key) if isinstance(value, dict) else None
    return value if isinstance(value, dict) else {}


def _http_method(event: Event) -> str:
    method = event.get("httpMethod")
    if not method:
        # HTTP API (payload format 2.0)
        method = _section(event, "requestContext", "http").get("method")
    return str(method or "").upper()


def _path_id(event: Event) -> str | None:
    params = _section(event, "pathParameters")
    return params.get("id") or None


def _request_id(event: Event, context: Any) -> str:
    request_id = _section(event, "requestContext").get("requestId")
    if not request_id:
        request_id = getattr(context, "aws_request_id", None)
    return str(request_id or uuid4())


class TodoRouter:
    """
    Lambda entry point for the todo resource.

    Client errors become 4xx responses with the reason phrase as body.
    Any other exception is logged and becomes a 500.
    """

    def __init__(self, service: TodoService) -> None:
        self._service = service
        self._routes: dict[str, Callable[[Event], Response]] = {
            "GET": self._get,
            "POST": self._post,
            "PUT": self._put,
            "DELETE": self._delete,
        }

    def __call__(self, event: Event, context: Any = None) -> Response:
        request_id = _request_id(event, context)
        method = _http_method(event)

        with bind_invocation(request_id, method=method, path=event.get("path")):
            logger.info("Request started")

            with Timer() as t:
                response = self.dispatch(method, event)

            logger.info(
                "Request completed",
                status_code=response["statusCode"],
                duration_ms=t.duration_ms,
            )

        response.setdefault("headers", {})["X-Request-ID"] = request_id
        return response

    def dispatch(self, method: str, event: Event) -> Response:
        """Route one event and map the outcome to a response."""
        try:
            route = self._routes.get(method)
            if route is None:
                raise MethodNotAllowedError(f"Method {method or '<none>'} is not supported")
            return route(event)
        except TodoApiError as e:
            logger.warning(
                "Client error",
                status_code=int(e.status_code),
                reason=str(e),
            )
            return status_response(e.status_code)
        except Exception as e:
            logger.error(
                "Unhandled error while processing request",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return status_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    def _get(self, event: Event) -> Response:
        todo_id = _path_id(event)
        if todo_id is None:
            return todo_list_response(self._service.list_todos())

        logger.info("Received GET todo request", todo_id=todo_id)
        todo = self._service.get_todo(todo_id)
        if todo is None:
            return status_response(HTTPStatus.NOT_FOUND)
        return todo_response(todo)

    def _post(self, event: Event) -> Response:
        payload = parse_payload(
            CreateTodoDTO,
            event.get("body"),
            bool(event.get("isBase64Encoded")),
        )
        todo = self._service.create_todo(payload)
        return todo_response(todo, HTTPStatus.CREATED, with_location=True)

    def _put(self, event: Event) -> Response:
        todo_id = _path_id(event)
        if todo_id is None:
            raise BadRequestError("Path parameter 'id' is required")

        payload = parse_payload(
            UpdateTodoDTO,
            event.get("body"),
            bool(event.get("isBase64Encoded")),
        )
        todo = self._service.update_todo(todo_id, payload)
        if todo is None:
            return status_response(HTTPStatus.NOT_FOUND)
        return todo_response(todo, with_location=True)

    def _delete(self, event: Event) -> Response:
        todo_id = _path_id(event)
        if todo_id is None:
            raise BadRequestError("Path parameter 'id' is required")

        logger.info("Received DELETE todo request", todo_id=todo_id)
        todo = self._service.delete_todo(todo_id)
        if todo is None:
            return status_response(HTTPStatus.NOT_FOUND)
        return todo_response(todo)
