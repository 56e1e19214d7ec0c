"""Client-facing errors raised while handling a todo request.

Each error maps to a 4xx status. Anything else raised during a request is
treated as a server error by the router.
"""

from http import HTTPStatus


class TodoApiError(Exception):
    """Base class for errors caused by the caller's request."""

    status_code: int = HTTPStatus.BAD_REQUEST


class BadRequestError(TodoApiError):
    """Raised when a payload fails required-field checks or the id is missing."""

    status_code = HTTPStatus.BAD_REQUEST


class UnprocessableEntityError(TodoApiError):
    """Raised when the request body cannot be decoded into the expected shape."""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY


class MethodNotAllowedError(TodoApiError):
    """Raised for HTTP methods the API does not route."""

    status_code = HTTPStatus.METHOD_NOT_ALLOWED
