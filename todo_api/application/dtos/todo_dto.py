"""Todo DTOs and request payload decoding.

Decoding happens in two steps. The body must first decode into a JSON object
whose fields have the right JSON types; a failure there is an unprocessable
entity. Keys match field names case-insensitively, exact matches first.
Fields that are absent or ``null`` take their zero value (``""`` or
``false``) and must then pass the required checks; a failure there is a bad
request.

The required check on ``status`` is a zero-value check: ``false`` does not
satisfy it, so an update must send ``"status": true``.
"""

import base64
import binascii
import json
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import BadRequestError, UnprocessableEntityError

# Error type emitted by the required-field validators below
_REQUIRED_ERROR_TYPES = {"value_error"}

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        """Map keys such as ``Name`` onto ``name``; an exact match wins.

        Among differently cased keys for the same field, the last one wins.
        """
        if not isinstance(data, dict):
            return data
        matched: dict[str, Any] = {}
        for key, value in data.items():
            if key in cls.model_fields:
                matched[key] = value
                continue
            field = next(
                (name for name in cls.model_fields if name.casefold() == str(key).casefold()),
                None,
            )
            if field is not None and field not in data:
                matched[field] = value
        return matched

    @field_validator("*", mode="before")
    @classmethod
    def null_to_zero_value(cls, v: Any, info) -> Any:
        """JSON null leaves the field at its zero value."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class CreateTodoDTO(_Payload):
    """Payload for creating a todo."""

    name: str = Field(default="", validate_default=True)
    description: str = Field(default="", validate_default=True)

    @field_validator("name", "description", mode="after")
    @classmethod
    def required(cls, v: str) -> str:
        if not v:
            raise ValueError("field is required")
        return v


class UpdateTodoDTO(_Payload):
    """Payload for a full update of a todo."""

    name: str = Field(default="", validate_default=True)
    description: str = Field(default="", validate_default=True)
    status: bool = Field(default=False, validate_default=True)

    @field_validator("name", "description", "status", mode="after")
    @classmethod
    def required(cls, v: Any) -> Any:
        if not v:
            raise ValueError("field is required")
        return v


class TodoResponseDTO(BaseModel):
    """DTO for todo responses."""

    id: str
    name: str
    description: str
    status: bool


def decode_body(body: str | None, is_base64_encoded: bool = False) -> dict[str, Any]:
    """
    Decode an API Gateway request body into a JSON object.

    Raises:
        UnprocessableEntityError: If the body is missing, not JSON, or not an object
    """
    if body is None:
        raise UnprocessableEntityError("Request body is missing")

    if is_base64_encoded:
        try:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise UnprocessableEntityError("Request body is not valid base64") from e

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise UnprocessableEntityError(f"Request body is not valid JSON: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise UnprocessableEntityError("Request body is not a JSON object")
    return data


def parse_payload(
    model: type[PayloadT],
    body: str | None,
    is_base64_encoded: bool = False,
) -> PayloadT:
    """
    Decode and validate a request body against a payload model.

    Args:
        model: CreateTodoDTO or UpdateTodoDTO
        body: Raw request body
        is_base64_encoded: Whether API Gateway base64-encoded the body

    Returns:
        The validated payload

    Raises:
        UnprocessableEntityError: Body is not a JSON object or a field has the wrong type
        BadRequestError: A required field is empty
    """
    data = decode_body(body, is_base64_encoded)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        error_types = {err["type"] for err in e.errors()}
        fields = sorted(".".join(str(p) for p in err["loc"]) for err in e.errors())
        if error_types <= _REQUIRED_ERROR_TYPES:
            raise BadRequestError(f"Missing required fields: {', '.join(fields)}") from e
        raise UnprocessableEntityError(f"Invalid field types: {', '.join(fields)}") from e
