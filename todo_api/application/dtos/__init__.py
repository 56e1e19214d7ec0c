from .todo_dto import (
    CreateTodoDTO,
    TodoResponseDTO,
    UpdateTodoDTO,
    decode_body,
    parse_payload,
)

__all__ = [
    "CreateTodoDTO",
    "UpdateTodoDTO",
    "TodoResponseDTO",
    "decode_body",
    "parse_payload",
]
