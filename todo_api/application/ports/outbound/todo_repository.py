from abc import ABC, abstractmethod

from ....domain.entities import Todo
from ...dtos import CreateTodoDTO, UpdateTodoDTO


class TodoRepository(ABC):
    """Output port for todo persistence.

    Absence is reported as ``None``, never as an exception. Any exception
    raised by an implementation is a storage failure.
    """

    @abstractmethod
    def get(self, todo_id: str) -> Todo | None:
        """Retrieve a todo by ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[Todo]:
        """Retrieve every todo, in store order."""
        ...

    @abstractmethod
    def insert(self, payload: CreateTodoDTO) -> Todo:
        """Create a todo with a generated ID and ``status=False``."""
        ...

    @abstractmethod
    def update(self, todo_id: str, payload: UpdateTodoDTO) -> Todo | None:
        """Overwrite name, description and status of an existing todo."""
        ...

    @abstractmethod
    def delete(self, todo_id: str) -> Todo | None:
        """Remove a todo and return its last value."""
        ...
