import structlog

from ...domain.entities import Todo
from ..dtos import CreateTodoDTO, TodoResponseDTO, UpdateTodoDTO
from ..ports.outbound import TodoRepository

logger = structlog.get_logger()


def _to_dto(todo: Todo) -> TodoResponseDTO:
    return TodoResponseDTO(
        id=todo.id,
        name=todo.name,
        description=todo.description,
        status=todo.status,
    )


class TodoService:
    """Service implementing the todo use cases.

    Every method performs one repository call. ``None`` means the todo does
    not exist.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def list_todos(self) -> list[TodoResponseDTO]:
        todos = self._repository.list_all()
        logger.info("Fetched todos", count=len(todos))
        return [_to_dto(todo) for todo in todos]

    def get_todo(self, todo_id: str) -> TodoResponseDTO | None:
        todo = self._repository.get(todo_id)
        if todo is None:
            logger.info("Todo not found", todo_id=todo_id)
            return None
        return _to_dto(todo)

    def create_todo(self, payload: CreateTodoDTO) -> TodoResponseDTO:
        todo = self._repository.insert(payload)
        logger.info("Created todo", todo_id=todo.id)
        return _to_dto(todo)

    def update_todo(self, todo_id: str, payload: UpdateTodoDTO) -> TodoResponseDTO | None:
        todo = self._repository.update(todo_id, payload)
        if todo is None:
            logger.info("Todo not found for update", todo_id=todo_id)
            return None
        logger.info("Updated todo", todo_id=todo.id, status=todo.status)
        return _to_dto(todo)

    def delete_todo(self, todo_id: str) -> TodoResponseDTO | None:
        todo = self._repository.delete(todo_id)
        if todo is None:
            logger.info("Todo not found for delete", todo_id=todo_id)
            return None
        logger.info("Deleted todo", todo_id=todo.id)
        return _to_dto(todo)
