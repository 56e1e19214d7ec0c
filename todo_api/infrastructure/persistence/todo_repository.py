"""
DynamoDB implementation of the TodoRepository port.

This adapter performs exactly one table operation per call and keeps all
DynamoDB expressions isolated from the application layer.
"""

from collections.abc import Iterator
from typing import Any

import structlog
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from ...application.dtos import CreateTodoDTO, UpdateTodoDTO
from ...application.ports.outbound import TodoRepository
from ...domain.entities import Todo
from ..logging import timed

logger = structlog.get_logger()

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


class DynamoDBTodoRepository(TodoRepository):
    """
    DynamoDB implementation of TodoRepository.

    The table is keyed on ``id`` only. Storage failures propagate unchanged;
    only a failed update condition is translated into ``None``.
    """

    def __init__(self, table: Any) -> None:
        """
        Initialize with a table handle.

        Args:
            table: boto3 ``dynamodb.Table`` resource
        """
        self._table = table

    @timed(logger)
    def get(self, todo_id: str) -> Todo | None:
        """Retrieve a todo by ID."""
        response = self._table.get_item(Key={"id": todo_id})
        item = response.get("Item")
        if item is None:
            return None
        return Todo.from_item(item)

    @timed(logger)
    def list_all(self) -> list[Todo]:
        """Scan the whole table, following continuation keys until exhausted."""
        todos: list[Todo] = []
        pages = 0
        for page in self._scan_pages():
            todos.extend(Todo.from_item(item) for item in page)
            pages += 1

        logger.debug("Scanned todos table", pages=pages, count=len(todos))
        return todos

    def _scan_pages(self) -> Iterator[list[dict[str, Any]]]:
        start_key: dict[str, Any] | None = None
        while True:
            kwargs: dict[str, Any] = {}
            if start_key:
                kwargs["ExclusiveStartKey"] = start_key
            response = self._table.scan(**kwargs)
            yield response.get("Items", [])

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break

    @timed(logger)
    def insert(self, payload: CreateTodoDTO) -> Todo:
        """Create a todo with a generated ID."""
        todo = Todo.create(name=payload.name, description=payload.description)
        self._table.put_item(Item=todo.to_item())

        logger.info("Todo inserted", todo_id=todo.id)
        return todo

    @timed(logger)
    def update(self, todo_id: str, payload: UpdateTodoDTO) -> Todo | None:
        """Conditionally overwrite name, description and status of a todo."""
        try:
            response = self._table.update_item(
                Key={"id": todo_id},
                # name and status are DynamoDB reserved words
                UpdateExpression="SET #name = :name, #description = :description, #status = :status",
                ExpressionAttributeNames={
                    "#name": "name",
                    "#description": "description",
                    "#status": "status",
                },
                ExpressionAttributeValues={
                    ":name": payload.name,
                    ":description": payload.description,
                    ":status": payload.status,
                },
                ConditionExpression=Attr("id").exists(),
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            if error_code == CONDITIONAL_CHECK_FAILED:
                logger.info("Update condition failed, todo does not exist", todo_id=todo_id)
                return None
            raise

        attributes = response.get("Attributes")
        if not attributes:
            return None
        return Todo.from_item(attributes)

    @timed(logger)
    def delete(self, todo_id: str) -> Todo | None:
        """Remove a todo and return its previous value."""
        response = self._table.delete_item(
            Key={"id": todo_id},
            ReturnValues="ALL_OLD",
        )
        attributes = response.get("Attributes")
        if not attributes:
            return None
        return Todo.from_item(attributes)
