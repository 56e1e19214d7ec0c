import copy
from typing import Any

import pytest
from botocore.exceptions import ClientError

from todo_api.application.services import TodoService
from todo_api.infrastructure.persistence import DynamoDBTodoRepository
from todo_api.presentation import TodoRouter


class FakeTodoTable:
    """In-memory stand-in for a boto3 ``dynamodb.Table`` keyed on ``id``.

    Scans return at most ``page_size`` items per call, with a
    ``LastEvaluatedKey`` when more remain.
    """

    def __init__(self, page_size: int = 100) -> None:
        self.page_size = page_size
        self.items: dict[str, dict[str, Any]] = {}
        self.scan_calls: list[dict[str, Any]] = []

    def get_item(self, Key: dict[str, Any]) -> dict[str, Any]:
        item = self.items.get(Key["id"])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def scan(self, **kwargs: Any) -> dict[str, Any]:
        self.scan_calls.append(kwargs)
        keys = list(self.items)
        start = 0
        if "ExclusiveStartKey" in kwargs:
            start = keys.index(kwargs["ExclusiveStartKey"]["id"]) + 1

        page_keys = keys[start : start + self.page_size]
        response: dict[str, Any] = {
            "Items": [copy.deepcopy(self.items[k]) for k in page_keys],
            "Count": len(page_keys),
        }
        if start + self.page_size < len(keys):
            response["LastEvaluatedKey"] = {"id": page_keys[-1]}
        return response

    def put_item(self, Item: dict[str, Any]) -> dict[str, Any]:
        self.items[Item["id"]] = copy.deepcopy(Item)
        return {}

    def update_item(self, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        existing = self.items.get(Key["id"])
        if existing is None:
            raise ClientError(
                {
                    "Error": {
                        "Code": "ConditionalCheckFailedException",
                        "Message": "The conditional request failed",
                    }
                },
                "UpdateItem",
            )

        names = kwargs["ExpressionAttributeNames"]
        values = kwargs["ExpressionAttributeValues"]
        for placeholder, attribute in names.items():
            existing[attribute] = values[":" + placeholder[1:]]
        return {"Attributes": copy.deepcopy(existing)}

    def delete_item(self, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        old = self.items.pop(Key["id"], None)
        if old is None or kwargs.get("ReturnValues") != "ALL_OLD":
            return {}
        return {"Attributes": old}


def backend_error(operation: str) -> ClientError:
    return ClientError(
        {
            "Error": {
                "Code": "ProvisionedThroughputExceededException",
                "Message": "Rate of requests exceeds the allowed throughput",
            }
        },
        operation,
    )


def api_event(
    method: str,
    todo_id: str | None = None,
    body: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build an API Gateway REST proxy event."""
    event: dict[str, Any] = {
        "httpMethod": method,
        "path": f"/todo/{todo_id}" if todo_id else "/todo",
        "resource": "/todo/{id}" if todo_id else "/todo",
        "pathParameters": {"id": todo_id} if todo_id else None,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"requestId": "req-123"},
    }
    event.update(extra)
    return event


@pytest.fixture
def table() -> FakeTodoTable:
    return FakeTodoTable()


@pytest.fixture
def repository(table) -> DynamoDBTodoRepository:
    return DynamoDBTodoRepository(table)


@pytest.fixture
def router(repository) -> TodoRouter:
    return TodoRouter(TodoService(repository))


@pytest.fixture
def stored_item(table) -> dict[str, Any]:
    item = {
        "id": "8a1f6c1e-7d4b-4c1e-9a57-5b0f3f1b2c3d",
        "name": "Buy milk",
        "description": "Two litres, semi-skimmed",
        "status": False,
    }
    table.put_item(Item=item)
    return item


@pytest.fixture
def make_event():
    return api_event


@pytest.fixture
def make_backend_error():
    return backend_error
