from .dynamodb import create_table, get_table
from .todo_repository import DynamoDBTodoRepository

__all__ = ["DynamoDBTodoRepository", "create_table", "get_table"]
