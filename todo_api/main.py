"""AWS Lambda entry point for the Todo API (API Gateway proxy integration)."""

from typing import Any

import structlog

from .application.services import TodoService
from .config import settings
from .infrastructure.logging import configure_logging
from .infrastructure.persistence import DynamoDBTodoRepository, get_table
from .presentation import TodoRouter

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()

# Built once per execution environment; a failure here aborts the cold start
router = TodoRouter(TodoService(DynamoDBTodoRepository(get_table())))

logger.info("Todo API initialized", table_name=settings.table_name)


def handler(event: dict, context: Any) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    return router(event, context)
