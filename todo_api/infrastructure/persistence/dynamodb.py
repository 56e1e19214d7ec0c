"""Process-wide DynamoDB table handle.

The handle is created once per Lambda execution environment and reused,
read-only, by every invocation.
"""

from typing import Any

import boto3
import structlog

from ...config import settings

logger = structlog.get_logger()

# Global instance (lazy initialized)
_table: Any | None = None


def create_table(
    table_name: str,
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> Any:
    """
    Build a boto3 Table resource.

    Args:
        table_name: DynamoDB table name
        region_name: AWS region. If None, uses default from environment.
        endpoint_url: Override endpoint (LocalStack / DynamoDB Local)

    Returns:
        ``boto3.resource("dynamodb").Table`` for the given name
    """
    resource = boto3.resource(
        "dynamodb",
        region_name=region_name,
        endpoint_url=endpoint_url,
    )
    logger.info(
        "DynamoDB table handle created",
        table_name=table_name,
        region=region_name,
        endpoint_url=endpoint_url,
    )
    return resource.Table(table_name)


def get_table() -> Any:
    """Get or create the global DynamoDB table handle."""
    global _table
    if _table is None:
        _table = create_table(
            settings.table_name,
            region_name=settings.aws_region,
            endpoint_url=settings.aws_endpoint_url,
        )
    return _table
