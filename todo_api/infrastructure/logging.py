"""
Logging configuration for the Todo API Lambda function.

Structured JSON logging through structlog on top of stdlib logging. Each
invocation binds its correlation ID (and whether it is a cold start) into
structlog context variables, so every log line of the request carries them.
"""

import logging
import sys
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

import structlog

_cold_start = True


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for the service.

    The Lambda runtime installs its own root handler before any user code
    runs, which turns ``logging.basicConfig`` into a no-op. The root level is
    therefore always set explicitly.

    Args:
        service_name: Name of the service for log context
        level: Minimum stdlib log level name (e.g. "INFO", "DEBUG")
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(message)s", stream=sys.stdout)
    root.setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


@contextmanager
def bind_invocation(correlation_id: str, **fields: Any) -> Iterator[None]:
    """
    Bind per-invocation context for every log emitted inside the block.

    The first invocation handled by the execution environment is logged with
    ``cold_start=True``.

    Usage:
        with bind_invocation(request_id, method="GET"):
            logger.info("Request started")
    """
    global _cold_start
    cold_start, _cold_start = _cold_start, False

    with structlog.contextvars.bound_contextvars(
        correlation_id=correlation_id,
        cold_start=cold_start,
        **fields,
    ):
        yield


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)


def timed(logger: Any = None):
    """Decorator logging a storage call's duration at debug level."""

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or structlog.get_logger()
            with Timer() as t:
                result = func(*args, **kwargs)
            log.debug(
                "Storage call completed",
                operation=func.__name__,
                duration_ms=t.duration_ms,
            )
            return result

        return wrapper

    return decorator
