import json
import logging

import pytest
import structlog
from structlog.testing import CapturingLogger

from todo_api.infrastructure import logging as todo_logging
from todo_api.infrastructure.logging import (
    Timer,
    bind_invocation,
    configure_logging,
    timed,
)


@pytest.fixture
def root_logger():
    """Restore the root logger's level and handlers after the test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def json_logging(root_logger):
    configure_logging("todo-api-test")
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_renders_json_with_service(self, json_logging, caplog):
        caplog.set_level(logging.INFO)

        structlog.get_logger().info("Todo created", todo_id="todo-1")

        entry = json.loads(caplog.records[-1].getMessage())
        assert entry["event"] == "Todo created"
        assert entry["todo_id"] == "todo-1"
        assert entry["service"] == "todo-api-test"
        assert entry["level"] == "info"

    def test_debug_is_filtered_at_info(self, json_logging, caplog):
        caplog.set_level(logging.INFO)

        structlog.get_logger().debug("Noisy detail")

        assert not [r for r in caplog.records if "Noisy detail" in r.getMessage()]

    def test_level_applies_when_runtime_handler_already_installed(self, root_logger):
        """The Lambda runtime attaches a root handler before user code runs."""
        root_logger.addHandler(logging.StreamHandler())
        root_logger.setLevel(logging.WARNING)

        configure_logging("todo-api-test", "DEBUG")
        try:
            assert logging.getLogger("todo_api.presentation").getEffectiveLevel() == logging.DEBUG
        finally:
            structlog.reset_defaults()

    def test_unknown_level_falls_back_to_info(self, root_logger):
        configure_logging("todo-api-test", "chatty")
        try:
            assert root_logger.level == logging.INFO
        finally:
            structlog.reset_defaults()


class TestBindInvocation:
    def test_binds_correlation_id_and_fields(self, json_logging, caplog):
        caplog.set_level(logging.INFO)

        with bind_invocation("req-42", method="GET"):
            structlog.get_logger().info("Request started")
        structlog.get_logger().info("Outside invocation")

        inside = json.loads(caplog.records[-2].getMessage())
        outside = json.loads(caplog.records[-1].getMessage())
        assert inside["correlation_id"] == "req-42"
        assert inside["method"] == "GET"
        assert "correlation_id" not in outside

    def test_only_first_invocation_is_cold_start(self, monkeypatch):
        monkeypatch.setattr(todo_logging, "_cold_start", True)
        seen = []

        for request_id in ("req-1", "req-2"):
            with bind_invocation(request_id):
                seen.append(structlog.contextvars.get_contextvars()["cold_start"])

        assert seen == [True, False]


class TestTimer:
    def test_measures_duration(self):
        with Timer() as t:
            sum(range(1000))

        assert t.duration_ms >= 0


class TestTimed:
    def test_logs_operation_name_and_returns_result(self):
        logger = CapturingLogger()

        @timed(logger)
        def lookup(todo_id):
            return {"id": todo_id}

        assert lookup("todo-1") == {"id": "todo-1"}
        call = logger.calls[-1]
        assert call.method_name == "debug"
        assert call.kwargs["operation"] == "lookup"
        assert "duration_ms" in call.kwargs
