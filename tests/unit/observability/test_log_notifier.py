"""Unit tests for the structlog helpers and LogNotifier."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from aretry import retry
from aretry.observability import JsonLoggerFactory, LogNotifier, get_logger
from aretry.testing import FlakyOperation, ScriptedBackoffBuilder, VirtualSleeper


class _RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.calls.append(("warning", event, kw))

    def info(self, event: str, **kw: Any) -> None:
        self.calls.append(("info", event, kw))


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# LogNotifier
# ---------------------------------------------------------------------------


class TestLogNotifier:
    def test_emits_structured_event(self) -> None:
        logger = _RecordingLogger()
        notifier = LogNotifier(logger)

        notifier(ConnectionError("reset"), 0.5)

        assert logger.calls == [
            (
                "warning",
                "retry_scheduled",
                {"retry": 1, "delay": 0.5, "error_type": "ConnectionError", "error": "reset"},
            )
        ]

    def test_counts_retries_and_binds_context(self) -> None:
        logger = _RecordingLogger()
        notifier = LogNotifier(logger, level="info", event="fetch_retry", url="https://example.test")

        notifier("E", 1.0)
        notifier("E", 2.0)

        assert notifier.retries == 2
        level, event, fields = logger.calls[-1]
        assert (level, event) == ("info", "fetch_retry")
        assert fields["retry"] == 2
        assert fields["url"] == "https://example.test"
        assert fields["error_type"] == "str"

    def test_default_logger_is_structlog(self) -> None:
        with capture_logs() as logs:
            LogNotifier()(TimeoutError("slow"), 0.25)

        assert logs == [
            {
                "event": "retry_scheduled",
                "log_level": "warning",
                "retry": 1,
                "delay": 0.25,
                "error_type": "TimeoutError",
                "error": "slow",
            }
        ]

    def test_as_engine_notifier(self, virtual_sleeper: VirtualSleeper) -> None:
        op = FlakyOperation(2, value="ok")
        with capture_logs() as logs:
            engine = retry(op, ScriptedBackoffBuilder([0.1, 0.2])).notify(LogNotifier()).sleep(virtual_sleeper)
            assert asyncio.run(engine.run()) == "ok"

        assert [e["delay"] for e in logs] == [0.1, 0.2]
        assert [e["retry"] for e in logs] == [1, 2]


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestStructlogHelpers:
    def test_get_logger_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("aretry.test", component="fetcher").info("hello")

        assert logs[0]["component"] == "fetcher"
        assert logs[0]["event"] == "hello"

    def test_configure_installs_json_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
