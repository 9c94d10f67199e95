"""Observability – structlog helpers and a logging retry notifier.

The engines themselves log through stdlib :mod:`logging` (logger
``aretry.engine``, DEBUG). This module is for applications that want retries
as structured events::

    await retry(fetch, ExponentialBuilder()).notify(LogNotifier())
"""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally pre-bound with *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class JsonLoggerFactory:
    """Configure structlog and the stdlib root logger for JSON output."""

    @staticmethod
    def configure(level: int = logging.INFO) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


class LogNotifier:
    """Notification callback that records each scheduled retry as an event.

    Emits ``event`` at ``level`` with ``retry`` (1-based count of retries this
    notifier has seen), ``delay``, ``error_type`` and ``error``. One instance
    per retry keeps the count meaningful.
    """

    def __init__(
        self,
        logger: Any = None,
        *,
        level: str = "warning",
        event: str = "retry_scheduled",
        **context: Any,
    ) -> None:
        self._logger = logger if logger is not None else get_logger("aretry")
        self._level = level
        self._event = event
        self._context = context
        self.retries = 0

    def __call__(self, error: Any, delay: float) -> None:
        self.retries += 1
        log = getattr(self._logger, self._level)
        log(
            self._event,
            retry=self.retries,
            delay=delay,
            error_type=type(error).__name__,
            error=str(error),
            **self._context,
        )


__all__ = ["JsonLoggerFactory", "LogNotifier", "get_logger"]
