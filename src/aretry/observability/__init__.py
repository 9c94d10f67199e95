"""Observability – structured logging for retries."""
from aretry.observability.logging import JsonLoggerFactory, LogNotifier, get_logger

__all__ = ["JsonLoggerFactory", "LogNotifier", "get_logger"]
