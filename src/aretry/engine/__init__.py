"""Retry – awaitable and blocking retry engines with pluggable backoff."""
from aretry.engine.base import RetryBase
from aretry.engine.blocking import BlockingRetry
from aretry.engine.awaitable import Retry
from aretry.engine.retryable import blocking_retry, retry, retryable
from aretry.engine.state import Executing, Idle, Phase, State, Waiting

__all__ = [
    "BlockingRetry",
    "Executing",
    "Idle",
    "Phase",
    "Retry",
    "RetryBase",
    "State",
    "Waiting",
    "blocking_retry",
    "retry",
    "retryable",
]
