"""
aretry – retry combinator for async and blocking operations.

Import path convention::

    from aretry import retry, ExponentialBuilder
    from aretry.engine import Retry, BlockingRetry
    from aretry.testing import VirtualSleeper

Example::

    async def fetch(url: str) -> bytes: ...

    body = await (
        retry(fetch, ExponentialBuilder(min_delay=0.1), args=(url,))
        .when(lambda exc: isinstance(exc, ConnectionError))
        .notify(lambda exc, delay: print(f"retrying in {delay}s: {exc}"))
    )
"""

from aretry.backoff import (
    Backoff,
    BackoffBuilder,
    ConstantBuilder,
    ExponentialBuilder,
    FibonacciBuilder,
)
from aretry.errors import AretryError, ConfigError, RetryStateError
from aretry.result import Err, Ok, Result
from aretry.engine import BlockingRetry, Phase, Retry, blocking_retry, retry, retryable
from aretry.sleeper import AsyncioSleeper, BlockingSleeper, Sleeper, ThreadSleeper

__version__ = "0.1.0"
__all__ = [
    "AretryError",
    "AsyncioSleeper",
    "Backoff",
    "BackoffBuilder",
    "BlockingRetry",
    "BlockingSleeper",
    "ConfigError",
    "ConstantBuilder",
    "Err",
    "ExponentialBuilder",
    "FibonacciBuilder",
    "Ok",
    "Phase",
    "Result",
    "Retry",
    "RetryStateError",
    "Sleeper",
    "ThreadSleeper",
    "__version__",
    "blocking_retry",
    "retry",
    "retryable",
]
