"""Retry – entry points and the ``@retryable`` decorator."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from aretry.backoff import BackoffBuilder, ExponentialBuilder
from aretry.engine.base import Notifier, Predicate
from aretry.engine.blocking import BlockingRetry
from aretry.engine.awaitable import Retry

T = TypeVar("T")


def retry(
    fn: Callable[..., Any],
    builder: BackoffBuilder | None = None,
    *,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
) -> Retry[Any]:
    """Wrap *fn* in an awaitable :class:`Retry` with a freshly built backoff.

    *builder* defaults to :class:`~aretry.backoff.ExponentialBuilder` (three
    retries after 1s, 2s and 4s).
    """
    backoff = (builder if builder is not None else ExponentialBuilder()).build()
    return Retry(fn, backoff, args=args, kwargs=kwargs)


def blocking_retry(
    fn: Callable[..., Any],
    builder: BackoffBuilder | None = None,
    *,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
) -> BlockingRetry[Any]:
    """Blocking counterpart of :func:`retry`; drive with ``.call()``."""
    backoff = (builder if builder is not None else ExponentialBuilder()).build()
    return BlockingRetry(fn, backoff, args=args, kwargs=kwargs)


def retryable(
    builder: BackoffBuilder | None = None,
    *,
    when: Predicate | None = None,
    notify: Notifier | None = None,
    sleeper: Any = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator: every call of the decorated function runs with retry.

    Coroutine functions get an async wrapper driving a new :class:`Retry`
    per call; plain functions get a sync wrapper driving a new
    :class:`BlockingRetry`. Each call builds its own backoff, so concurrent
    calls never share retry state.

    Example::

        @retryable(ConstantBuilder(delay=0.5), when=lambda e: isinstance(e, OSError))
        async def fetch(url: str) -> bytes: ...
    """

    def _configure(engine: Any) -> Any:
        if when is not None:
            engine = engine.when(when)
        if notify is not None:
            engine = engine.notify(notify)
        if sleeper is not None:
            engine = engine.sleep(sleeper)
        return engine

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await _configure(retry(func, builder, args=args, kwargs=kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return _configure(blocking_retry(func, builder, args=args, kwargs=kwargs)).call()

        return wrapper

    return decorator


__all__ = ["blocking_retry", "retry", "retryable"]
