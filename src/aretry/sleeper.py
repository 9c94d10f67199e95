"""Sleeper – suspend for a delay between attempts.

:class:`Sleeper` is what :class:`~aretry.engine.Retry` waits on: any callable
taking a delay in seconds. When it returns an awaitable the engine awaits it;
a sleeper that returns ``None`` is treated as already finished, which is what
virtual-time test sleepers rely on.

:class:`BlockingSleeper` is the thread-blocking counterpart used by
:class:`~aretry.engine.BlockingRetry`.
"""
from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Protocol, runtime_checkable


@runtime_checkable
class Sleeper(Protocol):
    def __call__(self, delay: float) -> Awaitable[None] | None: ...


@runtime_checkable
class BlockingSleeper(Protocol):
    def __call__(self, delay: float) -> None: ...


class AsyncioSleeper:
    """Default async sleeper backed by :func:`asyncio.sleep`.

    Cancelling the task that awaits it releases the underlying timer handle.
    """

    __slots__ = ()

    def __call__(self, delay: float) -> Awaitable[None]:
        return asyncio.sleep(delay)

    def __repr__(self) -> str:
        return "AsyncioSleeper()"


class ThreadSleeper:
    """Default blocking sleeper backed by :func:`time.sleep`."""

    __slots__ = ()

    def __call__(self, delay: float) -> None:
        time.sleep(delay)

    def __repr__(self) -> str:
        return "ThreadSleeper()"


__all__ = ["AsyncioSleeper", "BlockingSleeper", "Sleeper", "ThreadSleeper"]
