"""Retry – the awaitable retry engine.

A :class:`Retry` is awaited exactly like the operation it wraps::

    content = await retry(fetch, ExponentialBuilder(), args=(url,)).when(is_transient)

and resolves to what the bare operation would have produced: its value, the
:class:`~aretry.result.Err` it returned, or the exception it raised, taken
from the last attempt.
"""
from __future__ import annotations

import inspect
from collections.abc import Coroutine, Generator
from typing import Any, TypeVar

from aretry.result import Err
from aretry.engine.base import RetryBase
from aretry.engine.state import Executing, Idle, Waiting
from aretry.sleeper import AsyncioSleeper

T = TypeVar("T")


class Retry(RetryBase[T]):
    """Awaitable that re-invokes an operation until it succeeds or gives up.

    The operation may be a coroutine function, return any awaitable, or be a
    plain function. Each loop step moves the engine through
    ``Idle -> Executing -> (Waiting -> Idle)*``; at most one awaitable is ever
    pending. Cancelling the awaiting task (or closing the coroutine from
    :meth:`run`) cancels whichever awaitable is pending, and the operation is
    not invoked again.
    """

    __slots__ = ()

    @staticmethod
    def _default_sleeper() -> AsyncioSleeper:
        return AsyncioSleeper()

    def __await__(self) -> Generator[Any, None, T]:
        return self.run().__await__()

    def run(self) -> Coroutine[Any, Any, T]:
        """Return the driving coroutine, e.g. for :func:`asyncio.create_task`.

        Misuse is reported here, eagerly. The engine only counts as started
        once the coroutine takes its first step, so a coroutine that is
        cancelled or closed before that leaves the engine fresh.
        """
        self._ensure_fresh()
        return self._drive()

    async def _drive(self) -> T:
        self._begin()
        try:
            while True:
                match self._state:
                    case Idle():
                        self._attempts += 1
                        self._state = Executing(self._attempts, self._attempt())
                    case Executing(pending=pending):
                        try:
                            outcome = await pending
                        except Exception as exc:
                            delay = self._next_delay(exc)
                            if delay is None:
                                raise
                        else:
                            if not isinstance(outcome, Err):
                                return outcome
                            delay = self._next_delay(outcome.error)
                            if delay is None:
                                return outcome  # type: ignore[return-value]
                        self._state = Waiting(delay, self._wait(delay))
                    case Waiting(pending=pending):
                        await pending
                        self._state = Idle()
        finally:
            self._finish()

    async def _attempt(self) -> Any:
        outcome = self._fn(*self._args, **self._kwargs)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome

    async def _wait(self, delay: float) -> None:
        pending = self._sleeper(delay)
        if inspect.isawaitable(pending):
            await pending


__all__ = ["Retry"]
