"""Retry – blocking engine for synchronous operations."""
from __future__ import annotations

import inspect
from typing import Any, TypeVar

from aretry.result import Err
from aretry.engine.base import RetryBase
from aretry.engine.state import Executing, Idle, Waiting
from aretry.sleeper import ThreadSleeper

T = TypeVar("T")


class BlockingRetry(RetryBase[T]):
    """Run a synchronous operation with retry on the calling thread.

    Same state machine and builder surface as :class:`~aretry.engine.Retry`;
    delays block the thread through a
    :class:`~aretry.sleeper.BlockingSleeper`. Drive it with :meth:`call`.
    """

    __slots__ = ()

    @staticmethod
    def _default_sleeper() -> ThreadSleeper:
        return ThreadSleeper()

    def __call__(self) -> T:
        return self.call()

    def call(self) -> T:
        self._begin()
        try:
            while True:
                match self._state:
                    case Idle():
                        self._attempts += 1
                        self._state = Executing(self._attempts)
                    case Executing():
                        try:
                            outcome = self._fn(*self._args, **self._kwargs)
                        except Exception as exc:
                            delay = self._next_delay(exc)
                            if delay is None:
                                raise
                        else:
                            _reject_awaitable(
                                outcome,
                                f"{getattr(self._fn, '__qualname__', self._fn)!s} returned an awaitable; "
                                "use Retry for asynchronous operations",
                            )
                            if not isinstance(outcome, Err):
                                return outcome
                            delay = self._next_delay(outcome.error)
                            if delay is None:
                                return outcome  # type: ignore[return-value]
                        self._state = Waiting(delay)
                    case Waiting(delay=delay):
                        _reject_awaitable(
                            self._sleeper(delay),
                            f"sleeper {self._sleeper!r} returned an awaitable; "
                            "BlockingRetry needs a BlockingSleeper such as ThreadSleeper",
                        )
                        self._state = Idle()
        finally:
            self._finish()


def _reject_awaitable(outcome: Any, message: str) -> None:
    if inspect.isawaitable(outcome):
        if inspect.iscoroutine(outcome):
            outcome.close()
        raise TypeError(message)


__all__ = ["BlockingRetry"]
