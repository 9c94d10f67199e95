"""Retry – configuration and failure handling shared by both engines."""
from __future__ import annotations

import abc
import enum
import logging
from typing import Any, Callable, Generic, Self, TypeVar

from aretry.backoff import Backoff
from aretry.errors import RetryStateError
from aretry.engine.state import Idle, Phase, State

T = TypeVar("T")
logger = logging.getLogger("aretry.engine")

Predicate = Callable[[Any], bool]
Notifier = Callable[[Any, float], None]


def always_retry(error: Any) -> bool:  # noqa: ARG001
    return True


def no_notify(error: Any, delay: float) -> None:  # noqa: ARG001
    return None


class _Status(enum.Enum):
    FRESH = "fresh"
    RUNNING = "running"
    DONE = "done"
    MOVED = "moved"


class RetryBase(abc.ABC, Generic[T]):
    """Holds the operation, its fixed arguments and the pluggable collaborators.

    Subclasses supply the drive loop and the default sleeper. Reconfiguring
    (:meth:`sleep`, :meth:`when`, :meth:`notify`) returns a new engine that
    takes over the backoff cursor; the receiver can no longer be driven, so
    two engines never advance the same cursor.
    """

    __slots__ = (
        "_fn",
        "_args",
        "_kwargs",
        "_backoff",
        "_retryable",
        "_notify",
        "_sleeper",
        "_state",
        "_attempts",
        "_status",
    )

    def __init__(
        self,
        fn: Callable[..., Any],
        backoff: Backoff,
        *,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
        retryable: Predicate | None = None,
        notify: Notifier | None = None,
        sleeper: Any = None,
    ) -> None:
        self._fn = fn
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})
        self._backoff = backoff
        self._retryable = retryable if retryable is not None else always_retry
        self._notify = notify if notify is not None else no_notify
        self._sleeper = sleeper if sleeper is not None else self._default_sleeper()
        self._state: State = Idle()
        self._attempts = 0
        self._status = _Status.FRESH

    @staticmethod
    @abc.abstractmethod
    def _default_sleeper() -> Any: ...

    # ------------------------------------------------------------------
    # Builder surface
    # ------------------------------------------------------------------

    def sleep(self, sleeper: Any) -> Self:
        """Return an engine that waits between attempts with *sleeper*."""
        return self._reconfigure(sleeper=sleeper)

    def when(self, retryable: Predicate) -> Self:
        """Return an engine that only retries failures *retryable* accepts.

        The predicate receives the raised exception, or ``Err.error`` for a
        returned :class:`~aretry.result.Err`.
        """
        return self._reconfigure(retryable=retryable)

    def notify(self, notify: Notifier) -> Self:
        """Return an engine that calls ``notify(error, delay)`` before every sleep."""
        return self._reconfigure(notify=notify)

    def _reconfigure(self, **overrides: Any) -> Self:
        if self._status is not _Status.FRESH:
            raise RetryStateError(
                f"cannot reconfigure a retry that is {self._status.value}",
                detail={"status": self._status.value},
            )
        config: dict[str, Any] = {
            "retryable": self._retryable,
            "notify": self._notify,
            "sleeper": self._sleeper,
        }
        config.update(overrides)
        successor = type(self)(self._fn, self._backoff, args=self._args, kwargs=self._kwargs, **config)
        self._status = _Status.MOVED
        return successor

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def attempts(self) -> int:
        """Number of times the operation has been invoked so far."""
        return self._attempts

    @property
    def done(self) -> bool:
        return self._status is _Status.DONE

    # ------------------------------------------------------------------
    # Drive-loop helpers
    # ------------------------------------------------------------------

    def _ensure_fresh(self) -> None:
        if self._status is _Status.MOVED:
            raise RetryStateError(
                "retry was reconfigured; drive the instance returned by sleep()/when()/notify()",
                detail={"status": self._status.value},
            )
        if self._status is not _Status.FRESH:
            raise RetryStateError(
                "a retry can only be driven once",
                detail={"status": self._status.value},
            )

    def _begin(self) -> None:
        self._ensure_fresh()
        self._status = _Status.RUNNING

    def _finish(self) -> None:
        self._state = Idle()
        self._status = _Status.DONE

    def _next_delay(self, error: Any) -> float | None:
        """Decide what follows a failed attempt.

        Returns the delay to wait before the next attempt, or ``None`` when the
        failure is final. Runs the predicate, the backoff advance and the
        notification in that order, with no suspension in between.
        """
        if not self._retryable(error):
            logger.debug("retry stopped attempt=%d reason=not_retryable exc=%r", self._attempts, error)
            return None
        delay = next(self._backoff, None)
        if delay is None:
            logger.debug("retry stopped attempt=%d reason=backoff_exhausted exc=%r", self._attempts, error)
            return None
        logger.debug("retry attempt=%d delay=%.3fs exc=%r", self._attempts, delay, error)
        self._notify(error, delay)
        return delay

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return (
            f"{type(self).__name__}({name}, phase={self.phase.value}, "
            f"attempts={self._attempts}, status={self._status.value})"
        )


__all__ = ["RetryBase", "always_retry", "no_notify"]
