"""Backoff – policy and builder contracts."""
from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

Backoff = Iterator[float]
"""A stateful cursor over delays in seconds.

Advancing it with ``next(backoff, None)`` yields the next delay, or ``None``
once no more delays remain. Exhaustion is permanent.
"""


@runtime_checkable
class BackoffBuilder(Protocol):
    """Port: produce a fresh, independent :data:`Backoff` per retry."""

    def build(self) -> Backoff: ...


__all__ = ["Backoff", "BackoffBuilder"]
