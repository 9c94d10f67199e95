"""Retry – engine phases.

An engine is always in exactly one of three phases. The payload of the
active phase owns the single pending unit of work, so replacing the state
is also what releases it.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any


class Phase(enum.Enum):
    IDLE = "idle"
    EXECUTING = "executing"
    WAITING = "waiting"


@dataclasses.dataclass(frozen=True, slots=True)
class Idle:
    """No attempt in flight; the next step invokes the operation."""

    phase = Phase.IDLE


@dataclasses.dataclass(frozen=True, slots=True)
class Executing:
    """An operation invocation is pending.

    ``pending`` is the awaitable for async engines and ``None`` for the
    blocking engine, whose attempts run to completion on the caller's thread.
    """

    attempt: int
    pending: Any = None

    phase = Phase.EXECUTING


@dataclasses.dataclass(frozen=True, slots=True)
class Waiting:
    """A delay of ``delay`` seconds is pending before the next attempt."""

    delay: float
    pending: Any = None

    phase = Phase.WAITING


State = Idle | Executing | Waiting

__all__ = ["Executing", "Idle", "Phase", "State", "Waiting"]
