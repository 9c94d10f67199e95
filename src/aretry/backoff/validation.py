"""Backoff – builder parameter checks."""
from __future__ import annotations

import math

from aretry.errors import InvalidSettingValueError


def check_delay(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidSettingValueError(name, value, "must be a finite, non-negative number of seconds")


def check_max_delay(min_delay: float, max_delay: float | None) -> None:
    if max_delay is None:
        return
    check_delay("max_delay", max_delay)
    if max_delay < min_delay:
        raise InvalidSettingValueError("max_delay", max_delay, f"must be >= min_delay ({min_delay})")


def check_max_times(max_times: int | None) -> None:
    if max_times is not None and max_times < 0:
        raise InvalidSettingValueError("max_times", max_times, "must be >= 0 or None for unbounded")


__all__ = ["check_delay", "check_max_delay", "check_max_times"]
