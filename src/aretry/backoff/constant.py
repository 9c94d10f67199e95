"""Backoff – fixed delay between attempts."""
from __future__ import annotations

import dataclasses
import itertools

from aretry.backoff.base import Backoff
from aretry.backoff.validation import check_delay, check_max_times


@dataclasses.dataclass(frozen=True)
class ConstantBuilder:
    """Yield ``delay`` seconds ``max_times`` times (forever when ``None``)."""

    delay: float = 1.0
    max_times: int | None = 3

    def __post_init__(self) -> None:
        check_delay("delay", self.delay)
        check_max_times(self.max_times)

    def with_delay(self, delay: float) -> ConstantBuilder:
        return dataclasses.replace(self, delay=delay)

    def with_max_times(self, max_times: int) -> ConstantBuilder:
        return dataclasses.replace(self, max_times=max_times)

    def without_max_times(self) -> ConstantBuilder:
        return dataclasses.replace(self, max_times=None)

    def build(self) -> Backoff:
        if self.max_times is None:
            return itertools.repeat(self.delay)
        return itertools.repeat(self.delay, self.max_times)


__all__ = ["ConstantBuilder"]
