"""Backoff – exponential growth with an optional cap."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterator

from aretry.backoff.validation import check_delay, check_max_delay, check_max_times
from aretry.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class ExponentialBuilder:
    """Delay grows exponentially: ``min_delay * factor ** n``, capped at ``max_delay``.

    With the defaults a retry sleeps 1s, 2s, then 4s before giving up.
    """

    min_delay: float = 1.0
    max_delay: float | None = 60.0
    factor: float = 2.0
    max_times: int | None = 3

    def __post_init__(self) -> None:
        check_delay("min_delay", self.min_delay)
        check_max_delay(self.min_delay, self.max_delay)
        check_max_times(self.max_times)
        if not math.isfinite(self.factor) or self.factor < 1:
            raise InvalidSettingValueError("factor", self.factor, "must be a finite number >= 1")

    def with_min_delay(self, min_delay: float) -> ExponentialBuilder:
        return dataclasses.replace(self, min_delay=min_delay)

    def with_max_delay(self, max_delay: float) -> ExponentialBuilder:
        return dataclasses.replace(self, max_delay=max_delay)

    def without_max_delay(self) -> ExponentialBuilder:
        return dataclasses.replace(self, max_delay=None)

    def with_factor(self, factor: float) -> ExponentialBuilder:
        return dataclasses.replace(self, factor=factor)

    def with_max_times(self, max_times: int) -> ExponentialBuilder:
        return dataclasses.replace(self, max_times=max_times)

    def without_max_times(self) -> ExponentialBuilder:
        return dataclasses.replace(self, max_times=None)

    def build(self) -> Iterator[float]:
        return _exponential(self.min_delay, self.max_delay, self.factor, self.max_times)


def _exponential(
    min_delay: float, max_delay: float | None, factor: float, max_times: int | None
) -> Iterator[float]:
    delay = min_delay
    attempt = 0
    while max_times is None or attempt < max_times:
        # once capped the delay can only stay capped
        if max_delay is not None and delay >= max_delay:
            delay = max_delay
        yield delay
        if max_delay is None or delay < max_delay:
            delay *= factor
        attempt += 1


__all__ = ["ExponentialBuilder"]
