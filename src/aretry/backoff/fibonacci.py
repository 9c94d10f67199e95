"""Backoff – Fibonacci growth with an optional cap."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from aretry.backoff.validation import check_delay, check_max_delay, check_max_times


@dataclasses.dataclass(frozen=True)
class FibonacciBuilder:
    """Delays follow the Fibonacci sequence scaled by ``min_delay``.

    ``min_delay, min_delay, 2*min_delay, 3*min_delay, 5*min_delay, ...``,
    each capped at ``max_delay``.
    """

    min_delay: float = 1.0
    max_delay: float | None = 60.0
    max_times: int | None = 3

    def __post_init__(self) -> None:
        check_delay("min_delay", self.min_delay)
        check_max_delay(self.min_delay, self.max_delay)
        check_max_times(self.max_times)

    def with_min_delay(self, min_delay: float) -> FibonacciBuilder:
        return dataclasses.replace(self, min_delay=min_delay)

    def with_max_delay(self, max_delay: float) -> FibonacciBuilder:
        return dataclasses.replace(self, max_delay=max_delay)

    def without_max_delay(self) -> FibonacciBuilder:
        return dataclasses.replace(self, max_delay=None)

    def with_max_times(self, max_times: int) -> FibonacciBuilder:
        return dataclasses.replace(self, max_times=max_times)

    def without_max_times(self) -> FibonacciBuilder:
        return dataclasses.replace(self, max_times=None)

    def build(self) -> Iterator[float]:
        return _fibonacci(self.min_delay, self.max_delay, self.max_times)


def _fibonacci(min_delay: float, max_delay: float | None, max_times: int | None) -> Iterator[float]:
    previous, current = 0.0, min_delay
    attempt = 0
    while max_times is None or attempt < max_times:
        if max_delay is not None and current >= max_delay:
            current = max_delay
        yield current
        if max_delay is None or current < max_delay:
            previous, current = current, previous + current
        attempt += 1


__all__ = ["FibonacciBuilder"]
