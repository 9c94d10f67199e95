"""Config – RetrySettings, a 12-factor description of a backoff."""
from __future__ import annotations

import dataclasses
import math
from typing import ClassVar

from aretry.backoff import BackoffBuilder, ConstantBuilder, ExponentialBuilder, FibonacciBuilder
from aretry.backoff.validation import check_delay, check_max_delay, check_max_times
from aretry.errors import InvalidSettingValueError

STRATEGIES = frozenset({"constant", "exponential", "fibonacci"})


@dataclasses.dataclass
class RetrySettings:
    """Backoff configuration, loadable from ``ARETRY_*`` environment variables.

    ``min_delay`` is the fixed delay for the ``constant`` strategy.
    ``max_delay <= 0`` disables the cap; ``unbounded`` disables ``max_times``.
    """

    _prefix: ClassVar[str] = "ARETRY"

    strategy: str = "exponential"
    min_delay: float = 1.0
    max_delay: float = 60.0
    factor: float = 2.0
    max_times: int = 3
    unbounded: bool = False

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        self.strategy = self.strategy.strip().lower()
        if self.strategy not in STRATEGIES:
            raise InvalidSettingValueError(
                "strategy", self.strategy, f"expected one of {sorted(STRATEGIES)}"
            )
        check_delay("min_delay", self.min_delay)
        if self.strategy != "constant" and self.max_delay > 0:
            check_max_delay(self.min_delay, self.max_delay)
        if not math.isfinite(self.factor) or self.factor < 1:
            raise InvalidSettingValueError("factor", self.factor, "must be a finite number >= 1")
        check_max_times(self.max_times)

    def to_builder(self) -> BackoffBuilder:
        """Build the backoff builder these settings describe."""
        max_times = None if self.unbounded else self.max_times
        max_delay = self.max_delay if self.max_delay > 0 else None
        match self.strategy:
            case "constant":
                return ConstantBuilder(delay=self.min_delay, max_times=max_times)
            case "fibonacci":
                return FibonacciBuilder(min_delay=self.min_delay, max_delay=max_delay, max_times=max_times)
            case _:
                return ExponentialBuilder(
                    min_delay=self.min_delay,
                    max_delay=max_delay,
                    factor=self.factor,
                    max_times=max_times,
                )


__all__ = ["RetrySettings", "STRATEGIES"]
