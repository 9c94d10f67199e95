"""Backoff – policy contract and the stock builders."""
from aretry.backoff.base import Backoff, BackoffBuilder
from aretry.backoff.constant import ConstantBuilder
from aretry.backoff.exponential import ExponentialBuilder
from aretry.backoff.fibonacci import FibonacciBuilder

__all__ = [
    "Backoff",
    "BackoffBuilder",
    "ConstantBuilder",
    "ExponentialBuilder",
    "FibonacciBuilder",
]
