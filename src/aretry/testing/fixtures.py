"""Testing – pytest fixtures.

Enable in your ``conftest.py``::

    pytest_plugins = ["aretry.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from aretry.testing.backoff import ScriptedBackoffBuilder
from aretry.testing.sleeper import VirtualSleeper


@pytest.fixture
def virtual_sleeper() -> VirtualSleeper:
    """A fresh :class:`VirtualSleeper` starting at t=0."""
    return VirtualSleeper()


@pytest.fixture
def scripted_backoff() -> ScriptedBackoffBuilder:
    """Builder for three retries of 1ms, 2ms and 4ms."""
    return ScriptedBackoffBuilder([0.001, 0.002, 0.004])


__all__ = ["scripted_backoff", "virtual_sleeper"]
