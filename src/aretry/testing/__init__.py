"""Testing support – deterministic sleepers, scripted backoffs, flaky operations.

Fixtures live in :mod:`aretry.testing.fixtures`; load them from ``conftest.py``::

    pytest_plugins = ["aretry.testing.fixtures"]
"""

from aretry.testing.backoff import ScriptedBackoff, ScriptedBackoffBuilder
from aretry.testing.operation import FlakyOperation
from aretry.testing.sleeper import VirtualSleeper

__all__ = ["FlakyOperation", "ScriptedBackoff", "ScriptedBackoffBuilder", "VirtualSleeper"]
