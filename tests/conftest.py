"""Shared fixtures for the aretry test-suite."""

from aretry.testing.fixtures import scripted_backoff, virtual_sleeper  # noqa: F401
