"""Benchmark fixtures: one asyncio loop for the whole session."""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """``run_async(coro)`` drives *coro* to completion on the shared loop."""
    return event_loop.run_until_complete
