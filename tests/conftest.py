# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from tests.utils import FakeClock, make_trace_hooks


@pytest.fixture
def fake_clock():
    """A FakeClock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def trace():
    """An empty list the trace hooks append to."""
    return []


@pytest.fixture
def trace_hooks(trace):
    """A full set of hooks recording into `trace`."""
    return make_trace_hooks(trace)


@pytest.fixture
def stop_after():
    """
    Returns a factory for sync tasks that count their calls and stop the
    runner on the n-th one. Given a FakeClock, each call also records its
    start time and advances the clock by `duration`.
    """

    def _factory(n: int, duration: float = 0.0, clock: FakeClock = None):
        def task(runner):
            task.calls += 1
            if clock is not None:
                task.starts.append(clock.now())
                clock.advance(duration)
            if task.calls >= n:
                runner.stop()

        task.calls = 0
        task.starts = []
        return task

    return _factory


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive() and not thread.daemon:
            thread.join(timeout=1.0)
