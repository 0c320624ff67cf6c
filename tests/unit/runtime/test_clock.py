# tests/unit/runtime/test_clock.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import asyncio
import time

import pytest

from mininterval.runtime.clock import Clock, MonotonicClock, sleep


def test_abstract_clock_methods():
    clock = Clock()
    with pytest.raises(NotImplementedError):
        clock.now()
    with pytest.raises(NotImplementedError):
        asyncio.run(clock.sleep(0))


def test_monotonic_clock_never_goes_backwards():
    clock = MonotonicClock()
    readings = [clock.now() for _ in range(100)]
    assert readings == sorted(readings)


@pytest.mark.asyncio
async def test_monotonic_clock_sleep_waits():
    clock = MonotonicClock()
    before = time.monotonic()
    await clock.sleep(0.05)
    assert time.monotonic() - before >= 0.04


@pytest.mark.asyncio
async def test_sleep_is_cancellable():
    task = asyncio.ensure_future(sleep(10))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
