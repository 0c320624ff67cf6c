# mininterval/runtime/clock.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import time


async def sleep(seconds: float) -> None:
    """
    Pause the current coroutine for the given number of seconds. Cancelling
    the awaiting task cancels the sleep.
    """
    await asyncio.sleep(seconds)


class Clock:
    """
    Abstract time source used by the runner. Allows custom time sources
    (e.g. a manually advanced clock in tests) to be plugged in.
    """

    def now(self) -> float:
        """
        Return the current time in seconds. Only differences between two
        readings are meaningful.
        """
        raise NotImplementedError()

    async def sleep(self, seconds: float) -> None:
        """
        Suspend for the given number of seconds.
        """
        raise NotImplementedError()


class MonotonicClock(Clock):
    """
    Default clock backed by time.monotonic() and asyncio.sleep(), so wall
    clock adjustments never shorten or stretch an interval.
    """

    def now(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await sleep(seconds)
