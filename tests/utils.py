# tests/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import asyncio
from typing import List

from mininterval.core.hooks import RunnerHooks
from mininterval.runtime.clock import Clock


class FakeClock(Clock):
    """
    A manually advanced clock. sleep() records the requested duration and
    moves time forward by exactly that much, so interval arithmetic can be
    checked without real waiting.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.time = start
        self.sleeps: List[float] = []

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.time += seconds
        await asyncio.sleep(0)


def make_trace_hooks(trace: List[str]) -> RunnerHooks:
    """
    RunnerHooks with every slot wired to append a marker to `trace`, so the
    order of hook calls can be compared against an expected sequence.
    """
    return RunnerHooks(
        on_start=lambda runner: trace.append("start"),
        on_before_waiting=lambda duration, runner: trace.append(f"before_waiting:{duration:g}"),
        on_after_waiting=lambda runner: trace.append("after_waiting"),
        on_before_executing=lambda runner: trace.append("before_executing"),
        on_after_executing=lambda runner: trace.append("after_executing"),
        on_task_error=lambda error, runner: trace.append(f"task_error:{error}"),
        on_stop=lambda runner: trace.append("stop"),
    )
