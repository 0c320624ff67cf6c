# mininterval/core/runner.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import inspect
import logging
import math
import numbers
from datetime import timedelta
from threading import RLock
from typing import Awaitable, Callable, Optional, Union

from mininterval.core.errors import ValidationError
from mininterval.core.hooks import HookInvoker, RunnerHooks
from mininterval.core.status import RunnerStatus
from mininterval.runtime.clock import Clock, MonotonicClock

logger = logging.getLogger(__name__)

Task = Callable[["MinIntervalRunner"], Union[None, Awaitable[None]]]


class MinIntervalRunner:
    """
    Executes a task repeatedly, keeping at least `interval` seconds between
    the starts of two consecutive executions.

    The wait before an execution is measured from the start of the previous
    successful execution, so a slow task does not add its own duration on
    top of the interval. The first execution after start() never waits.

    Stop requests are cooperative. stop() marks the runner as STOPPING and the
    loop ends at its next stop-check point: around each wait, before and
    after each task invocation, and after each task error.

    Example:
        async def poll(runner):
            ...

        runner = MinIntervalRunner(5.0, poll)
        runner.hooks.on_task_error = lambda error, runner: True
        await runner.start()
    """

    def __init__(
        self,
        interval: Union[float, timedelta],
        task: Task,
        hooks: Optional[RunnerHooks] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        :param interval: Minimum number of seconds between execution starts.
        :param task: Called as task(runner); may be a coroutine function.
        :param hooks: Optional lifecycle observers. A fresh empty set is used
                      when omitted.
        :param clock: Time source, MonotonicClock by default.
        :raises ValidationError: If interval is negative or task is not callable.
        """
        self._status_lock = RLock()
        self._status = RunnerStatus.IDLE
        self.interval = interval

        if task is None or not callable(task):
            raise ValidationError("`task` must be callable", details={"task": repr(task)})
        self._task = task

        self._clock = clock or MonotonicClock()
        self._invoker = HookInvoker(hooks if hooks is not None else RunnerHooks(), self)
        self._last_execution_start = float("-inf")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} interval={self.interval!r} status={self.status.name}>"

    @property
    def interval(self) -> float:
        """Minimum number of seconds between the starts of two executions."""
        with self._status_lock:
            return self._interval

    @interval.setter
    def interval(self, interval: Union[float, timedelta]) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if isinstance(interval, bool) or not isinstance(interval, numbers.Real) or math.isnan(interval):
            raise ValidationError("`interval` must be a number of seconds", details={"interval": interval})
        if interval < 0:
            raise ValidationError("`interval` cannot be negative", details={"interval": interval})

        with self._status_lock:
            self._interval = float(interval)

    @property
    def task(self) -> Task:
        return self._task

    @property
    def hooks(self) -> RunnerHooks:
        """The lifecycle observers; slots may be reassigned at any time."""
        return self._invoker.hooks

    @hooks.setter
    def hooks(self, hooks: RunnerHooks) -> None:
        self._invoker.hooks = hooks

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def status(self) -> RunnerStatus:
        with self._status_lock:
            return self._status

    @property
    def running(self) -> bool:
        """True from the moment start() begins until its loop has exited."""
        return self.status.is_active

    @property
    def stopping(self) -> bool:
        """True while running with a stop request not yet honored."""
        return self.status is RunnerStatus.STOPPING

    @property
    def last_execution_start(self) -> float:
        """Clock reading taken just before the last successful execution."""
        return self._last_execution_start

    async def start(self) -> None:
        """
        Run the task repeatedly until stop() is called. Returns immediately
        if the runner is already running.

        on_start fires once on entry and on_stop fires once on exit, even if
        the task never ran. Task and hook failures never propagate out of
        this coroutine; cancelling it does, after on_stop has fired.
        """
        with self._status_lock:
            if self._status.is_active:
                return
            self._status = RunnerStatus.STARTED

        logger.debug("%r started", self)
        try:
            await self._invoker.invoke("on_start")
            if not self._should_stop():
                await self._run_loop()
        finally:
            with self._status_lock:
                self._status = RunnerStatus.IDLE
            logger.debug("%r stopped", self)
            await self._invoker.invoke("on_stop")

    def run(self) -> None:
        """Blocking convenience wrapper around start() for synchronous callers."""
        asyncio.run(self.start())

    def stop(self) -> None:
        """
        Request the runner to stop at its next stop-check point. Does not
        block. Has no effect when the runner is not running or a stop is
        already pending. Safe to call from the task, a hook or another thread.
        """
        with self._status_lock:
            if self._status.is_active:
                self._status = RunnerStatus.STOPPING

    def _should_stop(self) -> bool:
        with self._status_lock:
            return self._status is RunnerStatus.STOPPING

    def _enter(self, status: RunnerStatus) -> None:
        # A pending stop request must survive phase changes.
        with self._status_lock:
            if self._status is not RunnerStatus.STOPPING:
                self._status = status

    async def _run_loop(self) -> None:
        self._last_execution_start = float("-inf")

        while True:
            elapsed = self._clock.now() - self._last_execution_start
            interval = self.interval

            if elapsed < interval and not await self._wait(interval - elapsed):
                break

            if not await self._execute():
                break

        logger.debug("%r left its loop", self)

    async def _wait(self, duration: float) -> bool:
        """
        Wait out the rest of the interval.

        :return: False if a stop-check point ended the loop.
        """
        self._enter(RunnerStatus.WAITING)
        await self._invoker.invoke("on_before_waiting", duration)
        if self._should_stop():
            return False

        logger.debug("%r waiting %.3fs", self, duration)
        await self._clock.sleep(duration)

        await self._invoker.invoke("on_after_waiting")
        return not self._should_stop()

    async def _execute(self) -> bool:
        """
        Run the task once, retrying immediately for as long as on_task_error
        asks for it. Only a successful run moves the interval baseline.

        :return: False if a stop-check point ended the loop.
        """
        self._enter(RunnerStatus.EXECUTING)

        while True:
            await self._invoker.invoke("on_before_executing")
            if self._should_stop():
                return False

            execution_start = self._clock.now()
            try:
                result = self._task(self)
                if inspect.isawaitable(result):
                    await result
            except Exception as error:
                logger.debug("%r task raised %s: %s", self, type(error).__name__, error)
                retry = await self._invoker.invoke_task_error(error)
                if self._should_stop():
                    return False
                if retry:
                    continue
                return True

            if self._should_stop():
                return False

            self._last_execution_start = execution_start
            await self._invoker.invoke("on_after_executing")
            return not self._should_stop()
