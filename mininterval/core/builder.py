# mininterval/core/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading
from datetime import timedelta
from typing import Callable, Optional, Union

from mininterval.core.errors import ConfigurationError, ValidationError
from mininterval.core.hooks import HOOK_NAMES, RunnerHooks
from mininterval.core.runner import MinIntervalRunner, Task
from mininterval.runtime.clock import Clock


class RunnerBuilder:
    """Builds MinIntervalRunner instances.

    RunnerBuilder implements the Builder pattern to collect an interval, a
    task, an optional clock and any number of hooks before constructing a
    runner. Every with_*/on_* method returns the builder so calls can be
    chained:

        runner = (
            RunnerBuilder()
            .with_interval(0.5)
            .with_task(poll)
            .on_task_error(lambda error, runner: True)
            .build()
        )

    A builder may be reused; each build() returns an independent runner with
    its own copy of the hooks.
    """

    def __init__(self):
        self._interval: Optional[Union[float, timedelta]] = None
        self._task: Optional[Task] = None
        self._clock: Optional[Clock] = None
        self._hooks = RunnerHooks()
        self._lock = threading.Lock()

    def with_interval(self, interval: Union[float, timedelta]) -> "RunnerBuilder":
        with self._lock:
            self._interval = interval
        return self

    def with_task(self, task: Task) -> "RunnerBuilder":
        with self._lock:
            self._task = task
        return self

    def with_clock(self, clock: Clock) -> "RunnerBuilder":
        with self._lock:
            self._clock = clock
        return self

    def with_hook(self, name: str, hook: Optional[Callable]) -> "RunnerBuilder":
        """Attach a hook by slot name, e.g. "on_before_waiting".

        Raises:
            ValidationError: If name is not a known hook slot
        """
        if name not in HOOK_NAMES:
            raise ValidationError(f"Unknown hook '{name}'", details={"known": list(HOOK_NAMES)})
        with self._lock:
            setattr(self._hooks, name, hook)
        return self

    def on_start(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_start", hook)

    def on_before_waiting(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_before_waiting", hook)

    def on_after_waiting(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_after_waiting", hook)

    def on_before_executing(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_before_executing", hook)

    def on_after_executing(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_after_executing", hook)

    def on_task_error(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_task_error", hook)

    def on_stop(self, hook: Callable) -> "RunnerBuilder":
        return self.with_hook("on_stop", hook)

    def build(self) -> MinIntervalRunner:
        """Build a runner from the collected parts.

        Returns:
            A new, idle MinIntervalRunner

        Raises:
            ConfigurationError: If the interval or the task is missing
            ValidationError: If the interval or the task is invalid
        """
        with self._lock:
            missing = [
                name for name, value in (("interval", self._interval), ("task", self._task)) if value is None
            ]
            if missing:
                raise ConfigurationError(
                    f"Cannot build runner, missing: {', '.join(missing)}", details={"missing": missing}
                )
            return MinIntervalRunner(self._interval, self._task, hooks=self._hooks.copy(), clock=self._clock)
