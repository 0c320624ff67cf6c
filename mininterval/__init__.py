"""mininterval: repeated task execution with minimum interval control

This package runs a task over and over while guaranteeing a minimum amount of
time between the starts of two consecutive executions. The wait is measured
from when the previous execution started, not from when it finished, so a
slow task does not push the schedule back.

Responsibilities:
    - Start/stop lifecycle of a run loop
    - Interval accounting between execution starts
    - Lifecycle hooks around every phase
    - Retry-immediately vs. wait decision after a task error

Interactions:
    - Client code through MinIntervalRunner and RunnerBuilder
    - asyncio for suspension and cancellation
    - Logging system for hook failure diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - stop() and the interval setter may be called from any thread
        - Runner status protected by a lock

    Error Handling:
        - Hook failures are logged and swallowed
        - Task failures are routed to the on_task_error hook
        - Only validation errors reach the caller
"""

from mininterval.core.builder import RunnerBuilder
from mininterval.core.errors import ConfigurationError, HookError, RunnerError, ValidationError
from mininterval.core.hooks import RunnerHooks
from mininterval.core.runner import MinIntervalRunner
from mininterval.core.status import RunnerStatus
from mininterval.runtime.clock import Clock, MonotonicClock, sleep

__version__ = "0.1.1"

__all__ = [
    "MinIntervalRunner",
    "RunnerBuilder",
    "RunnerHooks",
    "RunnerStatus",
    "Clock",
    "MonotonicClock",
    "sleep",
    "RunnerError",
    "ValidationError",
    "ConfigurationError",
    "HookError",
]
