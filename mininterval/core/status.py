# mininterval/core/status.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum, auto


class RunnerStatus(Enum):
    """Defines the possible states of an interval runner.

    A single status replaces separate "running" and "stop requested" flags.
    While a runner is running the status names the loop's current position.
    """

    IDLE = auto()  # Not running
    STARTED = auto()  # start() entered, on_start in progress
    WAITING = auto()  # Waiting out the rest of the interval
    EXECUTING = auto()  # Running the task or handling its error
    STOPPING = auto()  # Stop requested, loop not exited yet

    @property
    def is_active(self) -> bool:
        """True for every status except IDLE."""
        return self is not RunnerStatus.IDLE
