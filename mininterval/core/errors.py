# mininterval/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class RunnerError(Exception):
    """
    Base exception class for errors raised by the interval runner.

    :param message: Human readable description of the failure.
    :param details: Optional mapping of extra context for diagnostics.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(RunnerError, ValueError):
    """
    Raised when a runner is given an invalid interval or task. Surfaces
    synchronously, before any scheduling happens.
    """


class ConfigurationError(RunnerError):
    """
    Raised when a RunnerBuilder is asked to build with required parts missing.
    """


class HookError(RunnerError):
    """
    Describes a lifecycle hook that raised. Only ever logged, never raised
    out of MinIntervalRunner.start().
    """

    def __init__(self, message: str, hook_name: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.hook_name = hook_name
