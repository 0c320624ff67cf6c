"""
Core package providing the runner and its collaborators.

Architecture:
- MinIntervalRunner owns the run loop and its state machine
- RunnerHooks holds the optional lifecycle observers
- RunnerBuilder assembles runners from parts

Design Patterns:
- State Pattern for the runner status
- Observer Pattern for lifecycle hooks
- Builder Pattern for configuration
"""

# Import order matters to avoid circular dependencies
from .errors import ConfigurationError, HookError, RunnerError, ValidationError
from .status import RunnerStatus
from .hooks import HookInvoker, RunnerHooks
from .runner import MinIntervalRunner
from .builder import RunnerBuilder

__all__ = [
    # Errors
    "RunnerError",
    "ValidationError",
    "ConfigurationError",
    "HookError",
    # Runner
    "RunnerStatus",
    "RunnerHooks",
    "HookInvoker",
    "MinIntervalRunner",
    "RunnerBuilder",
]
