# mininterval/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

from mininterval.core.errors import HookError

if TYPE_CHECKING:
    from mininterval.core.runner import MinIntervalRunner

logger = logging.getLogger(__name__)

Listener = Optional[Callable[["MinIntervalRunner"], Union[None, Awaitable[None]]]]
WaitListener = Optional[Callable[[float, "MinIntervalRunner"], Union[None, Awaitable[None]]]]
ErrorListener = Optional[
    Callable[[Exception, "MinIntervalRunner"], Union[Optional[bool], Awaitable[Optional[bool]]]]
]

HOOK_NAMES = (
    "on_start",
    "on_before_waiting",
    "on_after_waiting",
    "on_before_executing",
    "on_after_executing",
    "on_task_error",
    "on_stop",
)


@dataclass
class RunnerHooks:
    """
    The set of lifecycle observers attached to a runner. Every slot is
    optional and may be reassigned at any time, including mid-run; the runner
    reads the slot again at each phase boundary.

    Each slot accepts a plain function or a coroutine function. Only
    on_task_error can influence scheduling: returning exactly True requests
    an immediate retry of the failed task.
    """

    on_start: Listener = None
    on_before_waiting: WaitListener = None
    on_after_waiting: Listener = None
    on_before_executing: Listener = None
    on_after_executing: Listener = None
    on_task_error: ErrorListener = None
    on_stop: Listener = None

    def copy(self) -> "RunnerHooks":
        """Return a shallow copy holding the same callables."""
        return dataclasses.replace(self)

    def clear(self) -> None:
        """Detach every hook."""
        for name in HOOK_NAMES:
            setattr(self, name, None)


class HookInvoker:
    """
    Calls the hooks of a RunnerHooks set on behalf of a runner, isolating the
    runner from hook failures. A hook that raises is logged and otherwise
    ignored.
    """

    def __init__(self, hooks: RunnerHooks, runner: "MinIntervalRunner") -> None:
        self._hooks = hooks
        self._runner = runner

    @property
    def hooks(self) -> RunnerHooks:
        return self._hooks

    @hooks.setter
    def hooks(self, hooks: RunnerHooks) -> None:
        self._hooks = hooks

    async def invoke(self, name: str, *args: Any) -> Any:
        """
        Call the hook stored in slot `name` with `args` followed by the
        runner, awaiting the result if it is awaitable.

        :return: The hook's result, or None if the slot is empty or the hook
                 raised.
        """
        hook = getattr(self._hooks, name)
        if hook is None:
            return None

        try:
            result = hook(*args, self._runner)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as error:
            hook_error = HookError(f"Hook '{name}' raised {type(error).__name__}: {error}", hook_name=name)
            hook_error.__cause__ = error
            logger.error("%s", hook_error.message, exc_info=hook_error, extra={"hook_name": name})
            return None

    async def invoke_task_error(self, error: Exception) -> bool:
        """
        Ask on_task_error whether a failed task should be retried at once.
        Anything other than an explicit True (including a missing or failing
        hook) means "wait for the next cycle".
        """
        return await self.invoke("on_task_error", error) is True
