"""
Hook bus: actions and filters of the host platform.

Callbacks run in (priority, registration order). A callback added to a hook
while that hook is running is picked up by the same pass, which is how replay
wires follow-up work onto the checkpoint hook itself.
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


@dataclass(frozen=True)
class Callback:
    func: Callable[..., Any]
    priority: int
    accepted_args: int
    seq: int


class HookBus:
    """
    Registry of hook callbacks.

    Usage:
        hooks = HookBus()
        hooks.add_action("init", setup)
        hooks.do_action("init")
        hooks.did_action("init")  # -> 1
    """

    def __init__(self) -> None:
        self._actions: Dict[str, List[Callback]] = {}
        self._filters: Dict[str, List[Callback]] = {}
        self._fired: Dict[str, int] = {}
        self._running: List[str] = []
        self._seq = itertools.count()

    def add_action(
        self, hook: str, func: Callable[..., Any], priority: int = 10, accepted_args: int = 1
    ) -> None:
        self._actions.setdefault(hook, []).append(
            Callback(func, priority, accepted_args, next(self._seq))
        )

    def add_filter(
        self, hook: str, func: Callable[..., Any], priority: int = 10, accepted_args: int = 1
    ) -> None:
        self._filters.setdefault(hook, []).append(
            Callback(func, priority, accepted_args, next(self._seq))
        )

    def has_action(self, hook: str) -> bool:
        return bool(self._actions.get(hook))

    def did_action(self, hook: str) -> int:
        """Number of times hook has started firing."""
        return self._fired.get(hook, 0)

    def doing_action(self, hook: str) -> bool:
        return hook in self._running

    def do_action(self, hook: str, *args: Any) -> None:
        """
        Run every callback of hook.

        Args:
            hook: Hook name
            *args: Passed to callbacks, truncated to each callback's accepted_args
        """
        self._fired[hook] = self._fired.get(hook, 0) + 1
        self._running.append(hook)
        try:
            ran = set()
            while True:
                waiting = [cb for cb in self._actions.get(hook, []) if cb.seq not in ran]
                if not waiting:
                    break
                cb = min(waiting, key=lambda c: (c.priority, c.seq))
                ran.add(cb.seq)
                cb.func(*args[: cb.accepted_args])
        finally:
            self._running.pop()

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Thread value through every filter of hook and return the result."""
        for cb in sorted(self._filters.get(hook, []), key=lambda c: (c.priority, c.seq)):
            value = cb.func(*((value,) + args)[: cb.accepted_args])
        return value
