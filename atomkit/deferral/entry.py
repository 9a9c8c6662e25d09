"""
Deferred entry and its chainable facade.

The facade stands in for a real builder before the checkpoint fires: every
public method call is recorded on the owning entry and the facade is returned
so fluent chains keep working. Nothing is executed and nothing is validated.
"""

from typing import Any, Callable, Tuple

from ..core.calls import CallLog, CallRecord
from ..core.errors import EntryConsumedError


class DeferredEntry:
    """
    Construction key plus the calls recorded against it.

    Lifecycle:
        created by a factory before the checkpoint -> records calls ->
        consumed exactly once by replay -> inert
    """

    def __init__(self, category: str, key: str) -> None:
        self.category = category
        self.key = key
        self.log = CallLog()
        self._consumed = False
        self._facade = ChainableFacade(self)

    @property
    def facade(self) -> "ChainableFacade":
        return self._facade

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def trace_id(self) -> str:
        return f"{self.category}:{self.key}"

    def record(self, name: str, args: Tuple[Any, ...], kwargs: dict) -> None:
        """
        Append one call to the log.

        Raises:
            EntryConsumedError: If the entry has already been replayed
        """
        if self._consumed:
            raise EntryConsumedError(
                f"{self.trace_id} was already replayed; {name!r} would never run"
            )
        self.log.append(CallRecord(name=name, args=args, kwargs=kwargs))

    def consume(self) -> CallLog:
        """
        Hand the log to replay and make the entry inert.

        Raises:
            EntryConsumedError: If called a second time
        """
        if self._consumed:
            raise EntryConsumedError(f"{self.trace_id} cannot be replayed twice")
        self._consumed = True
        self.log.freeze()
        return self.log

    def __repr__(self) -> str:
        return f"DeferredEntry({self.trace_id!r}, calls={len(self.log)})"


class ChainableFacade:
    """
    Stand-in returned to callers during the deferral window.

    Usage:
        facade = entry.facade
        facade.fields("name", "email").send_to("me@example.com")
        # entry.log.names() == ["fields", "send_to"]
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: DeferredEntry) -> None:
        object.__setattr__(self, "_entry", entry)

    def __getattr__(self, name: str) -> Callable[..., "ChainableFacade"]:
        # Protocol lookups (copy, pickle, hasattr on dunders) are never recorded.
        if name.startswith("_"):
            raise AttributeError(name)

        entry = self._entry

        def recorder(*args: Any, **kwargs: Any) -> "ChainableFacade":
            entry.record(name, args, kwargs)
            return self

        recorder.__name__ = name
        return recorder

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"deferred builder {self._entry.trace_id} is call-only")

    def __repr__(self) -> str:
        return f"<deferred {self._entry.trace_id} calls={len(self._entry.log)}>"
