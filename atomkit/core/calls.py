"""
Call records for deferred builder invocations.

A CallRecord is the recorded form of one fluent call; a CallLog keeps them
in invocation order until replay consumes it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from .errors import LogFrozenError


@dataclass(frozen=True)
class CallRecord:
    """
    Immutable record of one intercepted call.

    Records compare by value but are unhashable: kwargs is a plain dict so
    arguments reach the operation exactly as passed.

    Fields:
        name: Operation name exactly as called (e.g., "fields", "send_to")
        args: Positional arguments, stored as passed
        kwargs: Keyword arguments, stored as passed
    """
    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{self.name}({', '.join(parts)})"


class CallLog:
    """
    Append-only, ordered collection of CallRecord.

    Usage:
        log = CallLog()
        log.append(CallRecord("alpha", (1,)))
        log.freeze()
    """

    def __init__(self) -> None:
        self._records: List[CallRecord] = []
        self._frozen = False

    def append(self, record: CallRecord) -> None:
        """
        Append a record.

        Raises:
            LogFrozenError: If the log was already handed to replay
        """
        if self._frozen:
            raise LogFrozenError(f"call log is frozen, cannot record {record.name!r}")
        self._records.append(record)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return [r.name for r in self._records]

    def __iter__(self) -> Iterator[CallRecord]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> CallRecord:
        return self._records[index]
