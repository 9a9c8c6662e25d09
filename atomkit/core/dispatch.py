"""
Dispatcher: maps recorded operation names to real builder operations.

Resolution order for a name:
1. Explicitly registered handler
2. Public attribute with the exact name

Names are never rewritten: a chain is spelled the same way whether it reaches
the real builder directly or through replay.
"""

from typing import Any, Callable, Dict

from .calls import CallRecord
from .errors import UnknownOperationError

# Handler signature: (builder, *args, **kwargs) -> ignored
Handler = Callable[..., Any]


class Dispatcher:
    """
    Lookup table from operation names to builder operations.

    Usage:
        dispatcher = Dispatcher()
        dispatcher.register("mail_to", lambda b, *a: b.send_to(*a))
        dispatcher.apply(builder, CallRecord("mail_to", ("x",)))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """
        Register an explicit operation handler.

        Args:
            name: Recorded operation name
            handler: Function (builder, *args, **kwargs)
        """
        self._handlers[name] = handler

    def resolve(self, builder: Any, name: str) -> Callable[..., Any]:
        """
        Resolve a recorded name to a callable bound to builder.

        Raises:
            UnknownOperationError: If builder exposes no matching operation
        """
        if name in self._handlers:
            handler = self._handlers[name]
            return lambda *args, **kwargs: handler(builder, *args, **kwargs)

        if name.startswith("_"):
            raise UnknownOperationError(f"Private operation not dispatchable: {name}")

        op = getattr(builder, name, None)
        if op is not None and callable(op):
            return op

        raise UnknownOperationError(
            f"{type(builder).__name__} has no operation: {name}"
        )

    def apply(self, builder: Any, record: CallRecord) -> None:
        """
        Invoke the operation named by record on builder.

        The builder's own return value is discarded.

        Raises:
            UnknownOperationError: If the operation cannot be resolved
        """
        op = self.resolve(builder, record.name)
        op(*record.args, **record.kwargs)
