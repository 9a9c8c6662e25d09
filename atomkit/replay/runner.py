"""
Replay runner: build the real builder and apply a deferred call log.

Replay constructs the builder from the construction key only, then applies
each recorded call in log order. Unknown operations are skipped; an operation
that fails stops its own entry and surfaces as ReplayError.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from ..core.calls import CallRecord
from ..core.dispatch import Dispatcher
from ..core.errors import ReplayError, UnknownOperationError
from ..logging_config import get_logger

if TYPE_CHECKING:
    from ..deferral.entry import DeferredEntry

# Factory signature: (construction_key) -> real builder
BuilderFactory = Callable[[str], Any]


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replaying one entry.

    Fields:
        key: Construction key the builder was built from
        builder: The real builder the calls were applied to
        applied: Number of calls applied
        skipped: Calls whose operation the builder does not expose
    """
    key: str
    builder: Any
    applied: int
    skipped: List[CallRecord] = field(default_factory=list)


def replay_entry(
    entry: "DeferredEntry",
    factory: BuilderFactory,
    dispatcher: Optional[Dispatcher] = None,
) -> ReplayResult:
    """
    Consume entry and replay its calls against a freshly built builder.

    Args:
        entry: Deferred entry to consume (must not have been replayed)
        factory: Builds the real builder from the construction key
        dispatcher: Name -> operation lookup (default: attribute lookup)

    Returns:
        ReplayResult with the builder and applied/skipped counts

    Raises:
        EntryConsumedError: If entry was already replayed
        ReplayError: If a replayed operation raises
    """
    dispatcher = dispatcher or Dispatcher()
    logger = get_logger(__name__, trace_id=entry.trace_id)

    log = entry.consume()
    builder = factory(entry.key)
    applied = 0
    skipped: List[CallRecord] = []

    for record in log:
        try:
            op = dispatcher.resolve(builder, record.name)
        except UnknownOperationError as e:
            logger.warning("Skipping unknown operation: %s", e)
            skipped.append(record)
            continue

        try:
            op(*record.args, **record.kwargs)
        except Exception as e:
            raise ReplayError(entry.key, record, e) from e
        applied += 1

    logger.debug("Replayed %d calls (%d skipped)", applied, len(skipped))
    return ReplayResult(key=entry.key, builder=builder, applied=applied, skipped=skipped)
