"""
Deferral registry: one checkpoint flag and one pending queue per category.

The registry is the only place a checkpoint fires. Firing is monotonic and
idempotent, replays entries in registration order, and contains every
per-entry failure so the host's startup sequence never sees an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from ..core.calls import CallRecord
from ..core.dispatch import Dispatcher
from ..core.errors import RegistrationError
from ..logging_config import get_logger
from ..replay.runner import BuilderFactory, ReplayResult, replay_entry
from .entry import ChainableFacade, DeferredEntry

# Diagnostics signature: (level, message, **context) -> None
Diagnostics = Callable[..., None]

logger = get_logger(__name__)


@dataclass(frozen=True)
class EntryFailure:
    """
    A deferred entry whose replay did not complete.

    Fields:
        key: Construction key of the failed entry
        error: The exception raised by construction or by an operation
    """
    key: str
    error: BaseException


@dataclass(frozen=True)
class FireReport:
    """
    Outcome of one checkpoint pass for a category.

    Fields:
        category: Builder category the pass ran for
        results: Successfully replayed entries, in registration order
        failures: Entries that failed, in registration order
        already_fired: True if the checkpoint had fired before (nothing ran)
    """
    category: str
    results: List[ReplayResult] = field(default_factory=list)
    failures: List[EntryFailure] = field(default_factory=list)
    already_fired: bool = False

    @property
    def replayed(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def skipped_calls(self) -> List[Tuple[str, CallRecord]]:
        return [(r.key, rec) for r in self.results for rec in r.skipped]


class DeferralRegistry:
    """
    Checkpoint state and pending entries for one builder category.

    Usage:
        registry = DeferralRegistry("form", lambda key: FormBuilder(key, host))
        facade = registry.defer("contact")
        facade.fields("name").send_to("me@example.com")
        report = registry.fire()
    """

    def __init__(
        self,
        category: str,
        factory: BuilderFactory,
        dispatcher: Optional[Dispatcher] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        """
        Initialize registry.

        Args:
            category: Category name (e.g., "form", "post_type")
            factory: Builds the real builder from a construction key
            dispatcher: Name -> operation lookup used during replay
            diagnostics: Host error channel receiving replay warnings and failures
        """
        self.category = category
        self.factory = factory
        self.dispatcher = dispatcher or Dispatcher()
        self.diagnostics = diagnostics
        self._fired = False
        self._pending: List[DeferredEntry] = []

    @property
    def is_fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> Tuple[DeferredEntry, ...]:
        return tuple(self._pending)

    def register(self, entry: DeferredEntry) -> None:
        """
        Queue entry for replay.

        Raises:
            RegistrationError: If the checkpoint has already fired
        """
        if self._fired:
            raise RegistrationError(
                f"{self.category} checkpoint already fired; build {entry.key!r} directly"
            )
        self._pending.append(entry)

    def defer(self, key: str) -> ChainableFacade:
        """Create, queue and return the facade of a new entry for key."""
        entry = DeferredEntry(self.category, key)
        self.register(entry)
        return entry.facade

    def build(self, key: str) -> Any:
        """Immediate path: construct the real builder without deferral."""
        return self.factory(key)

    def fire(self) -> FireReport:
        """
        Fire the checkpoint: replay every pending entry, once.

        Entries replay in registration order. A failing entry is reported and
        the pass moves on to the next one.

        Returns:
            FireReport (already_fired=True and empty on repeated calls)
        """
        if self._fired:
            return FireReport(category=self.category, already_fired=True)
        self._fired = True

        pending, self._pending = self._pending, []
        report = FireReport(category=self.category)
        logger.info("Firing %s checkpoint (%d pending)", self.category, len(pending))

        for entry in pending:
            try:
                result = replay_entry(entry, self.factory, self.dispatcher)
            except Exception as e:
                get_logger(__name__, trace_id=entry.trace_id).exception(
                    "Replay failed for %s", entry.trace_id
                )
                report.failures.append(EntryFailure(key=entry.key, error=e))
                self._report("error", f"replay failed: {e}", entry=entry.trace_id)
                continue

            report.results.append(result)
            for record in result.skipped:
                self._report(
                    "warning",
                    f"skipped unknown operation {record.name!r}",
                    entry=entry.trace_id,
                )

        return report

    def _report(self, level: str, message: str, **context: Any) -> None:
        if self.diagnostics is None:
            return
        try:
            self.diagnostics(level, message, category=self.category, **context)
        except Exception:
            # Diagnostics failures stay inside the pass.
            logger.exception("Diagnostics channel failed for %s: %s", self.category, message)
