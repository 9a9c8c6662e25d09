"""
Exception types for the deferral core.
"""


class UnknownOperationError(Exception):
    """Raised when a recorded call names an operation the real builder does not expose."""
    pass


class ReplayError(Exception):
    """Raised when a replayed operation fails inside the real builder."""

    def __init__(self, key: str, record, cause: BaseException) -> None:
        super().__init__(f"replay of {record.name!r} for {key!r} failed: {cause}")
        self.key = key
        self.record = record
        self.cause = cause


class EntryConsumedError(Exception):
    """Raised when a deferred entry (or its facade) is used after replay."""
    pass


class LogFrozenError(Exception):
    """Raised when appending to a call log that replay has already consumed."""
    pass


class RegistrationError(Exception):
    """Raised when an entry is registered into a registry whose checkpoint already fired."""
    pass
