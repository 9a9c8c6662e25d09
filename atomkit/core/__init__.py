"""
Core deferral primitives.

This module provides:
- CallRecord / CallLog: Recorded fluent calls in invocation order
- Dispatcher: Name -> operation lookup used at replay time
- Canonical: Stable JSON rendering of recorded calls
- Errors: Exception types shared by the deferral core
"""

from .calls import CallRecord, CallLog
from .dispatch import Dispatcher
from .canonical import describe, describe_call, describe_calls, canonical_json_str
from .errors import (
    UnknownOperationError,
    ReplayError,
    EntryConsumedError,
    LogFrozenError,
    RegistrationError,
)

__all__ = [
    "CallRecord",
    "CallLog",
    "Dispatcher",
    "describe",
    "describe_call",
    "describe_calls",
    "canonical_json_str",
    "UnknownOperationError",
    "ReplayError",
    "EntryConsumedError",
    "LogFrozenError",
    "RegistrationError",
]
