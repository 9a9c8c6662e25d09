"""
Canonical rendering of recorded calls.

Recorded arguments are opaque (callables, dicts, nested lists). These helpers
turn them into a stable JSON form for display and comparison; they never
touch the records themselves.
"""

import json
from typing import Any, Dict, Iterable

from .calls import CallRecord


def describe(obj: Any) -> Any:
    """
    Convert an arbitrary argument to a JSON-safe canonical form.

    Rules:
    - dict keys stringified and sorted
    - tuples and lists converted to lists
    - callables rendered as "<callable qualname>"
    - other non-JSON scalars rendered with repr()
    """
    if isinstance(obj, dict):
        return {str(k): describe(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [describe(x) for x in obj]
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if callable(obj):
        name = getattr(obj, "__qualname__", None) or type(obj).__name__
        return f"<callable {name}>"
    return repr(obj)


def describe_call(record: CallRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "args": describe(record.args),
        "kwargs": describe(record.kwargs),
    }


def describe_calls(records: Iterable[CallRecord]) -> list:
    return [describe_call(r) for r in records]


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string (for display or comparison).

    Input goes through describe() first, so recorded callables are safe.
    """
    return json.dumps(describe(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
