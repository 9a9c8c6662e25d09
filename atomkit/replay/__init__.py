"""
Replay system for deferred builder calls.

Replay applies a consumed call log to a real builder, in order.
"""

from .runner import BuilderFactory, ReplayResult, replay_entry

__all__ = [
    "BuilderFactory",
    "ReplayResult",
    "replay_entry",
]
