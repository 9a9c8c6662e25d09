"""
Runtime configuration for the deferral core.

Environment Variables:
    ATOMKIT_CHECKPOINT_HOOK: Host hook whose first firing replays deferred calls - default: init
    ATOMKIT_REPLAY_PRIORITY: Hook priority of the replay pass - default: 0
    ATOMKIT_REST_NAMESPACE: Namespace for REST routes - default: atom/v1
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_int(key: str, default: int) -> int:
    val = os.getenv(key)
    if not val:
        return default
    try:
        return int(val)
    except ValueError:
        return default


@dataclass(frozen=True)
class AtomConfig:
    """
    Immutable configuration.

    Fields:
        checkpoint_hook: Lifecycle hook that fires the checkpoint
        replay_priority: Priority the replay pass subscribes with (lower runs first)
        rest_namespace: Namespace REST builders register their routes under
    """
    checkpoint_hook: str = "init"
    replay_priority: int = 0
    rest_namespace: str = "atom/v1"

    @classmethod
    def from_env(cls, overrides: Optional[dict] = None) -> "AtomConfig":
        values = {
            "checkpoint_hook": os.getenv("ATOMKIT_CHECKPOINT_HOOK", "init"),
            "replay_priority": _env_int("ATOMKIT_REPLAY_PRIORITY", 0),
            "rest_namespace": os.getenv("ATOMKIT_REST_NAMESPACE", "atom/v1"),
        }
        values.update(overrides or {})
        return cls(**values)
