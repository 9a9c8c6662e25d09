"""
Host platform the builders register into.

This module provides:
- HookBus: Actions/filters; the source of lifecycle checkpoints
- Host: In-memory platform state (shortcodes, options, endpoints, ...)
"""

from .hooks import HookBus
from .platform import Host, Diagnostic, Mail, RestResponse

__all__ = ["HookBus", "Host", "Diagnostic", "Mail", "RestResponse"]
