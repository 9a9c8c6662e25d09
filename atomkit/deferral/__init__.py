"""
Deferral: recording calls before the checkpoint and replaying them after.

This module provides:
- DeferredEntry: Construction key + ordered call log
- ChainableFacade: Call-recording stand-in returned to callers
- DeferralRegistry: Per-category checkpoint flag and pending entries
- FireReport: Outcome of one checkpoint pass
"""

from .entry import DeferredEntry, ChainableFacade
from .registry import DeferralRegistry, FireReport, EntryFailure

__all__ = [
    "DeferredEntry",
    "ChainableFacade",
    "DeferralRegistry",
    "FireReport",
    "EntryFailure",
]
