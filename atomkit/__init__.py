"""
atomkit

Fluent builder toolkit whose calls are recorded before a host lifecycle
checkpoint and replayed against the real builders once it fires.
"""

__version__ = "0.1.0"

from .atom import Atom
from .config import AtomConfig
from .host import Host

__all__ = ["Atom", "AtomConfig", "Host", "__version__"]
