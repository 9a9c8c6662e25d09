"""
Logging for atomkit.

Records go to stderr, as JSON by default, so `--json` output on stdout stays
parseable. Every record carries a trace_id; replay code uses "category:key" so
the lines of one deferred chain can be grepped together.

ATOMKIT_LOG_LEVEL picks the level (INFO when unset or unknown) and
ATOMKIT_LOG_FORMAT picks "json" or "text".
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

NO_TRACE = "N/A"

_JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s"
_TEXT_FIELDS = "%(asctime)s %(levelname)-7s %(name)s [%(trace_id)s] %(message)s"


def setup_logging() -> None:
    """Replace the root logger's handlers with one stderr handler configured from env."""
    level = logging.getLevelName(os.getenv("ATOMKIT_LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())
    if os.getenv("ATOMKIT_LOG_FORMAT", "json").lower() == "json":
        handler.setFormatter(
            JsonFormatter(
                _JSON_FIELDS,
                rename_fields={"asctime": "timestamp", "name": "logger", "levelname": "level"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FIELDS, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger for name whose records carry trace_id (e.g. "form:contact")."""
    return logging.LoggerAdapter(logging.getLogger(name), {"trace_id": trace_id or NO_TRACE})


class TraceIDFilter(logging.Filter):
    """Give records logged outside get_logger() a placeholder trace_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = NO_TRACE  # type: ignore[attr-defined]
        return True
