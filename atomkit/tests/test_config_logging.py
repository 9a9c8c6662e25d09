"""
Tests for configuration and logging setup.
"""

import logging

from pythonjsonlogger.json import JsonFormatter

from atomkit.config import AtomConfig
from atomkit.logging_config import TraceIDFilter, get_logger, setup_logging


def test_config_defaults(monkeypatch):
    """Defaults apply when the environment is empty."""
    for key in ("ATOMKIT_CHECKPOINT_HOOK", "ATOMKIT_REPLAY_PRIORITY", "ATOMKIT_REST_NAMESPACE"):
        monkeypatch.delenv(key, raising=False)

    config = AtomConfig.from_env()

    assert config == AtomConfig(checkpoint_hook="init", replay_priority=0, rest_namespace="atom/v1")


def test_config_from_env(monkeypatch):
    """Environment overrides defaults; bad integers fall back."""
    monkeypatch.setenv("ATOMKIT_CHECKPOINT_HOOK", "plugins_loaded")
    monkeypatch.setenv("ATOMKIT_REPLAY_PRIORITY", "not-a-number")
    monkeypatch.setenv("ATOMKIT_REST_NAMESPACE", "mine/v2")

    config = AtomConfig.from_env({"replay_priority": -5})

    assert config.checkpoint_hook == "plugins_loaded"
    assert config.replay_priority == -5
    assert config.rest_namespace == "mine/v2"
    monkeypatch.delenv("ATOMKIT_REPLAY_PRIORITY")
    assert AtomConfig.from_env().replay_priority == 0


def test_setup_logging_json(monkeypatch):
    """json format installs a JsonFormatter with the trace filter."""
    monkeypatch.setenv("ATOMKIT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ATOMKIT_LOG_FORMAT", "json")
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging()
        handler = root.handlers[0]
        assert root.level == logging.DEBUG
        assert isinstance(handler.formatter, JsonFormatter)
        assert any(isinstance(f, TraceIDFilter) for f in handler.filters)
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_get_logger_carries_trace_id():
    """Adapters carry trace_id, defaulting to N/A."""
    assert get_logger("x", trace_id="form:contact").extra == {"trace_id": "form:contact"}
    assert get_logger("x").extra == {"trace_id": "N/A"}


def test_trace_id_filter_fills_missing_field():
    """Records without trace_id get N/A."""
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert TraceIDFilter().filter(record)
    assert record.trace_id == "N/A"


def test_setup_logging_text_and_unknown_level(monkeypatch):
    """text format uses a plain Formatter; an unknown level falls back to INFO."""
    monkeypatch.setenv("ATOMKIT_LOG_LEVEL", "chatty")
    monkeypatch.setenv("ATOMKIT_LOG_FORMAT", "text")
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging()
        handler = root.handlers[0]
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert not isinstance(handler.formatter, JsonFormatter)
        assert "[%(trace_id)s]" in handler.formatter._fmt
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
