"""
Tests for call recording.

Critical: The facade records every call verbatim, in order, and executes nothing.
"""

import pytest

from atomkit.core.calls import CallLog, CallRecord
from atomkit.core.errors import EntryConsumedError, LogFrozenError
from atomkit.deferral.entry import ChainableFacade, DeferredEntry


def test_facade_records_calls_in_order():
    """Chained calls append records in invocation order."""
    entry = DeferredEntry("form", "k1")

    entry.facade.alpha(1).beta("x").alpha(2)

    assert [(r.name, r.args) for r in entry.log] == [
        ("alpha", (1,)),
        ("beta", ("x",)),
        ("alpha", (2,)),
    ]


def test_facade_returns_itself():
    """Every recorded call returns the same facade object."""
    entry = DeferredEntry("form", "k1")
    facade = entry.facade

    assert facade.anything() is facade
    assert facade.fields("a").send_to("b") is facade


def test_arguments_captured_by_reference():
    """Arguments are stored exactly as passed, with no copy or coercion."""
    entry = DeferredEntry("settings", "opts")
    menu = {"parent": None}
    callback = lambda: None  # noqa: E731

    entry.facade.menu(menu, on_load=callback)

    record = entry.log[0]
    assert record.args[0] is menu
    assert record.kwargs["on_load"] is callback


def test_unknown_names_recorded_like_known_ones():
    """The facade has no notion of valid operations."""
    entry = DeferredEntry("form", "k1")

    entry.facade.doesNotExistAnywhere(1, 2, 3)

    assert entry.log.names() == ["doesNotExistAnywhere"]


def test_attribute_access_without_call_records_nothing():
    """Only calls are recorded; looking up a name is not a call."""
    entry = DeferredEntry("form", "k1")

    recorder = entry.facade.fields

    assert callable(recorder)
    assert len(entry.log) == 0


def test_underscore_names_are_not_intercepted():
    """Private and protocol names raise AttributeError instead of recording."""
    entry = DeferredEntry("form", "k1")

    with pytest.raises(AttributeError):
        entry.facade._private()
    assert not hasattr(entry.facade, "__deepcopy_hook__")
    assert not hasattr(entry.facade, "_entry_state")

    assert len(entry.log) == 0


def test_facade_rejects_attribute_assignment():
    """Facades are call-only."""
    entry = DeferredEntry("form", "k1")

    with pytest.raises(AttributeError):
        entry.facade.title = "x"


def test_consume_is_single_use():
    """An entry can be consumed only once."""
    entry = DeferredEntry("form", "k1")
    entry.facade.alpha(1)

    log = entry.consume()

    assert log.frozen
    assert entry.consumed
    with pytest.raises(EntryConsumedError):
        entry.consume()


def test_facade_after_consume_raises():
    """Calls through a stale facade are refused instead of silently lost."""
    entry = DeferredEntry("form", "k1")
    facade = entry.facade
    entry.consume()

    with pytest.raises(EntryConsumedError):
        facade.alpha(1)


def test_frozen_log_rejects_append():
    """A frozen log never changes."""
    log = CallLog()
    log.append(CallRecord("alpha", (1,)))
    log.freeze()

    with pytest.raises(LogFrozenError):
        log.append(CallRecord("beta"))
    assert len(log) == 1


def test_facade_repr_names_entry():
    """repr identifies the deferred entry."""
    entry = DeferredEntry("post_type", "book")
    entry.facade.public()

    assert isinstance(entry.facade, ChainableFacade)
    assert repr(entry.facade) == "<deferred post_type:book calls=1>"
    assert str(entry.log[0]) == "public()"


def test_call_record_compares_by_value_and_is_unhashable():
    """Records with equal contents are equal; none can be hashed."""
    a = CallRecord("field", ("email",), {"required": True})
    b = CallRecord("field", ("email",), {"required": True})

    assert a == b
    with pytest.raises(TypeError):
        hash(a)
