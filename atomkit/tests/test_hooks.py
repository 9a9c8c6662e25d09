"""
Tests for the host hook bus.
"""

from atomkit.host.hooks import HookBus


def test_actions_run_by_priority_then_registration():
    """Lower priority first; equal priority in registration order."""
    hooks = HookBus()
    seen = []
    hooks.add_action("init", lambda: seen.append("late"), priority=20)
    hooks.add_action("init", lambda: seen.append("a"))
    hooks.add_action("init", lambda: seen.append("b"))
    hooks.add_action("init", lambda: seen.append("early"), priority=0)

    hooks.do_action("init")

    assert seen == ["early", "a", "b", "late"]


def test_did_action_counts_and_doing_action():
    """did_action counts firings; doing_action is true only while running."""
    hooks = HookBus()
    during = []
    hooks.add_action("init", lambda: during.append(hooks.doing_action("init")))

    assert hooks.did_action("init") == 0
    hooks.do_action("init")
    hooks.do_action("init")

    assert hooks.did_action("init") == 2
    assert during == [True, True]
    assert not hooks.doing_action("init")


def test_callbacks_added_while_running_run_in_same_pass():
    """A callback registered by a running callback still runs."""
    hooks = HookBus()
    seen = []

    def first():
        seen.append("first")
        hooks.add_action("init", lambda: seen.append("added"))

    hooks.add_action("init", first, priority=0)
    hooks.do_action("init")

    assert seen == ["first", "added"]


def test_accepted_args_truncates_arguments():
    """Callbacks receive only as many arguments as they accept."""
    hooks = HookBus()
    seen = []
    hooks.add_action("save", lambda: seen.append("none"), accepted_args=0)
    hooks.add_action("save", lambda post_id, update: seen.append((post_id, update)), accepted_args=2)

    hooks.do_action("save", 7, True)

    assert seen == ["none", (7, True)]


def test_filters_thread_value():
    """Filters transform the value in priority order."""
    hooks = HookBus()
    hooks.add_filter("title", lambda v: v + "!", priority=20)
    hooks.add_filter("title", lambda v: v.upper())

    assert hooks.apply_filters("title", "hi") == "HI!"
    assert hooks.apply_filters("untouched", 3) == 3
