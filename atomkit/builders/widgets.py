"""
Immediate-only builders: dashboard widgets, sidebar widgets and help tabs.

These register on their own host hooks and are never deferred.
"""

from typing import Any, Callable, Optional

from ..host import Host
from .base import sanitize_key


class DashboardWidgetBuilder:
    def __init__(self, widget_id: str, host: Host) -> None:
        self.host = host
        self.widget_id = sanitize_key(widget_id)
        self._title = "Dashboard Widget"
        self._content: Optional[Callable[..., Any]] = None
        self._context = "normal"
        self._priority = "core"

    def title(self, title: str) -> "DashboardWidgetBuilder":
        self._title = title
        return self

    def context(self, context: str) -> "DashboardWidgetBuilder":
        self._context = context
        return self

    def priority(self, priority: str) -> "DashboardWidgetBuilder":
        self._priority = priority
        return self

    def content(self, render: Callable[..., Any]) -> "DashboardWidgetBuilder":
        self._content = render
        self.host.hooks.add_action(
            "wp_dashboard_setup",
            lambda *_: self.host.add_dashboard_widget(
                self.widget_id,
                title=self._title,
                render=self._content,
                context=self._context,
                priority=self._priority,
            ),
        )
        return self


class WidgetBuilder:
    def __init__(self, widget_id: str, host: Host) -> None:
        self.host = host
        self.widget_id = sanitize_key(widget_id)
        self._title = "Widget"
        self._content: Optional[Callable[..., Any]] = None

    def title(self, title: str) -> "WidgetBuilder":
        self._title = title
        return self

    def content(self, render: Callable[..., Any]) -> "WidgetBuilder":
        self._content = render
        self.host.hooks.add_action(
            "widgets_init",
            lambda *_: self.host.register_widget(
                self.widget_id, title=self._title, render=self._content
            ),
        )
        return self


class HelpTabBuilder:
    def __init__(self, screen_id: str, host: Host) -> None:
        self.host = host
        self.screen_id = screen_id
        self._title = "Help"
        self._content = ""

    def title(self, title: str) -> "HelpTabBuilder":
        self._title = title
        return self

    def content(self, content: str) -> "HelpTabBuilder":
        self._content = content
        self.host.hooks.add_action("current_screen", self._add_tab)
        return self

    def _add_tab(self, screen_id: Optional[str] = None) -> None:
        if screen_id == self.screen_id:
            self.host.add_help_tab(
                self.screen_id,
                id=f"{self.screen_id}_help",
                title=self._title,
                content=self._content,
            )
