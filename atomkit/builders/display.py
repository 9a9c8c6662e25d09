"""
Immediate-only display builders: tables, modals and tabbed admin pages.

Rendering echoes a structured fragment to the host; no markup is produced.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..host import Host
from .base import sanitize_key

TabRenderer = Callable[["TabbedSettingsBuilder"], Any]


class TableBuilder:
    """Frontend table: column headings plus rows of cells."""

    scope = "front"

    def __init__(self, table_id: str, host: Host) -> None:
        self.host = host
        self.table_id = sanitize_key(table_id)
        self._columns: List[str] = []
        self._rows: List[List[Any]] = []

    def columns(self, columns: Sequence[str]) -> "TableBuilder":
        self._columns = list(columns)
        return self

    def rows(self, rows: Sequence[Sequence[Any]]) -> "TableBuilder":
        self._rows = [list(row) for row in rows]
        return self

    def render(self) -> "TableBuilder":
        self.host.echo(self.describe())
        return self

    def describe(self) -> Dict[str, Any]:
        return {
            "table": self.table_id,
            "scope": self.scope,
            "columns": list(self._columns),
            "rows": [list(row) for row in self._rows],
        }


class AdminTableBuilder(TableBuilder):
    """Admin list table; adds row actions to the frontend table."""

    scope = "admin"

    def __init__(self, table_id: str, host: Host) -> None:
        super().__init__(table_id, host)
        self._actions: Dict[str, Any] = {}

    def actions(self, actions: Dict[str, Any]) -> "AdminTableBuilder":
        self._actions = dict(actions)
        return self

    def describe(self) -> Dict[str, Any]:
        fragment = super().describe()
        fragment["actions"] = list(self._actions)
        return fragment


class ModalBuilder:
    """Frontend modal, echoed on wp_footer once show_on_load() is called."""

    def __init__(self, modal_id: str, host: Host) -> None:
        self.host = host
        self.modal_id = sanitize_key(modal_id)
        self._title = "Modal"
        self._content = ""
        self._visible = False
        self._registered = False

    def title(self, title: str) -> "ModalBuilder":
        self._title = title
        return self

    def content(self, content: str) -> "ModalBuilder":
        self._content = content
        return self

    def show_on_load(self, value: bool = True) -> "ModalBuilder":
        self._visible = value
        if not self._registered:
            self._registered = True
            self.host.hooks.add_action("wp_footer", lambda *_: self.host.echo(self.describe()))
        return self

    def describe(self) -> Dict[str, Any]:
        return {
            "modal": self.modal_id,
            "scope": "front",
            "title": self._title,
            "content": self._content,
            "visible": self._visible,
        }


class AdminModalBuilder:
    """Admin modal with a confirm callback."""

    def __init__(self, modal_id: str, host: Host) -> None:
        self.host = host
        self.modal_id = sanitize_key(modal_id)
        self._title = "Modal"
        self._content = ""
        self._on_confirm: Optional[Callable[[], Any]] = None

    def title(self, title: str) -> "AdminModalBuilder":
        self._title = title
        return self

    def content(self, content: str) -> "AdminModalBuilder":
        self._content = content
        return self

    def on_confirm(self, callback: Callable[[], Any]) -> "AdminModalBuilder":
        self._on_confirm = callback
        return self

    def render(self) -> "AdminModalBuilder":
        self.host.echo(self.describe())
        return self

    def confirm(self) -> Any:
        """Run the confirm callback, if any, and return its result."""
        if self._on_confirm is None:
            return None
        return self._on_confirm()

    def describe(self) -> Dict[str, Any]:
        return {
            "modal": self.modal_id,
            "scope": "admin",
            "title": self._title,
            "content": self._content,
            "visible": False,
            "confirmable": self._on_confirm is not None,
        }


class TabbedSettingsBuilder:
    """
    Options page split into tabs.

    Each tab is a label and a renderer called with the builder, so renderers
    can emit fields through field().
    """

    def __init__(self, slug: str, host: Host) -> None:
        self.host = host
        self.slug = sanitize_key(slug)
        self._tabs: List[Tuple[str, TabRenderer]] = []
        self._registered = False

    def tab(self, label: str, render: TabRenderer) -> "TabbedSettingsBuilder":
        self._tabs.append((label, render))
        if not self._registered:
            self._registered = True
            self.host.hooks.add_action("admin_menu", lambda *_: self._add_options_page())
        return self

    def _add_options_page(self) -> None:
        title = self.slug.capitalize()
        self.host.add_menu_page(
            slug=self.slug,
            parent="options-general.php",
            title=title,
            menu=title,
            capability="manage_options",
            render=self.render,
        )

    def render(self, active: Optional[str] = None) -> "TabbedSettingsBuilder":
        """Echo the tab bar, then run the active tab (the first one by default)."""
        labels = [label for label, _ in self._tabs]
        if active is None and labels:
            active = labels[0]
        self.host.echo({"tabs": labels, "active": active, "page": self.slug})
        for label, render in self._tabs:
            if label == active:
                render(self)
        return self

    def field(self, name: str, field_type: str = "text") -> "TabbedSettingsBuilder":
        self.host.echo({"field": name, "type": field_type})
        return self
