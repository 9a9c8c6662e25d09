"""
SettingsBuilder: admin settings page backed by host options.
"""

from typing import Any, Dict, Optional

from ..host import Host
from .base import sanitize_key


class SettingsBuilder:
    def __init__(self, slug: str, host: Host) -> None:
        self.host = host
        self.slug = sanitize_key(slug)
        self._fields: Dict[str, str] = {}
        self._field_options: Dict[str, Dict[str, Any]] = {}
        self._role: Optional[str] = None
        self._menu: Dict[str, Any] = {}
        self._registered = False

    def field(
        self, name: str, field_type: str = "text", options: Optional[Dict[str, Any]] = None
    ) -> "SettingsBuilder":
        self._fields[name] = field_type
        if options:
            self._field_options[name] = dict(options)
        self._register()
        return self

    def only_for(self, role: str) -> "SettingsBuilder":
        self._role = role
        self._register()
        return self

    def menu(self, options: Dict[str, Any]) -> "SettingsBuilder":
        """
        Set menu options: parent, title, menu, position, icon, capability.

        A falsy parent makes a top-level page.
        """
        self._menu = dict(options)
        self._register()
        return self

    def menu_options(self) -> Dict[str, Any]:
        opts: Dict[str, Any] = {
            "parent": "options-general.php",
            "title": self.slug.capitalize(),
            "menu": self.slug.capitalize(),
            "position": None,
            "icon": None,
            "capability": self._role or "manage_options",
        }
        opts.update(self._menu)
        return opts

    def values(self) -> Dict[str, Any]:
        return {name: self.host.get_option(name, "") for name in self._fields}

    def _register(self) -> None:
        if self._registered:
            return
        self._registered = True
        self.host.hooks.add_action("admin_menu", lambda *_: self._add_menu_page())
        self.host.hooks.add_action("admin_init", lambda *_: self._register_settings())

    def _add_menu_page(self) -> None:
        opts = self.menu_options()
        self.host.add_menu_page(
            slug=self.slug,
            parent=opts["parent"] or None,
            title=opts["title"],
            menu=opts["menu"],
            capability=opts["capability"],
            position=opts["position"],
            icon=None if opts["parent"] else opts["icon"],
        )

    def _register_settings(self) -> None:
        for name, field_type in self._fields.items():
            self.host.register_setting(self.slug, name, field_type)
