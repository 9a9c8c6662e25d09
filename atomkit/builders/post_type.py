"""
PostTypeBuilder: custom post types with admin columns.

The first configuring call wires the host callbacks; each callback reads the
builder's state when it runs, so later calls still take effect.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from ..host import Host
from .base import sanitize_key

ColumnRenderer = Callable[[Any], Any]


class PostTypeBuilder:
    def __init__(self, slug: str, host: Host) -> None:
        self.host = host
        self.slug = sanitize_key(slug)
        self._args: Dict[str, Any] = {}
        self._fields: Dict[str, str] = {}
        self._label: Optional[str] = None
        self._menu_position: Optional[int] = None
        self._sortable: List[str] = []
        self._not_sortable: List[str] = []
        self._columns: Dict[str, Dict[str, Any]] = {}
        self._registered = False

    def fields(self, *fields: str) -> "PostTypeBuilder":
        for name in fields:
            self.field(name)
        return self

    def field(self, name: str, field_type: str = "text") -> "PostTypeBuilder":
        self._fields[name] = field_type
        self._register()
        return self

    def public(self, value: bool = True) -> "PostTypeBuilder":
        self._args["public"] = value
        self._register()
        return self

    def icon(self, icon: str) -> "PostTypeBuilder":
        self._args["menu_icon"] = icon
        self._register()
        return self

    def only_for(self, role: str) -> "PostTypeBuilder":
        self._args["capability_type"] = role
        self._register()
        return self

    def label(self, label: str) -> "PostTypeBuilder":
        self._label = label
        self._register()
        return self

    def menu_position(self, position: int) -> "PostTypeBuilder":
        self._menu_position = position
        self._register()
        return self

    def sortable(self, columns: Union[List[str], bool]) -> "PostTypeBuilder":
        self._sortable = list(columns) if isinstance(columns, (list, tuple)) else []
        self._register()
        return self

    def not_sortable(self, columns: Union[List[str], str]) -> "PostTypeBuilder":
        self._not_sortable = list(columns) if isinstance(columns, (list, tuple)) else [columns]
        self._register()
        return self

    def column(self, key: str, label: str, render: ColumnRenderer) -> "PostTypeBuilder":
        self._columns[key] = {"label": label, "render": render}
        self._register()
        return self

    def post_type_args(self) -> Dict[str, Any]:
        args: Dict[str, Any] = {
            "label": self._label or self.slug.capitalize(),
            "supports": list(self._fields),
        }
        args.update(self._args)
        if self._menu_position:
            args["menu_position"] = self._menu_position
        return args

    def render_column(self, column: str, post: Any) -> Any:
        spec = self._columns.get(column)
        return spec["render"](post) if spec else None

    def _register(self) -> None:
        hooks = self.host.hooks
        if hooks.did_action("init") and not hooks.doing_action("init"):
            # Built after init: the hook will not run again, register now.
            self.host.register_post_type(self.slug, self.post_type_args())
        if self._registered:
            return
        self._registered = True
        hooks.add_action(
            "init", lambda *_: self.host.register_post_type(self.slug, self.post_type_args())
        )
        hooks.add_filter(f"manage_{self.slug}_posts_columns", self._add_columns)
        hooks.add_filter(f"manage_edit-{self.slug}_sortable_columns", self._add_sortable)
        hooks.add_filter(
            f"manage_edit-{self.slug}_sortable_columns", self._remove_not_sortable, priority=20
        )

    def _add_columns(self, columns: Dict[str, str]) -> Dict[str, str]:
        columns = dict(columns)
        for key, spec in self._columns.items():
            columns[key] = spec["label"]
        return columns

    def _add_sortable(self, columns: Dict[str, str]) -> Dict[str, str]:
        columns = dict(columns)
        for col in self._sortable:
            columns[col] = col
        return columns

    def _remove_not_sortable(self, columns: Dict[str, str]) -> Dict[str, str]:
        return {k: v for k, v in columns.items() if k not in self._not_sortable}
