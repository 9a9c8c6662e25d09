"""
In-memory host platform.

Host is the surface concrete builders write their side effects into:
shortcodes, options, post types, menu pages, ajax actions, REST routes,
widgets, an output buffer, an outbox and a diagnostics channel. It owns the
HookBus that delivers lifecycle events.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .hooks import HookBus


@dataclass(frozen=True)
class Diagnostic:
    """
    Entry on the host's error channel.

    Fields:
        level: "warning" or "error"
        message: Human-readable description
        context: Extra fields (category, entry, ...)
    """
    level: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RestResponse:
    status: int
    data: Any


@dataclass(frozen=True)
class Mail:
    to: str
    subject: str
    body: str
    headers: Tuple[str, ...] = ()


class Host:
    """
    Host platform state.

    Usage:
        host = Host()
        host.hooks.add_action("init", lambda: host.add_shortcode("hi", lambda **a: "Hi"))
        host.hooks.do_action("init")
        host.do_shortcode("hi")  # -> "Hi"
    """

    def __init__(self, hooks: Optional[HookBus] = None) -> None:
        self.hooks = hooks or HookBus()
        self.shortcodes: Dict[str, Callable[..., Any]] = {}
        self.options: Dict[str, Any] = {}
        self.settings: Dict[str, Dict[str, str]] = {}
        self.post_types: Dict[str, Dict[str, Any]] = {}
        self.menu_pages: List[Dict[str, Any]] = []
        self.menu_separators: List[int] = []
        self.ajax_actions: Dict[str, Tuple[Callable[[Dict[str, Any]], Any], bool]] = {}
        self.rest_routes: Dict[str, Dict[str, Any]] = {}
        self.dashboard_widgets: Dict[str, Dict[str, Any]] = {}
        self.widgets: Dict[str, Dict[str, Any]] = {}
        self.help_tabs: Dict[str, Dict[str, Any]] = {}
        self.output: List[Any] = []
        self.outbox: List[Mail] = []
        self.diagnostics: List[Diagnostic] = []

    # Shortcodes

    def add_shortcode(self, tag: str, callback: Callable[..., Any]) -> None:
        self.shortcodes[tag] = callback

    def do_shortcode(self, tag: str, **attrs: Any) -> Any:
        """
        Render a registered shortcode.

        Raises:
            KeyError: If no shortcode is registered under tag
        """
        return self.shortcodes[tag](**attrs)

    # Options and settings

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def update_option(self, name: str, value: Any) -> None:
        self.options[name] = value

    def register_setting(self, group: str, name: str, field_type: str = "text") -> None:
        self.settings.setdefault(group, {})[name] = field_type

    # Admin surfaces

    def register_post_type(self, slug: str, args: Dict[str, Any]) -> None:
        self.post_types[slug] = dict(args)

    def add_menu_page(self, **page: Any) -> None:
        self.menu_pages.append(page)

    def add_menu_separator(self, position: int) -> None:
        if position not in self.menu_separators:
            self.menu_separators.append(position)
            self.menu_separators.sort()

    def add_dashboard_widget(self, widget_id: str, **widget: Any) -> None:
        self.dashboard_widgets[widget_id] = widget

    def register_widget(self, widget_id: str, **widget: Any) -> None:
        self.widgets[widget_id] = widget

    def add_help_tab(self, screen_id: str, **tab: Any) -> None:
        self.help_tabs[screen_id] = tab

    # Endpoints

    def add_ajax_action(
        self, action: str, handler: Callable[[Dict[str, Any]], Any], public: bool = True
    ) -> None:
        self.ajax_actions[action] = (handler, public)

    def handle_ajax(self, action: str, data: Dict[str, Any], logged_in: bool = False) -> Any:
        """
        Dispatch an ajax request to its handler.

        Raises:
            KeyError: If no handler serves action for this visitor
        """
        handler, public = self.ajax_actions[action]
        if not public and not logged_in:
            raise KeyError(action)
        return handler(data)

    def register_rest_route(
        self, namespace: str, route: str, callback: Callable[[Dict[str, Any]], RestResponse],
        methods: str = "POST",
    ) -> None:
        path = f"/{namespace.strip('/')}/{route.lstrip('/')}"
        self.rest_routes[path] = {"methods": methods, "callback": callback}

    def dispatch_rest(self, path: str, params: Dict[str, Any]) -> RestResponse:
        route = self.rest_routes.get(path)
        if route is None:
            return RestResponse(404, {"code": "rest_no_route", "message": f"No route {path}"})
        return route["callback"](params)

    # Output and channels

    def echo(self, fragment: Any) -> None:
        self.output.append(fragment)

    def send_mail(self, to: str, subject: str, body: str, headers: Tuple[str, ...] = ()) -> bool:
        self.outbox.append(Mail(to=to, subject=subject, body=body, headers=tuple(headers)))
        return True

    def report(self, level: str, message: str, **context: Any) -> None:
        """Error channel for non-fatal problems (replay skips and failures)."""
        self.diagnostics.append(Diagnostic(level=level, message=message, context=context))
