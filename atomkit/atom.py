"""
Atom: application-lifetime context and builder factories.

Each deferred category owns one DeferralRegistry. A factory returns the real
builder once its category's checkpoint has fired, and a call-recording facade
before that. Every registry subscribes its replay pass to the checkpoint hook
exactly once, ahead of plugin callbacks at the default priority.

Usage:
    atom = Atom(host)
    atom.form("contact").fields("name", "email", "message").shortcode("contact").send_to("me@example.com")
    atom.post_type("book").fields("title", "author").public()
    host.hooks.do_action("init")   # replays both chains
"""

from typing import Any, Callable, Dict, Optional, Tuple

from .builders import (
    AdminModalBuilder,
    AdminTableBuilder,
    AjaxBuilder,
    DashboardWidgetBuilder,
    FilterBuilder,
    FormBuilder,
    HelpTabBuilder,
    ModalBuilder,
    PostTypeBuilder,
    RestBuilder,
    SettingsBuilder,
    TabbedSettingsBuilder,
    TableBuilder,
    WidgetBuilder,
)
from .builders.form import TURNSTILE_SECRET_KEY_OPTION, TURNSTILE_SITE_KEY_OPTION
from .config import AtomConfig
from .deferral import DeferralRegistry, FireReport
from .host import Host
from .logging_config import get_logger

logger = get_logger(__name__)

DEFERRED_CATEGORIES: Tuple[str, ...] = ("form", "post_type", "settings", "ajax", "rest", "filter")


class Atom:
    """
    Builder factories bound to one host.

    Fields:
        host: Host platform builders register into
        config: Runtime configuration
        last_reports: FireReport per category from the checkpoint pass
    """

    def __init__(self, host: Optional[Host] = None, config: Optional[AtomConfig] = None) -> None:
        self.host = host or Host()
        self.config = config or AtomConfig.from_env()
        self.last_reports: Dict[str, FireReport] = {}

        factories: Dict[str, Callable[[str], Any]] = {
            "form": lambda key: FormBuilder(key, self.host),
            "post_type": lambda key: PostTypeBuilder(key, self.host),
            "settings": lambda key: SettingsBuilder(key, self.host),
            "ajax": lambda key: AjaxBuilder(key, self.host),
            "rest": lambda key: RestBuilder(key, self.host, namespace=self.config.rest_namespace),
            "filter": lambda key: FilterBuilder(key, self.host),
        }
        self._registries: Dict[str, DeferralRegistry] = {
            category: DeferralRegistry(category, factories[category], diagnostics=self.host.report)
            for category in DEFERRED_CATEGORIES
        }

        hooks = self.host.hooks
        hook = self.config.checkpoint_hook
        for registry in self._registries.values():
            hooks.add_action(
                hook, self._replay_callback(registry), priority=self.config.replay_priority
            )
        if hooks.did_action(hook) and not hooks.doing_action(hook):
            # Checkpoint already behind us: every category starts fired.
            self.fire_checkpoint()

    def _replay_callback(self, registry: DeferralRegistry) -> Callable[..., None]:
        def replay(*_: Any) -> None:
            self._store(registry.fire())

        return replay

    def _store(self, report: FireReport) -> None:
        if report.already_fired:
            return
        self.last_reports[report.category] = report
        logger.info(
            "%s checkpoint: %d replayed, %d failed, %d calls skipped",
            report.category,
            report.replayed,
            report.failed,
            len(report.skipped_calls),
        )

    def registry(self, category: str) -> DeferralRegistry:
        """
        Registry of one deferred category.

        Raises:
            KeyError: If category is not a deferred category
        """
        return self._registries[category]

    def fire_checkpoint(self) -> Dict[str, FireReport]:
        """Fire every category's checkpoint now (no-op for categories already fired)."""
        reports = {}
        for category, registry in self._registries.items():
            report = registry.fire()
            self._store(report)
            reports[category] = report
        return reports

    def _builder(self, category: str, key: str) -> Any:
        registry = self._registries[category]
        if registry.is_fired:
            return registry.build(key)
        return registry.defer(key)

    # Deferred factories

    def form(self, slug: str) -> Any:
        return self._builder("form", slug)

    def post_type(self, slug: str) -> Any:
        return self._builder("post_type", slug)

    def settings(self, slug: str) -> Any:
        return self._builder("settings", slug)

    def ajax(self, action: str) -> Any:
        return self._builder("ajax", action)

    def rest(self, route: str) -> Any:
        return self._builder("rest", route)

    def filter(self, post_type: str) -> Any:
        return self._builder("filter", post_type)

    # Immediate factories

    def dashboard_widget(self, widget_id: str) -> DashboardWidgetBuilder:
        return DashboardWidgetBuilder(widget_id, self.host)

    def widget(self, widget_id: str) -> WidgetBuilder:
        return WidgetBuilder(widget_id, self.host)

    def help_tab(self, screen_id: str) -> HelpTabBuilder:
        return HelpTabBuilder(screen_id, self.host)

    def tabbed_settings(self, slug: str) -> TabbedSettingsBuilder:
        return TabbedSettingsBuilder(slug, self.host)

    def admin_table(self, table_id: str) -> AdminTableBuilder:
        return AdminTableBuilder(table_id, self.host)

    def admin_modal(self, modal_id: str) -> AdminModalBuilder:
        return AdminModalBuilder(modal_id, self.host)

    def modal(self, modal_id: str) -> ModalBuilder:
        return ModalBuilder(modal_id, self.host)

    def table(self, table_id: str) -> TableBuilder:
        return TableBuilder(table_id, self.host)

    # Helpers

    def shortcode(self, tag: str, callback: Callable[..., Any]) -> None:
        self.host.add_shortcode(tag, callback)

    def plugin(self, callback: Callable[..., Any]) -> None:
        """Run callback on the checkpoint hook, after deferred chains have replayed."""
        self.host.hooks.add_action(self.config.checkpoint_hook, callback)

    def set_turnstile_keys(self, site_key: str, secret_key: str) -> None:
        self.host.update_option(TURNSTILE_SITE_KEY_OPTION, site_key)
        self.host.update_option(TURNSTILE_SECRET_KEY_OPTION, secret_key)

    def admin_notice(self, message: str, notice_type: str = "success") -> None:
        self.host.hooks.add_action(
            "admin_notices",
            lambda *_: self.host.echo({"notice": message, "type": notice_type, "scope": "admin"}),
        )

    def admin_menu_separator(self, position: int) -> None:
        self.host.hooks.add_action(
            "admin_menu", lambda *_: self.host.add_menu_separator(position)
        )

    def notice(self, message: str, notice_type: str = "success") -> None:
        self.host.hooks.add_action(
            "wp_footer",
            lambda *_: self.host.echo({"notice": message, "type": notice_type, "scope": "front"}),
        )

    def bulk_action(
        self, post_type: str, action: str, label: str, callback: Callable[[list], Any]
    ) -> None:
        """Add a bulk action to a post type listing; callback receives the selected ids."""

        def add_action(actions: Dict[str, str]) -> Dict[str, str]:
            actions = dict(actions)
            actions[action] = label
            return actions

        def handle(redirect: Any, doaction: str, ids: list) -> Any:
            if doaction == action:
                callback(ids)
            return redirect

        hooks = self.host.hooks
        hooks.add_filter(f"bulk_actions-edit-{post_type}", add_action)
        hooks.add_filter(f"handle_bulk_actions-edit-{post_type}", handle, accepted_args=3)
