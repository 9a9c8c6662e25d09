"""
Tests for the concrete builders used directly (no deferral).
"""

from atomkit.atom import Atom
from atomkit.builders import FormBuilder, RestBuilder
from atomkit.builders.base import infer_field_type, sanitize_key, split_field_spec
from atomkit.config import AtomConfig
from atomkit.host import Host


def test_sanitize_key():
    """Keys are lowercased and stripped of unsafe characters."""
    assert sanitize_key("My Form!") == "myform"
    assert sanitize_key("contact_form-2") == "contact_form-2"


def test_field_type_inference_and_specs():
    """Bare names infer types; list specs carry type and options."""
    assert infer_field_type("work_email") == "email"
    assert infer_field_type("message") == "textarea"
    assert infer_field_type("name") == "text"
    assert split_field_spec(["rows", "number", {"required": True}]) == ("rows", "number", {"required": True})
    assert split_field_spec("name", "text") == ("name", "text", {})


def test_form_field_options_and_turnstile_key():
    """describe() reflects labels, required flags and the turnstile site key."""
    host = Host()
    atom = Atom(host, AtomConfig())
    atom.set_turnstile_keys("site-123", "secret-456")
    form = FormBuilder("contact", host)

    form.field(["name", "text", {"label": "Your Name", "required": True}]).turnstile()
    fields = form.describe()["fields"]

    assert fields[0] == {"name": "name", "type": "text", "label": "Your Name", "required": True}
    assert fields[1]["sitekey"] == "site-123"


def test_form_handler_exception_returns_error_message():
    """A failing submit handler yields the configured error message."""
    host = Host()

    def handler(data):
        raise RuntimeError("db down")

    FormBuilder("contact", host).fields("name").error("Try later").on_submit(handler)
    response = host.handle_ajax("atom_form_contact_submit", {"name": "Ada"})

    assert response == {"success": False, "data": {"message": "Try later"}}


def test_form_handler_captures_state_at_registration():
    """Fields added after on_submit are not part of that handler's data."""
    host = Host()
    seen = []
    FormBuilder("contact", host).field("name").on_submit(lambda d: seen.append(d) or {"success": True}).field("late")

    host.handle_ajax("atom_form_contact_submit", {"name": "Ada", "late": "x"})

    assert seen == [{"name": "Ada"}]


def test_rest_error_responses():
    """Unsuccessful results are 400, exceptions are 500."""
    host = Host()
    RestBuilder("/fail", host).on_submit(lambda d, req: {"success": False, "message": "nope"})
    RestBuilder("/crash", host).on_submit(lambda d, req: 1 / 0)
    host.hooks.do_action("rest_api_init")

    assert host.dispatch_rest("/atom/v1/fail", {}).status == 400
    assert host.dispatch_rest("/atom/v1/fail", {}).data["message"] == "nope"
    assert host.dispatch_rest("/atom/v1/crash", {}).status == 500
    assert host.dispatch_rest("/atom/v1/missing", {}).status == 404


def test_immediate_widgets_and_help_tab():
    """Widget builders register on their own hooks."""
    host = Host()
    atom = Atom(host, AtomConfig())
    atom.dashboard_widget("Stats").title("Stats").content(lambda: "42")
    atom.widget("side").title("Side").content(lambda: "hello")
    atom.help_tab("settings_page_x").title("How").content("Read me")

    host.hooks.do_action("wp_dashboard_setup")
    host.hooks.do_action("widgets_init")
    host.hooks.do_action("current_screen", "other_screen")
    assert host.help_tabs == {}
    host.hooks.do_action("current_screen", "settings_page_x")

    assert host.dashboard_widgets["stats"]["title"] == "Stats"
    assert host.widgets["side"]["render"]() == "hello"
    assert host.help_tabs["settings_page_x"]["id"] == "settings_page_x_help"


def test_notices_and_bulk_actions():
    """Notices echo on their hooks; bulk actions add and handle an action."""
    host = Host()
    atom = Atom(host, AtomConfig())
    handled = []
    atom.admin_notice("Saved")
    atom.notice("Welcome", "info")
    atom.bulk_action("book", "mark_read", "Mark as Read", handled.extend)

    host.hooks.do_action("admin_notices")
    host.hooks.do_action("wp_footer")
    actions = host.hooks.apply_filters("bulk_actions-edit-book", {"trash": "Trash"})
    redirect = host.hooks.apply_filters("handle_bulk_actions-edit-book", "/edit.php", "mark_read", [3, 4])

    assert host.output == [
        {"notice": "Saved", "type": "success", "scope": "admin"},
        {"notice": "Welcome", "type": "info", "scope": "front"},
    ]
    assert actions == {"trash": "Trash", "mark_read": "Mark as Read"}
    assert redirect == "/edit.php"
    assert handled == [3, 4]


def test_tables_render_structured_fragments():
    """Tables echo columns and rows; admin tables also list their actions."""
    host = Host()
    atom = Atom(host, AtomConfig())

    atom.table("Prices").columns(["Plan", "Price"]).rows([["Basic", "$5"], ["Pro", "$9"]]).render()
    atom.admin_table("orders").columns(["Id"]).rows([[1], [2]]).actions({"refund": lambda i: i}).render()

    assert host.output == [
        {"table": "prices", "scope": "front", "columns": ["Plan", "Price"], "rows": [["Basic", "$5"], ["Pro", "$9"]]},
        {"table": "orders", "scope": "admin", "columns": ["Id"], "rows": [[1], [2]], "actions": ["refund"]},
    ]


def test_modals():
    """Frontend modals echo on wp_footer once; admin modals run their confirm callback."""
    host = Host()
    atom = Atom(host, AtomConfig())
    confirmed = []

    modal = atom.modal("promo").title("Sale").content("50% off").show_on_load()
    modal.show_on_load(False)
    admin = atom.admin_modal("confirm_delete").title("Delete?").on_confirm(lambda: confirmed.append(1) or "done")
    admin.render()
    host.hooks.do_action("wp_footer")

    assert host.output == [
        {"modal": "confirm_delete", "scope": "admin", "title": "Delete?", "content": "", "visible": False, "confirmable": True},
        {"modal": "promo", "scope": "front", "title": "Sale", "content": "50% off", "visible": False},
    ]
    assert admin.confirm() == "done"
    assert confirmed == [1]
    assert atom.admin_modal("plain").confirm() is None


def test_tabbed_settings_page_and_menu_separator():
    """Tabbed settings add one options page; render runs only the active tab."""
    host = Host()
    atom = Atom(host, AtomConfig())
    page = atom.tabbed_settings("Tools") \
        .tab("General", lambda b: b.field("site_name")) \
        .tab("Advanced", lambda b: b.field("api_key", "password"))
    atom.admin_menu_separator(30)
    atom.admin_menu_separator(30)

    host.hooks.do_action("admin_menu")
    assert [p["slug"] for p in host.menu_pages] == ["tools"]
    assert host.menu_pages[0]["parent"] == "options-general.php"
    assert host.menu_separators == [30]

    host.menu_pages[0]["render"]()
    page.render("Advanced")

    assert host.output == [
        {"tabs": ["General", "Advanced"], "active": "General", "page": "tools"},
        {"field": "site_name", "type": "text"},
        {"tabs": ["General", "Advanced"], "active": "Advanced", "page": "tools"},
        {"field": "api_key", "type": "password"},
    ]
