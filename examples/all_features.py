"""
Example plugin exercising every builder.

    atomkit inspect examples/all_features.py
"""


def register(atom):
    atom.admin_notice("Atom All Features Example loaded!", "success")

    atom.settings("atom_all_settings") \
        .field("site_api_key", "text") \
        .field("enable_feature", "checkbox") \
        .menu({
            "parent": "options-general.php",
            "title": "All Features Settings",
            "menu": "All Features",
            "capability": "manage_options",
        })

    atom.settings("atom_all_top") \
        .field("top_setting", "text") \
        .menu({"parent": None, "title": "Top Level Settings", "menu": "Top Level", "icon": "dashicons-admin-tools"})

    atom.post_type("book") \
        .label("Books") \
        .menu_position(5) \
        .fields("title", "author") \
        .sortable(["title", "author"]) \
        .not_sortable(["date"]) \
        .column("author", "Author", lambda post: post.get("author", "")) \
        .public()

    atom.bulk_action("book", "mark_read", "Mark as Read", lambda ids: None)

    atom.dashboard_widget("atom_widget") \
        .title("Atom Widget") \
        .content(lambda: "This is a dashboard widget from Atom!")

    atom.help_tab("settings_page_atom_all_settings") \
        .title("How to use") \
        .content("This page demonstrates Atom settings.")

    atom.notice("Welcome to the Atom All Features Example!", "info")

    atom.widget("atom_sidebar_widget") \
        .title("Atom Widget") \
        .content(lambda: "This is a sidebar widget from Atom!")

    atom.ajax("say_hi") \
        .fields("name") \
        .on_submit(lambda d: {"success": True, "message": f"Hi, {d['name']}!"})

    atom.rest("/hello") \
        .fields("name") \
        .on_submit(lambda d, request: {"success": True, "message": f"Hello, {d['name']}"})

    atom.filter("book").by("author").by("year").render()

    atom.form("all_features_contact") \
        .fields(
            ["name", "text", {"label": "Your Name", "required": True}],
            ["email", "email", {"label": "Your Email", "required": True}],
            ["message", "textarea", {"label": "Message", "required": True, "rows": 5}],
        ) \
        .shortcode("atom_all_contact_form") \
        .send_to("admin@example.com") \
        .success("Thank you for contacting us!") \
        .error("Sorry, there was a problem.") \
        .captcha()

    atom.modal("atom_welcome") \
        .title("Welcome") \
        .content("Thanks for trying Atom.") \
        .show_on_load()

    atom.table("atom_prices") \
        .columns(["Plan", "Price"]) \
        .rows([["Basic", "$5"], ["Pro", "$9"]]) \
        .render()
