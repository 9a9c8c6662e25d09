"""
FormBuilder: frontend forms submitted over ajax.

Usage:
    atom.form("contact").fields("name", "email", "message").turnstile().send_to("me@example.com")
"""

from typing import Any, Callable, Dict, Optional

from ..host import Host
from ..logging_config import get_logger
from .base import FieldSpec, collect_fields, infer_field_type, sanitize_key, split_field_spec

TURNSTILE_SITE_KEY_OPTION = "atom_turnstile_site_key"
TURNSTILE_SECRET_KEY_OPTION = "atom_turnstile_secret_key"

SubmitHandler = Callable[[Dict[str, Any]], Any]


class FormBuilder:
    def __init__(self, slug: str, host: Host) -> None:
        self.host = host
        self.slug = sanitize_key(slug)
        self.form_id = f"atom_form_{self.slug}"
        self._fields: Dict[str, str] = {}
        self._field_options: Dict[str, Dict[str, Any]] = {}
        self._use_turnstile = False
        self._use_captcha = False
        self._email: Optional[str] = None
        self._handler: Optional[SubmitHandler] = None
        self._success_message = "Thank you!"
        self._error_message = "Failed to send."

    @property
    def action(self) -> str:
        return f"{self.form_id}_submit"

    def fields(self, *fields: FieldSpec) -> "FormBuilder":
        for spec in fields:
            self.field(spec)
        return self

    def field(self, name: FieldSpec, field_type: Optional[str] = None) -> "FormBuilder":
        name, field_type, options = split_field_spec(name, field_type)
        self._fields[name] = field_type or infer_field_type(name)
        if options:
            self._field_options[name] = options
        return self

    def success(self, message: str) -> "FormBuilder":
        self._success_message = message
        return self

    def error(self, message: str) -> "FormBuilder":
        self._error_message = message
        return self

    def turnstile(self) -> "FormBuilder":
        self._use_turnstile = True
        return self

    def captcha(self) -> "FormBuilder":
        self._use_captcha = True
        return self

    def send_to(self, email: str) -> "FormBuilder":
        self._email = email
        self._register_handler()
        return self

    def on_submit(self, handler: SubmitHandler) -> "FormBuilder":
        self._handler = handler
        self._register_handler()
        return self

    def shortcode(self, tag: str) -> "FormBuilder":
        """Expose the form under a shortcode; renders the builder's state at render time."""
        self.host.add_shortcode(tag, lambda **attrs: self.describe())
        return self

    def _submitted_fields(self) -> Dict[str, str]:
        fields = dict(self._fields)
        if self._use_turnstile:
            fields["turnstile"] = "turnstile"
        if self._use_captcha:
            fields["captcha"] = "captcha"
        return fields

    def _register_handler(self) -> None:
        # Fields and messages are captured now; later calls do not change this handler.
        fields = self._submitted_fields()
        success_message = self._success_message
        error_message = self._error_message
        handler = self._handler
        if handler is None and self._email:
            handler = self._mail_handler(self._email, success_message, error_message)
        if handler is None:
            return

        logger = get_logger(__name__, trace_id=f"form:{self.slug}")

        def respond(data: Dict[str, Any]) -> Dict[str, Any]:
            values = collect_fields(fields, data)
            try:
                result = handler(values)
            except Exception:
                logger.exception("Form handler failed")
                return {"success": False, "data": {"message": error_message}}
            ok = isinstance(result, dict) and bool(result.get("success"))
            return {"success": ok, "data": result}

        self.host.add_ajax_action(self.action, respond)

    def _mail_handler(self, to: str, success_message: str, error_message: str) -> SubmitHandler:
        def send(values: Dict[str, Any]) -> Dict[str, Any]:
            body = "".join(
                f"{name.capitalize()}: {values.get(name, '')}\n" for name in self._fields
            )
            headers = []
            reply_to = values.get("email")
            if reply_to and "@" in str(reply_to):
                headers.append(f"Reply-To: {reply_to}")
            sent = self.host.send_mail(to, "Contact Form Submission", body, tuple(headers))
            if sent:
                return {"success": True, "message": success_message}
            return {"success": False, "message": error_message}

        return send

    def describe(self) -> Dict[str, Any]:
        """Structured description of the form as it would be rendered."""
        fields = []
        for name, field_type in self._submitted_fields().items():
            options = self._field_options.get(name, {})
            item = {
                "name": name,
                "type": field_type,
                "label": options.get("label", name.replace("_", " ").replace("-", " ").title()),
                "required": bool(options.get("required")),
            }
            if field_type == "turnstile":
                item["sitekey"] = self.host.get_option(TURNSTILE_SITE_KEY_OPTION, "")
            fields.append(item)
        return {"form": self.form_id, "action": self.action, "fields": fields}
