"""
AjaxBuilder and RestBuilder: request handlers over declared fields.

Handlers receive only the declared fields. A result dict with a truthy
"success" key is a success; anything else, or an exception, is an error.
"""

from typing import Any, Callable, Dict, Optional

from ..host import Host, RestResponse
from ..logging_config import get_logger
from .base import collect_fields

Handler = Callable[..., Any]


class AjaxBuilder:
    def __init__(self, action: str, host: Host) -> None:
        self.host = host
        self.action = action
        self._fields: Dict[str, str] = {}
        self._handler: Optional[Handler] = None

    def fields(self, *fields: str) -> "AjaxBuilder":
        for name in fields:
            self.field(name)
        return self

    def field(self, name: str, field_type: str = "text") -> "AjaxBuilder":
        self._fields[name] = field_type
        return self

    def on_submit(self, handler: Handler) -> "AjaxBuilder":
        self._handler = handler
        self.host.add_ajax_action(self.action, self._respond)
        return self

    def _respond(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self._handler(collect_fields(self._fields, data))
        except Exception as e:
            get_logger(__name__, trace_id=f"ajax:{self.action}").exception("Ajax handler failed")
            return {"success": False, "data": {"message": str(e)}}
        ok = isinstance(result, dict) and bool(result.get("success"))
        return {"success": ok, "data": result}


class RestBuilder:
    def __init__(self, route: str, host: Host, namespace: str = "atom/v1") -> None:
        self.host = host
        self.route = route
        self.namespace = namespace
        self._fields: Dict[str, str] = {}
        self._handler: Optional[Handler] = None

    def fields(self, *fields: str) -> "RestBuilder":
        for name in fields:
            self.field(name)
        return self

    def field(self, name: str, field_type: str = "text") -> "RestBuilder":
        self._fields[name] = field_type
        return self

    def on_submit(self, handler: Handler) -> "RestBuilder":
        """Register the route when the host initializes its REST API."""
        self._handler = handler
        self.host.hooks.add_action("rest_api_init", lambda *_: self._register_route())
        return self

    def _register_route(self) -> None:
        self.host.register_rest_route(self.namespace, self.route, self._respond, methods="POST")

    def _respond(self, params: Dict[str, Any]) -> RestResponse:
        try:
            result = self._handler(collect_fields(self._fields, params), params)
        except Exception as e:
            get_logger(__name__, trace_id=f"rest:{self.route}").exception("REST handler failed")
            return RestResponse(500, {"code": "rest_exception", "message": str(e)})
        if isinstance(result, dict) and result.get("success"):
            return RestResponse(200, result)
        message = result.get("message", "Error") if isinstance(result, dict) else "Error"
        return RestResponse(400, {"code": "rest_error", "message": message})
