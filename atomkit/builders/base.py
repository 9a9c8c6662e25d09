"""
Helpers shared by the concrete builders.
"""

import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

_KEY_UNSAFE = re.compile(r"[^a-z0-9_\-]")

# A field spec is a bare name or a (name, type, options) sequence.
FieldSpec = Union[str, Sequence[Any]]


def sanitize_key(key: str) -> str:
    """
    Lowercase key and strip everything but [a-z0-9_-].

    Example:
        sanitize_key("My Form!") -> "myform"
    """
    return _KEY_UNSAFE.sub("", str(key).lower())


def infer_field_type(name: str) -> str:
    lowered = name.lower()
    if "email" in lowered:
        return "email"
    if "message" in lowered:
        return "textarea"
    return "text"


def split_field_spec(
    spec: FieldSpec, field_type: Optional[str] = None
) -> Tuple[str, Optional[str], Dict[str, Any]]:
    """
    Normalize a field spec to (name, type, options).

    Args:
        spec: "name" or ["name", "type", {options}]
        field_type: Type used when spec is a bare name
    """
    if isinstance(spec, (list, tuple)):
        parts: List[Any] = list(spec) + [None, None, None]
        return str(parts[0] or ""), parts[1], dict(parts[2] or {})
    return str(spec), field_type, {}


def collect_fields(fields: Dict[str, str], data: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the declared fields out of request data; missing fields become ""."""
    return {name: data.get(name, "") for name in fields}
