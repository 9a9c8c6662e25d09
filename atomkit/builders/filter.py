"""
FilterBuilder: filter controls for a post type listing.
"""

from typing import Any, Dict, List

from ..host import Host


class FilterBuilder:
    def __init__(self, post_type: str, host: Host) -> None:
        self.host = host
        self.post_type = post_type
        self._fields: List[str] = []

    def by(self, field: str) -> "FilterBuilder":
        self._fields.append(field)
        return self

    def render(self) -> "FilterBuilder":
        self.host.echo(self.describe())
        return self

    def describe(self) -> Dict[str, Any]:
        return {
            "filter": self.post_type,
            "inputs": [{"name": f, "placeholder": f"Filter by {f}"} for f in self._fields],
        }
