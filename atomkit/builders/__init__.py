"""
Concrete builders.

Each builder is constructed from a key plus the host and exposes a fluent
surface; the deferral core drives them only through that surface.
"""

from .form import FormBuilder
from .post_type import PostTypeBuilder
from .settings import SettingsBuilder
from .endpoints import AjaxBuilder, RestBuilder
from .filter import FilterBuilder
from .widgets import DashboardWidgetBuilder, WidgetBuilder, HelpTabBuilder
from .display import (
    AdminModalBuilder,
    AdminTableBuilder,
    ModalBuilder,
    TableBuilder,
    TabbedSettingsBuilder,
)

__all__ = [
    "FormBuilder",
    "PostTypeBuilder",
    "SettingsBuilder",
    "AjaxBuilder",
    "RestBuilder",
    "FilterBuilder",
    "DashboardWidgetBuilder",
    "WidgetBuilder",
    "HelpTabBuilder",
    "TabbedSettingsBuilder",
    "AdminTableBuilder",
    "AdminModalBuilder",
    "ModalBuilder",
    "TableBuilder",
]
