"""
Terminal widgets built on the virtualized-collection core.

Provides the list and table widgets, the component base class they share,
key parsing, and keybinding management.
"""
from __future__ import annotations

from virtualview.tui.component import Component
from virtualview.tui.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from virtualview.tui.keys import Key, parse_key
from virtualview.tui.list_view import ListView
from virtualview.tui.table_view import ColumnSpec, TableView

__all__ = [
    # Core
    "Component",
    # Keys
    "Key",
    "parse_key",
    # Widgets
    "ListView",
    "TableView",
    "ColumnSpec",
    # Keybindings
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
]
