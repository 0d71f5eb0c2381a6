"""
virtualview - virtualized list and table widgets for terminal UIs.

The core keeps a highlighted entry visible inside a fixed-height window over
a large collection, and sorts that collection by a named field with
ascending/descending toggling.  Widgets render to plain text lines.

Example:
    from virtualview import ColumnSpec, Ref, TableView

    people = Ref([{"Name": "Charlie", "Age": 35}, {"Name": "Alice", "Age": 30}])
    table = TableView(
        data=people,
        columns=[
            ColumnSpec(header="Name", field_key="Name", width=12, sortable=True),
            ColumnSpec(header="Age", field_key="Age", width=5, sortable=True),
        ],
        sortable=True,
    )

    table.emit("sort", "Name")
    for line in table.render(40):
        print(line)
"""

from virtualview.collection import (
    Comparison,
    FieldNotFoundError,
    FieldResolver,
    Ordering,
    SelectionController,
    SelectionMode,
    SortController,
    SortDirection,
    SortResult,
    SortState,
    ViewportController,
    Window,
    compare,
    compare_tagged,
    render_window,
    sync_to_selection,
    visible_window,
)
from virtualview.config import ViewConfig
from virtualview.events import (
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_HOME,
    KEY_UP,
    PAGE_DOWN,
    PAGE_UP,
    ROW_CLICK,
    SORT,
    EventBus,
)
from virtualview.logging import get_logger, setup_logging
from virtualview.reactive import Ref
from virtualview.tui import ColumnSpec, Component, KeybindingsManager, Key, ListView, TableView, parse_key

__version__ = "0.1.0"

__all__ = [
    # Core
    "FieldResolver",
    "FieldNotFoundError",
    "Comparison",
    "Ordering",
    "SortDirection",
    "compare",
    "compare_tagged",
    "SortController",
    "SortResult",
    "SortState",
    "SelectionController",
    "SelectionMode",
    "ViewportController",
    "Window",
    "sync_to_selection",
    "visible_window",
    "render_window",
    # Runtime boundary
    "Ref",
    "EventBus",
    "KEY_DOWN",
    "KEY_UP",
    "KEY_ENTER",
    "KEY_HOME",
    "KEY_END",
    "PAGE_DOWN",
    "PAGE_UP",
    "SORT",
    "ROW_CLICK",
    # Widgets
    "Component",
    "ListView",
    "TableView",
    "ColumnSpec",
    "Key",
    "parse_key",
    "KeybindingsManager",
    # Config & logging
    "ViewConfig",
    "setup_logging",
    "get_logger",
]
