"""Virtualized-collection core shared by the list and table widgets."""
from __future__ import annotations

from virtualview.collection.compare import (
    Comparison,
    Ordering,
    SortDirection,
    TypeFamily,
    compare,
    compare_tagged,
    compare_values,
    type_family,
)
from virtualview.collection.fields import (
    MISSING_VALUE,
    FieldNotFoundError,
    FieldResolver,
    resolve,
)
from virtualview.collection.render import (
    MORE_ABOVE,
    MORE_BELOW,
    pad_cells,
    render_window,
    truncate_cells,
)
from virtualview.collection.selection import (
    NO_SELECTION,
    SelectionController,
    SelectionMode,
)
from virtualview.collection.sorting import SortController, SortResult, SortState, sort_items
from virtualview.collection.viewport import (
    DEFAULT_HEIGHT,
    ViewportController,
    Window,
    clamp_offset,
    sync_to_selection,
    visible_window,
)

__all__ = [
    # Fields
    "FieldResolver",
    "FieldNotFoundError",
    "MISSING_VALUE",
    "resolve",
    # Comparison
    "Comparison",
    "Ordering",
    "SortDirection",
    "TypeFamily",
    "compare",
    "compare_tagged",
    "compare_values",
    "type_family",
    # Sorting
    "SortController",
    "SortResult",
    "SortState",
    "sort_items",
    # Selection
    "NO_SELECTION",
    "SelectionController",
    "SelectionMode",
    # Viewport
    "DEFAULT_HEIGHT",
    "ViewportController",
    "Window",
    "clamp_offset",
    "sync_to_selection",
    "visible_window",
    # Rendering
    "MORE_ABOVE",
    "MORE_BELOW",
    "pad_cells",
    "render_window",
    "truncate_cells",
]
