"""
Line rendering for a viewport window.

Turns the visible slice of a collection into display lines using a
caller-supplied formatter.  Widths are measured in terminal cells, so wide
(e.g. CJK) characters count double.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from rich.cells import cell_len, set_cell_size

from virtualview.collection.viewport import Window

MORE_ABOVE = "↑ More items above"
MORE_BELOW = "↓ More items below"

ItemFormatter = Callable[[Any, int], str]


def render_window(
    items: Sequence[Any],
    window: Window,
    format_item: ItemFormatter,
    *,
    indicators: bool = True,
    more_above: str = MORE_ABOVE,
    more_below: str = MORE_BELOW,
) -> list[str]:
    """
    Render the items inside *window*, one line each.

    *format_item* receives ``(item, absolute_index)``.  With *indicators*
    enabled a "more above" line precedes the items when the window does not
    start at the top, and a "more below" line follows them when it stops
    short of the end.
    """
    lines: list[str] = []
    if indicators and window.has_more_above:
        lines.append(more_above)
    for index in window.as_range():
        lines.append(format_item(items[index], index))
    if indicators and window.has_more_below:
        lines.append(more_below)
    return lines


def pad_cells(text: str, width: int) -> str:
    """
    Pad or truncate *text* to exactly *width* cells.

    Text that is too long is cut and, when *width* leaves room for it,
    finished with ``"..."``.  A non-positive *width* returns *text* as is.
    """
    if width <= 0:
        return text
    if cell_len(text) > width:
        if width <= 3:
            return set_cell_size(text, width)
        return set_cell_size(text, width - 3) + "..."
    return set_cell_size(text, width)


def truncate_cells(text: str, width: int) -> str:
    """Truncate *text* to at most *width* cells, ending with an ellipsis."""
    if width <= 0 or cell_len(text) <= width:
        return text
    return set_cell_size(text, width - 1) + "…"
