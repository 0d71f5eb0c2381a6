"""
Viewport windowing over an ordered collection.

The viewport is a contiguous ``[offset, offset + height)`` slice of the
collection.  ``sync_to_selection`` scrolls it just far enough to reveal the
selected index.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEIGHT = 10


def clamp_offset(offset: int, height: int, collection_len: int) -> int:
    """Clamp *offset* to ``[0, max(0, collection_len - height)]``."""
    max_offset = max(0, collection_len - max(0, height))
    return max(0, min(offset, max_offset))


def sync_to_selection(
    selected_index: int,
    offset: int,
    height: int,
    collection_len: int,
) -> int:
    """
    Return the offset that keeps *selected_index* visible.

    Scrolls down when the selection is below the window, up when it is
    above, and otherwise leaves the offset alone.  A ``-1`` selection only
    clamps the current offset.

    >>> sync_to_selection(14, 0, 10, 100)
    5
    >>> sync_to_selection(2, 5, 10, 100)
    2
    >>> sync_to_selection(7, 5, 10, 100)
    5
    """
    new_offset = offset
    if selected_index >= 0:
        if selected_index >= offset + height:
            new_offset = selected_index - height + 1
        elif selected_index < offset:
            new_offset = selected_index
    return clamp_offset(new_offset, height, collection_len)


@dataclass(frozen=True)
class Window:
    """Half-open index range ``[start, stop)`` currently eligible for display."""

    start: int
    stop: int
    total: int

    @property
    def has_more_above(self) -> bool:
        return self.start > 0

    @property
    def has_more_below(self) -> bool:
        return self.stop < self.total

    def as_range(self) -> range:
        return range(self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.stop


def visible_window(offset: int, height: int, collection_len: int) -> Window:
    """Return the window ``[offset, min(offset + height, collection_len))``."""
    start = clamp_offset(offset, height, collection_len)
    stop = min(start + max(0, height), collection_len)
    return Window(start=start, stop=max(start, stop), total=collection_len)


class ViewportController:
    """
    Hold the scroll offset of a fixed-height viewport.

    Parameters
    ----------
    height:
        Number of rows in the viewport.  Values ``<= 0`` fall back to
        *default_height*.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, default_height: int = DEFAULT_HEIGHT) -> None:
        self._height = height if height > 0 else default_height
        self._offset = 0

    @property
    def height(self) -> int:
        return self._height

    @property
    def offset(self) -> int:
        return self._offset

    def sync(self, selected_index: int, collection_len: int) -> int:
        """Scroll to reveal *selected_index* and return the new offset."""
        self._offset = sync_to_selection(
            selected_index, self._offset, self._height, collection_len
        )
        return self._offset

    def scroll_to(self, offset: int, collection_len: int) -> int:
        """Move the window to *offset*, clamped to the collection."""
        self._offset = clamp_offset(offset, self._height, collection_len)
        return self._offset

    def reset(self) -> None:
        self._offset = 0

    def window(self, collection_len: int) -> Window:
        """The visible window for a collection of *collection_len* items."""
        return visible_window(self._offset, self._height, collection_len)
