"""
Selection state machine.

``SelectionController`` owns the highlighted index into a collection and
moves it in response to navigation commands.  The index is always ``-1``
(no selection) or a valid position; out-of-range moves clamp silently and
every operation on an empty collection is a no-op.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any

from virtualview.collection.viewport import ViewportController
from virtualview.logging import get_logger

logger = get_logger("selection")

NO_SELECTION = -1

SelectCallback = Callable[[Any, int], None]


class SelectionMode(str, enum.Enum):
    """When the select callback fires."""

    EAGER = "eager"
    """Every successful move notifies, as does confirm."""

    CONFIRMED = "confirmed"
    """Only explicit confirm (or a direct select) notifies."""


class SelectionController:
    """
    Track and move the selected index over a collection.

    Parameters
    ----------
    source:
        Zero-argument callable returning the current collection.  It is
        read on every command, so the collection may be replaced between
        commands.
    viewport:
        Viewport kept in sync with the selection after every change.
    on_select:
        Callback receiving ``(item, index)``.
    mode:
        :class:`SelectionMode` deciding whether moves notify.
    """

    def __init__(
        self,
        source: Callable[[], Sequence[Any]],
        viewport: ViewportController | None = None,
        on_select: SelectCallback | None = None,
        mode: SelectionMode = SelectionMode.EAGER,
    ) -> None:
        self._source = source
        self._viewport = viewport or ViewportController()
        self._on_select = on_select
        self._mode = mode
        self._selected_index = NO_SELECTION

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def viewport(self) -> ViewportController:
        return self._viewport

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @property
    def on_select(self) -> SelectCallback | None:
        return self._on_select

    @on_select.setter
    def on_select(self, callback: SelectCallback | None) -> None:
        self._on_select = callback

    @property
    def has_selection(self) -> bool:
        return self._selected_index != NO_SELECTION

    @property
    def selected_item(self) -> Any:
        """The selected item, or ``None`` when nothing is selected."""
        items = self._source()
        if 0 <= self._selected_index < len(items):
            return items[self._selected_index]
        return None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def move_down(self) -> bool:
        size = self._clamp()
        if size == 0:
            return False
        if self._selected_index == NO_SELECTION:
            return self._move_to(0)
        if self._selected_index < size - 1:
            return self._move_to(self._selected_index + 1)
        return False

    def move_up(self) -> bool:
        size = self._clamp()
        if size == 0:
            return False
        if self._selected_index == NO_SELECTION:
            return self._move_to(size - 1)
        if self._selected_index > 0:
            return self._move_to(self._selected_index - 1)
        return False

    def move_to_first(self) -> bool:
        if self._clamp() == 0:
            return False
        return self._move_to(0)

    def move_to_last(self) -> bool:
        size = self._clamp()
        if size == 0:
            return False
        return self._move_to(size - 1)

    def page_down(self) -> bool:
        """Move one viewport height down, clamped at the last index."""
        size = self._clamp()
        if size == 0:
            return False
        start = max(self._selected_index, 0)
        return self._move_to(min(size - 1, start + self._viewport.height))

    def page_up(self) -> bool:
        """Move one viewport height up, clamped at the first index."""
        size = self._clamp()
        if size == 0:
            return False
        if self._selected_index == NO_SELECTION:
            return self._move_to(0)
        return self._move_to(max(0, self._selected_index - self._viewport.height))

    def select(self, index: int) -> bool:
        """
        Select *index* directly and notify in either mode.

        Out-of-range indices are ignored.
        """
        items = self._source()
        if not 0 <= index < len(items):
            return False
        self._set_index(index, len(items))
        self._notify(items, index)
        return True

    def confirm(self) -> bool:
        """Notify the callback with the selected ``(item, index)``."""
        items = self._source()
        if not 0 <= self._selected_index < len(items):
            return False
        self._notify(items, self._selected_index)
        return True

    def clear(self) -> None:
        """Drop the selection and scroll back to the top."""
        self._selected_index = NO_SELECTION
        self._viewport.reset()

    def resync(self) -> None:
        """Re-establish the invariants after the collection changed size."""
        size = self._clamp()
        self._viewport.sync(self._selected_index, size)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _clamp(self) -> int:
        """Pull a stale index back into range and return the collection size."""
        size = len(self._source())
        if self._selected_index >= size:
            logger.debug("Collection shrank to %d, clamping selection", size)
            self._selected_index = size - 1 if size else NO_SELECTION
            self._viewport.sync(self._selected_index, size)
        return size

    def _move_to(self, index: int) -> bool:
        items = self._source()
        if not 0 <= index < len(items) or index == self._selected_index:
            return False
        self._set_index(index, len(items))
        if self._mode is SelectionMode.EAGER:
            self._notify(items, index)
        return True

    def _set_index(self, index: int, size: int) -> None:
        logger.debug("Selection %d -> %d", self._selected_index, index)
        self._selected_index = index
        self._viewport.sync(index, size)

    def _notify(self, items: Sequence[Any], index: int) -> None:
        if self._on_select is not None:
            self._on_select(items[index], index)
