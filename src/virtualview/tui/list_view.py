"""
Virtualized list widget.

Renders a window of a potentially large collection, keeps the selected item
visible while the user navigates, and reports every selection change.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from virtualview.collection.render import render_window, truncate_cells
from virtualview.collection.selection import SelectCallback, SelectionController, SelectionMode
from virtualview.collection.viewport import ViewportController, Window, visible_window
from virtualview.config import ViewConfig
from virtualview.events import KEY_DOWN, KEY_END, KEY_ENTER, KEY_HOME, KEY_UP, PAGE_DOWN, PAGE_UP
from virtualview.reactive import Ref
from virtualview.tui.component import Component
from virtualview.tui.keybindings import KeybindingsManager

RenderItem = Callable[[Any, int], str]


def _default_render_item(item: Any, index: int) -> str:
    return str(item)


class ListView(Component):
    """
    Scrollable list over a collection held in a :class:`Ref`.

    Parameters
    ----------
    items:
        The collection, either a :class:`Ref` shared with the host or a
        plain sequence (wrapped in a new ``Ref``).
    render_item:
        Formatter receiving ``(item, index)``.  Defaults to ``str(item)``.
    height:
        Visible rows.  Falls back to ``config.height`` when ``None`` or not
        positive.
    virtual:
        Render only the visible window.  When false every item is rendered
        and no scroll indicators are shown.  Defaults to ``config.virtual``.
    on_select:
        Callback receiving ``(item, index)`` on every selection move and on
        confirm.
    config:
        Shared :class:`ViewConfig`.
    """

    name = "list"

    def __init__(
        self,
        items: Ref | Sequence[Any] | None = None,
        render_item: RenderItem | None = None,
        height: int | None = None,
        virtual: bool | None = None,
        on_select: SelectCallback | None = None,
        config: ViewConfig | None = None,
        keybindings: KeybindingsManager | None = None,
    ) -> None:
        self._config = config or ViewConfig()
        super().__init__(keybindings or KeybindingsManager(self._config.keybindings))

        if isinstance(items, Ref):
            self._items = items
        else:
            self._items = Ref(list(items) if items is not None else [])

        self._render_item = render_item or _default_render_item
        self._virtual = self._config.virtual if virtual is None else virtual
        self._viewport = ViewportController(
            height if height is not None else self._config.height,
            default_height=self._config.height,
        )
        self._selection = SelectionController(
            self._current_items,
            viewport=self._viewport,
            on_select=on_select,
            mode=SelectionMode.EAGER,
        )

        self._unwatch = self._items.watch(self._on_items_changed)

        self.on(KEY_DOWN, lambda _: self._selection.move_down())
        self.on(KEY_UP, lambda _: self._selection.move_up())
        self.on(KEY_ENTER, lambda _: self._selection.confirm())
        self.on(KEY_HOME, lambda _: self._selection.move_to_first())
        self.on(KEY_END, lambda _: self._selection.move_to_last())
        self.on(PAGE_DOWN, lambda _: self._selection.page_down())
        self.on(PAGE_UP, lambda _: self._selection.page_up())

    # ------------------------------------------------------------------
    # Public properties
    # ------------------------------------------------------------------

    @property
    def items(self) -> Ref:
        return self._items

    @property
    def selected_index(self) -> int:
        return self._selection.selected_index

    @property
    def selected_item(self) -> Any:
        return self._selection.selected_item

    @property
    def scroll_offset(self) -> int:
        return self._viewport.offset

    @property
    def height(self) -> int:
        return self._viewport.height

    @property
    def selection(self) -> SelectionController:
        return self._selection

    @property
    def window(self) -> Window:
        """The visible index range for the current collection."""
        items = self._current_items()
        if not self._virtual:
            return Window(start=0, stop=len(items), total=len(items))
        return visible_window(self._viewport.offset, self._viewport.height, len(items))

    def close(self) -> None:
        """Stop watching the items ``Ref`` and drop command handlers."""
        self._unwatch()
        super().close()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int) -> list[str]:
        """Render the visible window, marking the selected item."""
        items = self._current_items()
        if not items:
            self._dirty = False
            return [truncate_cells(self._config.empty_list_text, width)]

        selected = self._selection.selected_index
        marker = self._config.selected_marker
        blank = self._config.unselected_marker

        def format_item(item: Any, index: int) -> str:
            prefix = marker if index == selected else blank
            return truncate_cells(prefix + self._render_item(item, index), width)

        lines = render_window(
            items,
            self.window,
            format_item,
            indicators=self._virtual and self._config.show_indicators,
            more_above=truncate_cells(self._config.more_above_text, width),
            more_below=truncate_cells(self._config.more_below_text, width),
        )
        self._dirty = False
        return lines

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _current_items(self) -> Sequence[Any]:
        return self._items.get()

    def _on_items_changed(self, new: Sequence[Any], old: Sequence[Any]) -> None:
        self._selection.resync()
        self.invalidate()
