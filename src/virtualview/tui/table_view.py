"""
Sortable table widget.

Displays a collection as rows of fixed-width columns.  Columns marked
sortable can be sorted through the ``"sort"`` command; sorting the same
field again flips the direction.  Rows are selected with the arrow keys and
reported only on explicit confirmation or a row click.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from rich.cells import cell_len

from virtualview.collection.fields import FieldResolver
from virtualview.collection.render import pad_cells, render_window, truncate_cells
from virtualview.collection.selection import SelectCallback, SelectionController, SelectionMode
from virtualview.collection.sorting import SortController, SortResult, SortState
from virtualview.collection.viewport import ViewportController, Window, visible_window
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
)
from virtualview.logging import get_logger
from virtualview.reactive import Ref
from virtualview.tui.component import Component
from virtualview.tui.keybindings import KeybindingsManager

logger = get_logger("table")

SORT_ASCENDING_INDICATOR = " ↑"
SORT_DESCENDING_INDICATOR = " ↓"
_INDICATOR_WIDTH = 2


@dataclass
class ColumnSpec:
    """
    A single table column.

    Attributes
    ----------
    header:
        Text shown in the header row.
    field_key:
        Name of the item field displayed and sorted by this column.
    width:
        Column width in terminal cells.  Longer values are cut with ``...``.
    sortable:
        Whether the ``"sort"`` command may sort by this column.
    render:
        Optional ``item -> str`` formatter overriding the field's text.
    accessor:
        Optional ``item -> value`` used instead of looking up *field_key*
        by name, for both display and sorting.
    """

    header: str
    field_key: str
    width: int = 10
    sortable: bool = False
    render: Callable[[Any], str] | None = None
    accessor: Callable[[Any], Any] | None = None

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"column width must not be negative, got {self.width}")


class TableView(Component):
    """
    Table over a collection held in a :class:`Ref`.

    Parameters
    ----------
    data:
        The collection, either a shared :class:`Ref` or a plain sequence.
    columns:
        Column definitions, rendered left to right.
    sortable:
        Table-wide switch for the ``"sort"`` command.
    on_row_click:
        Callback receiving ``(item, index)`` on confirm or row click.
    height:
        Visible rows.  ``None`` renders every row; an int virtualizes the
        body with scroll indicators.
    config:
        Shared :class:`ViewConfig`.
    """

    name = "table"

    def __init__(
        self,
        data: Ref | Sequence[Any] | None = None,
        columns: Sequence[ColumnSpec] = (),
        sortable: bool = False,
        on_row_click: SelectCallback | None = None,
        height: int | None = None,
        config: ViewConfig | None = None,
        keybindings: KeybindingsManager | None = None,
    ) -> None:
        self._config = config or ViewConfig()
        super().__init__(keybindings or KeybindingsManager(self._config.keybindings))

        if isinstance(data, Ref):
            self._data = data
        else:
            self._data = Ref(list(data) if data is not None else [])

        self._columns: list[ColumnSpec] = list(columns)
        self._sortable = sortable
        self._virtual = height is not None

        self._resolver = FieldResolver(strict=self._config.strict_fields)
        for column in self._columns:
            if column.accessor is not None:
                self._resolver.register(column.field_key, column.accessor)

        self._sorter = SortController(self._resolver)
        self._viewport = ViewportController(
            height if height is not None else self._config.height,
            default_height=self._config.height,
        )
        self._selection = SelectionController(
            self._current_rows,
            viewport=self._viewport,
            on_select=on_row_click,
            mode=SelectionMode.CONFIRMED,
        )

        self._unwatch = self._data.watch(self._on_data_changed)

        self.on(KEY_UP, lambda _: self._selection.move_up())
        self.on(KEY_DOWN, lambda _: self._selection.move_down())
        self.on(KEY_HOME, lambda _: self._selection.move_to_first())
        self.on(KEY_END, lambda _: self._selection.move_to_last())
        self.on(PAGE_UP, lambda _: self._selection.page_up())
        self.on(PAGE_DOWN, lambda _: self._selection.page_down())
        self.on(KEY_ENTER, lambda _: self._selection.confirm())
        self.on(ROW_CLICK, self._handle_row_click)
        self.on(SORT, self._handle_sort)

    # ------------------------------------------------------------------
    # Public properties
    # ------------------------------------------------------------------

    @property
    def data(self) -> Ref:
        return self._data

    @property
    def columns(self) -> list[ColumnSpec]:
        return list(self._columns)

    @property
    def selected_row(self) -> int:
        return self._selection.selected_index

    @property
    def selected_item(self) -> Any:
        return self._selection.selected_item

    @property
    def sort_state(self) -> SortState:
        return self._sorter.state

    @property
    def scroll_offset(self) -> int:
        return self._viewport.offset

    @property
    def selection(self) -> SelectionController:
        return self._selection

    @property
    def window(self) -> Window:
        rows = self._current_rows()
        if not self._virtual:
            return Window(start=0, stop=len(rows), total=len(rows))
        return visible_window(self._viewport.offset, self._viewport.height, len(rows))

    def close(self) -> None:
        """Stop watching the data ``Ref`` and drop command handlers."""
        self._unwatch()
        super().close()

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def can_sort(self, field_key: str) -> bool:
        """
        Whether the ``"sort"`` command accepts *field_key*.

        The table must be sortable.  If any column shows *field_key*, at
        least one such column must be sortable; fields no column shows are
        sorted leniently.
        """
        if not self._sortable:
            return False
        matching = [c for c in self._columns if c.field_key == field_key]
        return not matching or any(c.sortable for c in matching)

    def sort_by(self, field_key: str) -> SortResult | None:
        """Sort the rows by *field_key* and publish the result to the ``Ref``."""
        result = self._sorter.apply_sort(
            self._current_rows(), field_key, sortable=self.can_sort(field_key)
        )
        if result is None:
            logger.debug("Sort by %r ignored", field_key)
            return None

        # Row indices are stale after a reorder
        self._selection.clear()
        self._data.set(result.items)
        return result

    def _handle_sort(self, payload: Any) -> None:
        if not isinstance(payload, str):
            logger.warning("Ignoring sort request with non-string field %r", payload)
            return
        self.sort_by(payload)

    def _handle_row_click(self, payload: Any) -> None:
        if isinstance(payload, int) and not isinstance(payload, bool):
            self._selection.select(payload)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int) -> list[str]:
        """Render the header row followed by the visible rows."""
        rows = self._current_rows()
        lines = [truncate_cells(self.render_header(), width)]

        if not rows:
            lines.append(truncate_cells(self._config.empty_table_text, width))
            self._dirty = False
            return lines

        selected = self._selection.selected_index
        marker = self._config.selected_marker
        blank = self._config.unselected_marker

        def format_row(row: Any, index: int) -> str:
            prefix = marker if index == selected else blank
            return truncate_cells(prefix + self.render_row(row), width)

        lines.extend(
            render_window(
                rows,
                self.window,
                format_row,
                indicators=self._virtual and self._config.show_indicators,
                more_above=truncate_cells(self._config.more_above_text, width),
                more_below=truncate_cells(self._config.more_below_text, width),
            )
        )
        self._dirty = False
        return lines

    def render_header(self) -> str:
        """The header row, with a direction indicator on the sorted column."""
        parts = [self._header_cell(column) for column in self._columns]
        return self._config.unselected_marker + " ".join(parts)

    def render_row(self, row: Any) -> str:
        """One data row without the selection marker."""
        return " ".join(pad_cells(self._cell_text(row, c), c.width) for c in self._columns)

    def _header_cell(self, column: ColumnSpec) -> str:
        if not (self._sortable and column.sortable):
            return pad_cells(column.header, column.width)

        state = self._sorter.state
        indicator = "  "
        if state.is_active(column.field_key):
            indicator = SORT_ASCENDING_INDICATOR if state.ascending else SORT_DESCENDING_INDICATOR

        text_width = max(1, column.width - _INDICATOR_WIDTH)
        text = column.header
        if cell_len(text) > text_width:
            text = pad_cells(text, text_width)
        combined = text + indicator
        if cell_len(combined) < column.width:
            return pad_cells(combined, column.width)
        return combined

    def _cell_text(self, row: Any, column: ColumnSpec) -> str:
        if column.render is not None:
            return column.render(row)
        return self._resolver.resolve_text(row, column.field_key)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _current_rows(self) -> Sequence[Any]:
        return self._data.get()

    def _on_data_changed(self, new: Sequence[Any], old: Sequence[Any]) -> None:
        self._selection.resync()
        self.invalidate()
