"""Tests for viewport windowing."""

from __future__ import annotations

import pytest

from virtualview.collection.viewport import (
    DEFAULT_HEIGHT,
    ViewportController,
    Window,
    clamp_offset,
    sync_to_selection,
    visible_window,
)


class TestClampOffset:
    """Tests for clamp_offset."""

    @pytest.mark.parametrize(
        ("offset", "height", "length", "expected"),
        [
            (0, 10, 100, 0),
            (95, 10, 100, 90),
            (-3, 10, 100, 0),
            (4, 10, 5, 0),
            (2, 10, 0, 0),
        ],
    )
    def test_clamp(self, offset: int, height: int, length: int, expected: int) -> None:
        assert clamp_offset(offset, height, length) == expected


class TestSyncToSelection:
    """Tests for sync_to_selection."""

    def test_below_window_scrolls_down(self) -> None:
        assert sync_to_selection(14, 0, 10, 100) == 5

    def test_above_window_scrolls_up(self) -> None:
        assert sync_to_selection(2, 5, 10, 100) == 2

    def test_inside_window_is_unchanged(self) -> None:
        assert sync_to_selection(7, 5, 10, 100) == 5

    def test_last_item_stays_clamped(self) -> None:
        assert sync_to_selection(99, 0, 10, 100) == 90

    def test_no_selection_only_clamps(self) -> None:
        assert sync_to_selection(-1, 50, 10, 20) == 10
        assert sync_to_selection(-1, 3, 10, 100) == 3

    def test_short_collection(self) -> None:
        assert sync_to_selection(2, 0, 10, 3) == 0

    def test_selection_always_visible(self) -> None:
        offset = 0
        for selected in list(range(100)) + list(range(99, -1, -7)):
            offset = sync_to_selection(selected, offset, 10, 100)
            assert offset <= selected < offset + 10
            assert 0 <= offset <= 90


class TestWindow:
    """Tests for Window and visible_window."""

    def test_window_bounds(self) -> None:
        window = visible_window(5, 10, 100)

        assert window == Window(start=5, stop=15, total=100)
        assert len(window) == 10
        assert list(window.as_range()) == list(range(5, 15))

    def test_window_flags(self) -> None:
        assert not visible_window(0, 10, 100).has_more_above
        assert visible_window(0, 10, 100).has_more_below
        assert visible_window(90, 10, 100).has_more_above
        assert not visible_window(90, 10, 100).has_more_below

    def test_short_collection_fits(self) -> None:
        window = visible_window(0, 10, 3)

        assert window == Window(start=0, stop=3, total=3)
        assert not window.has_more_above
        assert not window.has_more_below

    def test_empty_collection(self) -> None:
        window = visible_window(0, 10, 0)

        assert len(window) == 0
        assert list(window.as_range()) == []

    def test_contains(self) -> None:
        window = visible_window(5, 10, 100)

        assert 5 in window
        assert 14 in window
        assert 15 not in window
        assert "5" not in window


class TestViewportController:
    """Tests for ViewportController."""

    def test_defaults(self) -> None:
        viewport = ViewportController()

        assert viewport.height == DEFAULT_HEIGHT == 10
        assert viewport.offset == 0

    @pytest.mark.parametrize("height", [0, -4])
    def test_non_positive_height_falls_back(self, height: int) -> None:
        assert ViewportController(height).height == DEFAULT_HEIGHT
        assert ViewportController(height, default_height=3).height == 3

    def test_sync(self) -> None:
        viewport = ViewportController(10)

        assert viewport.sync(14, 100) == 5
        assert viewport.offset == 5
        assert viewport.sync(3, 100) == 3

    def test_scroll_to_clamps(self) -> None:
        viewport = ViewportController(10)

        assert viewport.scroll_to(500, 100) == 90
        assert viewport.scroll_to(-2, 100) == 0

    def test_reset(self) -> None:
        viewport = ViewportController(10)
        viewport.sync(50, 100)

        viewport.reset()

        assert viewport.offset == 0

    def test_window(self) -> None:
        viewport = ViewportController(4)
        viewport.sync(6, 8)

        assert viewport.window(8) == Window(start=3, stop=7, total=8)
