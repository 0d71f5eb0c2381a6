"""Tests for the event system."""

from __future__ import annotations

import logging

import pytest

from virtualview.events import (
    KEY_DOWN,
    KEY_ENTER,
    ROW_CLICK,
    SORT,
    EventBus,
)


# ---------------------------------------------------------------------------
# EventBus core tests
# ---------------------------------------------------------------------------


class TestEventBus:
    def test_on_and_emit(self) -> None:
        bus = EventBus()
        received: list[str] = []

        bus.on("test", lambda data: received.append(data))

        bus.emit("test", "hello")
        assert received == ["hello"]

    def test_on_decorator(self) -> None:
        bus = EventBus()
        received: list[str] = []

        @bus.on("test")
        def handler(data: str) -> None:
            received.append(data)

        bus.emit("test", "world")
        assert received == ["world"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received: list[str] = []

        unsub = bus.on("test", lambda data: received.append(data))
        unsub()
        unsub()

        bus.emit("test", "nope")
        assert received == []

    def test_off(self) -> None:
        bus = EventBus()
        received: list[str] = []

        def handler(data: str) -> None:
            received.append(data)

        bus.on("test", handler)
        bus.off("test", handler)

        bus.emit("test", "nope")
        assert received == []

    def test_priority_order(self) -> None:
        bus = EventBus()
        order: list[str] = []

        bus.on("test", lambda _: order.append("late"), priority=10)
        bus.on("test", lambda _: order.append("early"), priority=-1)
        bus.on("test", lambda _: order.append("middle"))

        bus.emit("test")
        assert order == ["early", "middle", "late"]

    def test_emit_collects_results(self) -> None:
        bus = EventBus()
        bus.on("test", lambda _: "a")
        bus.on("test", lambda _: None)
        bus.on("test", lambda _: "b")

        assert bus.emit("test") == ["a", "b"]

    def test_unknown_event_is_ignored(self) -> None:
        bus = EventBus()

        assert bus.emit("nobody-listens", 1) == []

    def test_handler_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        bus = EventBus()
        received: list[int] = []

        def broken(_: object) -> None:
            raise RuntimeError("boom")

        bus.on("test", broken, source="list")
        bus.on("test", lambda data: received.append(data))

        with caplog.at_level(logging.WARNING, logger="virtualview.events"):
            bus.emit("test", 1)

        assert received == [1]
        assert "boom" in caplog.text
        assert "source=list" in caplog.text

    def test_off_by_source(self) -> None:
        bus = EventBus()
        bus.on("a", lambda _: None, source="list")
        bus.on("b", lambda _: None, source="list")
        bus.on("a", lambda _: None, source="table")

        assert bus.off_by_source("list") == 2
        assert bus.handler_count() == 1
        assert bus.off_by_source("list") == 0

    def test_clear(self) -> None:
        bus = EventBus()
        bus.on("a", lambda _: None)
        bus.on("b", lambda _: None)

        bus.clear("a")
        assert not bus.has_handlers("a")
        assert bus.has_handlers("b")

        bus.clear()
        assert bus.handler_count() == 0

    def test_handler_count(self) -> None:
        bus = EventBus()
        bus.on("a", lambda _: None)
        bus.on("a", lambda _: None)
        bus.on("b", lambda _: None)

        assert bus.handler_count("a") == 2
        assert bus.handler_count() == 3


class TestEventNames:
    def test_command_names(self) -> None:
        assert KEY_DOWN == "keyDown"
        assert KEY_ENTER == "keyEnter"
        assert SORT == "sort"
        assert ROW_CLICK == "rowClick"
