"""
Event dispatch for widgets.

Widgets register named handlers on an ``EventBus`` and the host feeds them
abstract commands (key presses, sort requests).  Dispatch is synchronous:
every handler runs to completion before ``emit`` returns.

Example:
    from virtualview.events import KEY_DOWN, EventBus

    bus = EventBus()

    @bus.on(KEY_DOWN)
    def on_down(_payload):
        controller.move_down()

    bus.emit(KEY_DOWN)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from virtualview.logging import get_logger

logger = get_logger("events")


# ---------------------------------------------------------------------------
# Event names
# ---------------------------------------------------------------------------

KEY_DOWN = "keyDown"
KEY_UP = "keyUp"
KEY_ENTER = "keyEnter"
KEY_HOME = "keyHome"
KEY_END = "keyEnd"
PAGE_UP = "pageUp"
PAGE_DOWN = "pageDown"
SORT = "sort"
ROW_CLICK = "rowClick"


# ---------------------------------------------------------------------------
# Handler types
# ---------------------------------------------------------------------------

EventHandler = Callable[[Any], Any]


@dataclass
class _HandlerEntry:
    """Internal: a registered handler with metadata."""

    event: str
    handler: EventHandler
    priority: int = 0  # lower runs first
    source: str = ""  # who registered it (widget name, etc.)


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------


class EventBus:
    """
    A synchronous, named-event bus.

    Handlers are called in priority order (lower first), each receiving the
    opaque payload passed to :meth:`emit`.

    Usage:
        bus = EventBus()

        # Decorator style
        @bus.on("sort")
        def on_sort(field_key):
            ...

        # Method style
        unsub = bus.on("keyUp", lambda _: controller.move_up())
        unsub()  # remove handler
    """

    def __init__(self) -> None:
        self._handlers: list[_HandlerEntry] = []

    def on(
        self,
        event: str,
        handler: EventHandler | None = None,
        priority: int = 0,
        source: str = "",
    ) -> Callable[[], None] | Callable[[EventHandler], EventHandler]:
        """
        Register an event handler.

        Can be used as a method call (returns an unsubscribe function) or as
        a decorator (returns the original function).
        """
        if handler is not None:
            entry = _HandlerEntry(
                event=event, handler=handler, priority=priority, source=source
            )
            self._handlers.append(entry)

            def unsubscribe() -> None:
                try:
                    self._handlers.remove(entry)
                except ValueError:
                    pass

            return unsubscribe

        def decorator(fn: EventHandler) -> EventHandler:
            self.on(event, fn, priority=priority, source=source)
            return fn

        return decorator

    def off(self, event: str, handler: EventHandler) -> None:
        """Remove a specific handler for an event."""
        self._handlers = [
            h for h in self._handlers if not (h.event == event and h.handler is handler)
        ]

    def off_by_source(self, source: str) -> int:
        """Remove every handler registered by *source* and return how many went."""
        before = len(self._handlers)
        self._handlers = [h for h in self._handlers if h.source != source]
        return before - len(self._handlers)

    def clear(self, event: str | None = None) -> None:
        """Remove all handlers, or all handlers for a specific event."""
        if event is None:
            self._handlers.clear()
        else:
            self._handlers = [h for h in self._handlers if h.event != event]

    def has_handlers(self, event: str) -> bool:
        """Check whether any handler is registered for *event*."""
        return any(h.event == event for h in self._handlers)

    def handler_count(self, event: str | None = None) -> int:
        """Count registered handlers, optionally for one event."""
        if event is None:
            return len(self._handlers)
        return sum(1 for h in self._handlers if h.event == event)

    def emit(self, event: str, data: Any = None) -> list[Any]:
        """
        Emit an event and collect handler results.

        Args:
            event: Event name
            data: Opaque payload (e.g. the field key for ``"sort"``)

        Returns:
            List of non-None results from handlers
        """
        relevant = sorted(
            (h for h in self._handlers if h.event == event),
            key=lambda h: h.priority,
        )

        results: list[Any] = []
        for entry in relevant:
            try:
                result = entry.handler(data)
                if result is not None:
                    results.append(result)
            except Exception as e:
                logger.warning(
                    "Event handler error (event=%s, source=%s): %s",
                    event,
                    entry.source,
                    e,
                )
        return results
