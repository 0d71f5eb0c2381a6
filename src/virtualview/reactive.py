"""
Observable value container.

``Ref`` holds a single value that widgets read on every render and that
other parts of an application can watch for changes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Watcher = Callable[[Any, Any], None]


class Ref:
    """
    A mutable reference that notifies watchers on every :meth:`set`.

    Watchers are called synchronously with ``(new_value, old_value)`` in
    registration order.  No comparison is made between old and new values:
    setting the same object again still notifies.

    Example:
        items = Ref(["a", "b"])
        unwatch = items.watch(lambda new, old: print(len(new)))
        items.set(["a", "b", "c"])   # prints 3
        unwatch()
    """

    def __init__(self, value: Any) -> None:
        self._value = value
        self._watchers: list[Watcher] = []

    def get(self) -> Any:
        """Return the current value."""
        return self._value

    def set(self, value: Any) -> None:
        """Replace the value and notify watchers."""
        old = self._value
        self._value = value
        for watcher in list(self._watchers):
            watcher(value, old)

    def watch(self, callback: Watcher) -> Callable[[], None]:
        """Register a change watcher and return a function that removes it."""
        self._watchers.append(callback)

        def unwatch() -> None:
            try:
                self._watchers.remove(callback)
            except ValueError:
                pass

        return unwatch

    @property
    def watcher_count(self) -> int:
        return len(self._watchers)

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"
