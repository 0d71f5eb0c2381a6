"""
Abstract base component for widgets.

Every widget renders to a list of text lines and owns an :class:`EventBus`
through which abstract commands (navigation, sort requests) arrive.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from virtualview.events import EventBus, EventHandler
from virtualview.tui.keybindings import KeybindingsManager
from virtualview.tui.keys import Key


class Component(ABC):
    """
    Base class for widgets.

    Subclasses implement :meth:`render`, returning plain text lines, and
    register their command handlers with :meth:`on`.  Key presses are
    translated into events by a :class:`KeybindingsManager`.
    """

    name: str = "component"

    def __init__(self, keybindings: KeybindingsManager | None = None) -> None:
        self._dirty: bool = True
        self._visible: bool = True
        self._focused: bool = False
        self._events = EventBus()
        self._keybindings = keybindings or KeybindingsManager()

    # ------------------------------------------------------------------
    # Abstract API
    # ------------------------------------------------------------------

    @abstractmethod
    def render(self, width: int) -> list[str]:
        """
        Render the component into a list of text lines.

        Rendering is a query: it must not change selection, sort or
        viewport state, and repeated calls without an intervening command
        return the same lines.

        Parameters
        ----------
        width:
            The available horizontal space in columns.
        """
        ...

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    @property
    def events(self) -> EventBus:
        return self._events

    def on(self, event: str, handler: EventHandler) -> None:
        """Register *handler* for the named command."""
        self._events.on(event, handler, source=self.name)

    def emit(self, event: str, payload: Any = None) -> None:
        """Dispatch a command to this component's handlers."""
        self._events.emit(event, payload)
        self.invalidate()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    @property
    def keybindings(self) -> KeybindingsManager:
        return self._keybindings

    def handle_input(self, key: Key) -> bool:
        """
        Translate a key press into a command and dispatch it.

        Returns
        -------
        bool
            ``True`` if the key mapped to a command this component handles.
        """
        action = self._keybindings.find_action(key)
        if action is None or not self._events.has_handlers(action):
            return False
        self.emit(action)
        return True

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Detach this component's command handlers."""
        self._events.off_by_source(self.name)

    def invalidate(self) -> None:
        """Mark the component as needing a re-render."""
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """Whether the component needs to be re-rendered."""
        return self._dirty

    @dirty.setter
    def dirty(self, value: bool) -> None:
        self._dirty = value

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if self._visible != value:
            self._visible = value
            self._dirty = True

    @property
    def focused(self) -> bool:
        return self._focused

    @focused.setter
    def focused(self, value: bool) -> None:
        if self._focused != value:
            self._focused = value
            self._dirty = True
