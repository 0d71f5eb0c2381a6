"""
Keybinding management.

Maps key presses to the widget command names dispatched through
:class:`~virtualview.events.EventBus`, with user overrides loaded from a
JSON configuration file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from virtualview.events import KEY_DOWN, KEY_END, KEY_ENTER, KEY_HOME, KEY_UP, PAGE_DOWN, PAGE_UP
from virtualview.logging import get_logger
from virtualview.tui.keys import Key

logger = get_logger("keybindings")

# ---------------------------------------------------------------------------
# Default keybinding map
# ---------------------------------------------------------------------------

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    KEY_UP: ["up", "k"],
    KEY_DOWN: ["down", "j"],
    KEY_ENTER: ["enter", "space"],
    KEY_HOME: ["home", "g"],
    KEY_END: ["end", "shift+g"],
    PAGE_UP: ["page_up", "ctrl+b"],
    PAGE_DOWN: ["page_down", "ctrl+f"],
}


# ---------------------------------------------------------------------------
# Descriptor normalisation
# ---------------------------------------------------------------------------

def _normalise_key_descriptor(descriptor: str) -> str:
    """
    Normalise a human-readable key descriptor to a canonical form.

    ``"Shift+G"`` -> ``"shift+g"``; ``"G"`` -> ``"shift+g"``
    """
    parts = [p.strip() for p in descriptor.split("+")]
    base = parts[-1] if parts else ""
    modifiers = {p.lower() for p in parts[:-1]}
    if len(base) == 1 and base.isupper():
        modifiers.add("shift")
    return "+".join(sorted(modifiers) + [base.lower()])


def _key_to_descriptor(key: Key) -> str:
    """
    Convert a parsed :class:`Key` into a canonical descriptor string.

    >>> _key_to_descriptor(Key(name="ctrl+f", char="f", ctrl=True))
    'ctrl+f'
    >>> _key_to_descriptor(Key(name="G", char="G"))
    'shift+g'
    """
    modifiers: set[str] = set()
    if key.ctrl:
        modifiers.add("ctrl")
    if key.alt:
        modifiers.add("alt")
    if key.shift:
        modifiers.add("shift")

    # ctrl+<letter> names already carry the modifier
    base = key.name.rsplit("+", 1)[-1] if len(key.name) > 1 else key.name
    if len(base) == 1 and base.isupper():
        modifiers.add("shift")
    return "+".join(sorted(modifiers) + [base.lower()])


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class KeybindingsManager:
    """
    Map key presses to command names.

    Parameters
    ----------
    user_overrides:
        Optional mapping of command names to key descriptor lists that
        replace the defaults for those commands.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings: dict[str, list[str]] = dict(DEFAULT_KEYBINDINGS)
        if user_overrides:
            self._bindings.update(user_overrides)

        self._normalised: dict[str, list[str]] = {
            action: [_normalise_key_descriptor(d) for d in descriptors]
            for action, descriptors in self._bindings.items()
        }

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> KeybindingsManager:
        """
        Load keybindings from a JSON file.

        When *config_path* is ``None`` the file
        ``~/.virtualview/keybindings.json`` is tried.  A missing or malformed
        file yields the defaults.  The file maps command names to lists of
        key descriptors::

            {
                "keyDown": ["down", "j", "ctrl+n"],
                "keyUp": ["up", "k", "ctrl+p"]
            }
        """
        if config_path is not None:
            path = Path(config_path)
        else:
            path = Path.home() / ".virtualview" / "keybindings.json"

        overrides: dict[str, list[str]] | None = None

        if path.is_file():
            try:
                raw: Any = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring keybindings file %s: %s", path, e)
            else:
                if isinstance(raw, dict):
                    overrides = {
                        action: val
                        for action, val in raw.items()
                        if isinstance(val, list) and all(isinstance(v, str) for v in val)
                    }

        return cls(user_overrides=overrides)

    def matches(self, key: Key | str, action: str) -> bool:
        """Test whether *key* (a :class:`Key` or descriptor) is bound to *action*."""
        descriptors = self._normalised.get(action)
        if descriptors is None:
            return False

        if isinstance(key, str):
            normalised = _normalise_key_descriptor(key)
        else:
            normalised = _key_to_descriptor(key)

        return normalised in descriptors

    def get_keys(self, action: str) -> list[str]:
        """Return the descriptor strings bound to *action*."""
        return list(self._bindings.get(action, []))

    def actions(self) -> list[str]:
        """Return all bound command names."""
        return list(self._bindings.keys())

    def find_action(self, key: Key | str) -> str | None:
        """Find the first command bound to *key*, or ``None``."""
        for action in self._bindings:
            if self.matches(key, action):
                return action
        return None
