"""
Configuration for virtualview widgets.

Provides a configuration object that can be loaded from YAML files,
environment variables, or constructed programmatically.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from virtualview.collection.render import MORE_ABOVE, MORE_BELOW
from virtualview.collection.viewport import DEFAULT_HEIGHT

ENV_PREFIX = "VIRTUALVIEW_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ViewConfig:
    """
    Shared configuration for list and table widgets.

    Example YAML:
        height: 15
        virtual: true
        show_indicators: true
        selected_marker: "> "
        strict_fields: false
        keybindings:
          keyDown: ["down", "j", "ctrl+n"]
    """

    # Viewport
    height: int = DEFAULT_HEIGHT  # Rows shown at once
    virtual: bool = True  # Render only the visible window

    # Rendering
    show_indicators: bool = True  # "more above/below" lines
    more_above_text: str = MORE_ABOVE
    more_below_text: str = MORE_BELOW
    empty_list_text: str = "No items to display"
    empty_table_text: str = "No data available"
    selected_marker: str = "> "

    # Field lookup
    strict_fields: bool = False  # Raise on unknown field names

    # Key overrides, action name -> key descriptors
    keybindings: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")

    @property
    def unselected_marker(self) -> str:
        return " " * len(self.selected_marker)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ViewConfig:
        """Create config from a dictionary."""
        return cls(
            height=int(data.get("height", DEFAULT_HEIGHT)),
            virtual=data.get("virtual", True),
            show_indicators=data.get("show_indicators", True),
            more_above_text=data.get("more_above_text", MORE_ABOVE),
            more_below_text=data.get("more_below_text", MORE_BELOW),
            empty_list_text=data.get("empty_list_text", "No items to display"),
            empty_table_text=data.get("empty_table_text", "No data available"),
            selected_marker=data.get("selected_marker", "> "),
            strict_fields=data.get("strict_fields", False),
            keybindings={k: list(v) for k, v in (data.get("keybindings") or {}).items()},
        )

    @classmethod
    def from_yaml(cls, path: Path) -> ViewConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> ViewConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls, base: ViewConfig | None = None, dotenv: bool = True) -> ViewConfig:
        """
        Apply ``VIRTUALVIEW_*`` environment overrides on top of *base*.

        Recognised variables: ``VIRTUALVIEW_HEIGHT``, ``VIRTUALVIEW_VIRTUAL``,
        ``VIRTUALVIEW_SHOW_INDICATORS``, ``VIRTUALVIEW_STRICT_FIELDS``,
        ``VIRTUALVIEW_SELECTED_MARKER``.  A ``.env`` file in the working
        directory is loaded first when *dotenv* is true.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        data = (base or cls()).to_dict()
        env = os.environ
        if f"{ENV_PREFIX}HEIGHT" in env:
            data["height"] = int(env[f"{ENV_PREFIX}HEIGHT"])
        if f"{ENV_PREFIX}VIRTUAL" in env:
            data["virtual"] = _env_bool(env[f"{ENV_PREFIX}VIRTUAL"])
        if f"{ENV_PREFIX}SHOW_INDICATORS" in env:
            data["show_indicators"] = _env_bool(env[f"{ENV_PREFIX}SHOW_INDICATORS"])
        if f"{ENV_PREFIX}STRICT_FIELDS" in env:
            data["strict_fields"] = _env_bool(env[f"{ENV_PREFIX}STRICT_FIELDS"])
        if f"{ENV_PREFIX}SELECTED_MARKER" in env:
            data["selected_marker"] = env[f"{ENV_PREFIX}SELECTED_MARKER"]
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "height": self.height,
            "virtual": self.virtual,
            "show_indicators": self.show_indicators,
            "more_above_text": self.more_above_text,
            "more_below_text": self.more_below_text,
            "empty_list_text": self.empty_list_text,
            "empty_table_text": self.empty_table_text,
            "selected_marker": self.selected_marker,
            "strict_fields": self.strict_fields,
            "keybindings": {k: list(v) for k, v in self.keybindings.items()},
        }
