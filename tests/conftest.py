"""Shared pytest fixtures for virtualview tests."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from textwrap import dedent

import pytest

from virtualview.config import ViewConfig
from virtualview.reactive import Ref
from virtualview.tui.table_view import ColumnSpec


@dataclass
class Person:
    """Attribute-style record used across the tests."""

    name: str
    age: int
    city: str = ""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VIRTUALVIEW_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("VIRTUALVIEW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _propagate_logs() -> None:
    """The CLI reconfigures the package logger; restore it for caplog."""
    logger = logging.getLogger("virtualview")
    logger.disabled = False
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger.handlers.clear()


@pytest.fixture
def numbered_items() -> list[str]:
    """One hundred display strings, ``Item 1`` .. ``Item 100``."""
    return [f"Item {i}" for i in range(1, 101)]


@pytest.fixture
def people_dicts() -> list[dict]:
    """Mapping-style records in insertion order Charlie, Alice, Bob."""
    return [
        {"Name": "Charlie", "Age": 35},
        {"Name": "Alice", "Age": 30},
        {"Name": "Bob", "Age": 25},
    ]


@pytest.fixture
def people() -> list[Person]:
    """Attribute-style records in insertion order Charlie, Alice, Bob."""
    return [
        Person(name="Charlie", age=35, city="Paris"),
        Person(name="Alice", age=30, city="Oslo"),
        Person(name="Bob", age=25, city="Lima"),
    ]


@pytest.fixture
def people_ref(people_dicts: list[dict]) -> Ref:
    return Ref(people_dicts)


@pytest.fixture
def people_columns() -> list[ColumnSpec]:
    """Sortable Name and Age columns."""
    return [
        ColumnSpec(header="Name", field_key="Name", width=12, sortable=True),
        ColumnSpec(header="Age", field_key="Age", width=5, sortable=True),
    ]


@pytest.fixture
def default_config() -> ViewConfig:
    return ViewConfig()


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    """A YAML file holding a list of people records."""
    path = tmp_path / "people.yaml"
    path.write_text(
        dedent("""
        - Name: Charlie
          Age: 35
        - Name: Alice
          Age: 30
        - Name: Bob
          Age: 25
    """).strip()
    )
    return path
