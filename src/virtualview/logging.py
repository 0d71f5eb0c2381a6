"""
Logging for virtualview.

Every package logger is a child of ``virtualview``.  The widgets log very
little: unknown field names and failing event handlers at WARNING, selection
moves and sorts at DEBUG.  Nothing is printed until the host application (or
the CLI) calls :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "virtualview"
LEVEL_ENV_VAR = "VIRTUALVIEW_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)


def _resolve_level(value: str | int | None, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    if value is None:
        value = os.environ.get(LEVEL_ENV_VAR)
    if value is None or value == "":
        return logging.WARNING
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError:
        pass
    resolved = logging.getLevelName(value.upper())
    # unknown names come back as "Level <name>"
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def setup_logging(
    level: str | int | None = None,
    *,
    verbose: bool = False,
    stream: TextIO | None = None,
    file: str | None = None,
    format: str | None = None,
) -> int:
    """
    Attach handlers to the ``virtualview`` logger.

    Calling it again replaces the handlers from the previous call.

    Parameters
    ----------
    level:
        Level name or number.  Defaults to ``$VIRTUALVIEW_LOG_LEVEL``, then
        ``WARNING``.
    verbose:
        Force ``DEBUG``; the CLI's ``-v`` flag.
    stream:
        Console stream, ``sys.stderr`` by default.
    file:
        Optional log file receiving the same records.

    Returns
    -------
    int
        The level that was applied.
    """
    resolved = _resolve_level(level, verbose)
    formatter = logging.Formatter(format or DEFAULT_FORMAT)

    _root_logger.setLevel(resolved)
    _root_logger.handlers.clear()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    _root_logger.addHandler(console)

    if file:
        file_handler = logging.FileHandler(file)
        file_handler.setFormatter(formatter)
        _root_logger.addHandler(file_handler)

    return resolved


def get_logger(name: str) -> logging.Logger:
    """
    Return the package logger for a submodule.

    >>> get_logger("sorting").name
    'virtualview.sorting'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
