"""
Key parsing for terminal input.

Translates raw bytes read from stdin into ``Key`` objects.  Only the keys a
collection widget navigates with are named specially (arrows, home/end,
page up/down, enter, space, escape); everything else printable becomes a
plain character key.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Key:
    """
    Parsed representation of a single key press.

    Attributes
    ----------
    name:
        Symbolic name for special keys (e.g. ``'enter'``, ``'up'``).
        For plain printable characters this equals *char*.
    char:
        The literal character, if printable.
    ctrl, alt, shift:
        Modifier flags.
    """

    name: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


KEY_ENTER = Key(name="enter", char="\r")
KEY_ESCAPE = Key(name="escape")
KEY_SPACE = Key(name="space", char=" ")
KEY_TAB = Key(name="tab", char="\t")
KEY_BACKSPACE = Key(name="backspace")

KEY_UP = Key(name="up")
KEY_DOWN = Key(name="down")
KEY_LEFT = Key(name="left")
KEY_RIGHT = Key(name="right")
KEY_HOME = Key(name="home")
KEY_END = Key(name="end")
KEY_PAGE_UP = Key(name="page_up")
KEY_PAGE_DOWN = Key(name="page_down")

KEY_UNKNOWN = Key(name="unknown")

# Final byte of ``ESC [ <final>`` and ``ESC O <final>`` sequences
_FINAL_BYTE: dict[str, Key] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

# ``ESC [ <number> ~`` sequences
_TILDE_CODE: dict[int, Key] = {
    1: KEY_HOME,
    4: KEY_END,
    5: KEY_PAGE_UP,
    6: KEY_PAGE_DOWN,
    7: KEY_HOME,
    8: KEY_END,
}


def _with_modifiers(base: Key, code: str) -> Key:
    """Apply an xterm ``;N`` modifier code (``N = 1 + shift + 2*alt + 4*ctrl``)."""
    try:
        bits = int(code) - 1
    except ValueError:
        return base
    return Key(
        name=base.name,
        char=base.char,
        shift=bool(bits & 1),
        alt=bool(bits & 2),
        ctrl=bool(bits & 4),
    )


def _parse_csi(text: str) -> Key:
    if not text:
        return KEY_UNKNOWN

    final = text[-1]
    params = text[:-1].split(";") if len(text) > 1 else []

    if final == "~":
        try:
            base = _TILDE_CODE.get(int(params[0]))
        except (IndexError, ValueError):
            return KEY_UNKNOWN
        if base is None:
            return KEY_UNKNOWN
        return _with_modifiers(base, params[1]) if len(params) == 2 else base

    base = _FINAL_BYTE.get(final)
    if base is None:
        return KEY_UNKNOWN
    if len(params) == 2:
        return _with_modifiers(base, params[1])
    return base


def parse_key(data: bytes) -> Key:
    """
    Parse raw terminal input bytes into a ``Key``.

    >>> parse_key(b"\\x1b[B").name
    'down'
    >>> parse_key(b"j").name
    'j'
    """
    if not data:
        return KEY_UNKNOWN

    if data[:1] == b"\x1b":
        if len(data) == 1:
            return KEY_ESCAPE
        try:
            rest = data[2:].decode("ascii")
        except UnicodeDecodeError:
            return KEY_UNKNOWN
        if data[1:2] == b"[":
            return _parse_csi(rest)
        if data[1:2] == b"O":
            return _FINAL_BYTE.get(rest, KEY_UNKNOWN)
        if len(data) == 2 and chr(data[1]).isprintable():
            ch = chr(data[1])
            return Key(name=f"alt+{ch}", char=ch, alt=True)
        return KEY_UNKNOWN

    byte = data[0]
    if byte in (0x0D, 0x0A):
        return KEY_ENTER
    if byte == 0x09:
        return KEY_TAB
    if byte in (0x7F, 0x08):
        return KEY_BACKSPACE
    if 1 <= byte <= 26:
        letter = chr(byte + 96)
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)

    try:
        ch = data.decode("utf-8")
    except UnicodeDecodeError:
        return KEY_UNKNOWN
    if len(ch) == 1 and ch.isprintable():
        return KEY_SPACE if ch == " " else Key(name=ch, char=ch)
    return KEY_UNKNOWN
