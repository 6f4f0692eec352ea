"""Turning key presses into messages."""

from __future__ import annotations

import curses
from typing import Optional, Union

from modaledit.model import (
    ChangeMode,
    CommandLine,
    CommandMode,
    Delete,
    InsertMode,
    Message,
    Mode,
    Model,
    NewChar,
    NewLine,
    NormalMode,
    Quit,
)

POLL_TIMEOUT_MS = 250
ESCAPE = "\x1b"
BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, "\x7f", "\b"})
ENTER_KEYS = frozenset({curses.KEY_ENTER, "\n", "\r"})

Key = Union[str, int]


def _editing_key(key: Key) -> Optional[Message]:
    if key in BACKSPACE_KEYS:
        return Delete()
    if key in ENTER_KEYS:
        return NewLine()
    if key == ESCAPE:
        return ChangeMode(NormalMode())
    if isinstance(key, str) and key.isprintable():
        return NewChar(key)
    return None


def _normal_key(key: Key) -> Optional[Message]:
    match key:
        case "q":
            return Quit()
        case "i":
            return ChangeMode(InsertMode())
        case ":":
            return ChangeMode(CommandMode(CommandLine()))
    return None


def handle_key(mode: Mode, key: Key) -> Optional[Message]:
    """Message for a key in the given mode, or None if the key means nothing."""
    if isinstance(mode, NormalMode):
        return _normal_key(key)
    return _editing_key(key)


def read_message(screen, model: Model) -> Optional[Message]:
    """Wait briefly for a key and translate it; None when no key came."""
    screen.timeout(POLL_TIMEOUT_MS)
    try:
        key = screen.get_wch()
    except curses.error:
        return None
    return handle_key(model.mode, key)