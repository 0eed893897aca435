"""
Keyboard handling for the interactive session.

Keys are decoded into KeyInput intents. While a text field has focus,
printable keys (including 'q', '/' and hjkl) are text; Ctrl+C always quits.
"""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum


class KeyAction(Enum):
    QUIT = 'quit'
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    ENTER = 'enter'
    ESCAPE = 'escape'
    SEARCH = 'search'
    BACKSPACE = 'backspace'
    CHAR = 'char'


@dataclass(frozen=True)
class KeyInput:
    action: KeyAction
    char: str = ''


CTRL_C = '\x03'
ESC = '\x1b'

SPECIAL_KEYS = {
    curses.KEY_UP: KeyAction.UP,
    curses.KEY_DOWN: KeyAction.DOWN,
    curses.KEY_LEFT: KeyAction.LEFT,
    curses.KEY_RIGHT: KeyAction.RIGHT,
    curses.KEY_ENTER: KeyAction.ENTER,
    curses.KEY_BACKSPACE: KeyAction.BACKSPACE,
}

CONTROL_CHARS = {
    CTRL_C: KeyAction.QUIT,
    '\n': KeyAction.ENTER,
    '\r': KeyAction.ENTER,
    ESC: KeyAction.ESCAPE,
    '\x7f': KeyAction.BACKSPACE,
    '\x08': KeyAction.BACKSPACE,
}

# Only outside text entry
COMMAND_CHARS = {
    'q': KeyAction.QUIT,
    'k': KeyAction.UP,
    'j': KeyAction.DOWN,
    'h': KeyAction.LEFT,
    'l': KeyAction.RIGHT,
    '/': KeyAction.SEARCH,
}


def decode_key(key: int | str, text_entry: bool = False) -> KeyInput | None:
    """Translate a curses key into an intent, or None for keys we ignore.

    `key` is what `window.get_wch()` returns: a str for characters, an int
    for function keys (arrows, KEY_RESIZE, ...).
    """
    if isinstance(key, int):
        action = SPECIAL_KEYS.get(key)
        return KeyInput(action) if action else None

    if key in CONTROL_CHARS:
        return KeyInput(CONTROL_CHARS[key])
    if not text_entry and key in COMMAND_CHARS:
        return KeyInput(COMMAND_CHARS[key])
    if key.isprintable():
        return KeyInput(KeyAction.CHAR, key)
    return None


class EventHandler:
    """Blocking key reader with a tick timeout."""

    def __init__(self, window: curses.window, tick_rate_ms: int) -> None:
        self._window = window
        self._window.timeout(tick_rate_ms)

    def next(self, text_entry: bool = False) -> KeyInput | None:
        """Wait for one key; None on tick, resize or an ignored key."""
        try:
            key = self._window.get_wch()
        except curses.error:
            # timeout: no key within the tick
            return None
        return decode_key(key, text_entry)
