"""Drawing helpers shared by the screens."""

from __future__ import annotations

import curses

from lantern.ui.theme import KEY, TITLE, color

APP_TITLE = ' Lantern Teleport '


def put(window: curses.window, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write `text` clipped to the window; lines outside it are dropped."""
    height, width = window.getmaxyx()
    if y < 0 or y >= height or x >= width:
        return
    # the bottom-right cell cannot be written without moving the cursor off screen
    limit = width - x - 1
    if limit > 0:
        window.addnstr(y, x, text, limit, attr)


def put_centered(window: curses.window, y: int, text: str, attr: int = 0) -> None:
    _, width = window.getmaxyx()
    put(window, y, max((width - len(text)) // 2, 0), text, attr)


def draw_frame(window: curses.window, subtitle: str = '') -> None:
    """Clear the window and draw the border and title."""
    window.erase()
    window.border()
    put(window, 0, 2, APP_TITLE + (f'- {subtitle} ' if subtitle else ''), color(TITLE, curses.A_BOLD))


def draw_footer(window: curses.window, hints: list[tuple[str, str]]) -> None:
    """Draw `key: description` pairs on the last line inside the frame."""
    height, _ = window.getmaxyx()
    x = 2
    for key, description in hints:
        put(window, height - 2, x, key, color(KEY, curses.A_BOLD))
        x += len(key)
        text = f': {description}  '
        put(window, height - 2, x, text)
        x += len(text)


def draw_lines(window: curses.window, top: int, lines: list[tuple[str, int]]) -> None:
    """Draw centered lines starting at row `top`."""
    for offset, (text, attr) in enumerate(lines):
        put_centered(window, top + offset, text, attr)


def scroll_top(selected: int, visible: int) -> int:
    """First row to show so that `selected` stays inside `visible` rows."""
    if visible <= 0:
        return selected
    return max(selected - visible + 1, 0)
