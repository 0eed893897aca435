"""Color pairs used by every screen."""

import curses

TITLE = 1
HIGHLIGHT = 2
ERROR = 3
SUCCESS = 4
MUTED = 5
KEY = 6
WARNING = 7


def init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(HIGHLIGHT, curses.COLOR_YELLOW, curses.COLOR_BLUE)
    curses.init_pair(ERROR, curses.COLOR_RED, -1)
    curses.init_pair(SUCCESS, curses.COLOR_GREEN, -1)
    curses.init_pair(MUTED, curses.COLOR_WHITE, -1)
    curses.init_pair(KEY, curses.COLOR_CYAN, -1)
    curses.init_pair(WARNING, curses.COLOR_YELLOW, -1)


def color(pair: int, *modifiers: int) -> int:
    """Attribute for a color pair, plain text on monochrome terminals."""
    attr = curses.color_pair(pair) if curses.has_colors() else 0
    for modifier in modifiers:
        attr |= modifier
    return attr
