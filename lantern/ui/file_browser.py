"""Save file browser screen."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from lantern.ui.common import draw_footer, draw_frame, put, scroll_top
from lantern.ui.theme import HIGHLIGHT, MUTED, TITLE, color

if TYPE_CHECKING:
    from lantern.app import App


def render_file_browser(window: curses.window, app: App) -> None:
    height, _ = window.getmaxyx()
    draw_frame(window, 'Select Save File')

    put(window, 2, 2, str(app.current_path), color(TITLE, curses.A_BOLD))
    total = len(app.file_list)
    put(window, 3, 2, f'Files ({min(app.selected_file + 1, total)}/{total})', color(MUTED))

    top_row = 5
    visible = height - top_row - 3
    first = scroll_top(app.selected_file, visible)
    for row, entry in enumerate(app.file_list[first : first + max(visible, 0)]):
        index = first + row
        name = entry.name + ('/' if entry.is_dir and entry.name != '..' else '')
        if index == app.selected_file:
            put(window, top_row + row, 2, f'> {name}', color(HIGHLIGHT, curses.A_BOLD))
        else:
            put(window, top_row + row, 2, f'  {name}')

    draw_footer(window, [('Up/Down', 'Navigate'), ('Enter', 'Select'), ('q', 'Quit')])
