"""Teleport confirmation dialog."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from lantern.ui.common import draw_footer, draw_frame, draw_lines, put
from lantern.ui.theme import ERROR, HIGHLIGHT, MUTED, TITLE, WARNING, color

if TYPE_CHECKING:
    from lantern.app import App

CANCEL = '[ Cancel ]'
CONFIRM = '[ Confirm ]'


def render_confirmation(window: curses.window, app: App) -> None:
    height, width = window.getmaxyx()
    draw_frame(window, 'Confirm Teleport')

    location = app.selected_destination
    lines = [('You are about to teleport to:', 0), ('', 0)]
    if location is not None:
        lines += [
            (f'{location.name} ({location.region})', color(WARNING, curses.A_BOLD)),
            (f'X: {location.x:.2f}  Y: {location.y:.2f}  Z: {location.z:.2f}', color(TITLE)),
        ]
        if not location.verified:
            lines.append(('Placeholder coordinates, not checked in game', color(WARNING, curses.A_BOLD)))
    lines += [
        ('', 0),
        ('This will modify your save file.', color(ERROR)),
        ('Make sure you have a backup!', color(ERROR, curses.A_BOLD)),
    ]
    top = max((height - len(lines)) // 2 - 2, 2)
    draw_lines(window, top, lines)

    buttons_row = top + len(lines) + 2
    gap = 6
    x = max((width - len(CANCEL) - len(CONFIRM) - gap) // 2, 2)
    selected = color(HIGHLIGHT, curses.A_BOLD)
    put(window, buttons_row, x, CANCEL, color(MUTED) if app.confirm_selection else selected)
    put(window, buttons_row, x + len(CANCEL) + gap, CONFIRM, selected if app.confirm_selection else color(MUTED))

    draw_footer(window, [('Left/Right', 'Switch'), ('Enter', 'Select'), ('Esc', 'Cancel'), ('q', 'Quit')])
