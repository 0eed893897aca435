"""Destination list with incremental search."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from lantern.app import Searching
from lantern.ui.common import draw_footer, draw_frame, put, scroll_top
from lantern.ui.theme import HIGHLIGHT, MUTED, TITLE, WARNING, color

if TYPE_CHECKING:
    from lantern.app import App


def build_rows(app: App) -> tuple[list[tuple[str, int]], int]:
    """Display rows for the grouped list and the row of the selected entry."""
    rows: list[tuple[str, int]] = []
    selected_row = 0
    index = 0
    for group in app.location_groups:
        rows.append((group.region, color(TITLE, curses.A_BOLD, curses.A_UNDERLINE)))
        rows.append(('-' * 60, color(MUTED)))
        for location in group.locations:
            if index == app.selected_location:
                selected_row = len(rows)
                rows.append((f'> {location.describe()}', color(HIGHLIGHT, curses.A_BOLD)))
            else:
                rows.append((f'  {location.describe()}', 0))
            index += 1
        rows.append(('', 0))
    return rows, selected_row


def render_location_list(window: curses.window, app: App) -> None:
    height, _ = window.getmaxyx()
    searching = isinstance(app.mode, Searching)
    draw_frame(window, 'Select Destination')

    if searching:
        put(window, 2, 2, f'Search: {app.search_query}_', color(WARNING, curses.A_BOLD))
    elif app.search_query:
        put(window, 2, 2, f'Search: {app.search_query}', color(MUTED))
    else:
        put(window, 2, 2, 'Press / to search...', color(MUTED))

    total = app.total_filtered_locations
    put(window, 3, 2, f'Locations ({min(app.selected_location + 1, total)}/{total})', color(MUTED))

    top_row = 5
    visible = height - top_row - 3
    if total == 0:
        put(window, top_row, 2, 'No locations match the search.', color(WARNING))
    else:
        rows, selected_row = build_rows(app)
        first = scroll_top(selected_row, visible)
        for offset, (text, attr) in enumerate(rows[first : first + max(visible, 0)]):
            put(window, top_row + offset, 2, text, attr)

    if searching:
        hints = [('Type', 'Filter'), ('Enter', 'Confirm'), ('Esc', 'Clear search'), ('Ctrl+C', 'Quit')]
    else:
        hints = [('/', 'Search'), ('Up/Down', 'Navigate'), ('Enter', 'Select'), ('Esc', 'Change file'), ('q', 'Quit')]
    draw_footer(window, hints)
