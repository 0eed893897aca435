"""Progress and result screens for validation and teleport."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from lantern.ui.common import draw_footer, draw_frame, draw_lines
from lantern.ui.theme import ERROR, MUTED, SUCCESS, TITLE, WARNING, color

if TYPE_CHECKING:
    from lantern.app import App
    from lantern.model.location import CurrentPosition, Location


def render_busy(window: curses.window, message: str) -> None:
    height, _ = window.getmaxyx()
    draw_frame(window)
    draw_lines(window, height // 2, [(message, color(WARNING, curses.A_BOLD))])


def render_validation_success(window: curses.window, app: App, position: CurrentPosition) -> None:
    draw_frame(window, 'Save File Valid')
    path = str(app.save_file_path) if app.save_file_path else 'Unknown'
    draw_lines(
        window,
        3,
        [
            ('Valid Bloodborne save file detected', color(SUCCESS, curses.A_BOLD)),
            ('', 0),
            ('File:', color(MUTED)),
            (path, 0),
            ('', 0),
            ('Current Position:', color(TITLE, curses.A_BOLD)),
            (f'Zone ID: {position.zone_id_hex}', 0),
            (f'X: {position.x:.2f}  Y: {position.y:.2f}  Z: {position.z:.2f}', 0),
            ('', 0),
            ('Press Enter to select destination...', color(MUTED)),
        ],
    )
    draw_footer(window, [('Enter', 'Continue'), ('Esc', 'Change file'), ('q', 'Quit')])


def render_validation_error(window: curses.window, message: str) -> None:
    draw_frame(window, 'Validation Failed')
    draw_lines(
        window,
        3,
        [
            ('Invalid save file', color(ERROR, curses.A_BOLD)),
            ('', 0),
            ('Error:', color(WARNING)),
            (message, 0),
            ('', 0),
            ('Please select a valid decrypted Bloodborne save file.', color(MUTED)),
        ],
    )
    draw_footer(window, [('Enter/Esc', 'Go back'), ('q', 'Quit')])


def render_teleport_success(window: curses.window, location: Location) -> None:
    draw_frame(window, 'Success')
    draw_lines(
        window,
        3,
        [
            ('Successfully teleported!', color(SUCCESS, curses.A_BOLD)),
            ('', 0),
            ('Destination:', color(MUTED)),
            (f'{location.name} ({location.region})', color(WARNING, curses.A_BOLD)),
            (f'X: {location.x:.2f}  Y: {location.y:.2f}  Z: {location.z:.2f}', color(TITLE)),
            ('', 0),
            ('Your save file has been updated.', 0),
            ('Load your game to spawn at the new location!', color(MUTED)),
        ],
    )
    draw_footer(window, [('Enter', 'Teleport again'), ('Esc', 'Change file'), ('q', 'Quit')])


def render_teleport_error(window: curses.window, message: str, save_untouched: bool = True) -> None:
    draw_frame(window, 'Teleport Failed')
    if save_untouched:
        outcome = ('Your save file was not modified.', color(MUTED))
    else:
        outcome = ('The save file may be incomplete, restore it from your backup.', color(ERROR, curses.A_BOLD))
    draw_lines(
        window,
        3,
        [
            ('Teleport failed!', color(ERROR, curses.A_BOLD)),
            ('', 0),
            ('Error:', color(WARNING)),
            (message, 0),
            ('', 0),
            outcome,
        ],
    )
    draw_footer(window, [('Enter/Esc', 'Go back'), ('q', 'Quit')])
