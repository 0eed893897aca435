#!/usr/bin/env python3
"""
Interactive lantern teleport.

Usage: lantern-teleport-tui [start_dir]

Browse to a decrypted save file (userdata0000, userdata0001, ...), pick a
lantern and confirm. Set LANTERN_TELEPORT_LOG to keep a log file.
"""

from __future__ import annotations

import argparse
import curses
import logging
from pathlib import Path

from lantern.app import App
from lantern.const import START_DIR, TICK_RATE_MS, TUI_LOG_FILE
from lantern.event import EventHandler
from lantern.log import log, setup_logging, silence_logging
from lantern.ui import render
from lantern.ui.theme import init_colors


def run_app(window: curses.window, app: App, events: EventHandler) -> None:
    """Main loop: draw, then either finish a busy step or wait for one key."""
    while not app.should_quit:
        render(window, app)

        if app.is_busy:
            # drawn once, completed before any further input is read
            app.advance()
            continue

        app.handle(events.next(text_entry=app.is_text_entry))


def configure_logging(filename: Path | None) -> None:
    """Log to filename at DEBUG, or not at all while curses owns the screen."""
    if filename is not None:
        setup_logging(logging.DEBUG, filename)
    else:
        silence_logging()


def _session(window: curses.window, start_dir: Path) -> None:
    curses.raw()
    curses.curs_set(0)
    curses.set_escdelay(25)
    window.keypad(True)
    init_colors()

    app = App(start_dir)
    app.refresh_file_list()
    run_app(window, app, EventHandler(window, TICK_RATE_MS))


def main() -> None:
    parser = argparse.ArgumentParser(description='Teleport to any lantern in Bloodborne save files')
    parser.add_argument(
        'start_dir',
        nargs='?',
        type=Path,
        default=START_DIR,
        help=f'Directory to start browsing in (default: {START_DIR})',
    )
    args = parser.parse_args()

    configure_logging(TUI_LOG_FILE)

    start_dir = args.start_dir.expanduser().resolve()
    if not start_dir.is_dir():
        parser.error(f'Not a directory: {start_dir}')

    log.info(f'Starting session in {start_dir}')
    curses.wrapper(_session, start_dir)


if __name__ == '__main__':
    main()
