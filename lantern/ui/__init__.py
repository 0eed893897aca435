"""Curses screens for the interactive session."""

from __future__ import annotations

import curses

from lantern.app import (
    App,
    Browsing,
    CommitFailed,
    Committed,
    Committing,
    Confirming,
    Searching,
    Selecting,
    ValidationFailed,
    ValidationOk,
    Validating,
)
from lantern.ui.confirmation import render_confirmation
from lantern.ui.file_browser import render_file_browser
from lantern.ui.location_list import render_location_list
from lantern.ui.status import (
    render_busy,
    render_teleport_error,
    render_teleport_success,
    render_validation_error,
    render_validation_success,
)

__all__ = ['render']


def render(window: curses.window, app: App) -> None:
    """Draw the screen for the current session mode."""
    mode = app.mode
    if isinstance(mode, Browsing):
        render_file_browser(window, app)
    elif isinstance(mode, Validating):
        render_busy(window, 'Validating save file...')
    elif isinstance(mode, ValidationOk):
        render_validation_success(window, app, mode.position)
    elif isinstance(mode, ValidationFailed):
        render_validation_error(window, mode.message)
    elif isinstance(mode, (Selecting, Searching)):
        render_location_list(window, app)
    elif isinstance(mode, Confirming):
        render_confirmation(window, app)
    elif isinstance(mode, Committing):
        render_busy(window, 'Teleporting...')
    elif isinstance(mode, Committed):
        render_teleport_success(window, mode.location)
    elif isinstance(mode, CommitFailed):
        render_teleport_error(window, mode.message, mode.save_untouched)
    else:
        raise TypeError(f'Unhandled session mode: {mode!r}')
    window.refresh()
