"""
Tests for the interactive session state machine.
"""

from pathlib import Path

import pytest

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
from lantern.event import KeyAction, KeyInput
from lantern.locations import LOCATIONS, group_by_region
from lantern.save import validate_file


def press(app: App, *actions: KeyAction) -> None:
    for action in actions:
        app.handle(KeyInput(action))


def type_text(app: App, text: str) -> None:
    for char in text:
        app.handle(KeyInput(KeyAction.CHAR, char))


@pytest.fixture()
def app(save_path: Path) -> App:
    app = App(save_path.parent)
    app.refresh_file_list()
    return app


@pytest.fixture()
def selecting(app: App, save_path: Path) -> App:
    """Session that validated `save_path` and shows the destination list."""
    open_file(app, save_path.name)
    app.advance()
    press(app, KeyAction.ENTER)
    assert isinstance(app.mode, Selecting)
    return app


def open_file(app: App, name: str) -> None:
    app.selected_file = [entry.name for entry in app.file_list].index(name)
    press(app, KeyAction.ENTER)


class TestBrowsing:
    def test_initial_state(self, app: App) -> None:
        assert isinstance(app.mode, Browsing)
        assert app.selected_location == 0
        assert app.total_filtered_locations == len(LOCATIONS)

    def test_navigation_clamps(self, app: App) -> None:
        press(app, KeyAction.UP)
        assert app.selected_file == 0
        for _ in range(len(app.file_list) + 3):
            press(app, KeyAction.DOWN)
        assert app.selected_file == len(app.file_list) - 1

    def test_enter_directory(self, app: App, tmp_path: Path) -> None:
        (tmp_path / 'saves').mkdir()
        app.refresh_file_list()
        open_file(app, 'saves')
        assert app.current_path == tmp_path / 'saves'
        assert isinstance(app.mode, Browsing)

    def test_enter_file_starts_validation(self, app: App, save_path: Path) -> None:
        open_file(app, save_path.name)
        assert isinstance(app.mode, Validating)
        assert app.is_busy
        assert app.save_file_path == save_path


class TestValidation:
    def test_valid_file(self, app: App, save_path: Path) -> None:
        open_file(app, save_path.name)
        app.advance()
        assert isinstance(app.mode, ValidationOk)
        assert app.mode.position == validate_file(save_path)
        assert not app.is_busy

    def test_invalid_file(self, app: App, tmp_path: Path) -> None:
        (tmp_path / 'notes.txt').write_bytes(b'not a save')
        app.refresh_file_list()
        open_file(app, 'notes.txt')
        app.advance()
        assert isinstance(app.mode, ValidationFailed)
        assert 'LCED' in app.mode.message

    def test_failed_validation_goes_back(self, app: App, tmp_path: Path) -> None:
        (tmp_path / 'notes.txt').write_bytes(b'not a save')
        app.refresh_file_list()
        open_file(app, 'notes.txt')
        app.advance()
        press(app, KeyAction.ESCAPE)
        assert isinstance(app.mode, Browsing)
        assert app.save_file_path is None

    def test_busy_mode_ignores_input(self, app: App, save_path: Path) -> None:
        open_file(app, save_path.name)
        press(app, KeyAction.ESCAPE, KeyAction.DOWN, KeyAction.ENTER)
        assert isinstance(app.mode, Validating)

    def test_escape_from_success_returns_to_browser(self, app: App, save_path: Path) -> None:
        open_file(app, save_path.name)
        app.advance()
        press(app, KeyAction.ESCAPE)
        assert isinstance(app.mode, Browsing)
        assert app.current_position is None


class TestSelecting:
    def test_down_at_last_entry_is_noop(self, selecting: App) -> None:
        last = len(LOCATIONS) - 1
        selecting.selected_location = last
        press(selecting, KeyAction.DOWN)
        assert selecting.selected_location == last

    def test_up_at_first_entry_is_noop(self, selecting: App) -> None:
        press(selecting, KeyAction.UP)
        assert selecting.selected_location == 0

    def test_navigation(self, selecting: App) -> None:
        press(selecting, KeyAction.DOWN, KeyAction.DOWN, KeyAction.UP)
        assert selecting.selected_location == 1
        assert selecting.get_selected_location() == LOCATIONS[1]

    def test_escape_returns_to_browser(self, selecting: App) -> None:
        press(selecting, KeyAction.ESCAPE)
        assert isinstance(selecting.mode, Browsing)

    def test_enter_opens_confirmation_on_cancel(self, selecting: App) -> None:
        press(selecting, KeyAction.DOWN, KeyAction.ENTER)
        assert selecting.mode == Confirming(1)
        assert selecting.selected_destination == LOCATIONS[1]
        assert selecting.confirm_selection is False


class TestSearching:
    def test_search_keeps_filter_on_enter(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        assert isinstance(selecting.mode, Searching)
        type_text(selecting, 'hamlet')
        press(selecting, KeyAction.ENTER)
        assert isinstance(selecting.mode, Selecting)
        assert [loc.name for loc in selecting.filtered_locations] == ['Fishing Hamlet']

    def test_reentering_search_keeps_filter(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, 'cathedral')
        press(selecting, KeyAction.ENTER, KeyAction.SEARCH)
        assert selecting.search_query == 'cathedral'
        assert selecting.total_filtered_locations == 4

    def test_no_match_then_escape_restores_catalog(self, selecting: App) -> None:
        press(selecting, KeyAction.DOWN, KeyAction.DOWN, KeyAction.SEARCH)
        type_text(selecting, 'zzzz')
        assert selecting.total_filtered_locations == 0
        assert selecting.location_groups == []
        assert selecting.selected_location == 0

        press(selecting, KeyAction.ESCAPE)
        assert isinstance(selecting.mode, Selecting)
        assert selecting.search_query == ''
        assert selecting.location_groups == group_by_region(LOCATIONS)
        assert selecting.selected_location == 0

    def test_refilter_clamps_selection(self, selecting: App) -> None:
        selecting.selected_location = len(LOCATIONS) - 1
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, 'cathedral')
        assert selecting.selected_location == 3
        assert selecting.get_selected_location().name == 'Nightmare Grand Cathedral'

    def test_backspace_widens_filter(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, 'hamletx')
        assert selecting.total_filtered_locations == 0
        press(selecting, KeyAction.BACKSPACE)
        assert selecting.search_query == 'hamlet'
        assert selecting.total_filtered_locations == 1

    def test_text_keys_are_characters(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, "q/")
        assert selecting.search_query == 'q/'
        assert not selecting.should_quit

    def test_navigation_while_searching(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, 'yharnam')
        press(selecting, KeyAction.DOWN, KeyAction.DOWN, KeyAction.DOWN)
        assert selecting.selected_location == selecting.total_filtered_locations - 1

    def test_enter_on_empty_result_is_noop(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH)
        type_text(selecting, 'zzzz')
        press(selecting, KeyAction.ENTER, KeyAction.ENTER)
        assert isinstance(selecting.mode, Selecting)
        assert selecting.selected_destination is None


class TestConfirming:
    def test_cancel_by_default(self, selecting: App, save_path: Path) -> None:
        original = save_path.read_bytes()
        press(selecting, KeyAction.ENTER, KeyAction.ENTER)
        assert isinstance(selecting.mode, Selecting)
        assert save_path.read_bytes() == original

    def test_toggle(self, selecting: App) -> None:
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT)
        assert selecting.confirm_selection is True
        press(selecting, KeyAction.LEFT)
        assert selecting.confirm_selection is False

    def test_escape_cancels(self, selecting: App) -> None:
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ESCAPE)
        assert isinstance(selecting.mode, Selecting)

    def test_commit(self, selecting: App, save_path: Path) -> None:
        press(selecting, KeyAction.DOWN, KeyAction.DOWN, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        assert isinstance(selecting.mode, Committing)
        assert selecting.is_busy

        selecting.advance()
        assert selecting.mode == Committed(LOCATIONS[2])
        position = validate_file(save_path)
        assert position.coordinates == LOCATIONS[2].coordinates

    def test_commit_again_after_success(self, selecting: App) -> None:
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        selecting.advance()
        press(selecting, KeyAction.ENTER)
        assert isinstance(selecting.mode, Selecting)
        assert selecting.selected_destination is None

    def test_escape_after_success_returns_to_browser(self, selecting: App) -> None:
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        selecting.advance()
        press(selecting, KeyAction.ESCAPE)
        assert isinstance(selecting.mode, Browsing)

    def test_commit_failure(self, selecting: App, save_path: Path) -> None:
        save_path.write_bytes(b'\x00' * 64)
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        selecting.advance()
        assert isinstance(selecting.mode, CommitFailed)
        assert save_path.read_bytes() == b'\x00' * 64
        assert selecting.mode.save_untouched

        press(selecting, KeyAction.ENTER)
        assert isinstance(selecting.mode, Selecting)

    def test_commit_rereads_file(self, selecting: App, save_path: Path) -> None:
        save_path.unlink()
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        selecting.advance()
        assert isinstance(selecting.mode, CommitFailed)
        assert 'Failed to read' in selecting.mode.message
        assert selecting.mode.save_untouched

    def test_write_failure_may_leave_save_modified(self, selecting: App, monkeypatch: pytest.MonkeyPatch) -> None:
        def refuse(self, data):
            raise PermissionError(13, 'Permission denied')

        monkeypatch.setattr(Path, 'write_bytes', refuse)
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.ENTER)
        selecting.advance()
        assert isinstance(selecting.mode, CommitFailed)
        assert 'Permission denied' in selecting.mode.message
        assert not selecting.mode.save_untouched


class TestQuit:
    def test_quit_from_browsing(self, app: App) -> None:
        press(app, KeyAction.QUIT)
        assert app.should_quit

    def test_quit_from_busy_mode(self, app: App, save_path: Path) -> None:
        open_file(app, save_path.name)
        press(app, KeyAction.QUIT)
        assert app.should_quit

    def test_quit_from_confirmation_does_not_write(self, selecting: App, save_path: Path) -> None:
        original = save_path.read_bytes()
        press(selecting, KeyAction.ENTER, KeyAction.RIGHT, KeyAction.QUIT)
        assert selecting.should_quit
        assert save_path.read_bytes() == original

    def test_quit_while_searching(self, selecting: App) -> None:
        press(selecting, KeyAction.SEARCH, KeyAction.QUIT)
        assert selecting.should_quit


def test_none_input_is_ignored(app: App) -> None:
    app.handle(None)
    assert isinstance(app.mode, Browsing)
    assert not app.should_quit
