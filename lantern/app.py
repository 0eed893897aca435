"""
Interactive session state.

The session is a state machine over the mode dataclasses below. User intents
go through App.handle(); the two busy modes (Validating, Committing) are
completed by App.advance(), which the main loop calls right after drawing
them and before reading any further input.

    Browsing -> Validating -> ValidationOk | ValidationFailed
    ValidationOk -> Selecting <-> Searching
    Selecting -> Confirming -> Selecting | Committing
    Committing -> Committed | CommitFailed
    ValidationFailed -> Browsing
    Committed -> Selecting | Browsing
    CommitFailed -> Selecting
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lantern import locations
from lantern.browser import FileEntry, list_directory
from lantern.errors import FileWriteFailed, TeleportError
from lantern.event import KeyAction, KeyInput
from lantern.log import log
from lantern.model.location import CurrentPosition, Location, RegionGroup
from lantern.save import teleport_file, validate_file


@dataclass(frozen=True)
class Browsing:
    """Picking a save file."""


@dataclass(frozen=True)
class Validating:
    """Reading and checking the chosen file."""


@dataclass(frozen=True)
class ValidationOk:
    position: CurrentPosition


@dataclass(frozen=True)
class ValidationFailed:
    message: str


@dataclass(frozen=True)
class Selecting:
    """Browsing the (possibly filtered) lantern list."""


@dataclass(frozen=True)
class Searching:
    """Typing a filter for the lantern list."""


@dataclass(frozen=True)
class Confirming:
    index: int


@dataclass(frozen=True)
class Committing:
    """Writing the destination to the save file."""


@dataclass(frozen=True)
class Committed:
    location: Location


@dataclass(frozen=True)
class CommitFailed:
    message: str
    # False once a write was attempted and may have left the file partly written
    save_untouched: bool = True


Mode = (
    Browsing
    | Validating
    | ValidationOk
    | ValidationFailed
    | Selecting
    | Searching
    | Confirming
    | Committing
    | Committed
    | CommitFailed
)


class App:
    """State of one interactive session."""

    def __init__(self, start_dir: Path, catalog: tuple[Location, ...] | None = None) -> None:
        self.mode: Mode = Browsing()
        self.should_quit = False

        # File browser
        self.current_path = start_dir
        self.file_list: list[FileEntry] = []
        self.selected_file = 0

        # Destination list
        self.catalog = catalog if catalog is not None else locations.all_locations()
        self.search_query = ''
        self.location_groups: list[RegionGroup] = locations.group_by_region(self.catalog)
        self.selected_location = 0

        # Current cycle
        self.save_file_path: Path | None = None
        self.current_position: CurrentPosition | None = None
        self.selected_destination: Location | None = None
        self.confirm_selection = False

    # Derived views

    @property
    def filtered_locations(self) -> list[Location]:
        """Locations in display order (grouped, then flattened)."""
        return [loc for group in self.location_groups for loc in group.locations]

    @property
    def total_filtered_locations(self) -> int:
        return sum(len(group.locations) for group in self.location_groups)

    @property
    def is_busy(self) -> bool:
        """True when advance() has work to do before the next input."""
        return isinstance(self.mode, (Validating, Committing))

    @property
    def is_text_entry(self) -> bool:
        return isinstance(self.mode, Searching)

    def get_selected_location(self) -> Location | None:
        filtered = self.filtered_locations
        if 0 <= self.selected_location < len(filtered):
            return filtered[self.selected_location]
        return None

    # File browser

    def refresh_file_list(self) -> None:
        self.file_list = list_directory(self.current_path)
        self.selected_file = 0

    def move_file_up(self) -> None:
        if self.selected_file > 0:
            self.selected_file -= 1

    def move_file_down(self) -> None:
        if self.selected_file < len(self.file_list) - 1:
            self.selected_file += 1

    def navigate_to_selected(self) -> None:
        if not 0 <= self.selected_file < len(self.file_list):
            return
        entry = self.file_list[self.selected_file]
        if entry.is_dir:
            self.current_path = entry.path
            self.refresh_file_list()
        else:
            self.save_file_path = entry.path
            self.mode = Validating()

    # Destination list

    def move_location_up(self) -> None:
        if self.selected_location > 0:
            self.selected_location -= 1

    def move_location_down(self) -> None:
        if self.selected_location < self.total_filtered_locations - 1:
            self.selected_location += 1

    def apply_search_filter(self) -> None:
        matches = locations.search(self.search_query, self.catalog)
        self.location_groups = locations.group_by_region(matches)

        total = self.total_filtered_locations
        if total == 0:
            self.selected_location = 0
        elif self.selected_location >= total:
            self.selected_location = total - 1

    def clear_search(self) -> None:
        self.search_query = ''
        self.apply_search_filter()
        self.selected_location = 0
        self.mode = Selecting()

    def select_location(self) -> None:
        location = self.get_selected_location()
        if location is None:
            return
        self.selected_destination = location
        self.confirm_selection = False
        self.mode = Confirming(self.selected_location)

    # Automatic steps

    def validate_save_file(self) -> None:
        path = self.save_file_path
        if path is None:
            self.mode = ValidationFailed('No save file selected')
            return
        try:
            position = validate_file(path)
        except TeleportError as e:
            log.warning(f'Validation of {path} failed: {e}')
            self.mode = ValidationFailed(str(e))
            return
        log.info(f'Validated {path}: X={position.x} Y={position.y} Z={position.z} zone={position.zone_id_hex}')
        self.current_position = position
        self.mode = ValidationOk(position)

    def execute_teleport(self) -> None:
        path = self.save_file_path
        location = self.selected_destination
        if path is None or location is None:
            self.mode = CommitFailed('No save file or destination selected')
            return
        try:
            teleport_file(path, location)
        except FileWriteFailed as e:
            log.error(f'Writing {path} failed: {e}')
            self.mode = CommitFailed(str(e), save_untouched=False)
            return
        except TeleportError as e:
            log.warning(f'Teleport of {path} failed: {e}')
            self.mode = CommitFailed(str(e))
            return
        self.mode = Committed(location)

    def advance(self) -> None:
        """Run the pending automatic step, if any."""
        if isinstance(self.mode, Validating):
            self.validate_save_file()
        elif isinstance(self.mode, Committing):
            self.execute_teleport()

    # Session

    def go_back_to_file_browser(self) -> None:
        self.mode = Browsing()
        self.save_file_path = None
        self.current_position = None
        self.selected_destination = None
        self.search_query = ''
        self.selected_location = 0
        self.apply_search_filter()
        self.refresh_file_list()

    def go_to_selection(self) -> None:
        self.selected_destination = None
        self.mode = Selecting()

    def quit(self) -> None:
        self.should_quit = True

    # Input dispatch

    def handle(self, key: KeyInput | None) -> None:
        """Apply one user intent to the current mode."""
        if key is None:
            return
        if key.action is KeyAction.QUIT:
            self.quit()
            return

        action = key.action
        mode = self.mode
        if isinstance(mode, Browsing):
            if action is KeyAction.UP:
                self.move_file_up()
            elif action is KeyAction.DOWN:
                self.move_file_down()
            elif action is KeyAction.ENTER:
                self.navigate_to_selected()
        elif isinstance(mode, (Validating, Committing)):
            # busy: input is not read until advance() has run
            pass
        elif isinstance(mode, ValidationOk):
            if action is KeyAction.ENTER:
                self.mode = Selecting()
            elif action is KeyAction.ESCAPE:
                self.go_back_to_file_browser()
        elif isinstance(mode, ValidationFailed):
            if action in (KeyAction.ENTER, KeyAction.ESCAPE):
                self.go_back_to_file_browser()
        elif isinstance(mode, Selecting):
            if action is KeyAction.UP:
                self.move_location_up()
            elif action is KeyAction.DOWN:
                self.move_location_down()
            elif action is KeyAction.ENTER:
                self.select_location()
            elif action is KeyAction.ESCAPE:
                self.go_back_to_file_browser()
            elif action is KeyAction.SEARCH:
                self.mode = Searching()
        elif isinstance(mode, Searching):
            if action is KeyAction.ENTER:
                # keep the filter
                self.mode = Selecting()
            elif action is KeyAction.ESCAPE:
                self.clear_search()
            elif action is KeyAction.BACKSPACE:
                self.search_query = self.search_query[:-1]
                self.apply_search_filter()
            elif action is KeyAction.CHAR:
                self.search_query += key.char
                self.apply_search_filter()
            elif action is KeyAction.UP:
                self.move_location_up()
            elif action is KeyAction.DOWN:
                self.move_location_down()
        elif isinstance(mode, Confirming):
            if action is KeyAction.LEFT:
                self.confirm_selection = False
            elif action is KeyAction.RIGHT:
                self.confirm_selection = True
            elif action is KeyAction.ENTER:
                if self.confirm_selection:
                    self.mode = Committing()
                else:
                    self.mode = Selecting()
            elif action is KeyAction.ESCAPE:
                self.mode = Selecting()
        elif isinstance(mode, Committed):
            if action is KeyAction.ENTER:
                self.go_to_selection()
            elif action is KeyAction.ESCAPE:
                self.go_back_to_file_browser()
        elif isinstance(mode, CommitFailed):
            if action in (KeyAction.ENTER, KeyAction.ESCAPE):
                self.mode = Selecting()
        else:
            raise TypeError(f'Unhandled session mode: {mode!r}')
