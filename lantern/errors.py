"""
Errors raised while locating, reading and patching save files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lantern.model.location import Location


class TeleportError(Exception):
    """Base class for every failure surfaced to the operator."""


class FileReadFailed(TeleportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'Failed to read {path}: {reason}')
        self.path = path
        self.reason = reason


class FileWriteFailed(TeleportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'Failed to write {path}: {reason}')
        self.path = path
        self.reason = reason


class MarkerNotFound(TeleportError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            'Could not find LCED (4C 43 45 44) marker in save file. '
            'This may not be a valid decrypted Bloodborne save.'
        )


class PatternNotFound(TeleportError, ValueError):
    def __init__(self, search_from: int) -> None:
        super().__init__(
            f'Could not find coordinate pattern [FF FF FF FF 00 00 00 00 00 00 00 00] '
            f'after LCED marker at offset {search_from:#x}. '
            'The save file may be corrupted or in an unexpected format.'
        )
        self.search_from = search_from


class TruncatedBuffer(TeleportError, ValueError):
    def __init__(self, offset: int, wanted: int, available: int) -> None:
        super().__init__(f'Cannot access {wanted} bytes at offset {offset:#x}, only {max(available, 0)} available')
        self.offset = offset
        self.wanted = wanted
        self.available = available


class LocationNotFound(TeleportError, LookupError):
    def __init__(self, query: str) -> None:
        super().__init__(f'No locations found matching {query!r}')
        self.query = query


class AmbiguousLocation(TeleportError, LookupError):
    def __init__(self, query: str, matches: list[Location]) -> None:
        names = ', '.join(loc.name for loc in matches)
        super().__init__(f'Multiple locations match {query!r}: {names}')
        self.query = query
        self.matches = matches
