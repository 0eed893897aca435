"""
Pytest configuration and shared fixtures.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from lantern.const import COORD_PATTERN, LCED_MARKER
from lantern.log import log


def build_save(size: int = 256, marker_at: int | None = 100, pattern_at: int | None = 150) -> bytearray:
    """Build a synthetic decrypted save.

    Filler bytes are 0xAB so nothing but the placed structures can match.
    """
    data = bytearray(b'\xab' * size)
    data[4:8] = b'\x00\x00\x00\x15'
    if marker_at is not None:
        data[marker_at : marker_at + len(LCED_MARKER)] = LCED_MARKER
    if pattern_at is not None:
        data[pattern_at : pattern_at + len(COORD_PATTERN)] = COORD_PATTERN
    return data


@pytest.fixture()
def make_save() -> Callable[..., bytearray]:
    """Return the synthetic save builder."""
    return build_save


@pytest.fixture()
def save_buffer() -> bytearray:
    """Save with the marker at 100 and the coordinate pattern at 150."""
    return build_save()


@pytest.fixture()
def save_path(tmp_path: Path, save_buffer: bytearray) -> Path:
    """Write the default synthetic save to a temporary userdata file."""
    path = tmp_path / 'userdata0000'
    path.write_bytes(save_buffer)
    return path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo setup_logging() and silence_logging() so handlers bound to captured streams do not leak."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    lantern_handlers = log.handlers[:]
    propagate = log.propagate
    yield
    log.handlers[:] = lantern_handlers
    log.propagate = propagate
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
