"""
Locate and patch the player position in a decrypted Bloodborne save.

The coordinate block has no fixed offset: it follows the first
`FF FF FF FF 00 00 00 00 00 00 00 00` pattern found after the LCED marker.
The zone id is different and always lives at absolute offset 4.

Layout:
    [0x04:0x08]            zone id, stored as 00 00 <block> <area>
    ... LCED ...           marker, variable offset
    ... FF FF FF FF 00*8   sentinel at or after the marker
    [+0:+12]               x, y, z as little-endian float32
"""

from __future__ import annotations

from pathlib import Path

from lantern.const import (
    COORD_OFFSET_AFTER_PATTERN,
    COORD_PATTERN,
    LCED_MARKER,
    ZONE_ID_OFFSET,
    ZONE_ID_SIZE,
)
from lantern.errors import FileReadFailed, FileWriteFailed, MarkerNotFound, PatternNotFound
from lantern.io.reader import Reader
from lantern.io.writer import Writer
from lantern.log import log
from lantern.model.location import CurrentPosition, Location


def locate_marker(buffer: bytes | bytearray) -> int:
    """Return the offset of the first LCED marker."""
    offset = Reader(buffer).find(LCED_MARKER)
    if offset == -1:
        log.debug('LCED marker not found')
        raise MarkerNotFound()
    log.debug(f'Found LCED marker at {offset:#x} ({offset})')
    return offset


def locate_coordinate_block(buffer: bytes | bytearray, search_from: int) -> int:
    """Return the offset of the coordinate block following `search_from`.

    The search starts at the marker itself; earlier sentinel patterns belong
    to unrelated records.
    """
    match = Reader(buffer, search_from).find(COORD_PATTERN)
    if match == -1:
        log.debug(f'Coordinate pattern not found after {search_from:#x}')
        raise PatternNotFound(search_from)
    offset = match + COORD_OFFSET_AFTER_PATTERN
    log.debug(f'Found coordinate pattern at {match:#x}, coordinates at {offset:#x} ({offset})')
    return offset


def read_position(buffer: bytes | bytearray, offset: int) -> tuple[float, float, float]:
    """Read x, y, z at `offset`."""
    return Reader(buffer, offset).read_vector()


def read_zone_id(buffer: bytes | bytearray) -> bytes:
    """Read the raw 4-byte zone id field."""
    return Reader(buffer, ZONE_ID_OFFSET).read_bytes(ZONE_ID_SIZE)


def encode_zone_id(code: bytes) -> bytes:
    """Expand a 2-byte `[area, block]` code into the on-disk field.

    The save stores it as `00 00 <block> <area>`. This layout has only been
    observed for the catalog's own map codes.
    """
    if len(code) != 2:
        raise ValueError(f'Zone id code must be 2 bytes, got {len(code)}')
    return bytes((0x00, 0x00, code[1], code[0]))


def write_position(buffer: bytearray, offset: int, x: float, y: float, z: float) -> None:
    """Overwrite the coordinate block at `offset`."""
    log.debug(f'Writing coordinates at {offset:#x}: X={x}, Y={y}, Z={z}')
    Writer(buffer, offset).write_vector(x, y, z)


def write_zone_id(buffer: bytearray, code: bytes) -> None:
    """Overwrite the zone id field with the expanded form of `code`."""
    field = encode_zone_id(code)
    log.debug(f'Writing zone id at {ZONE_ID_OFFSET:#x}: {field.hex(" ").upper()}')
    Writer(buffer, ZONE_ID_OFFSET).write_bytes(field)


def teleport(buffer: bytearray, location: Location) -> None:
    """Move the character in `buffer` to `location`.

    Both offsets are resolved and bounds-checked before anything is written,
    so a failure leaves the buffer untouched.

    Raises:
        MarkerNotFound, PatternNotFound, TruncatedBuffer
    """
    marker = locate_marker(buffer)
    coord_offset = locate_coordinate_block(buffer, marker)
    # reading both fields first proves they fit before anything is written
    read_zone_id(buffer)
    read_position(buffer, coord_offset)

    write_zone_id(buffer, location.zone_id)
    write_position(buffer, coord_offset, location.x, location.y, location.z)


def validate(buffer: bytes | bytearray) -> CurrentPosition:
    """Check the save structure and return the stored position.

    Raises:
        MarkerNotFound, PatternNotFound, TruncatedBuffer
    """
    marker = locate_marker(buffer)
    coord_offset = locate_coordinate_block(buffer, marker)
    x, y, z = read_position(buffer, coord_offset)
    zone_id = read_zone_id(buffer)
    return CurrentPosition(x=x, y=y, z=z, zone_id=zone_id)


def load_save(path: Path) -> bytearray:
    """Read a whole save file into a fresh buffer."""
    try:
        data = bytearray(path.read_bytes())
    except OSError as e:
        raise FileReadFailed(path, e.strerror or str(e)) from e
    log.debug(f'Read {len(data)} bytes from {path}')
    return data


def store_save(path: Path, buffer: bytes | bytearray) -> None:
    """Write the whole buffer back to `path`."""
    try:
        path.write_bytes(buffer)
    except OSError as e:
        raise FileWriteFailed(path, e.strerror or str(e)) from e
    log.debug(f'Wrote {len(buffer)} bytes to {path}')


def validate_file(path: Path) -> CurrentPosition:
    """Validate the save at `path` and return its current position."""
    return validate(load_save(path))


def teleport_file(path: Path, location: Location) -> None:
    """Read, patch and rewrite the save at `path`."""
    if not location.verified:
        log.warning(
            f'Coordinates of {location.name} are placeholders that have not been checked in game; '
            'the character may load out of bounds'
        )
    buffer = load_save(path)
    teleport(buffer, location)
    store_save(path, buffer)
    log.info(f'Teleported {path.name} to {location.name}')
