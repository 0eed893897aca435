"""Teleport destinations and positions read back from save files."""

from __future__ import annotations

import struct
from dataclasses import dataclass


def to_float32(value: float) -> float:
    """Round a Python float to the nearest IEEE-754 single precision value."""
    return struct.unpack('<f', struct.pack('<f', value))[0]


@dataclass(frozen=True)
class Location:
    """A lantern that can be teleported to.

    Coordinates are kept as float32 values so a position read back from a
    patched save compares equal to the destination. `zone_id` is the compact
    two byte map code `[area, block]`, e.g. `b'\\x18\\x01'` for m24_01.
    `verified` is False for placeholder coordinates not yet checked in game.
    """

    name: str
    region: str
    x: float
    y: float
    z: float
    zone_id: bytes
    verified: bool = True

    def __post_init__(self) -> None:
        if len(self.zone_id) != 2:
            raise ValueError(f'Zone id of {self.name!r} must be 2 bytes, got {len(self.zone_id)}')
        for axis in ('x', 'y', 'z'):
            object.__setattr__(self, axis, to_float32(getattr(self, axis)))

    @property
    def coordinates(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def describe(self) -> str:
        return f'{self.name} (X: {self.x:.2f}, Y: {self.y:.2f}, Z: {self.z:.2f})'


@dataclass(frozen=True)
class RegionGroup:
    """Locations sharing a region, in catalog order."""

    region: str
    locations: tuple[Location, ...]


@dataclass(frozen=True)
class CurrentPosition:
    """Position stored in a save file.

    `zone_id` is the raw 4-byte field at the start of the file.
    """

    x: float
    y: float
    z: float
    zone_id: bytes

    @property
    def coordinates(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def zone_id_hex(self) -> str:
        return self.zone_id.hex(' ').upper()
