"""Binary reader with position tracking over an in-memory save buffer."""

from __future__ import annotations

import struct

from lantern.errors import TruncatedBuffer


class Reader:
    """Bounds-checked little-endian reader.

    Short reads raise TruncatedBuffer instead of returning partial data.
    """

    def __init__(self, data: bytes | bytearray, position: int = 0) -> None:
        self._data = data
        self._position = 0
        self.position = position

    @property
    def position(self) -> int:
        """Current read position."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        """Set read position."""
        if value < 0 or value > len(self._data):
            raise TruncatedBuffer(value, 0, len(self._data) - value)
        self._position = value

    @property
    def remaining(self) -> int:
        """Bytes remaining to read."""
        return len(self._data) - self._position

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes."""
        if count > self.remaining:
            raise TruncatedBuffer(self._position, count, self.remaining)
        result = bytes(self._data[self._position : self._position + count])
        self._position += count
        return result

    def read_vector(self) -> tuple[float, float, float]:
        """Read three consecutive 32-bit floats."""
        return struct.unpack('<fff', self.read_bytes(12))

    def find(self, pattern: bytes) -> int:
        """Return the offset of the first `pattern` at or after the position, or -1.

        Does not advance the position.
        """
        return self._data.find(pattern, self._position)
