"""Binary writer that patches an existing buffer in place."""

from __future__ import annotations

import struct

from lantern.errors import TruncatedBuffer


class Writer:
    """Little-endian writer over a bytearray.

    Unlike a stream writer it never grows the buffer: every write must fit
    inside the existing data, otherwise TruncatedBuffer is raised and nothing
    is written.
    """

    def __init__(self, buffer: bytearray, position: int = 0) -> None:
        self._buffer = buffer
        self._position = 0
        self.position = position

    @property
    def position(self) -> int:
        """Current write position."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        """Seek to position."""
        if value < 0 or value > len(self._buffer):
            raise TruncatedBuffer(value, 0, len(self._buffer) - value)
        self._position = value

    @property
    def size(self) -> int:
        """Size of the underlying buffer."""
        return len(self._buffer)

    @property
    def remaining(self) -> int:
        """Bytes left between the position and the end of the buffer."""
        return len(self._buffer) - self._position

    def write_bytes(self, data: bytes) -> None:
        """Overwrite raw bytes at the current position."""
        if len(data) > self.remaining:
            raise TruncatedBuffer(self._position, len(data), self.remaining)
        self._buffer[self._position : self._position + len(data)] = data
        self._position += len(data)

    def write_vector(self, x: float, y: float, z: float) -> None:
        """Write three consecutive 32-bit floats."""
        self.write_bytes(struct.pack('<fff', x, y, z))
