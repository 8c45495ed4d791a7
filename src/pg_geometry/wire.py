"""Byte-buffer reader/writer used by the geometric codecs.

All multi-byte values are network byte order (big-endian), matching the
PostgreSQL binary protocol.
"""

from __future__ import annotations

import struct

from pg_geometry.errors import MalformedInputError

_F64 = struct.Struct(">d")


class WireReader:
    """Sequential reader over a fixed byte slice."""

    def __init__(self, data: bytes | bytearray | memoryview, *, type_name: str = "value") -> None:
        self._data = bytes(data)
        self._offset = 0
        self._type_name = type_name

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or fail without consuming anything."""
        if self.remaining < size:
            raise MalformedInputError(self._type_name, expected=self._offset + size, actual=len(self._data))
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def read_f64(self) -> float:
        return _F64.unpack(self.read_exact(_F64.size))[0]

    def expect_end(self) -> None:
        if self.remaining:
            raise MalformedInputError(self._type_name, expected=self._offset, actual=len(self._data))


class WireWriter:
    """Append-only output buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write(self, raw: bytes) -> None:
        self._buffer.extend(raw)

    def write_f64(self, value: float) -> None:
        self._buffer.extend(_F64.pack(value))

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


def require_size(data: bytes | bytearray | memoryview, size: int, type_name: str) -> None:
    """Fail unless ``data`` is exactly the fixed wire size of ``type_name``."""
    if len(data) != size:
        raise MalformedInputError(type_name, expected=size, actual=len(data))
