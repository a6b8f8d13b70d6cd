"""Little-endian byte cursor.

This module provides the low-level reads every other decoding stage is built
on. All multi-byte integers are little-endian and fixed width.
"""

from __future__ import annotations

import struct
from typing import Sequence

from ..exceptions import OutOfBoundsError

Buffer = bytes | bytearray | memoryview

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I8 = struct.Struct("<b")
_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")


class ByteReader:
    """Reads fixed-width values from a byte buffer.

    The buffer is wrapped in a memoryview, so no copy is made. Each read
    advances the offset by the width of the value; a read that would run past
    the end raises OutOfBoundsError and leaves the offset unchanged.

    Example:
        >>> reader = ByteReader(b"\\xc4\\x30\\x03")
        >>> hex(reader.read_u16())
        '0x30c4'
        >>> reader.read_u8()
        3
    """

    def __init__(self, data: Buffer) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read from
        """
        self._view = memoryview(data).cast("B")
        self._position = 0

    @property
    def position(self) -> int:
        """Current read offset in bytes."""
        return self._position

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def _require(self, num_bytes: int) -> None:
        if num_bytes > self.bytes_remaining():
            raise OutOfBoundsError(
                f"Read of {num_bytes} bytes at offset {self._position} exceeds buffer "
                f"({self.bytes_remaining()} bytes remaining)"
            )

    def _unpack(self, fmt: struct.Struct) -> int:
        self._require(fmt.size)
        (value,) = fmt.unpack_from(self._view, self._position)
        self._position += fmt.size
        return value

    def read_u8(self) -> int:
        self._require(1)
        value = self._view[self._position]
        self._position += 1
        return value

    def read_u16(self) -> int:
        return self._unpack(_U16)

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_u64(self) -> int:
        return self._unpack(_U64)

    def read_i8(self) -> int:
        return self._unpack(_I8)

    def read_i16(self) -> int:
        return self._unpack(_I16)

    def read_i32(self) -> int:
        return self._unpack(_I32)

    def read_i64(self) -> int:
        return self._unpack(_I64)

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            A copy of the bytes read

        Raises:
            OutOfBoundsError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")
        self._require(num_bytes)
        start = self._position
        self._position += num_bytes
        return self._view[start : self._position].tobytes()

    def read_ascii_string(self, length: int) -> str:
        """Read ``length`` single-byte characters.

        Each byte becomes the character with the same code point; the bytes
        are never decoded as UTF-8.
        """
        return self.read_bytes(length).decode("latin-1")

    def read_name(self, names: Sequence[str]) -> str | None:
        """Read an i32 name index and resolve it against ``names``.

        Returns:
            The name at that index, or None when the index is out of range
        """
        index = self.read_i32()
        if 0 <= index < len(names):
            return names[index]
        return None

    def remaining_bytes(self) -> memoryview:
        """Return a view of all unread bytes without advancing."""
        return self._view[self._position :]
