"""Unit tests for the byte reader."""

from __future__ import annotations

import struct

import pytest

from usmap import ByteReader, OutOfBoundsError


class TestIntegerReads:
    """Test fixed-width integer reads."""

    def test_unsigned_little_endian(self) -> None:
        """Test unsigned reads are little-endian and advance by width."""
        data = b"\x01" + b"\x02\x01" + b"\x04\x03\x02\x01" + b"\x08\x07\x06\x05\x04\x03\x02\x01"
        reader = ByteReader(data)

        assert reader.read_u8() == 0x01
        assert reader.position == 1
        assert reader.read_u16() == 0x0102
        assert reader.position == 3
        assert reader.read_u32() == 0x01020304
        assert reader.position == 7
        assert reader.read_u64() == 0x0102030405060708
        assert reader.position == 15
        assert reader.bytes_remaining() == 0

    def test_signed(self) -> None:
        """Test signed reads use two's complement."""
        data = struct.pack("<bhiq", -1, -2, -3, -4)
        reader = ByteReader(data)

        assert reader.read_i8() == -1
        assert reader.read_i16() == -2
        assert reader.read_i32() == -3
        assert reader.read_i64() == -4

    def test_u64_full_range(self) -> None:
        """Test u64 and i64 interpret the same bytes differently."""
        data = b"\xff" * 8
        assert ByteReader(data).read_u64() == 0xFFFFFFFFFFFFFFFF
        assert ByteReader(data).read_i64() == -1

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test any bytes-like buffer can be read."""
        assert ByteReader(bytearray(b"\xc4\x30")).read_u16() == 0x30C4
        assert ByteReader(memoryview(b"\x00\xc4\x30")[1:]).read_u16() == 0x30C4


class TestBounds:
    """Test reads past the end of the buffer."""

    @pytest.mark.parametrize(
        "method,available",
        [
            ("read_u8", 0),
            ("read_u16", 1),
            ("read_u32", 3),
            ("read_u64", 7),
            ("read_i8", 0),
            ("read_i16", 1),
            ("read_i32", 3),
            ("read_i64", 7),
        ],
    )
    def test_short_read_raises(self, method: str, available: int) -> None:
        """Test a read one byte short fails without advancing."""
        reader = ByteReader(b"\x00" * available)

        with pytest.raises(OutOfBoundsError):
            getattr(reader, method)()

        assert reader.position == 0

    def test_string_past_end(self) -> None:
        """Test string reads are bounds-checked."""
        reader = ByteReader(b"abc")
        with pytest.raises(OutOfBoundsError, match="exceeds buffer"):
            reader.read_ascii_string(4)

    def test_negative_byte_count(self) -> None:
        """Test negative lengths are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            ByteReader(b"abc").read_bytes(-1)


class TestStrings:
    """Test fixed-length string reads."""

    def test_ascii(self) -> None:
        """Test plain ASCII text."""
        reader = ByteReader(b"Actor")
        assert reader.read_ascii_string(5) == "Actor"
        assert reader.bytes_remaining() == 0

    def test_bytes_map_to_code_points(self) -> None:
        """Test high bytes map to the same code point, not UTF-8."""
        reader = ByteReader(b"\xc3\xa9\xff")
        result = reader.read_ascii_string(3)

        assert result == "Ã©ÿ"
        assert [ord(c) for c in result] == [0xC3, 0xA9, 0xFF]

    def test_zero_length(self) -> None:
        """Test an empty string consumes nothing."""
        reader = ByteReader(b"x")
        assert reader.read_ascii_string(0) == ""
        assert reader.position == 0


class TestNames:
    """Test name index resolution."""

    NAMES = ["None", "Actor", "Pawn"]

    def test_in_range(self) -> None:
        """Test valid indices resolve to the table entry."""
        reader = ByteReader(struct.pack("<iii", 0, 1, 2))
        assert [reader.read_name(self.NAMES) for _ in range(3)] == self.NAMES

    @pytest.mark.parametrize("index", [3, 100, -1, -(2**31)])
    def test_out_of_range_is_absent(self, index: int) -> None:
        """Test out-of-range indices resolve to None instead of raising."""
        reader = ByteReader(struct.pack("<i", index))
        assert reader.read_name(self.NAMES) is None
        assert reader.position == 4

    def test_empty_table(self) -> None:
        """Test index 0 against an empty table is absent."""
        assert ByteReader(struct.pack("<i", 0)).read_name([]) is None


class TestRemainingBytes:
    """Test the unread-bytes view."""

    def test_does_not_advance(self) -> None:
        """Test remaining_bytes returns the tail and leaves the cursor alone."""
        reader = ByteReader(b"\x01\x02\x03\x04")
        reader.read_u8()

        remaining = reader.remaining_bytes()

        assert bytes(remaining) == b"\x02\x03\x04"
        assert reader.position == 1
        assert reader.read_u8() == 0x02

    def test_empty_tail(self) -> None:
        """Test the view is empty once everything is read."""
        reader = ByteReader(b"\x01")
        reader.read_u8()
        assert bytes(reader.remaining_bytes()) == b""
