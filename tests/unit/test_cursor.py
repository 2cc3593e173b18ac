"""test_cursor.py

Unit tests for prefixsid.tlv.cursor
"""

import pytest

from prefixsid.tlv.cursor import Cursor, read_bytes, read_uint
from prefixsid.tlv.error import DecodeError, OutOfBounds


class TestReadBytes:
    def test_read_copies_bytes(self) -> None:
        assert read_bytes(b'\x01\x02\x03\x04', 1, 2) == b'\x02\x03'

    def test_read_does_not_consume(self) -> None:
        data = b'\x01\x02\x03'
        read_bytes(data, 0, 2)
        assert read_bytes(data, 0, 2) == b'\x01\x02'

    def test_read_accepts_memoryview(self) -> None:
        value = read_bytes(memoryview(b'\xaa\xbb\xcc'), 1, 2)
        assert value == b'\xbb\xcc'
        assert isinstance(value, bytes)

    def test_zero_length_read(self) -> None:
        assert read_bytes(b'\x01', 1, 0) == b''
        assert read_bytes(b'', 0, 0) == b''

    def test_read_past_end(self) -> None:
        with pytest.raises(OutOfBounds) as exc_info:
            read_bytes(b'\x01\x02', 1, 2)
        assert exc_info.value.needed == 2
        assert exc_info.value.available == 1
        assert exc_info.value.offset == 1

    def test_read_offset_past_end(self) -> None:
        with pytest.raises(OutOfBounds) as exc_info:
            read_bytes(b'\x01\x02', 5, 1)
        assert exc_info.value.available == 0

    def test_negative_arguments(self) -> None:
        with pytest.raises(ValueError):
            read_bytes(b'\x01\x02', -1, 1)
        with pytest.raises(ValueError):
            read_bytes(b'\x01\x02', 0, -1)

    def test_out_of_bounds_hierarchy(self) -> None:
        assert issubclass(OutOfBounds, DecodeError)
        assert issubclass(DecodeError, ValueError)


class TestReadUint:
    def test_network_order(self) -> None:
        assert read_uint(b'\x12\x34', 0, 2) == 0x1234
        assert read_uint(b'\x12\x34', 0, 2, network_order=True) == 0x1234

    def test_little_endian(self) -> None:
        assert read_uint(b'\x12\x34', 0, 2, network_order=False) == 0x3412

    def test_single_byte_is_order_independent(self) -> None:
        assert read_uint(b'\xfe', 0, 1, network_order=True) == 0xFE
        assert read_uint(b'\xfe', 0, 1, network_order=False) == 0xFE

    def test_wide_values_are_unsigned(self) -> None:
        assert read_uint(b'\xff\xff', 0, 2) == 65535
        assert read_uint(b'\x00\xff\xff\xff\xff', 1, 4) == 0xFFFFFFFF
        assert read_uint(b'\x01\x02\x03', 0, 3) == 0x010203

    def test_zero_length(self) -> None:
        assert read_uint(b'', 0, 0) == 0

    def test_truncated(self) -> None:
        with pytest.raises(OutOfBounds):
            read_uint(b'\x12', 0, 2)


class TestCursor:
    def test_sequential_reads(self) -> None:
        cursor = Cursor(b'\x05\x00\x23\x00\xaa')
        assert cursor.uint(1) == 5
        assert cursor.uint(2) == 0x23
        assert cursor.uint(1) == 0
        assert cursor.remaining == 1
        assert cursor.read(1) == b'\xaa'
        assert cursor.remaining == 0

    def test_failed_read_does_not_move(self) -> None:
        cursor = Cursor(b'\x01\x02\x03')
        cursor.skip(2)
        with pytest.raises(OutOfBounds):
            cursor.uint(2)
        assert cursor.offset == 2
        assert cursor.uint(1) == 3

    def test_skip_past_end(self) -> None:
        cursor = Cursor(b'\x01')
        with pytest.raises(OutOfBounds):
            cursor.skip(2)
        assert cursor.offset == 0

    def test_rest(self) -> None:
        cursor = Cursor(b'\x01\x02\x03', 1)
        assert cursor.rest() == b'\x02\x03'
        assert cursor.rest() == b''

    def test_repr(self) -> None:
        assert repr(Cursor(b'\x01\x02', 1)) == 'Cursor(offset=1, remaining=1)'
