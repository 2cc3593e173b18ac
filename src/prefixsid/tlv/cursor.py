"""cursor.py

Bounds-checked reads from a byte buffer.

read_bytes() and read_uint() never move anything: the caller owns the offset.
Cursor wraps them for the decoders, advancing only once a read succeeded.
"""

from __future__ import annotations

from struct import unpack

from prefixsid.tlv.error import OutOfBounds

_FORMAT: dict[int, str] = {1: 'B', 2: 'H', 4: 'L'}


def _check(buf: bytes, offset: int, n: int) -> None:
    if offset < 0 or n < 0:
        raise ValueError(f'invalid read of {n} byte(s) at offset {offset}')
    available = max(len(buf) - offset, 0)
    if n > available:
        raise OutOfBounds(n, available, offset)


def read_bytes(buf: bytes, offset: int, n: int) -> bytes:
    _check(buf, offset, n)
    return bytes(buf[offset : offset + n])


def read_uint(buf: bytes, offset: int, n: int, network_order: bool = True) -> int:
    # network order is big-endian whatever the host is, otherwise least significant byte first
    data = read_bytes(buf, offset, n)
    order = '!' if network_order else '<'
    if n in _FORMAT:
        return unpack(order + _FORMAT[n], data)[0]
    if n == 3:
        padded = bytes([0]) + data if network_order else data + bytes([0])
        return unpack(order + 'L', padded)[0]
    return int.from_bytes(data, 'big' if network_order else 'little')


class Cursor:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data: bytes = data
        self.offset: int = offset

    @property
    def remaining(self) -> int:
        return max(len(self.data) - self.offset, 0)

    def read(self, n: int) -> bytes:
        value = read_bytes(self.data, self.offset, n)
        self.offset += n
        return value

    def uint(self, n: int, network_order: bool = True) -> int:
        value = read_uint(self.data, self.offset, n, network_order)
        self.offset += n
        return value

    def skip(self, n: int) -> None:
        _check(self.data, self.offset, n)
        self.offset += n

    def rest(self) -> bytes:
        return self.read(self.remaining)

    def __repr__(self) -> str:
        return f'Cursor(offset={self.offset}, remaining={self.remaining})'
