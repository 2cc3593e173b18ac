"""walk.py

The header-then-dispatch loop shared by every level of the attribute.

Every level (TLV, Sub-TLV, Sub-Sub-TLV) starts its elements the same way:

  0                   1                   2                   3
  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
 +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
 |     Type      |            Length             |   RESERVED    |
 +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
 |  Value (Length - 1 octets)                                   //
 +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

Length covers RESERVED and the value, so an element uses Length + 3 octets.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterator, Mapping, NamedTuple, Protocol

from prefixsid.environment import getenv
from prefixsid.logger import log
from prefixsid.logger import lazymsg
from prefixsid.logger import lazytlv
from prefixsid.tlv.cursor import Cursor
from prefixsid.tlv.error import OutOfBounds
from prefixsid.tlv.tree import Tree

HEADER_LEN: int = 4  # Type(1) + Length(2) + Reserved(1)


class TLV(NamedTuple):
    code: int
    length: int
    reserved: int
    payload: bytes


class TlvDecoder(Protocol):
    """What a class registered for a TLV code provides."""

    TLV: ClassVar[int]
    # key the decoded node is attached under, None merges its fields into the level node
    KEY: ClassVar[str | None]

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree: ...


def window(data: bytes, length: int) -> bytes:
    """The first length bytes of data, the caller must not declare more than it has."""
    if length < 0 or length > len(data):
        raise ValueError(f'declared length {length} does not fit the {len(data)} byte(s) buffer')
    return bytes(data[:length])


def sibling_bound(siblings: int | None) -> int:
    if siblings is None:
        return getenv().decode.siblings
    if siblings < 0:
        raise ValueError(f'sibling bound must be positive, got {siblings}')
    return siblings


def iter_tlvs(data: bytes, level: str, siblings: int) -> Iterator[TLV]:
    """Yield every element of data which fits entirely inside it.

    Stops, without raising, on a truncated header, a Length of zero, a
    Length running past the end of data, or once more than siblings
    elements were produced.
    """
    cursor = Cursor(data)
    count = 0

    while cursor.remaining > 0:
        if cursor.remaining < HEADER_LEN:
            log.info(
                lazymsg('{level} header truncated, {left} byte(s) left, stopping', level=level, left=cursor.remaining),
                'parser',
            )
            return

        code = cursor.uint(1)
        length = cursor.uint(2)
        reserved = cursor.uint(1)

        if length < 1:
            log.info(lazymsg('{level} type {code} has a zero length, stopping', level=level, code=code), 'parser')
            return

        if length - 1 > cursor.remaining:
            log.info(
                lazymsg(
                    '{level} type {code} length {length} needs {size} byte(s), only {left} left, stopping',
                    level=level,
                    code=code,
                    length=length,
                    size=length + 3,
                    left=cursor.remaining + HEADER_LEN,
                ),
                'parser',
            )
            return

        payload = cursor.read(length - 1)
        log.debug(lazytlv(level, code, length, payload), 'parser')
        yield TLV(code, length, reserved, payload)

        count += 1
        if count > siblings:
            log.info(lazymsg('too many {level}s (more than {bound}), stopping', level=level, bound=siblings), 'parser')
            return


def decode_level(data: bytes, level: str, registry: Mapping[int, Any], siblings: int) -> Tree:
    """Decode one nesting level, dispatching each element on its type code."""
    tree = Tree()

    for tlv in iter_tlvs(data, level, siblings):
        klass = registry.get(tlv.code, None)
        if klass is None:
            log.debug(
                lazymsg(
                    '{level} type {code} is not implemented or intentionally ignored, skipping',
                    level=level,
                    code=tlv.code,
                ),
                'parser',
            )
            continue

        try:
            node = klass.unpack_tlv(tlv, siblings)
        except OutOfBounds as exc:
            log.info(
                lazymsg('{level} type {code} is malformed ({error}), stopping', level=level, code=tlv.code, error=exc),
                'parser',
            )
            break

        if klass.KEY is None:
            tree.update(node)
        else:
            tree.add_child(klass.KEY, node)

    return tree
