"""sr/srgb.py

Originator SRGB TLV (RFC 8669 section 3.2).
"""

from __future__ import annotations

from typing import ClassVar

from prefixsid.sr.prefixsid import PrefixSid
from prefixsid.tlv.cursor import Cursor
from prefixsid.tlv.tree import Tree
from prefixsid.tlv.walk import TLV

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |     Type      |          Length               |    Flags      |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |     Flags     |
# +-+-+-+-+-+-+-+-+
#
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |         SRGB 1 (6 octets)                                     |
# |                               +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                               |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
#
# Each SRGB is a 3 octets base label followed by a 3 octets range size.


@PrefixSid.register()
class SrGb:
    TLV: ClassVar[int] = 3
    KEY: ClassVar[str] = 'originator_srgb'

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree:
        # no RESERVED octet here, the walk read the first Flags octet in its place
        cursor = Cursor(tlv.payload)
        flags = (tlv.reserved << 8) | cursor.uint(1)

        node = Tree(flags=flags)
        while cursor.remaining:
            base = cursor.uint(3)
            size = cursor.uint(3)
            node.add_child('srgb', Tree(base=base, range=size))
        return node
