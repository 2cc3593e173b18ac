"""sr/labelindex.py

Label-Index TLV (RFC 8669 section 3.1).
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
# |       Type    |             Length            |   RESERVED    |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |            Flags              |       Label Index             |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |          Label Index          |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+


@PrefixSid.register()
class SrLabelIndex:
    TLV: ClassVar[int] = 1
    KEY: ClassVar[str] = 'label_index'

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree:
        cursor = Cursor(tlv.payload)
        flags = cursor.uint(2)
        labelindex = cursor.uint(4)
        return Tree(flags=flags, label_index=labelindex)
