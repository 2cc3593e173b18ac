"""srv6/sidstructure.py

SRv6 SID Structure Sub-Sub-TLV (RFC 9252 section 3.2.1).
"""

from __future__ import annotations

from typing import ClassVar

from prefixsid.sr.srv6.sidinformation import Srv6SidInformation
from prefixsid.tlv.cursor import Cursor
from prefixsid.tlv.tree import Tree
from prefixsid.tlv.walk import TLV
from prefixsid.tlv.walk import sibling_bound
from prefixsid.tlv.walk import window

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | SRv6 Service  |    SRv6 Service               | Locator Block |
# | Data Sub-Sub  |    Data Sub-Sub-TLV           | Length        |
# | -TLV Type=1   |    Length                     |               |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | Locator Node  | Function      | Argument      | Transposition |
# | Length        | Length        | Length        | Length        |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | Transposition |
# | Offset        |
# +-+-+-+-+-+-+-+-+
#
#           Figure 5: SRv6 SID Structure Sub-Sub-TLV
#
# With Length 6 the walk read the Locator Block Length as the RESERVED octet.
# Senders including a RESERVED octet use Length 7.


@Srv6SidInformation.register()
class Srv6SidStructure:
    TLV: ClassVar[int] = 1
    # the fields are merged into the node the SID Information attaches as sid_structure
    KEY: ClassVar[None] = None
    LENGTH: ClassVar[int] = 6

    FIELDS: ClassVar[tuple[str, ...]] = (
        'locator_block_length',
        'locator_node_length',
        'function_length',
        'argument_length',
        'transposition_length',
        'transposition_offset',
    )

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree:
        if tlv.length == cls.LENGTH:
            packed = bytes([tlv.reserved]) + tlv.payload
        else:
            packed = Cursor(tlv.payload).read(cls.LENGTH)
        return Tree(zip(cls.FIELDS, packed))


def decode_sid_structure(data: bytes, subtlv_len: int, siblings: int | None = None) -> Tree:
    """Decode the Sub-Sub-TLVs following the fixed part of a SID Information Sub-TLV."""
    return Srv6SidInformation.unpack_subsubtlvs(window(data, subtlv_len), sibling_bound(siblings))
