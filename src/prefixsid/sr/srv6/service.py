"""srv6/service.py

SRv6 L3 and L2 Service TLVs (RFC 9252 section 2).
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Type

from prefixsid.sr.prefixsid import PrefixSid
from prefixsid.tlv.tree import Tree
from prefixsid.tlv.walk import TLV
from prefixsid.tlv.walk import decode_level
from prefixsid.tlv.walk import sibling_bound
from prefixsid.tlv.walk import window

# 2.  SRv6 Services TLVs
#
#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |   TLV Type    |         TLV Length            |   RESERVED    |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |   SRv6 Service Sub-TLVs                                      //
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
#
#                   Figure 1: SRv6 Service TLVs


class Srv6Service:
    TLV: ClassVar[int]
    KEY: ClassVar[str]
    LEVEL: ClassVar[str] = 'SRv6 Service Sub-TLV'

    # Registry maps Sub-TLV codes to their decoder, one per service type
    registered_subtlvs: ClassVar[dict[int, Type[Any]]]

    @classmethod
    def register(cls) -> Callable[[Type[Any]], Type[Any]]:
        def register_subtlv(klass: Type[Any]) -> Type[Any]:
            scode: int = klass.TLV
            if scode in cls.registered_subtlvs:
                raise RuntimeError('only one class can be registered per SRv6 Service Sub-TLV type')
            cls.registered_subtlvs[scode] = klass
            return klass

        return register_subtlv

    @classmethod
    def unpack_subtlvs(cls, data: bytes, siblings: int) -> Tree:
        return decode_level(data, cls.LEVEL, cls.registered_subtlvs, siblings)

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree:
        return cls.unpack_subtlvs(tlv.payload, siblings)


@PrefixSid.register()
class Srv6L3Service(Srv6Service):
    TLV: ClassVar[int] = 5
    KEY: ClassVar[str] = 'srv6_l3_service'

    registered_subtlvs: ClassVar[dict[int, Type[Any]]] = dict()


@PrefixSid.register()
class Srv6L2Service(Srv6Service):
    TLV: ClassVar[int] = 6
    KEY: ClassVar[str] = 'srv6_l2_service'

    registered_subtlvs: ClassVar[dict[int, Type[Any]]] = dict()


def decode_l3_service(data: bytes, tlv_len: int, siblings: int | None = None) -> Tree:
    """Decode the Sub-TLVs of an SRv6 L3 Service TLV (the bytes after its RESERVED octet)."""
    return Srv6L3Service.unpack_subtlvs(window(data, tlv_len), sibling_bound(siblings))


def decode_l2_service(data: bytes, tlv_len: int, siblings: int | None = None) -> Tree:
    """Decode the Sub-TLVs of an SRv6 L2 Service TLV (the bytes after its RESERVED octet)."""
    return Srv6L2Service.unpack_subtlvs(window(data, tlv_len), sibling_bound(siblings))
