"""srv6/sidinformation.py

SRv6 SID Information Sub-TLV (RFC 9252 section 3.1).
"""

from __future__ import annotations

import socket
from typing import Any, Callable, ClassVar, Type

from prefixsid.logger import log
from prefixsid.logger import lazymsg
from prefixsid.sr.behavior import name_for
from prefixsid.sr.srv6.service import Srv6L2Service
from prefixsid.sr.srv6.service import Srv6L3Service
from prefixsid.tlv.cursor import Cursor
from prefixsid.tlv.tree import Tree
from prefixsid.tlv.walk import TLV
from prefixsid.tlv.walk import decode_level

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | SRv6 Service  |    SRv6 Service               |               |
# | Sub-TLV       |    Sub-TLV                    |               |
# | Type=1        |    Length                     |  RESERVED1    |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |  SRv6 SID Value (16 octets)                                  //
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | Svc SID Flags |   SRv6 Endpoint Behavior      |   RESERVED2   |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |  SRv6 Service Data Sub-Sub-TLVs                              //
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
#
#            Figure 3: SRv6 SID Information Sub-TLV

SID_LEN: int = 16


@Srv6L2Service.register()
@Srv6L3Service.register()
class Srv6SidInformation:
    TLV: ClassVar[int] = 1
    KEY: ClassVar[str] = 'sid_information'
    LEVEL: ClassVar[str] = 'SRv6 Service Data Sub-Sub-TLV'

    # Registry maps TLV codes to Sub-Sub-TLV classes
    registered_subsubtlvs: ClassVar[dict[int, Type[Any]]] = dict()

    @classmethod
    def register(cls) -> Callable[[Type[Any]], Type[Any]]:
        def register_subsubtlv(klass: Type[Any]) -> Type[Any]:
            code: int = klass.TLV
            if code in cls.registered_subsubtlvs:
                raise RuntimeError('only one class can be registered per SRv6 Service Sub-Sub-TLV type')
            cls.registered_subsubtlvs[code] = klass
            return klass

        return register_subsubtlv

    @classmethod
    def unpack_subsubtlvs(cls, data: bytes, siblings: int) -> Tree:
        return decode_level(data, cls.LEVEL, cls.registered_subsubtlvs, siblings)

    @classmethod
    def unpack_tlv(cls, tlv: TLV, siblings: int) -> Tree:
        cursor = Cursor(tlv.payload)
        # the SID is an address, its octets are kept in wire order
        sid = cursor.read(SID_LEN)
        flags = cursor.uint(1)
        behavior = cursor.uint(2)
        cursor.skip(1)  # RESERVED2

        node = Tree()
        node.put('sid_value', socket.inet_ntop(socket.AF_INET6, sid))
        node.put('service_sid_flags', flags)
        node.put('endpoint_behavior_codepoint', behavior)
        node.put('endpoint_behavior', name_for(behavior))

        log.debug(
            lazymsg(
                'SID {sid} flags 0x{flags:02X} endpoint behavior {code} ({name})',
                sid=node['sid_value'],
                flags=flags,
                code=behavior,
                name=node['endpoint_behavior'],
            ),
            'parser',
        )

        # Sub-Sub-TLVs use what is left: Length - 21 octets
        structure = cls.unpack_subsubtlvs(cursor.rest(), siblings)
        if structure:
            node.add_child('sid_structure', structure)
        return node
