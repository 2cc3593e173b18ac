"""sr/prefixsid.py

BGP Prefix-SID attribute (RFC 8669), top level.

The attribute value is a list of TLVs. Each registered TLV type is decoded
into its own node of the output tree, other types are skipped.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Type

from prefixsid.tlv.tree import Tree
from prefixsid.tlv.walk import decode_level
from prefixsid.tlv.walk import sibling_bound
from prefixsid.tlv.walk import window

# =====================================================================
# RFC 8669 - Segment Routing Prefix Segment Identifier Extensions for BGP
# RFC 9252 - BGP Overlay Services Based on SRv6
#
# Type 1: Label-Index TLV
# Type 3: Originator SRGB TLV
# Type 5: SRv6 L3 Service TLV
# Type 6: SRv6 L2 Service TLV


class PrefixSid:
    LEVEL: ClassVar[str] = 'Prefix-SID TLV'

    # Registered classes we know how to decode, by TLV type
    registered_srids: ClassVar[dict[int, Type[Any]]] = dict()

    @classmethod
    def register(cls, srid: int | None = None) -> Callable[[Type[Any]], Type[Any]]:
        def register_srid(klass: Type[Any]) -> Type[Any]:
            scode: int = klass.TLV if srid is None else srid
            if scode in cls.registered_srids:
                raise RuntimeError('only one class can be registered per Segment Routing TLV type')
            cls.registered_srids[scode] = klass
            return klass

        return register_srid

    @classmethod
    def unpack_attribute(cls, data: bytes, siblings: int) -> Tree:
        return decode_level(data, cls.LEVEL, cls.registered_srids, siblings)


def decode_attribute(data: bytes, attr_len: int, siblings: int | None = None) -> Tree:
    """Decode the value of a BGP Prefix-SID attribute.

    Args:
        data: the attribute value, as sliced by the UPDATE parser
        attr_len: how many bytes of data belong to the attribute
        siblings: per level bound on the number of TLVs decoded,
            the decode.siblings configuration value when None

    Returns:
        The decoded tree. Malformed content never raises, decoding stops at
        the level where it was found and everything decoded so far is kept.

    Raises:
        ValueError: attr_len is negative or larger than data.
    """
    return PrefixSid.unpack_attribute(window(data, attr_len), sibling_bound(siblings))


# registers the TLV decoders
from prefixsid.sr import labelindex  # noqa: F401,E402
from prefixsid.sr import srgb  # noqa: F401,E402
from prefixsid.sr import srv6  # noqa: F401,E402
