"""prefixsid

Decoder for the BGP Prefix-SID path attribute (RFC 8669) and the SRv6
service TLVs it carries (RFC 9252).

    from prefixsid import decode_attribute

    tree = decode_attribute(data, len(data))
    print(tree.json())

The result is a Tree, a dict which also offers:

    tree.get_path('srv6_l3_service.sid_information.sid_value')
    tree['srv6_l3_service'].children('sid_information')

get_path returns None (or its default) when any key of the dotted path is
missing, children always returns a list even for a single child.
"""

from __future__ import annotations

from prefixsid.sr.prefixsid import decode_attribute  # noqa: F401,E261
from prefixsid.sr.srv6.service import decode_l3_service  # noqa: F401,E261
from prefixsid.sr.srv6.sidstructure import decode_sid_structure  # noqa: F401,E261
from prefixsid.sr.behavior import name_for  # noqa: F401,E261
from prefixsid.tlv.tree import Tree  # noqa: F401,E261

__all__ = [
    'decode_attribute',
    'decode_l3_service',
    'decode_sid_structure',
    'name_for',
    'Tree',
]
