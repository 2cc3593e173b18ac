"""srv6/__init__.py

SRv6 Service TLVs for BGP Prefix-SID Attribute.

Reference: RFC 9252 - BGP Overlay Services Based on Segment Routing over IPv6 (SRv6)
           https://datatracker.ietf.org/doc/html/rfc9252

- Type 5: SRv6 L3 Service TLV - Srv6L3Service
- Type 6: SRv6 L2 Service TLV - Srv6L2Service
- SRv6 SID Information Sub-TLV - Srv6SidInformation
- SRv6 SID Structure Sub-Sub-TLV - Srv6SidStructure
"""

# flake8: noqa: F401,E261

from __future__ import annotations

from prefixsid.sr.srv6.service import Srv6L2Service
from prefixsid.sr.srv6.service import Srv6L3Service
from prefixsid.sr.srv6.sidinformation import Srv6SidInformation
from prefixsid.sr.srv6.sidstructure import Srv6SidStructure
