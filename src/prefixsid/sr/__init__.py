"""sr

Decoders for the TLVs of the BGP Prefix-SID attribute (path attribute 40).

Reference: RFC 8669 - Segment Routing Prefix Segment Identifier Extensions for BGP
           RFC 9252 - BGP Overlay Services Based on SRv6

Every TLV is decoded by a class registered with PrefixSid for its type:
- Type 1: Label-Index TLV - SrLabelIndex
- Type 3: Originator SRGB TLV - SrGb
- Type 5: SRv6 L3 Service TLV - Srv6L3Service (srv6/)
- Type 6: SRv6 L2 Service TLV - Srv6L2Service (srv6/)
"""
