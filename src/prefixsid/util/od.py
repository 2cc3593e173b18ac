"""od.py

Hex dump used when logging raw TLV payloads, two octets per group.
"""

from __future__ import annotations


def od(value: bytes) -> str:
    return ' '.join(value[n : n + 2].hex().upper() for n in range(0, len(value), 2))
