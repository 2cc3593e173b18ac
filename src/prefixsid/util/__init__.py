"""util

Payload helpers for the command line.
"""

from __future__ import annotations

import string

# hex dumps are accepted with these separators between the digits
SEPARATORS: str = ':' + string.whitespace


def unhex(payload: str) -> bytes:
    """Convert a hex dump into bytes.

    Accepts an optional 0x prefix and ignores ':' and whitespace separators,
    so the output of od() or a wireshark copy can be pasted as is.
    Raises ValueError on anything which is not hexadecimal.
    """
    digits = ''.join(c for c in payload if c not in SEPARATORS)
    if digits[:2] in ('0x', '0X'):
        digits = digits[2:]
    if any(c not in string.hexdigits for c in digits):
        raise ValueError(f'invalid hexadecimal payload: {payload!r}')
    if len(digits) % 2:
        raise ValueError(f'odd number of hexadecimal digits: {payload!r}')
    return bytes.fromhex(digits)
