"""error.py

Exceptions raised while walking a Prefix-SID attribute.
"""

from __future__ import annotations


class DecodeError(ValueError):
    pass


class OutOfBounds(DecodeError):
    def __init__(self, needed: int, available: int, offset: int = 0) -> None:
        self.needed: int = needed
        self.available: int = available
        self.offset: int = offset
        DecodeError.__init__(self, f'need {needed} byte(s) at offset {offset}, only {available} available')
