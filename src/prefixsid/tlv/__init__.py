"""tlv

Building blocks shared by every Prefix-SID decoding level: a bounds-checked
cursor, the output tree, and the header-then-dispatch walk.
"""

# flake8: noqa: F401,E261

from __future__ import annotations

from prefixsid.tlv.error import DecodeError
from prefixsid.tlv.error import OutOfBounds
from prefixsid.tlv.cursor import Cursor
from prefixsid.tlv.cursor import read_bytes
from prefixsid.tlv.cursor import read_uint
from prefixsid.tlv.tree import Tree
