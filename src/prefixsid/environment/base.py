"""base.py

Where prefixsid is installed, and so where its configuration lives.
"""

from __future__ import annotations

import os
import sys

APPLICATION: str = 'prefixsid'

# running from a checkout, the root is above this folder
SOURCE_FOLDER: str = os.path.join('src', APPLICATION, 'application')


def _find_root() -> str:
    root = os.path.abspath(os.environ.get('PREFIXSID_ROOT', '') or os.path.dirname(sys.argv[0]))

    if os.path.basename(root) in ('bin', 'sbin'):
        root = os.path.dirname(root)

    checkout = root.find(SOURCE_FOLDER)
    if checkout >= 0:
        root = root[:checkout]

    return os.path.normpath(root)


ROOT: str = _find_root()
ETC: str = os.path.join(ROOT, 'etc', APPLICATION)
ENVFILE: str = os.path.join(ETC, f'{APPLICATION}.env')
