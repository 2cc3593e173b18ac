from __future__ import annotations

import os
import sys

# Do not change the next line as it is parsed by setup.py
version = '1.0.0'

REQUIRED_PYTHON_MAJOR = 3
REQUIRED_PYTHON_MINOR = 10

if sys.version_info[:2] < (REQUIRED_PYTHON_MAJOR, REQUIRED_PYTHON_MINOR):
    sys.exit('prefixsid requires python3.10 or later')


def get_root() -> str:
    return os.path.abspath(os.path.sep.join(__file__.split(os.path.sep)[:-1]))


if __name__ == '__main__':
    sys.stdout.write(version)
