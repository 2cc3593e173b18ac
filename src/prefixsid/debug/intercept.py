"""intercept.py

Replace sys.excepthook so an unexpected exception prints a report with the
version and the configuration, then opens pdb post mortem when asked to.
"""

from __future__ import annotations

import os
import sys
import pdb  # noqa: T100
import platform
import traceback
from types import TracebackType

from prefixsid.environment import Environment
from prefixsid.version import version


def format_panic(dtype: type[BaseException], value: BaseException, trace: TracebackType | None) -> str:
    python = sys.version.replace('\n', ' ')
    uname = ' '.join(platform.uname()[:5])
    lines = [
        'prefixsid crashed, please report the issue with this output',
        '',
        f'prefixsid version : {version}',
        f'Python version    : {python}',
        f'System Uname      : {uname}',
        '',
        '-- Configuration',
        '',
        *Environment.iter_env(diff=True),
        '',
        '-- Traceback',
        '',
        ''.join(traceback.format_exception(dtype, value, trace)),
    ]
    return '\n'.join(lines)


def intercept(dtype: type[BaseException], value: BaseException, trace: TracebackType | None) -> None:
    sys.stdout.flush()
    sys.stderr.write(f'{format_panic(dtype, value, trace)}\n')
    sys.stderr.flush()
    if os.environ.get('PDB', None) not in [None, '0', '']:
        pdb.post_mortem(trace)


def trace_interceptor(with_pdb: bool) -> None:
    if with_pdb:
        os.environ['PDB'] = '1'
    sys.excepthook = intercept
