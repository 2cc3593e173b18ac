"""format.py

Line formatters, and the lazy message builders used with log.
"""

from __future__ import annotations

import os
import time
from typing import Callable

from prefixsid.util.od import od

# (message, source, level, timestamp) -> line
FormatterFunc = Callable[[str, str, str, time.struct_time], str]


def _short_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    return f'{source:<15} {message}'


def _long_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    clock = time.strftime('%H:%M:%S', timestamp)
    return f'{clock} {os.getpid():<6} {level:<8} {source:<15} {message}'


def formater(short: bool, destination: str) -> FormatterFunc:
    # syslog adds its own timestamp and pid
    if destination == 'syslog' or short:
        return _short_formater
    return _long_formater


# Messages are only rendered once the logger decided to emit the line.
def lazyformat(prefix: str, data: bytes, dump: Callable[[bytes], str] = od) -> Callable[[], str]:
    return lambda: f'{prefix} ({len(data):4d}) {dump(data)}'


def lazytlv(level: str, code: int, length: int, data: bytes) -> Callable[[], str]:
    def _lazy() -> str:
        line = f'{level:<30} type {code:<3d} len {length:<5d}'
        return f'{line} payload {od(data)}' if data else line.rstrip()

    return _lazy


def lazymsg(template: str, **kwargs: object) -> Callable[[], str]:
    """Defer str.format until the message is emitted.

        log.debug(lazymsg('{level} type {code} skipped', level=level, code=code), 'parser')
    """
    return lambda: template.format(**kwargs)
