"""parsing.py

Readers and writers converting configuration strings to typed values.
"""

from __future__ import annotations

from typing import Any

from prefixsid.logger.handler import levels

TRUE: tuple[str, ...] = ('1', 'yes', 'on', 'enable', 'true')


def integer(value: Any) -> int:
    return int(value)


def positive(value: Any) -> int:
    number = int(value)
    if number < 0:
        raise TypeError(f'{value} is not a positive integer')
    return number


def boolean(value: str) -> bool:
    return value.strip().lower() in TRUE


def string(value: str) -> str:
    return value.strip().strip('\'"')


def quoted(value: Any) -> str:
    return f"'{value!s}'"


def lowercase(value: Any) -> str:
    return str(value).lower()


def log_level(value: str) -> str:
    name = value.strip().upper()
    if name not in levels:
        raise TypeError(f'invalid log level {value}')
    return name
