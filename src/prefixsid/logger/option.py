"""option.py

What gets logged (sources and levels) and where it goes.
"""

from __future__ import annotations

import sys
import time
import logging
from typing import Any, ClassVar, Dict, TYPE_CHECKING

from prefixsid.logger.handler import get_logger, levels
from prefixsid.logger.format import formater as get_formater, FormatterFunc

if TYPE_CHECKING:
    from prefixsid.environment.config import Environment

STREAMS: tuple[str, ...] = ('stdout', 'stderr')


def echo(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    return message


class option:
    logger: ClassVar[logging.Logger | None] = None
    formater: ClassVar[FormatterFunc] = echo

    short: ClassVar[bool] = True
    level: ClassVar[str] = 'WARNING'
    logit: ClassVar[Dict[str, bool]] = {}

    # stdout, stderr, syslog or a file name
    destination: ClassVar[str] = ''

    # sources not listed here are always logged
    enabled: ClassVar[Dict[str, bool]] = {
        'parser': False,
        'configuration': False,
        'cli': False,
    }

    @classmethod
    def _set_level(cls, level: str) -> None:
        cls.level = level
        threshold = levels[level]
        cls.logit = {name: value >= threshold for name, value in levels.items()}

    @classmethod
    def log_enabled(cls, source: str, level: str) -> bool:
        return cls.enabled.get(source, True) and cls.logit.get(level, False)

    @classmethod
    def load(cls, env: Environment) -> None:
        cls.short = env.log.short
        cls._set_level(env.log.level)

        enable = env.log.enable
        cls.enabled = {
            'parser': enable and (env.log.all or env.log.parser),
            'configuration': enable and (env.log.all or env.log.configuration),
            'cli': enable,
        }

        destination = env.log.destination
        if destination in STREAMS or destination == 'syslog':
            cls.destination = destination
        elif destination.startswith('file:'):
            cls.destination = destination[len('file:') :]
        else:
            cls.destination = 'stdout'

    @classmethod
    def setup(cls, env: Environment) -> None:
        cls.load(env)

        kwargs: dict[str, Any] = {'format': '%(message)s', 'level': cls.level}
        if cls.destination in STREAMS:
            kind = cls.destination
            kwargs['stream'] = getattr(sys, cls.destination)
        elif cls.destination == 'syslog':
            kind = 'syslog'
            kwargs['syslog'] = True
        else:
            kind = 'file'
            kwargs['filename'] = cls.destination

        # one logger per kind of destination, a new setup replaces its handlers
        cls.logger = get_logger(f'prefixsid.{kind}', replace=True, **kwargs)
        cls.formater = get_formater(cls.short, kind)
