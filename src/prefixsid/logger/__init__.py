"""logger

Lazy logging facade used by the decoders.

A message is a callable returning the text, it is only rendered once option
let its source and level through. Until log.init() configured a logger every
call is a no-op, which is how the library runs when embedded.
"""

from __future__ import annotations

import time
from typing import Callable, TYPE_CHECKING

from prefixsid.logger.option import option
from prefixsid.logger.handler import get_logger  # noqa: F401,E261
from prefixsid.logger.format import formater  # noqa: F401,E261
from prefixsid.logger.format import lazyformat  # noqa: F401,E261
from prefixsid.logger.format import lazytlv  # noqa: F401,E261
from prefixsid.logger.format import lazymsg  # noqa: F401,E261

if TYPE_CHECKING:
    from prefixsid.environment.config import Environment

__all__ = [
    'get_logger',
    'formater',
    'lazyformat',
    'lazytlv',
    'lazymsg',
    'option',
    'LogMessage',
    'log',
]

LogMessage = Callable[[], str]


class log:
    @staticmethod
    def init(env: Environment) -> None:
        option.setup(env)

    @staticmethod
    def disable() -> None:
        option.logger = None

    @staticmethod
    def _emit(method: str, message: LogMessage, source: str, level: str) -> None:
        if option.logger is None or not option.log_enabled(source, level):
            return

        write = getattr(option.logger, method)
        timestamp = time.localtime()
        for line in message().split('\n'):
            write(option.formater(line, source, level, timestamp))

    @classmethod
    def debug(cls, message: LogMessage, source: str = '', level: str = 'DEBUG') -> None:
        cls._emit('debug', message, source, level)

    @classmethod
    def info(cls, message: LogMessage, source: str = '', level: str = 'INFO') -> None:
        cls._emit('info', message, source, level)

    @classmethod
    def warning(cls, message: LogMessage, source: str = '', level: str = 'WARNING') -> None:
        cls._emit('warning', message, source, level)

    @classmethod
    def error(cls, message: LogMessage, source: str = '', level: str = 'ERROR') -> None:
        cls._emit('error', message, source, level)
