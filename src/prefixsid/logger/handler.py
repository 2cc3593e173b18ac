# A thin wrapper around logging, configured through logging.config.dictConfig

from __future__ import annotations

import sys
import logging
import logging.config
from typing import Any

SHORT: str = '%(message)s'
CLEAR: str = '%(levelname)s %(asctime)s %(filename)s: %(message)s'

levels: dict[str, int] = {
    'FATAL': logging.FATAL,
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
    'NOTSET': logging.NOTSET,
}

# a logger is only reconfigured when get_logger is called with replace=True
_created: dict[str, logging.Logger] = {}


def syslog_address() -> str:
    if sys.platform == 'darwin':
        return '/var/run/syslog'
    if sys.platform.startswith(('freebsd', 'netbsd')):
        return '/var/run/log'
    return '/dev/log'


def _handlers(name: str, level: str, **kwargs: Any) -> dict[str, dict[str, Any]]:
    def handler(klass: str, **extra: Any) -> dict[str, Any]:
        return {'class': klass, 'level': level, 'formatter': 'default', **extra}

    handlers: dict[str, dict[str, Any]] = {}

    stream = kwargs.get('stream')
    if stream is not None:
        which = 'stderr' if stream is sys.stderr else 'stdout'
        handlers[f'{name}_{which}'] = handler('logging.StreamHandler', stream=f'ext://sys.{which}')

    if kwargs.get('syslog', False) or kwargs.get('address') is not None:
        handlers[f'{name}_syslog'] = handler(
            'logging.handlers.SysLogHandler',
            address=kwargs.get('address') or syslog_address(),
            facility=kwargs.get('facility', 'daemon'),
        )

    filename = kwargs.get('filename')
    if filename is not None:
        handlers[f'{name}_file'] = handler(
            'logging.handlers.RotatingFileHandler',
            filename=filename,
            maxBytes=kwargs.get('maxBytes', 1048576),
            backupCount=kwargs.get('backupCount', 3),
        )

    return handlers


def get_logger(name: str, **kwargs: Any) -> logging.Logger:
    """Get or create a named logger.

    Args:
        name: Logger name.
        **kwargs: Configuration options:
            - level: Log level (default: 'DEBUG')
            - format: Log format string (default: CLEAR)
            - stream: sys.stdout or sys.stderr for a StreamHandler
            - syslog: If True, add a SysLogHandler on the local socket
            - address: Syslog address (implies syslog=True)
            - filename: File path for a RotatingFileHandler
            - replace: If True, reconfigure an existing logger of that name

    Returns:
        Configured logging.Logger instance.
    """
    replace = kwargs.pop('replace', False)
    if name in _created and not replace:
        if not kwargs:
            return _created[name]
        raise ValueError(f'a logger with the name "{name}" already exists')

    level = kwargs.pop('level', 'DEBUG')
    handlers = _handlers(name, level, **kwargs)

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'default': {'format': kwargs.get('format', CLEAR)}},
            'handlers': handlers,
            'loggers': {
                name: {
                    'level': level,
                    'handlers': list(handlers),
                    'propagate': False,
                },
            },
        }
    )

    logger = logging.getLogger(name)
    _created[name] = logger
    return logger
