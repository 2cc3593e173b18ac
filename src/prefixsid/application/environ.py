"""show the prefixsid configuration, as an INI file or as environment variables"""

from __future__ import annotations

import sys
import argparse

from prefixsid.environment import Environment
from prefixsid.environment import getenv


def setargs(sub: argparse.ArgumentParser) -> None:
    # fmt: off
    sub.add_argument('-d', '--diff', help='only show the values which are not the defaults', action='store_true')
    sub.add_argument('-e', '--env', help='show environment variables rather than an INI file', action='store_true')
    # fmt: on


def default() -> None:
    lines = '\n'.join(f'    {line}' for line in Environment.default())
    sys.stdout.write(f'\nEnvironment values are:\n{lines}\n')
    sys.stdout.flush()


def cmdline(cmdarg: argparse.Namespace) -> int:
    # values from the environment and the INI file are shown, not only the defaults
    getenv()

    lines = Environment.iter_env if cmdarg.env else Environment.iter_ini
    for line in lines(cmdarg.diff):
        sys.stdout.write(f'{line}\n')
    sys.stdout.flush()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=sys.modules[__name__].__doc__)
    setargs(parser)
    return cmdline(parser.parse_args())


if __name__ == '__main__':
    sys.exit(main())
