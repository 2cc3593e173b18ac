"""report the prefixsid version and where it runs from"""

from __future__ import annotations

import sys
import argparse
import platform

from prefixsid.version import version, get_root


def setargs(sub: argparse.ArgumentParser) -> None:
    pass


def cmdline(cmdarg: argparse.Namespace) -> int:
    report = (
        ('prefixsid', version),
        ('Python', sys.version.replace('\n', ' ')),
        ('Uname', ' '.join(platform.uname()[:5])),
        ('From', get_root()),
    )
    for name, value in report:
        sys.stdout.write(f'{name:<10}: {value}\n')
    sys.stdout.flush()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=sys.modules[__name__].__doc__)
    setargs(parser)
    return cmdline(parser.parse_args())


if __name__ == '__main__':
    sys.exit(main())
