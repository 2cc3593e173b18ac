"""main.py

Entry point of the prefixsid command.
"""

from __future__ import annotations

import sys
import argparse

from prefixsid.application import decode
from prefixsid.application import environ
from prefixsid.application import version


def main() -> int:
    parser = argparse.ArgumentParser(description='BGP Prefix-SID attribute decoder')

    subparsers = parser.add_subparsers()

    sub = subparsers.add_parser('version', help='report prefixsid version', description=version.__doc__)
    sub.set_defaults(func=version.cmdline)
    version.setargs(sub)

    sub = subparsers.add_parser('env', help='show prefixsid configuration information', description=environ.__doc__)
    sub.set_defaults(func=environ.cmdline)
    environ.setargs(sub)

    sub = subparsers.add_parser('decode', help='decode hex-encoded Prefix-SID attributes', description=decode.__doc__)
    sub.set_defaults(func=decode.cmdline)
    decode.setargs(sub)

    cmdarg = parser.parse_args()

    if 'func' in vars(cmdarg):
        return cmdarg.func(cmdarg)
    parser.print_help()
    environ.default()
    return 1


if __name__ == '__main__':
    try:
        sys.exit(main())
    except BrokenPipeError:
        # ( prefixsid decode ... | head ) closed the pipe early
        sys.exit(1)
