"""decode hex-encoded BGP Prefix-SID attribute values"""

from __future__ import annotations

import sys
import argparse

from prefixsid.debug import trace_interceptor
from prefixsid.environment import Environment
from prefixsid.environment import getenv
from prefixsid.logger import log
from prefixsid.logger import lazyformat
from prefixsid.logger import lazymsg
from prefixsid.sr.prefixsid import decode_attribute
from prefixsid.util import unhex


def setargs(sub: argparse.ArgumentParser) -> None:
    # fmt:off
    sub.add_argument('-d', '--debug', help='report the parsing details on stderr', action='store_true')
    sub.add_argument('-p', '--pdb', help='fire the debugger on invalid payloads and crashes', action='store_true')
    sub.add_argument('-s', '--siblings', help='maximum number of TLVs decoded per level (after the first)', type=int)
    sub.add_argument('-i', '--indent', help='indent the JSON output by this many spaces', type=int)
    sub.add_argument('payload', help='the attribute value in hexadecimal (reads from stdin if not provided)', type=str, nargs='?')
    # fmt:on


def usage() -> None:
    sys.stdout.write(
        'Environment values are:\n{}\n\n'.format('\n'.join(' - {}'.format(_) for _ in Environment.default()))
    )
    sys.stdout.write('Usage: prefixsid decode <hex>\n')
    sys.stdout.write('       echo "<hex>" | prefixsid decode\n\n')
    sys.stdout.write('The Prefix-SID attribute value must be an hexadecimal string.\n')
    sys.stdout.flush()


def cmdline(cmdarg: argparse.Namespace) -> int:
    if cmdarg.payload is None:
        if sys.stdin.isatty():
            usage()
            return 1
        payloads = [line.strip() for line in sys.stdin if line.strip()]
    else:
        payloads = [cmdarg.payload]

    env = getenv()

    # -d only overrides what the configuration asked for
    if cmdarg.debug:
        env.log.enable = True
        env.log.all = True
        env.log.level = 'DEBUG'
        env.log.destination = 'stderr'
        env.log.short = False

    if cmdarg.pdb:
        env.debug.pdb = True

    log.init(env)
    trace_interceptor(env.debug.pdb)

    for line in Environment.iter_env(diff=True):
        log.debug(lazymsg('using {line}', line=line), 'configuration')

    code = 0
    for payload in payloads:
        try:
            data = unhex(payload)
            log.debug(lazyformat('decoding', data), 'cli')
            tree = decode_attribute(data, len(data), cmdarg.siblings)
        except ValueError as exc:
            if env.debug.pdb:
                raise
            sys.stderr.write(f'invalid payload: {exc}\n')
            code = 1
            continue
        sys.stdout.write(tree.json(cmdarg.indent) + '\n')
    sys.stdout.flush()
    return code


def main() -> int:
    parser = argparse.ArgumentParser(description=sys.modules[__name__].__doc__)
    setargs(parser)
    return cmdline(parser.parse_args())


if __name__ == '__main__':
    sys.exit(main())
