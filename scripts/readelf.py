#!/usr/bin/env python3
import sys
import os
import logging

from elfstruct.executables.elf import decode_header
from elfstruct.exceptions import ElfStructException, IncompleteException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <elf file>' % progname)
    return 1


def dump_error(path, e):
    # the most specific context first, then the cause
    print(f'error: {path}', file=sys.stderr)
    for label in e.chain:
        print(f'  in {label}', file=sys.stderr)
    if isinstance(e, IncompleteException):
        print(f'  file too short: {e.cause}', file=sys.stderr)
    else:
        print(f'  {e.cause}', file=sys.stderr)


def main(argv):
    if len(argv) < 2:
        return usage(argv[0])

    path = argv[1]

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        print(f'error: failed to read \'{path}\': {e.strerror}', file=sys.stderr)
        return 1

    try:
        header, _ = decode_header(data)
    except ElfStructException as e:
        logger.debug('error during parsing at field \'%s\'' % '.'.join(e.chain[::-1]))
        dump_error(path, e)
        return 1

    print(header)

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
