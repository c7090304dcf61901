# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: nil; -*-
# Copyright (C) 2010-2012 Kevin Mehall <km@kevinmehall.net>
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 3, as published
# by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranties of
# MERCHANTABILITY, SATISFACTORY QUALITY, or FITNESS FOR A PARTICULAR
# PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import pprint
import sys

from .config import VERSION
from .decoder import StdDecoder
from .errors import DecodeError, Fault

EXIT_DECODE_ERROR = 1
EXIT_FAULT = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog='xmlrpcdecoder',
        description='Decode XML-RPC method responses and print their params',
    )
    parser.add_argument('files', metavar='FILE', nargs='+',
                        help='methodResponse document, - for standard input')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show info messages')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Show debug messages')
    parser.add_argument('--version', action='version',
                        version='xmlrpcdecoder {}'.format(VERSION))
    return parser


def setup_logging(options):
    # Set the logging level to show debug messages
    if options.debug:
        log_level = logging.DEBUG
    elif options.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARN

    stream = logging.StreamHandler()
    stream.setLevel(log_level)
    stream.setFormatter(logging.Formatter(fmt='%(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'))

    logging.basicConfig(level=logging.NOTSET, handlers=[stream], force=True)


def _read(path):
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def main(argv=None):
    options = build_parser().parse_args(argv)
    setup_logging(options)

    decoder = StdDecoder()
    status = 0
    for path in options.files:
        logging.info('Decoding {}'.format(path))
        try:
            params = decoder.decode(_read(path))
        except Fault as e:
            logging.error('{}: remote fault {}: {}'.format(path, e.code, e.string))
            print('{}: {!r}'.format(path, e))
            status = max(status, EXIT_FAULT)
            continue
        except (DecodeError, OSError) as e:
            logging.error('{}: {}'.format(path, e))
            status = max(status, EXIT_DECODE_ERROR)
            continue

        print('{}:'.format(path))
        for param in params:
            pprint.pprint(param)

    return status
