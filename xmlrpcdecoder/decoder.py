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

"""XML-RPC response decoder

Use :py:class:`StdDecoder` to fill a dataclass record from a raw
``methodResponse``::

    @dataclass
    class Result:
        Param: str = ''
        Int: int = 0

    result = Result()
    StdDecoder().decode_raw(raw, result)

A ``<fault>`` response raises :py:class:`~xmlrpcdecoder.errors.Fault` and
leaves the record alone; every other failure raises a
:py:class:`~xmlrpcdecoder.errors.DecodeError`.
"""

import logging

from . import config
from .binder import bind_params
from .xmlrpc import parse_response


class StdDecoder:
    def __init__(self, strict=config.STRICT_MEMBERS):
        self.strict = strict

    def _parse(self, raw):
        response = parse_response(raw)
        if response.is_fault:
            logging.info('xmlrpc: peer returned %r', response.fault)
            raise response.fault
        return response.params

    def decode_raw(self, raw, target):
        """Decode ``raw`` into the dataclass instance ``target``

        The number of exported fields of ``target`` must equal the number of
        params. On error the contents of ``target`` are undefined.
        """
        params = self._parse(raw)
        bind_params(target, params, strict=self.strict)
        logging.debug('xmlrpc: bound %i params to %s', len(params), type(target).__name__)

    def decode(self, raw):
        """Decode ``raw`` into a list of plain Python values, one per param."""
        return [param.native() for param in self._parse(raw)]


def decode_raw(raw, target, strict=config.STRICT_MEMBERS):
    StdDecoder(strict=strict).decode_raw(raw, target)
