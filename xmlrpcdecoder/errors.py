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

INVALID_FIELD_TYPE_FORMAT = "invalid field type: expected '{}', got '{}'"
FIELD_COUNT_FORMAT = 'fields count mismatch: expected {}, got {}'


class XmlRpcError(Exception):
    pass


class DecodeError(XmlRpcError, ValueError):
    """A response could not be decoded locally."""


class StructuralDecodeError(DecodeError):
    pass


class FieldCountMismatch(DecodeError):
    def __init__(self, expected, actual):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return FIELD_COUNT_FORMAT.format(self.expected, self.actual)


class InvalidFieldType(DecodeError):
    def __init__(self, expected, actual):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return INVALID_FIELD_TYPE_FORMAT.format(self.expected, self.actual)

    def __eq__(self, other):
        if not isinstance(other, InvalidFieldType):
            return NotImplemented
        return (self.expected, self.actual) == (other.expected, other.actual)

    __hash__ = DecodeError.__hash__


class UnmatchedMemberError(DecodeError):
    def __init__(self, member, record_type):
        super().__init__(member, record_type)
        self.member = member
        self.record_type = record_type

    def __str__(self):
        return 'struct member {!r} has no field in {}'.format(self.member, self.record_type.__name__)


class Fault(XmlRpcError):
    """An error reported by the remote XML-RPC peer.

    Raised instead of binding anything when the response holds a
    ``<fault>``. ``code`` and ``string`` carry ``faultCode`` and
    ``faultString`` unchanged.
    """

    def __init__(self, code, string):
        super().__init__(code, string)
        self.code = code
        self.string = string

    def __str__(self):
        return 'fault {}: {}'.format(self.code, self.string)

    def __repr__(self):
        return '<Fault {}: {!r}>'.format(self.code, self.string)

    def __eq__(self, other):
        if not isinstance(other, Fault):
            return NotImplemented
        return (self.code, self.string) == (other.code, other.string)

    def __hash__(self):
        return hash((self.code, self.string))
