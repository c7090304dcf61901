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

"""XML-RPC value model

Every ``<value>`` element of a response becomes exactly one of the classes
below. They are deliberately independent from ElementTree so the binder only
ever deals with one small, closed set of types.
"""


class Value:
    """Base class of all decoded XML-RPC values."""

    kind = None
    __slots__ = ('value',)

    def __init__(self, value):
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(self.__class__.__name__))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((self.__class__, self.value))

    def native(self):
        """Return the plain Python equivalent of this value."""
        return self.value

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.value)


class Int(Value):
    kind = 'int'
    __slots__ = ()


class String(Value):
    kind = 'string'
    __slots__ = ()


class Boolean(Value):
    kind = 'bool'
    __slots__ = ()


class Double(Value):
    kind = 'float'
    __slots__ = ()


class DateTime(Value):
    kind = 'time'
    __slots__ = ()


class Base64(Value):
    kind = 'bytes'
    __slots__ = ()


class Array(Value):
    """Ordered sequence of values. Order is significant."""

    kind = 'slice'
    __slots__ = ()

    def __init__(self, items=()):
        super().__init__(tuple(items))

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def native(self):
        return [item.native() for item in self.value]


class Struct(Value):
    """Mapping of member name to value.

    Member names are unique; the document order is kept only so that name
    collisions after normalization resolve the same way every time.
    """

    kind = 'struct'
    __slots__ = ()

    def __init__(self, members=()):
        super().__init__(dict(members))

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __getitem__(self, name):
        return self.value[name]

    def __contains__(self, name):
        return name in self.value

    def __hash__(self):
        return hash((self.__class__, frozenset(self.value.items())))

    def items(self):
        return self.value.items()

    def native(self):
        return {name: member.native() for name, member in self.value.items()}
