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

"""Bind decoded XML-RPC values onto dataclass records

Target records are dataclass instances. Their exported fields, the ones not
starting with an underscore, are filled in declaration order from the
response params, or by member name from a struct. The declared field types
decide how each value is converted:

=================  ===========================================
value              accepted field types
=================  ===========================================
Int                ``int``
String             ``str``
Boolean            ``bool``
Double             ``float``
DateTime           ``datetime.datetime``
Base64             ``bytes``
Array              ``list``, ``List[T]``, ``Sequence[T]``, ``tuple``,
                   ``Tuple[T, ...]``, ``Tuple[A, B]`` (same length)
Struct             a dataclass, ``dict``, ``Dict[str, T]``
anything           ``Value`` (kept as is), ``Any``, ``object``
=================  ===========================================
"""

import collections.abc
import dataclasses
import functools
import logging
import types
import typing
from datetime import datetime

from .errors import FieldCountMismatch, InvalidFieldType, UnmatchedMemberError
from .naming import struct_member_to_field_name
from .values import Array, Base64, Boolean, DateTime, Double, Int, String, Struct, Value

_scalar_types = {
    Int: int,
    String: str,
    Boolean: bool,
    Double: float,
    DateTime: datetime,
    Base64: bytes,
}

_sequence_types = (list, tuple, collections.abc.Sequence, collections.abc.MutableSequence)
_mapping_types = (dict, collections.abc.Mapping, collections.abc.MutableMapping)

_kinds = {
    bool: 'bool',
    int: 'int',
    str: 'string',
    float: 'float',
    datetime: 'time',
    bytes: 'bytes',
    object: 'interface',
}

_union_types = (typing.Union,)
if hasattr(types, 'UnionType'):
    _union_types += (types.UnionType,)


def _unwrap_optional(declared_type):
    if typing.get_origin(declared_type) in _union_types:
        args = [arg for arg in typing.get_args(declared_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return declared_type

def _is_class(declared_type):
    # list[int] passes isinstance(..., type) on older interpreters
    return isinstance(declared_type, type) and typing.get_origin(declared_type) is None

def kind_of(declared_type):
    """Name the kind of a declared field type, as used in error messages."""
    declared_type = _unwrap_optional(declared_type)
    if declared_type is typing.Any:
        return 'interface'
    if _is_class(declared_type) and issubclass(declared_type, Value):
        return declared_type.kind or 'interface'
    if _is_class(declared_type) and dataclasses.is_dataclass(declared_type):
        return 'struct'
    origin = typing.get_origin(declared_type) or declared_type
    if origin in _sequence_types:
        return 'slice'
    if origin in _mapping_types:
        return 'map'
    if origin in _kinds:
        return _kinds[origin]
    return getattr(declared_type, '__name__', repr(declared_type))

def _is_record(obj):
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)

@functools.lru_cache(maxsize=256)
def _type_hints(record_type):
    return typing.get_type_hints(record_type)

def exported_fields(record):
    """Exported fields of a dataclass instance or type, in declaration order."""
    if not dataclasses.is_dataclass(record):
        raise InvalidFieldType('struct', kind_of(type(record)))
    return [f for f in dataclasses.fields(record) if not f.name.startswith('_')]

def fields_must_equal(record, expected):
    actual = len(exported_fields(record))
    if actual != expected:
        raise FieldCountMismatch(expected, actual)

def _is_frozen(record_type):
    return record_type.__dataclass_params__.frozen

def _set_field(record, name, value):
    # frozen dataclasses fill themselves the same way in __init__
    if _is_frozen(type(record)):
        object.__setattr__(record, name, value)
    else:
        setattr(record, name, value)

def blank_record(record_type):
    """Create a record without calling its ``__init__``.

    Fields get their dataclass default when there is one, ``None``
    otherwise.
    """
    record = record_type.__new__(record_type)
    for f in dataclasses.fields(record_type):
        if f.default is not dataclasses.MISSING:
            value = f.default
        elif f.default_factory is not dataclasses.MISSING:
            value = f.default_factory()
        else:
            value = None
        _set_field(record, f.name, value)
    return record

def _member_index(struct):
    index = {}
    for name in struct:
        field_name = struct_member_to_field_name(name)
        if field_name in index:
            logging.warning('xmlrpc: members %r and %r both map to %s, using %r',
                            index[field_name], name, field_name, index[field_name])
            continue
        index[field_name] = name
    return index

def _assign_array(value, declared_type, strict):
    origin = typing.get_origin(declared_type) or declared_type
    if origin not in _sequence_types:
        raise InvalidFieldType(value.kind, kind_of(declared_type))
    args = typing.get_args(declared_type)
    if origin is not tuple:
        item_type = args[0] if args else typing.Any
        return [assign(item, item_type, strict=strict) for item in value]

    if not args or (len(args) == 2 and args[1] is Ellipsis):
        item_type = args[0] if args else typing.Any
        return tuple(assign(item, item_type, strict=strict) for item in value)
    if len(args) != len(value):
        raise FieldCountMismatch(len(value), len(args))
    return tuple(assign(item, item_type, strict=strict) for item, item_type in zip(value, args))

def _assign_struct(value, declared_type, current, strict):
    if _is_class(declared_type) and dataclasses.is_dataclass(declared_type):
        # frozen records may be shared, so they are never filled in place
        reuse = isinstance(current, declared_type) and not _is_frozen(declared_type)
        record = current if reuse else blank_record(declared_type)
        bind_struct(record, value, strict=strict)
        return record

    origin = typing.get_origin(declared_type) or declared_type
    if origin not in _mapping_types:
        raise InvalidFieldType(value.kind, kind_of(declared_type))
    args = typing.get_args(declared_type)
    item_type = args[1] if len(args) == 2 else typing.Any
    return {name: assign(member, item_type, strict=strict) for name, member in value.items()}

def assign(value, declared_type, current=None, strict=False):
    """Convert ``value`` for a field declared as ``declared_type``

    ``current`` is the field's present content; a nested record found there
    is filled in place rather than replaced.
    """
    declared_type = _unwrap_optional(declared_type)

    if declared_type is typing.Any or declared_type is object:
        return value.native()
    if _is_class(declared_type) and issubclass(declared_type, Value):
        if not isinstance(value, declared_type):
            raise InvalidFieldType(value.kind, kind_of(declared_type))
        return value

    if isinstance(value, Array):
        return _assign_array(value, declared_type, strict)
    if isinstance(value, Struct):
        return _assign_struct(value, declared_type, current, strict)

    if declared_type is not _scalar_types[value.__class__]:
        raise InvalidFieldType(value.kind, kind_of(declared_type))
    return value.value

def bind_struct(record, struct, strict=False):
    """Fill the exported fields of ``record`` from the members of ``struct``

    A field takes the member with exactly its name, or else the member whose
    normalized name equals the normalized field name. Members nothing asks
    for are ignored, unless ``strict`` is set. Fields without a member keep
    their value.
    """
    record_type = type(record)
    hints = _type_hints(record_type)
    index = _member_index(struct)

    pairs = []
    for f in exported_fields(record):
        if f.name in struct:
            pairs.append((f, f.name))
            continue
        name = index.get(struct_member_to_field_name(f.name))
        if name is None:
            logging.debug('xmlrpc: no member for %s.%s', record_type.__name__, f.name)
            continue
        pairs.append((f, name))

    matched = {name for f, name in pairs}
    for name in struct:
        if name not in matched:
            if strict:
                raise UnmatchedMemberError(name, record_type)
            logging.debug('xmlrpc: ignoring member %r of %s', name, record_type.__name__)

    for f, name in pairs:
        current = getattr(record, f.name, None)
        _set_field(record, f.name, assign(struct[name], hints[f.name], current, strict))

def bind_params(target, params, strict=False):
    """Bind response params to the fields of ``target``, one by one, in order."""
    if not _is_record(target):
        raise InvalidFieldType('struct', kind_of(type(target)))
    fields_must_equal(target, len(params))

    hints = _type_hints(type(target))
    for f, param in zip(exported_fields(target), params):
        current = getattr(target, f.name, None)
        _set_field(target, f.name, assign(param, hints[f.name], current, strict))
