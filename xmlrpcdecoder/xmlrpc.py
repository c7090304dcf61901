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

"""XML-RPC response tree builder

Turns a ``methodResponse`` document into a :py:class:`Response`, which holds
either the decoded params or the :py:class:`~xmlrpcdecoder.errors.Fault`
reported by the peer.
"""

import base64
import binascii
import logging
import math
import re
import xml.etree.ElementTree as etree
from datetime import datetime

from . import config
from .errors import Fault, StructuralDecodeError
from .values import Array, Base64, Boolean, DateTime, Double, Int, String, Struct

INT_REGEX = re.compile(r'[+-]?[0-9]+')
DOUBLE_REGEX = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
XML_WHITESPACE = ' \t\r\n'


class Response:
    def __init__(self, params=None, fault=None):
        if fault is not None and params is not None:
            raise ValueError('a response holds either params or a fault')
        self.fault = fault
        self.params = [] if fault is None and params is None else params

    @property
    def is_fault(self):
        return self.fault is not None

    def __repr__(self):
        if self.is_fault:
            return '<{}.{} {!r}>'.format(__name__, __class__.__name__, self.fault)
        return '<{}.{} {!r}>'.format(__name__, __class__.__name__, self.params)


def _scalar_text(tree):
    if len(tree):
        raise StructuralDecodeError('<{}> may not contain elements'.format(tree.tag))
    return tree.text or ''

def _parse_int(tree):
    text = _scalar_text(tree).strip(XML_WHITESPACE)
    if not INT_REGEX.fullmatch(text):
        raise StructuralDecodeError('invalid <{}> value {!r}'.format(tree.tag, text))
    return Int(int(text))

def _parse_string(tree):
    return String(_scalar_text(tree))

def _parse_boolean(tree):
    return Boolean(_scalar_text(tree).strip() in config.BOOLEAN_TRUE)

def _parse_double(tree):
    text = _scalar_text(tree).strip(XML_WHITESPACE)
    if not DOUBLE_REGEX.fullmatch(text) or not math.isfinite(float(text)):
        raise StructuralDecodeError('invalid <double> value {!r}'.format(text))
    return Double(float(text))

def _parse_datetime(tree):
    text = _scalar_text(tree).strip()
    for fmt in config.DATETIME_FORMATS:
        try:
            return DateTime(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise StructuralDecodeError('invalid <dateTime.iso8601> value {!r}'.format(text))

def _parse_base64(tree):
    text = _scalar_text(tree)
    try:
        return Base64(base64.b64decode(text.encode('ascii'), validate=False))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise StructuralDecodeError('invalid <base64> value') from e

def xmlrpc_parse_array(tree):
    data = tree.findall('data')
    if len(data) != 1 or len(tree) != 1:
        raise StructuralDecodeError('<array> must hold exactly one <data> element')
    items = []
    for item in data[0]:
        if item.tag != 'value':
            raise StructuralDecodeError('unexpected <{}> in <data>'.format(item.tag))
        items.append(xmlrpc_parse_value(item))
    return Array(items)

def xmlrpc_parse_struct(tree):
    members = {}
    for member in tree:
        if member.tag != 'member':
            raise StructuralDecodeError('unexpected <{}> in <struct>'.format(member.tag))
        name = member.findtext('name')
        value = member.find('value')
        if name is None or value is None:
            raise StructuralDecodeError('struct member needs both <name> and <value>')
        if name in members:
            raise StructuralDecodeError('duplicate struct member {!r}'.format(name))
        members[name] = xmlrpc_parse_value(value)
    return Struct(members)

_value_parsers = {
    'i4': _parse_int,
    'i8': _parse_int,
    'int': _parse_int,
    'string': _parse_string,
    'boolean': _parse_boolean,
    'double': _parse_double,
    'dateTime.iso8601': _parse_datetime,
    'base64': _parse_base64,
    'array': xmlrpc_parse_array,
    'struct': xmlrpc_parse_struct,
}

def xmlrpc_parse_value(tree):
    """Interpret one ``<value>`` element.

    A value without a type element is a string.
    """
    if len(tree) == 0:
        return String(tree.text or '')
    if len(tree) > 1:
        raise StructuralDecodeError('<value> holds {} elements, expected one'.format(len(tree)))
    child = tree[0]
    try:
        parser = _value_parsers[child.tag]
    except KeyError:
        raise StructuralDecodeError('unknown value type <{}>'.format(child.tag)) from None
    return parser(child)

def xmlrpc_parse_fault(tree):
    values = tree.findall('value')
    if len(values) != 1:
        raise StructuralDecodeError('<fault> must hold exactly one <value>')
    fault = xmlrpc_parse_value(values[0])
    if not isinstance(fault, Struct):
        raise StructuralDecodeError('<fault> value must be a struct')

    try:
        code = fault['faultCode']
        string = fault['faultString']
    except KeyError as e:
        raise StructuralDecodeError('fault is missing the {} member'.format(e.args[0])) from None
    if not isinstance(code, Int):
        raise StructuralDecodeError('faultCode must be an int, got {}'.format(code.kind))
    if not isinstance(string, String):
        raise StructuralDecodeError('faultString must be a string, got {}'.format(string.kind))

    logging.debug('xmlrpc: fault code: %s message: %s', code.value, string.value)
    return Fault(code.value, string.value)

def xmlrpc_parse_params(tree):
    params = []
    for param in tree:
        if param.tag != 'param':
            raise StructuralDecodeError('unexpected <{}> in <params>'.format(param.tag))
        values = param.findall('value')
        if len(values) != 1 or len(param) != 1:
            raise StructuralDecodeError('<param> must hold exactly one <value>')
        params.append(xmlrpc_parse_value(values[0]))
    return params

def xmlrpc_parse(tree):
    """Build a :py:class:`Response` from a parsed ``methodResponse`` element."""
    if tree.tag != 'methodResponse':
        raise StructuralDecodeError('expected <methodResponse>, got <{}>'.format(tree.tag))
    if len(tree) != 1:
        raise StructuralDecodeError('<methodResponse> must hold exactly one of <params> or <fault>')

    body = tree[0]
    if body.tag == 'fault':
        return Response(fault=xmlrpc_parse_fault(body))
    elif body.tag == 'params':
        params = xmlrpc_parse_params(body)
        logging.debug('xmlrpc: decoded %i params', len(params))
        return Response(params=params)
    else:
        raise StructuralDecodeError('unexpected <{}> in <methodResponse>'.format(body.tag))

def parse_response(raw):
    """Parse raw response bytes (or text) into a :py:class:`Response`."""
    try:
        tree = etree.fromstring(raw)
    except etree.ParseError as e:
        raise StructuralDecodeError('malformed XML: {}'.format(e)) from e
    return xmlrpc_parse(tree)
