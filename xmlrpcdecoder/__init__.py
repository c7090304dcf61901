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

"""Decode XML-RPC method responses into dataclass records"""

from .config import VERSION
from .decoder import StdDecoder, decode_raw
from .errors import (
    DecodeError,
    Fault,
    FieldCountMismatch,
    InvalidFieldType,
    StructuralDecodeError,
    UnmatchedMemberError,
    XmlRpcError,
)
from .naming import struct_member_to_field_name
from .values import Array, Base64, Boolean, DateTime, Double, Int, String, Struct, Value
from .xmlrpc import Response, parse_response

__version__ = VERSION
