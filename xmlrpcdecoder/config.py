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

__license__ = 'GPL-3'

VERSION = '1.0.0'

# Decoder defaults, overridable per StdDecoder instance
STRICT_MEMBERS = False

# <boolean> text that decodes to True, everything else is False
BOOLEAN_TRUE = ('1', 'true')

# dateTime.iso8601 layouts, tried in order
DATETIME_FORMATS = (
    '%Y%m%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M:%S',
    '%Y%m%dT%H%M%S',
)

if __name__=='__main__':
    print(VERSION)
