#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright 2026 pvhelpers developers.
#
# This file is part of pvhelpers.
#
# pvhelpers is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3 as
# published by the Free Software Foundation.
#
# pvhelpers is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with pvhelpers.  If not, see <http://www.gnu.org/licenses/>.

import math
import re

LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def bool_from_string(value):
    """Interpret string value as boolean.

    Returns True if value translates to True otherwise False.
    """
    if not isinstance(value, str):
        msg = "Unable to interpret non-string value '%s' as boolean" % (value)
        raise ValueError(msg)

    value = value.strip().lower()

    if value in ['y', 'yes', 'true', 't', 'on']:
        return True
    elif value in ['n', 'no', 'false', 'f', 'off']:
        return False

    msg = "Unable to interpret string value '%s' as boolean" % (value)
    raise ValueError(msg)


def int_from_leading_digits(value):
    """Interpret the leading decimal integer of a string.

    Leading whitespace and a sign are allowed, anything after the digits is
    ignored. Returns None when no digit could be consumed.
    """
    if not isinstance(value, str):
        return None
    matches = LEADING_INT.match(value)
    if not matches:
        return None
    return int(matches.group(1))


def round_half_up(value):
    "Round to the nearest integer, halves away from zero for positives"
    return int(math.floor(value + 0.5))


def attr_bit_set(attr_bits, index, placeholder='-'):
    """Report whether position ``index`` of an LVM attribute string is set.

    A string too short to carry the position reports the bit as unset.
    """
    return len(attr_bits) > index and attr_bits[index] != placeholder
