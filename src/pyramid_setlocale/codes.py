#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Helpers for cleaning up and comparing locale codes as they arrive
from clients (URL segments and ``Accept-Language`` entries).

These are simple string comparisons, not BCP 47 range
matching.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

import re

__docformat__ = "restructuredtext en"

__all__ = [
    'is_valid_code',
    'normalise_code',
    'parse_accept_language',
    'sanitise_code',
]

logger = __import__('logging').getLogger(__name__)

_LEADING_CODE = re.compile(r'^[A-Za-z_-]+')
_VALID_CODE = re.compile(r'^(?:[a-z]{2}|[a-z]{2}[_-][a-zA-Z]{2})$')

#: The separator between an ``Accept-Language`` entry and its weight.
_WEIGHT_SEPARATOR = re.compile(r'\s*;\s*[qQ]\s*=\s*')

DEFAULT_WEIGHT = 1.0


def sanitise_code(value):
    """
    Return the leading run of ``[A-Za-z_-]`` characters of *value*.

    Anything after the first other character is discarded. If *value*
    begins with such a character (or is empty), the result is empty.

        >>> sanitise_code('pt_PT')
        'pt_PT'
        >>> sanitise_code('en-gb.html')
        'en-gb'
        >>> sanitise_code('../en')
        ''
    """
    if not value:
        return ''
    m = _LEADING_CODE.match(value)
    return m.group(0) if m else ''


def is_valid_code(code):
    """
    Is *code* a two letter lowercase language, optionally followed by
    ``_`` or ``-`` and a two letter region in either case?
    """
    return bool(code) and _VALID_CODE.match(code) is not None


def normalise_code(code):
    """
    Normalise *code* for comparison, e.g. ``en_GB`` becomes ``en-gb``.
    """
    return code.replace('_', '-').lower()


def _parse_weight(text):
    try:
        weight = float(text)
    except ValueError:
        logger.debug("Ignoring malformed language weight %r", text)
        return DEFAULT_WEIGHT
    # NaN compares false to everything; treat it like garbage.
    if weight != weight:
        return DEFAULT_WEIGHT
    return min(max(weight, 0.0), 1.0)


def _split_weight(entry):
    parts = _WEIGHT_SEPARATOR.split(entry, 1)
    return parts[0], (parts[1] if len(parts) > 1 else '')


def parse_accept_language(values):
    """
    Parse ``Accept-Language`` header value(s) into an ordered
    mapping from locale code to weight.

    *values* may be a single string or an iterable of strings (one
    per header instance); they are combined as if they were a single
    comma separated header. Entries are kept in header order. Entries
    whose code does not sanitise to a valid code are dropped. A code
    that appears more than once keeps its first position but takes
    the last weight given for it.
    """
    if not values:
        return {}
    if isinstance(values, str):
        values = [values]

    prefs = {}
    for entry in ','.join(values).split(','):
        code, weight = _split_weight(entry.strip())
        code = sanitise_code(code)
        if not is_valid_code(code):
            continue
        prefs[code] = _parse_weight(weight) if weight else DEFAULT_WEIGHT
    return prefs
