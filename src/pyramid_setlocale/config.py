#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Configuration for locale resolution.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

import locale

from pyramid.settings import asbool
from pyramid.settings import aslist

from zope.cachedescriptors.property import Lazy

from .codes import normalise_code

__docformat__ = "restructuredtext en"

__all__ = [
    'LocaleConfig',
]

logger = __import__('logging').getLogger(__name__)

#: The prefix of the keys in the Pyramid settings we read.
SETTINGS_PREFIX = 'setlocale.'


def _category_named(name):
    if not isinstance(name, str):
        return name
    name = name.strip().upper()
    if not name.startswith('LC_') or not hasattr(locale, name):
        raise ValueError("Unknown locale category %r" % (name,))
    return getattr(locale, name)


def _locale_list(value):
    # Entries may be separated by whitespace, newlines or commas.
    return [code
            for token in aslist(value)
            for code in token.split(',')
            if code]


class LocaleConfig(object):
    """
    The locales an application supports and how a request's
    locale is matched against them.

    Instances are immutable and may be shared between
    concurrently running requests.
    """

    _frozen = False

    def __init__(self,
                 supported_locales=('en-gb',),
                 default_locale='en-gb',
                 strict_match=False,
                 override=None,
                 apply_to_process=True,
                 category=locale.LC_ALL):
        if isinstance(supported_locales, str):
            supported_locales = (supported_locales,)
        self.supported_locales = tuple(supported_locales)
        self.default_locale = default_locale
        self.strict_match = bool(strict_match)
        self.override = override or None
        self.apply_to_process = bool(apply_to_process)
        self.category = _category_named(category)
        self._frozen = True

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError("LocaleConfig is immutable")
        super(LocaleConfig, self).__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError("LocaleConfig is immutable")

    @Lazy
    def normalised_locales(self):
        """
        ``(normalised, configured)`` pairs for each supported locale,
        in the configured order.
        """
        return tuple((normalise_code(l), l) for l in self.supported_locales)

    @classmethod
    def from_settings(cls, settings, prefix=SETTINGS_PREFIX):
        """
        Create an instance from the Pyramid *settings* mapping, using
        the keys that begin with *prefix*. Keys we don't know about
        are ignored.
        """
        kwargs = {}
        for key, value in (settings or {}).items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):]
            if name == 'supported_locales':
                kwargs[name] = _locale_list(value)
            elif name in ('strict_match', 'apply_to_process'):
                kwargs[name] = asbool(value)
            elif name in ('default_locale', 'override', 'category'):
                kwargs[name] = value.strip() if isinstance(value, str) else value
            else:
                logger.debug("Ignoring unknown locale setting %r", key)
        return cls(**kwargs)

    def __repr__(self):
        return '<%s supported=%r default=%r strict=%r>' % (
            type(self).__name__,
            self.supported_locales,
            self.default_locale,
            self.strict_match,
        )
