#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Locale resolution interfaces.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from pyramid.interfaces import IRequest

from zope import interface

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)


class IResolvedLocaleRequest(IRequest):
    """
    An extension to a standard request used as a marker. Requests
    providing this have a ``locale`` attribute naming the locale
    chosen by :func:`pyramid_setlocale.tween.setlocale_tween_factory`.
    """


class ILocaleActivator(interface.Interface):
    """
    Something that can make a locale the active one, typically
    for the whole process.
    """

    def activate(category, locale_name):
        """
        Activate *locale_name* for the ``locale.LC_*`` *category*.

        :raises LocaleActivationError: If the locale cannot
           be activated.
        """


class LocaleActivationError(Exception):
    """
    Raised when the resolved locale cannot be activated. The
    request fails; the application decides how to report it.
    """

    def __init__(self, locale_name, category=None):
        super(LocaleActivationError, self).__init__(
            "Cannot set locale to %s" % (locale_name,))
        self.locale_name = locale_name
        self.category = category
