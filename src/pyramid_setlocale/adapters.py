# -*- coding: utf-8 -*-
"""
Adapters that let Zope and Pyramid i18n machinery see the
resolved locale.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from pyramid.i18n import default_locale_negotiator
from pyramid.interfaces import ILocaleNegotiator

from zope import component
from zope import interface

from zope.i18n.interfaces import IUserPreferredLanguages

from .interfaces import IResolvedLocaleRequest

__all__ = [
    'ResolvedUserPreferredLanguages',
    'resolved_locale_negotiator',
]


@interface.implementer(IUserPreferredLanguages)
@component.adapter(IResolvedLocaleRequest)
class ResolvedUserPreferredLanguages(object):
    """
    The preferred languages of a request whose locale has
    been resolved: just that locale.
    """

    def __init__(self, request):
        self.request = request

    def getPreferredLanguages(self):
        return [self.request.locale]


@interface.provider(ILocaleNegotiator)
def resolved_locale_negotiator(request):
    """
    A pyramid locale negotiator that uses the resolved locale if
    there is one, and otherwise falls back to pyramid's default
    (the ``_LOCALE_`` attribute, parameter or cookie).
    """
    if IResolvedLocaleRequest.providedBy(request):
        locale_name = getattr(request, 'locale', None)
        if locale_name:
            return locale_name
    return default_locale_negotiator(request)
