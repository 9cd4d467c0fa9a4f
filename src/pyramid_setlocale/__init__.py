#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Resolving the locale of a Pyramid request.

Resolution
==========

An application lists the locales it supports, in order of preference,
and a default locale (see :class:`pyramid_setlocale.config.LocaleConfig`).
For each request, :class:`pyramid_setlocale.resolver.LocaleResolver`
tries these sources in turn:

1. An override configured for the application. This is mostly useful
   for testing or for single-language deployments.
2. The first segment of the URL path, e.g. ``pt`` in ``/pt/initial``.
3. The ``Accept-Language`` header, highest quality value first.
4. The default locale.

Codes taken from the request are first cleaned up: only the leading
run of letters, ``_`` and ``-`` is kept, and the result must look like
``xx`` or ``xx-YY`` (or ``xx_YY``). Anything else is ignored.

Matching compares codes with case and ``_``/``-`` differences removed.
By default, matching is *fuzzy*: a supported locale matches if it
contains the requested code, so a request for ``en`` matches a
supported ``en_GB``. Note this only goes one way; a request for
``en-us`` does not match ``en_GB``. With ``strict_match`` enabled,
the codes must be equal.

Only a supported locale (or the default) is ever chosen; clients
cannot inject an arbitrary locale name.

Pyramid Integration
===================

Include this package in your configuration::

    config.include('pyramid_setlocale')

This adds :func:`pyramid_setlocale.tween.setlocale_tween_factory` and
installs :func:`pyramid_setlocale.adapters.resolved_locale_negotiator`
as the locale negotiator, so ``request.locale_name`` and the Pyramid
localizer use the resolved locale. The tween also sets
``request.locale`` and the ``Content-Language`` response header.

Settings are read from the ``setlocale.`` keys of the application
settings::

    setlocale.supported_locales = en_GB pt_PT
    setlocale.default_locale = en_GB
    setlocale.strict_match = false
    setlocale.override =
    setlocale.apply_to_process = true
    setlocale.category = LC_ALL

Process Locale
==============

When ``apply_to_process`` is true (the default), the resolved locale is
also activated with :func:`locale.setlocale`. If the platform has no such
locale, :class:`pyramid_setlocale.interfaces.LocaleActivationError` is
raised and the request fails.

.. warning::

   The C locale is shared by the whole process. In a multi-threaded
   server, concurrent requests for different locales will race. Turn
   ``apply_to_process`` off, or register a
   :class:`pyramid_setlocale.activation.NullLocaleActivator` as the
   :class:`pyramid_setlocale.interfaces.ILocaleActivator` utility, and
   rely on ``request.locale`` instead.

Zope Integration
================

Include ``<include package="pyramid_setlocale" />`` from your ZCML to
register an :class:`zope.i18n.interfaces.IUserPreferredLanguages`
adapter for resolved requests, so Zope translation domains pick the
same locale.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from .adapters import ResolvedUserPreferredLanguages
from .adapters import resolved_locale_negotiator

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)


def includeme(config):
    """
    Pyramid configuration hook; see the package documentation.
    """
    config.add_tween('pyramid_setlocale.tween.setlocale_tween_factory')
    config.set_locale_negotiator(resolved_locale_negotiator)
    config.registry.registerAdapter(ResolvedUserPreferredLanguages)
