#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Activating the resolved locale.

.. caution::

   :class:`ProcessLocaleActivator` uses :func:`locale.setlocale`,
   which changes state shared by every thread in the process. If
   requests are handled concurrently and can resolve to different
   locales, they will overwrite each other's setting. Such
   applications should set ``setlocale.apply_to_process = false``
   (or register a :class:`NullLocaleActivator`) and use
   ``request.locale`` instead.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from locale import Error as LocaleError
from locale import setlocale

from zope import component
from zope import interface

from .interfaces import ILocaleActivator
from .interfaces import LocaleActivationError

__docformat__ = "restructuredtext en"

__all__ = [
    'NullLocaleActivator',
    'ProcessLocaleActivator',
    'activate_locale',
]

logger = __import__('logging').getLogger(__name__)


@interface.implementer(ILocaleActivator)
class ProcessLocaleActivator(object):
    """
    Activates locales for the whole process using :func:`locale.setlocale`.
    """

    def activate(self, category, locale_name):
        try:
            setlocale(category, locale_name)
        except LocaleError:
            logger.warning("Cannot set locale to %s (category %s)",
                           locale_name, category)
            raise LocaleActivationError(locale_name, category)


@interface.implementer(ILocaleActivator)
class NullLocaleActivator(object):
    """
    Activates nothing.
    """

    def activate(self, category, locale_name):
        "Does nothing"


def activate_locale(config, locale_name, activator=None):
    """
    If the *config* asks for it, activate *locale_name*.

    The *activator* defaults to the registered :class:`.ILocaleActivator`
    utility, or a :class:`ProcessLocaleActivator` if there isn't one.

    :raises LocaleActivationError: If the locale cannot be activated.
    """
    if not config.apply_to_process:
        return
    if activator is None:
        activator = component.queryUtility(ILocaleActivator,
                                           default=ProcessLocaleActivator())
    activator.activate(config.category, locale_name)
