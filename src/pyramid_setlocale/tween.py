# -*- coding: utf-8 -*-
"""
A Pyramid tween that resolves the locale of each request.

"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from zope import interface

from .activation import activate_locale
from .config import LocaleConfig
from .interfaces import ILocaleActivator
from .interfaces import IResolvedLocaleRequest
from .resolver import LocaleResolver

__docformat__ = "restructuredtext en"

__all__ = [
    'setlocale_tween_factory',
]

logger = __import__('logging').getLogger(__name__)


def setlocale_tween_factory(handler, registry):
    """
    Create the tween. The :class:`.LocaleConfig` is read from the
    ``setlocale.*`` keys of the registry settings, once.

    For each request, the resolved locale is stored as
    ``request.locale`` (and ``request._LOCALE_``, for the benefit of
    the default pyramid localization machinery), the request is marked
    with :class:`.IResolvedLocaleRequest`, the locale is activated if
    the configuration asks for it, and the response gets a
    ``Content-Language`` header.

    An :class:`.ILocaleActivator` utility registered in *registry*
    is used in preference to a global one.

    :raises LocaleActivationError: From the tween, before the
        request is handled, if the locale cannot be activated.
    """
    config = LocaleConfig.from_settings(registry.settings)
    resolver = LocaleResolver(config)
    logger.debug("Resolving request locales with %r", config)

    def setlocale_tween(request):
        accept_language = request.headers.get('Accept-Language')
        locale_name = resolver.resolve(request.path_info,
                                       [accept_language] if accept_language else ())

        request.locale = locale_name
        request._LOCALE_ = locale_name
        interface.alsoProvides(request, IResolvedLocaleRequest)

        activate_locale(config, locale_name,
                        registry.queryUtility(ILocaleActivator))

        response = handler(request)
        response.headers['Content-Language'] = locale_name
        return response

    return setlocale_tween
