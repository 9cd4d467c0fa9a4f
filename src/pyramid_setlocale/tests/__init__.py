#!/usr/bin/env python
# -*- coding: utf-8 -*-

from __future__ import print_function, absolute_import, division

from pyramid.config import Configurator
from pyramid.request import Request

from ..activation import NullLocaleActivator
from ..interfaces import ILocaleActivator


def make_app(activator=None, **settings):
    """
    Build a WSGI app with the tween installed whose only view
    renders ``request.locale``. Settings are given without the
    ``setlocale.`` prefix.
    """
    settings = {'setlocale.' + k: v for k, v in settings.items()}
    config = Configurator(settings=settings)
    config.include('pyramid_setlocale')
    config.registry.registerUtility(activator or NullLocaleActivator(),
                                    ILocaleActivator)
    config.add_route('page', '/*subpath')
    config.add_view(lambda request: request.locale,
                    route_name='page', renderer='string')
    return config.make_wsgi_app()


def blank(path='/', accept_language=None):
    headers = {}
    if accept_language is not None:
        headers['Accept-Language'] = accept_language
    return Request.blank(path, headers=headers)
