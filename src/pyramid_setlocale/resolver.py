#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Choosing one of an application's supported locales for a request.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from .codes import is_valid_code
from .codes import normalise_code
from .codes import parse_accept_language
from .codes import sanitise_code

__docformat__ = "restructuredtext en"

__all__ = [
    'LocaleResolver',
]

logger = __import__('logging').getLogger(__name__)


class LocaleResolver(object):
    """
    Resolves the locale of a request against a
    :class:`pyramid_setlocale.config.LocaleConfig`.

    The sources are tried in this order, and the first one that
    produces a supported locale wins:

    1. The configured override;
    2. The first segment of the request path;
    3. The ``Accept-Language`` header(s);
    4. The configured default locale.

    The only state is the (immutable) configuration, so one instance
    can serve any number of concurrent requests.
    """

    def __init__(self, config):
        self.config = config

    def _matches(self, app_locale, candidate):
        if self.config.strict_match:
            return app_locale == candidate
        # Only the supported locale can contain the candidate, not
        # the other way around: 'en' matches 'en-gb', 'en-us' does not.
        return candidate in app_locale

    def match(self, candidates):
        """
        Find the supported locale matching the best of *candidates*.

        :param candidates: A mapping from locale code to weight. Codes
            with higher weights are tried first; equal weights are
            tried in the order of the mapping.
        :return: The supported locale, exactly as configured, or None.
        """
        ranked = sorted(candidates.items(), key=lambda item: item[1], reverse=True)
        for code, _ in ranked:
            code = normalise_code(code)
            for normalised, app_locale in self.config.normalised_locales:
                if self._matches(normalised, code):
                    return app_locale
        return None

    def match_code(self, value):
        """
        Match a single, untrusted, locale code. Values that do
        not sanitise to a valid code never match.
        """
        code = sanitise_code(value)
        if not is_valid_code(code):
            return None
        return self.match({code: 1.0})

    def match_override(self):
        if self.config.override:
            return self.match_code(self.config.override)
        return None

    def match_path(self, path):
        """
        Match the first segment of the URL *path*, e.g. ``pt`` in
        ``/pt/initial``.
        """
        segment = (path or '').lstrip('/').split('/', 1)[0]
        if not segment:
            return None
        return self.match_code(segment)

    def match_header(self, values):
        """
        Match the ``Accept-Language`` header *values*: a string, or
        a sequence of strings if the header was sent more than once.
        """
        return self.match(parse_accept_language(values))

    def resolve(self, path, accept_language=()):
        """
        Return the locale to use for a request to *path* that sent
        the *accept_language* header value(s).

        This never fails; when nothing matches, the configured default
        is returned as-is.
        """
        result = self.match_override()
        if result is not None:
            logger.debug("Using override locale %s", result)
            return result

        result = self.match_path(path)
        if result is not None:
            logger.debug("Using locale %s from path %r", result, path)
            return result

        result = self.match_header(accept_language)
        if result is not None:
            logger.debug("Using locale %s from Accept-Language %r",
                         result, accept_language)
            return result

        logger.debug("Using default locale %s", self.config.default_locale)
        return self.config.default_locale
