#!/usr/bin/env python
# -*- coding: utf-8 -*-

from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

# pylint: disable=W0212,R0904

import unittest

from hamcrest import assert_that
from hamcrest import is_
from hamcrest import has_entries
from hamcrest import contains_exactly

from nti.testing.matchers import is_empty

from ..codes import is_valid_code
from ..codes import normalise_code
from ..codes import parse_accept_language
from ..codes import sanitise_code


class TestSanitise(unittest.TestCase):

    def test_keeps_leading_run(self):
        assert_that(sanitise_code('pt_PT'), is_('pt_PT'))
        assert_that(sanitise_code('en-gb.html'), is_('en-gb'))
        assert_that(sanitise_code('de;q=0.8'), is_('de'))
        assert_that(sanitise_code('fr<script>'), is_('fr'))

    def test_invalid_start(self):
        assert_that(sanitise_code('../en'), is_(''))
        assert_that(sanitise_code(' en'), is_(''))
        assert_that(sanitise_code('1en'), is_(''))

    def test_empty(self):
        assert_that(sanitise_code(''), is_(''))
        assert_that(sanitise_code(None), is_(''))


class TestValid(unittest.TestCase):

    def test_valid(self):
        for code in ('en', 'pt_PT', 'en-gb', 'en-GB', 'pt_br'):
            assert_that(is_valid_code(code), is_(True), code)

    def test_invalid(self):
        for code in ('', 'e', 'EN', 'En', 'eng', 'en_', 'en-g',
                     'en-gbr', 'en_GB_x', 'en__GB', 'EN-gb', 'zh-Hant'):
            assert_that(is_valid_code(code), is_(False), code)


class TestNormalise(unittest.TestCase):

    def test_normalise(self):
        assert_that(normalise_code('en_GB'), is_('en-gb'))
        assert_that(normalise_code('pt-PT'), is_('pt-pt'))
        assert_that(normalise_code('de'), is_('de'))


class TestParseAcceptLanguage(unittest.TestCase):

    def test_weights(self):
        prefs = parse_accept_language('pt_BR,pt;q=0.8,pt_PT;q=0.6,en;q=0.4')
        assert_that(prefs, is_({'pt_BR': 1.0, 'pt': 0.8, 'pt_PT': 0.6, 'en': 0.4}))
        assert_that(list(prefs), contains_exactly('pt_BR', 'pt', 'pt_PT', 'en'))

    def test_whitespace(self):
        prefs = parse_accept_language('en-US, fr;q=0.5 ,  de;q=0.1')
        assert_that(prefs, is_({'en-US': 1.0, 'fr': 0.5, 'de': 0.1}))

    def test_optional_whitespace_around_weight(self):
        prefs = parse_accept_language('fr;q=0.9, en; q=0.5,de ;Q=0.2, it ; q = 0.1')
        assert_that(prefs, is_({'fr': 0.9, 'en': 0.5, 'de': 0.2, 'it': 0.1}))

    def test_multiple_values_are_joined(self):
        prefs = parse_accept_language(['de_DE,de;q=0.8', 'fr;q=0.1'])
        assert_that(prefs, is_({'de_DE': 1.0, 'de': 0.8, 'fr': 0.1}))

    def test_empty(self):
        assert_that(parse_accept_language(''), is_empty())
        assert_that(parse_accept_language(None), is_empty())
        assert_that(parse_accept_language(()), is_empty())
        assert_that(parse_accept_language(',,;q=1'), is_empty())

    def test_invalid_codes_dropped(self):
        prefs = parse_accept_language('*,eng;q=0.9,EN;q=0.8,en;q=0.1')
        assert_that(prefs, is_({'en': 0.1}))

    def test_malformed_weight_is_full(self):
        prefs = parse_accept_language('de;q=abc,fr;q=,it;q=nan,es;q=0.2')
        assert_that(prefs, has_entries(de=1.0, fr=1.0, it=1.0, es=0.2))

    def test_weight_clamped(self):
        prefs = parse_accept_language('de;q=7,fr;q=-1')
        assert_that(prefs, is_({'de': 1.0, 'fr': 0.0}))

    def test_duplicate_last_weight_wins(self):
        prefs = parse_accept_language('en;q=0.2,fr;q=0.5,en;q=0.9')
        assert_that(prefs, is_({'en': 0.9, 'fr': 0.5}))
        assert_that(list(prefs), contains_exactly('en', 'fr'))
