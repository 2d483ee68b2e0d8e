# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import pytest

from linker.parsers.referenceselector import hasrecognizedauthor, hasrecognizedwork, normalizereference, \
	selectreference


@pytest.mark.parametrize('raw, expected', [
	('Soph. <title>O. T.</title> 151 (lyr.)', 'soph. o. t. 151lyr.'),
	('Hdt. 1 § 5', 'hdt. 1.5'),
	('Il.  1,\n 5', 'il. 1 5'),
	('  Hom.   Il. 1.1 ', 'hom. il. 1.1'),
	('', ''),
])
def test_normalizereference(raw, expected):
	assert normalizereference(raw) == expected


def test_one_side_empty(referencedata):
	assert selectreference('', 'Hom. Il. 1.1', referencedata) == 'hom. il. 1.1'
	assert selectreference('Hom. Il. 1.1', '', referencedata) == 'hom. il. 1.1'
	assert selectreference('', '', referencedata) == ''


def test_embedded_identifier_in_attribute_wins(referencedata):
	chosen = selectreference('urn:cts:greekLit:tlg0012.tlg001:1.1', 'Il. 1.1', referencedata)
	assert chosen == 'urn:cts:greeklit:tlg0012.tlg001:1.1'


def test_attribute_with_author_beats_bare_text(referencedata):
	assert selectreference('Soph. OT 151', 'O. T. 151 lyr.', referencedata) == 'soph. ot 151'


def test_text_with_author_beats_bare_attribute(referencedata):
	assert selectreference('O. T. 151', 'Soph. OT 151', referencedata) == 'soph. ot 151'


def test_more_specific_pattern_wins(referencedata):
	# the attribute only has 'author work line'; the text has 'author work book.line'
	assert selectreference('Soph. OT 151', 'Hom. Il. 1.1', referencedata) == 'hom. il. 1.1'


def test_author_alone_decides_without_numbers(referencedata):
	assert selectreference('soph.', 'xyz', referencedata) == 'soph.'
	assert selectreference('xyz', 'soph.', referencedata) == 'soph.'


def test_work_decides_when_both_have_authors(referencedata):
	assert selectreference('soph. ot', 'hom. il.', referencedata) == 'soph. ot'
	assert selectreference('soph. xyz', 'hom. il.', referencedata) == 'hom. il.'


def test_nothing_usable(referencedata):
	assert selectreference('qqq', 'zzz', referencedata) == ''
	assert selectreference('soph. xyz', 'hom. qqq', referencedata) == ''


def test_hasrecognizedauthor(referencedata):
	assert hasrecognizedauthor(['soph.', 'ot', '151'], referencedata)
	assert hasrecognizedauthor(['ap.', 'rh.', '3.1265'], referencedata)
	assert not hasrecognizedauthor(['o.', 't.', '151'], referencedata)
	assert not hasrecognizedauthor(list(), referencedata)


def test_hasrecognizedwork(referencedata):
	assert hasrecognizedwork('soph. ot 151', referencedata)
	assert hasrecognizedwork('plin. ep. 10.96', referencedata)
	assert not hasrecognizedwork('soph. 151', referencedata)
	assert not hasrecognizedwork('soph.', referencedata)
