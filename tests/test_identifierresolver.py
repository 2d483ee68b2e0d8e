# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import pytest

from linker.referencedata.datastore import ReferenceDataStore
from linker.referencedata.referenceobjects import DirectAuthor
from linker.referencedata.traditions import determineliteraturesuffix, englishtradition, greektradition, latintradition
from linker.resolvers.identifierresolver import assembleurn, closeupfollowingpages, constructnumericworkcode, \
	resolveidentifier, resolveworkcode


@pytest.mark.parametrize('reference, expected', [
	('shakespeare cymb. iv. 2', 'urn:cts:englishLit:shak.cym.perseus-eng2:iv.2'),
	('soph. el. 123', 'urn:cts:greekLit:tlg0011.tlg005.perseus-grc2:123'),
	('hom. il. 1.1', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1'),
	('soph. ot 151', 'urn:cts:greekLit:tlg0011.tlg004.perseus-grc2:151'),
	('soph. oedipus tyrannus 151', 'urn:cts:greekLit:tlg0011.tlg004.perseus-grc2:151'),
	('schol. ar. nu. 225', 'urn:cts:greekLit:tlg5014.tlg003.perseus-grc2:225'),
	('cic. q. fr. 1.1', 'urn:cts:latinLit:phi0474.phi058.perseus-lat2:1.1'),
	('cic. mil. 5', 'urn:cts:latinLit:phi0474.phi052.perseus-lat2:5'),
	('caes. civ. 1.1', 'urn:cts:latinLit:phi0448.phi002.perseus-lat2:1.1'),
])
def test_ordinary_citations(referencedata, reference, expected):
	assert resolveidentifier(reference, None, 'test', referencedata).urn == expected


@pytest.mark.parametrize('reference, expected', [
	('plin. ep. 10.96', 'urn:cts:latinLit:phi1318.phi001.perseus-lat2:10.96'),
	('plin. nh 15.30', 'urn:cts:latinLit:phi0978.phi001.perseus-lat2:15.30'),
	('sen. ep. 47', 'urn:cts:latinLit:phi1017.phi015.perseus-lat2:47'),
	('sen. contr. 1.1', 'urn:cts:latinLit:phi1014.phi001.perseus-lat2:1.1'),
])
def test_homonymous_authors(referencedata, reference, expected):
	assert resolveidentifier(reference, None, 'test', referencedata).urn == expected


@pytest.mark.parametrize('reference, expected', [
	('hdt. 1.1', 'urn:cts:greekLit:tlg0016.tlg001.perseus-grc2:1.1'),
	('a.r. 3.1265', 'urn:cts:greekLit:tlg0001.tlg001.perseus-grc2:3.1265'),
	('liv. 21.1', 'urn:cts:latinLit:phi0914.phi001.perseus-lat2:21.1'),
	('hdt. ii', 'urn:cts:greekLit:tlg0016.tlg001.perseus-grc2:ii'),
])
def test_single_work_authors(referencedata, reference, expected):
	assert resolveidentifier(reference, None, 'test', referencedata).urn == expected


def test_range_of_works(referencedata):
	assert resolveidentifier('dem. or. 15', None, 'test', referencedata).urn == 'urn:cts:greekLit:tlg0014.tlg015.perseus-grc2'
	assert resolveidentifier('dem. or. 15.3', None, 'test', referencedata).urn == 'urn:cts:greekLit:tlg0014.tlg015.perseus-grc2:3'


def test_range_out_of_bounds(referencedata):
	outcome = resolveidentifier('dem. or. 99', None, 'test', referencedata)
	assert outcome.urn == ''
	assert outcome.errorcode == 'WORK_UNRESOLVED'


def test_numeric_work(referencedata):
	assert resolveidentifier('dem. 18.1', None, 'test', referencedata).urn == 'urn:cts:greekLit:tlg0014.tlg018.perseus-grc2:1'


def test_following_pages(referencedata):
	expected = 'urn:cts:greekLit:tlg0011.tlg004.perseus-grc2:151ff'
	assert resolveidentifier('soph. ot 151 ff.', None, 'test', referencedata).urn == expected
	assert resolveidentifier('soph. ot 151 ff', None, 'test', referencedata).urn == expected


def test_embedded_identifiers(referencedata):
	outcome = resolveidentifier('perseus:abo:tlg,0011,004:867', None, 'test', referencedata)
	assert outcome.urn == 'urn:cts:greekLit:tlg0011.tlg004.perseus-grc2:867'


def test_failures_carry_a_reason(referencedata):
	outcome = resolveidentifier('xyz. 1.1', None, 'test', referencedata)
	assert not outcome.resolved
	assert outcome.errorcode == 'AUTHOR_NOT_RECOGNIZED'
	assert 'xyz.' in outcome.reason

	outcome = resolveidentifier('', None, 'test', referencedata)
	assert outcome.urn == ''
	assert outcome.errorcode == 'NO_REFERENCE_SELECTED'


def test_author_without_stem():
	store = ReferenceDataStore({'ghost.': DirectAuthor('ghost')}, dict(), dict(), list(), dict())
	outcome = resolveidentifier('ghost. 1.1', None, 'test', store)
	assert outcome.errorcode == 'NO_IDENTIFIER_STEM'


def test_context_and_label_pass_through(referencedata):
	outcome = resolveidentifier('hom. il. 1.1', '<p>context</p>', 'iliad.xml', referencedata)
	assert outcome.context == '<p>context</p>'
	assert outcome.sourcelabel == 'iliad.xml'
	assert outcome.reference == 'hom. il. 1.1'


def test_resolution_is_idempotent(referencedata):
	first = resolveidentifier('plin. ep. 10.96', None, 'test', referencedata).urn
	second = resolveidentifier('plin. ep. 10.96', None, 'test', referencedata).urn
	assert first == second


@pytest.mark.parametrize('tradition, work, expected', [
	(greektradition, '5', 'tlg005'),
	(greektradition, '19', 'tlg019'),
	(greektradition, '019', 'tlg019'),
	(greektradition, '123', 'tlg0123'),
	(latintradition, '7', 'phi007'),
	(englishtradition, '7', ''),
])
def test_constructnumericworkcode(tradition, work, expected):
	assert constructnumericworkcode(tradition, work) == expected


def test_work_code_tiers(referencedata):
	homer = referencedata.authorurnstem('homer')
	assert resolveworkcode('homer', homer, 'il.', '1.1', referencedata) == ('tlg001', '1.1')
	assert resolveworkcode('homer', homer, '19', '5', referencedata) == ('tlg019', '5')
	assert resolveworkcode('homer', homer, 'zzz', '1', referencedata) == ('tlg001', '1')
	assert resolveworkcode('homer', homer, '', '1', referencedata) == ('tlg001', '1')

	shakespeare = referencedata.authorurnstem('shakespeare')
	assert resolveworkcode('shakespeare', shakespeare, '19', '', referencedata) == ('tlg001', '')

	demosthenes = referencedata.authorurnstem('demosthenes')
	assert resolveworkcode('demosthenes', demosthenes, 'or. 15', '', referencedata) == ('tlg015', '')


def test_closeupfollowingpages():
	assert closeupfollowingpages('soph. ot 151 ff.') == 'soph. ot 151ff'
	assert closeupfollowingpages('soph. ot 151ff.') == 'soph. ot 151ff'
	assert closeupfollowingpages('soph. ot 151') == 'soph. ot 151'


@pytest.mark.parametrize('stem, expected', [
	('urn:cts:greekLit:tlg0012', 'perseus-grc2'),
	('urn:cts:latinLit:phi0474', 'perseus-lat2'),
	('urn:cts:englishLit:shak', 'perseus-eng2'),
	('urn:cts:greekSchol:tlg5026', 'perseus-grc2'),
	('urn:cts:unknownLit:xyz0001', 'perseus-grc2'),
])
def test_determineliteraturesuffix(stem, expected):
	assert determineliteraturesuffix(stem) == expected
	assert assembleurn(stem, 'w001', str()) == '{s}.w001.{x}'.format(s=stem, x=expected)
