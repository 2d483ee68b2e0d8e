# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import pytest

from linker.referencedata.traditions import greektradition, latintradition
from linker.resolvers.embeddedidentifiers import detectembeddedidentifier, formatembeddedidentifier


@pytest.mark.parametrize('reference, expected', [
	('tlg0012.tlg001:1.1', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1'),
	('tlg0012.tlg001', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2'),
	('tlg0012.tlg001:1.1ff', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1ff'),
	('tlg0059.tlg030:428a', 'urn:cts:greekLit:tlg0059.tlg030.perseus-grc2:428a'),
	('phi0474.phi005 2.5', 'urn:cts:latinLit:phi0474.phi005.perseus-lat2:2.5'),
	('stoa0045.stoa001:3', 'urn:cts:latinLit:stoa0045.stoa001.perseus-lat2:3'),
	('urn:cts:greekLit:tlg0012.tlg001', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2'),
	('urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1', 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1'),
	('perseus:abo:tlg,0011,004:867', 'urn:cts:greekLit:tlg0011.tlg004.perseus-grc2:867'),
	('Perseus:abo:phi,0474,058:1:1:37', 'urn:cts:latinLit:phi0474.phi058.perseus-lat2:1.1.37'),
])
def test_formatembeddedidentifier(reference, expected):
	assert formatembeddedidentifier(reference) == expected


def test_detection():
	found = detectembeddedidentifier('see TLG0012.TLG001:1.1')
	assert found.workcode == 'tlg0012.tlg001'
	assert found.location == '1.1'
	assert found.tradition is greektradition
	assert detectembeddedidentifier('phi0690.phi003').tradition is latintradition


def test_nothing_embedded():
	assert detectembeddedidentifier('soph. ot 151') is None
	assert detectembeddedidentifier('') is None
	assert formatembeddedidentifier('hom. il. 1.1') == ''
