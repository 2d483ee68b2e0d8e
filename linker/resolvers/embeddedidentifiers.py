# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re

from linker.referencedata.traditions import greektradition, latintradition

# '151ff' is a locant of '151' plus 'ff'; '270b' keeps its letter
locant = r'(?::(\d+(?:(?!ff)[a-z])?(?:[.:]\d+(?:(?!ff)[a-z])?)*))?(ff)?'

# an edition suffix that is already present is skipped over
edition = r'(?:\.[a-z][\w-]*)?'

# stoa texts are latin
codeforms = [
	(re.compile(r'(tlg\d+\.tlg\d+)' + edition + locant, re.IGNORECASE), greektradition),
	(re.compile(r'(phi\d+\.phi\d+)' + edition + locant, re.IGNORECASE), latintradition),
	(re.compile(r'(stoa\d+\.stoa\d+)' + edition + locant, re.IGNORECASE), latintradition),
]

# how the lexica write it: n="Perseus:abo:tlg,0011,004:867"
perseusabo = re.compile(r'perseus:abo:(tlg|phi),(\d+),(\d+)(?::(\d+[a-z]?(?:[.:]\d+[a-z]?)*))?', re.IGNORECASE)

trailinglocation = re.compile(r'\d+.*')


class EmbeddedIdentifier(object):
	"""

	a work code that a citer already wrote out for us

	"""

	def __init__(self, workcode: str, location: str, tradition):
		self.workcode = workcode
		self.location = location
		self.tradition = tradition

	def asurn(self) -> str:
		urn = '{n}{c}.{s}'.format(n=self.tradition.urnnamespace(), c=self.workcode, s=self.tradition.editionsuffix)
		if self.location:
			urn = '{u}:{l}'.format(u=urn, l=self.location)
		return urn

	def __repr__(self):
		return 'EmbeddedIdentifier({c}:{l})'.format(c=self.workcode, l=self.location)


def detectembeddedidentifier(reference: str):
	"""

	look for 'tlg0012.tlg001', 'phi0474.phi005:2.5', 'stoa0045.stoa001' or the perseus
	'abo' notation anywhere in the reference

	:param reference:
	:return: an EmbeddedIdentifier or None
	"""

	if not reference:
		return None

	abo = re.search(perseusabo, reference)
	if abo:
		prefix = abo.group(1).lower()
		tradition = greektradition if prefix == 'tlg' else latintradition
		workcode = '{p}{a}.{p}{w}'.format(p=prefix, a=abo.group(2), w=abo.group(3))
		location = abo.group(4).replace(':', '.') if abo.group(4) else str()
		return EmbeddedIdentifier(workcode, location, tradition)

	for pattern, tradition in codeforms:
		found = re.search(pattern, reference)
		if not found:
			continue
		location = found.group(2) or str()
		if location and found.group(3):
			location += found.group(3)
		if not location:
			trailing = re.search(trailinglocation, reference[found.end():])
			if trailing:
				location = trailing.group(0).strip()
		return EmbeddedIdentifier(found.group(1).lower(), location, tradition)

	return None


def formatembeddedidentifier(reference: str) -> str:
	"""

	'tlg0012.tlg001:1.1' -> 'urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1'

	:param reference:
	:return: the urn or '' if nothing was embedded
	"""

	embedded = detectembeddedidentifier(reference)
	if not embedded:
		return str()
	return embedded.asurn()
