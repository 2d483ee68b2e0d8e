# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""


class Tradition(object):
	"""

	what the URN stem of an author tells us about how the rest of the URN is built

	"""

	def __init__(self, name: str, namespacemarker: str, editionsuffix: str, numericworkprefix, firstworkcode: str):
		self.name = name
		self.namespacemarker = namespacemarker
		self.editionsuffix = editionsuffix
		self.numericworkprefix = numericworkprefix
		self.firstworkcode = firstworkcode

	def urnnamespace(self) -> str:
		return 'urn:cts:{m}:'.format(m=self.namespacemarker)

	def __repr__(self):
		return 'Tradition({n})'.format(n=self.name)


greektradition = Tradition('greek', 'greekLit', 'perseus-grc2', 'tlg', 'tlg001')
latintradition = Tradition('latin', 'latinLit', 'perseus-lat2', 'phi', 'phi001')
englishtradition = Tradition('english', 'englishLit', 'perseus-eng2', None, 'tlg001')
scholiatradition = Tradition('scholia', 'greekSchol', 'perseus-grc2', None, 'tlg001')

# first hit wins; unknown stems are treated as greek
TRADITIONS = [greektradition, latintradition, englishtradition, scholiatradition]


def determinetradition(urnstem: str) -> Tradition:
	"""

	'urn:cts:latinLit:phi1017' -> latintradition

	:param urnstem:
	:return:
	"""

	for t in TRADITIONS:
		if t.namespacemarker in urnstem:
			return t
	return greektradition


def determineliteraturesuffix(urnstem: str) -> str:
	return determinetradition(urnstem).editionsuffix
