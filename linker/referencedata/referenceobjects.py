# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

from linker.resolvers.resolutionerrors import ReferenceDataError


class SimpleWorkIdentifier(object):
	"""

	a work that maps straight onto its code: 'tlg004', 'phi015', 'cym'

	"""

	isrange = False

	def __init__(self, code: str):
		self.code = code

	def __eq__(self, other):
		return isinstance(other, SimpleWorkIdentifier) and self.code == other.code

	def __hash__(self):
		return hash(self.code)

	def __repr__(self):
		return 'SimpleWorkIdentifier({c})'.format(c=self.code)


class RangeWorkIdentifier(object):
	"""

	a numbered run of works sharing one title: the 61 orations of Demosthenes are
	all 'or.'; the ordinal picks out tlg001 ... tlg061

	"""

	isrange = True

	def __init__(self, prefix: str, lowerbound: int, upperbound: int):
		self.prefix = prefix
		self.lowerbound = lowerbound
		self.upperbound = upperbound

	def contains(self, ordinal: int) -> bool:
		return self.lowerbound <= ordinal <= self.upperbound

	def workcode(self, ordinal: int) -> str:
		return '{p}{n:03d}'.format(p=self.prefix, n=ordinal)

	def __eq__(self, other):
		if not isinstance(other, RangeWorkIdentifier):
			return False
		return (self.prefix, self.lowerbound, self.upperbound) == (other.prefix, other.lowerbound, other.upperbound)

	def __hash__(self):
		return hash((self.prefix, self.lowerbound, self.upperbound))

	def __repr__(self):
		return 'RangeWorkIdentifier({p}, {a}, {b})'.format(p=self.prefix, a=self.lowerbound, b=self.upperbound)


class DirectAuthor(object):
	"""

	an abbreviation that names exactly one author: 'soph.' -> 'sophocles'

	"""

	needsworkcontext = False

	def __init__(self, key: str):
		self.key = key

	def __eq__(self, other):
		return isinstance(other, DirectAuthor) and self.key == other.key

	def __hash__(self):
		return hash(self.key)

	def __repr__(self):
		return 'DirectAuthor({k})'.format(k=self.key)


class NeedsWorkContext(object):
	"""

	an abbreviation shared by homonymous authors: 'plin.' can only be settled by looking at the work

	"""

	needsworkcontext = True

	def __init__(self, marker: str):
		self.marker = marker

	def __eq__(self, other):
		return isinstance(other, NeedsWorkContext) and self.marker == other.marker

	def __hash__(self):
		return hash(self.marker)

	def __repr__(self):
		return 'NeedsWorkContext({m})'.format(m=self.marker)


class DisambiguationRule(object):
	def __init__(self, marker: str, candidates: list, default: str):
		self.marker = marker
		self.candidates = tuple(candidates)
		self.default = default

	def __repr__(self):
		return 'DisambiguationRule({m}: {c} -> {d})'.format(m=self.marker, c=self.candidates, d=self.default)


def decodeworkidentifier(value, where=str()):
	"""

	the data files store a work either as a code or as a [prefix, lower, upper] triple

		"oedipus tyrannus": "tlg004"
		"orationes": ["tlg", 1, 61]

	:param value:
	:param where: used to make the error message useful
	:return:
	"""

	if isinstance(value, str):
		return SimpleWorkIdentifier(value)

	if isinstance(value, list) and len(value) == 3:
		prefix, lower, upper = value
		numeric = [isinstance(x, int) and not isinstance(x, bool) for x in [lower, upper]]
		if isinstance(prefix, str) and all(numeric):
			if lower <= upper:
				return RangeWorkIdentifier(prefix, lower, upper)
			raise ReferenceDataError('inverted work range {v} at {w}'.format(v=value, w=where))

	raise ReferenceDataError('cannot decode work identifier {v} at {w}'.format(v=value, w=where))


def decodeauthormapping(value: str):
	"""

	values that begin with '_' are markers for a disambiguation rule

	:param value:
	:return:
	"""

	if value.startswith('_'):
		return NeedsWorkContext(value)
	return DirectAuthor(value.lower())
