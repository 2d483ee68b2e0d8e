# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import json
from pathlib import Path
from types import MappingProxyType

from linker.parsers.abbreviations import generateworkabbreviations
from linker.referencedata.referenceobjects import DisambiguationRule, decodeauthormapping, decodeworkidentifier
from linker.resolvers.resolutionerrors import ReferenceDataError

defaultdatadir = Path(__file__).resolve().parent / 'data'

# later files override earlier ones if a key repeats
traditionfiles = [
	('greek_data.json', 'GREEK'),
	('latin_data.json', 'LATIN'),
	('schol_data.json', 'SCHOL'),
	('other_data.json', 'OTHER'),
]

emptytable = MappingProxyType(dict())


class ReferenceDataStore(object):
	"""

	the merged author and work tables of every tradition

	built once at startup; everything it hands out is read-only so that it can be
	shared by every worker without locking

	"""

	def __init__(self, authorabbreviations: dict, authorurns: dict, literalworktables: dict, singleworkauthors, disambiguationrules: dict):
		self.authorabbreviations = MappingProxyType(dict(authorabbreviations))
		self.authorurns = MappingProxyType(dict(authorurns))
		self.literalworktables = MappingProxyType({a: MappingProxyType(dict(t)) for a, t in literalworktables.items()})
		self.worktables = MappingProxyType({a: MappingProxyType(expandworktitles(t)) for a, t in literalworktables.items()})
		self.singleworkauthors = frozenset(singleworkauthors)
		self.disambiguationrules = MappingProxyType(dict(disambiguationrules))
		self._checkdisambiguationmarkers()

	def _checkdisambiguationmarkers(self):
		for abbreviation, mapping in self.authorabbreviations.items():
			if mapping.needsworkcontext and mapping.marker not in self.disambiguationrules:
				raise ReferenceDataError('"{a}" points at {m} but there is no rule for it'.format(a=abbreviation, m=mapping.marker))

	def __reduce__(self):
		# mappingproxies do not pickle; spawned workers get plain dicts and re-wrap them
		state = {
			'authorabbreviations': dict(self.authorabbreviations),
			'authorurns': dict(self.authorurns),
			'literalworktables': {a: dict(t) for a, t in self.literalworktables.items()},
			'worktables': {a: dict(t) for a, t in self.worktables.items()},
			'singleworkauthors': set(self.singleworkauthors),
			'disambiguationrules': dict(self.disambiguationrules),
		}
		return restorereferencedata, (state,)

	def authormapping(self, abbreviation: str):
		return self.authorabbreviations.get(abbreviation)

	def isauthorkey(self, name: str) -> bool:
		return name in self.authorurns

	def isrecognizedauthor(self, candidate: str) -> bool:
		return candidate in self.authorabbreviations or candidate in self.authorurns

	def authorurnstem(self, author: str) -> str:
		return self.authorurns.get(author, str())

	def issingleworkauthor(self, author: str) -> bool:
		return author in self.singleworkauthors

	def disambiguationrule(self, marker: str):
		return self.disambiguationrules.get(marker)

	def worktable(self, author: str):
		return self.worktables.get(author, emptytable)

	def literalworktable(self, author: str):
		return self.literalworktables.get(author, emptytable)

	def scanworktable(self, author: str, work: str):
		"""

		the slow path: run through the expanded table in order and test the work
		against every form each title can take

		a title that is the work wins; otherwise the first title that generates it

		:param author:
		:param work:
		:return: a work identifier or None
		"""

		if not work:
			return None

		abbreviationmatch = None
		for title, identifier in self.worktable(author).items():
			if title == work:
				return identifier
			if not abbreviationmatch and work in generateworkabbreviations(title):
				abbreviationmatch = identifier

		return abbreviationmatch

	def worktablerecognizes(self, author: str, work: str) -> bool:
		if work in self.worktable(author):
			return True
		return self.scanworktable(author, work) is not None


def restorereferencedata(state: dict) -> ReferenceDataStore:
	store = ReferenceDataStore.__new__(ReferenceDataStore)
	store.authorabbreviations = MappingProxyType(state['authorabbreviations'])
	store.authorurns = MappingProxyType(state['authorurns'])
	store.literalworktables = MappingProxyType({a: MappingProxyType(t) for a, t in state['literalworktables'].items()})
	store.worktables = MappingProxyType({a: MappingProxyType(t) for a, t in state['worktables'].items()})
	store.singleworkauthors = frozenset(state['singleworkauthors'])
	store.disambiguationrules = MappingProxyType(state['disambiguationrules'])
	return store


def expandworktitles(literaltable: dict) -> dict:
	"""

	every literal title plus every abbreviation generated from it

	a literal entry is never displaced by a generated one; among the generated
	forms the first title to claim one keeps it

	:param literaltable: {title: identifier}
	:return: {title or abbreviation: identifier}
	"""

	expanded = dict(literaltable)
	for title, identifier in literaltable.items():
		for abbreviation in generateworkabbreviations(title):
			if abbreviation not in expanded:
				expanded[abbreviation] = identifier
	return expanded


def readtraditionfile(filepath: Path) -> dict:
	try:
		f = open(filepath, encoding='utf-8', mode='r')
	except OSError as err:
		raise ReferenceDataError('cannot read {f}: {e}'.format(f=filepath, e=err)) from err

	try:
		records = json.load(f)
	except json.JSONDecodeError as err:
		raise ReferenceDataError('cannot parse {f}: {e}'.format(f=filepath, e=err)) from err
	finally:
		f.close()

	if not isinstance(records, dict):
		raise ReferenceDataError('{f} does not hold a json object'.format(f=filepath))

	return records


def loadreferencedata(datadir=None) -> ReferenceDataStore:
	"""

	read the four tradition files and merge them: greek, latin, scholia, other

	each file holds up to five tables, all keyed by the tradition prefix:

		GREEK_AUTH_ABB					abbreviation -> author key (or '_marker')
		GREEK_AUTH_URNS					author key -> urn stem
		GREEK_WORK_URNS					author key -> {title: work identifier}
		GREEK_SINGLE_WORK_AUTHORS		[author key, ...]
		LATIN_AUTHOR_DISAMBIGUATION		'_marker' -> {candidates: [...], default: ...}

	:param datadir:
	:return:
	"""

	if not datadir:
		datadir = defaultdatadir

	abbreviations = dict()
	authorurns = dict()
	worktables = dict()
	singleworkauthors = set()
	rules = dict()

	for filename, prefix in traditionfiles:
		filepath = Path(datadir) / filename
		records = readtraditionfile(filepath)

		for abbreviation, target in records.get(prefix + '_AUTH_ABB', dict()).items():
			abbreviations[abbreviation.lower()] = decodeauthormapping(target)

		for author, stem in records.get(prefix + '_AUTH_URNS', dict()).items():
			authorurns[author.lower()] = stem

		for author, works in records.get(prefix + '_WORK_URNS', dict()).items():
			where = '{f}: {a}'.format(f=filename, a=author)
			worktables[author.lower()] = {t.lower(): decodeworkidentifier(w, where) for t, w in works.items()}

		singleworkauthors.update(a.lower() for a in records.get(prefix + '_SINGLE_WORK_AUTHORS', list()))

		for marker, rule in records.get(prefix + '_AUTHOR_DISAMBIGUATION', dict()).items():
			try:
				rules[marker] = DisambiguationRule(marker, rule['candidates'], rule['default'])
			except (KeyError, TypeError) as err:
				raise ReferenceDataError('malformed disambiguation rule {m} in {f}'.format(m=marker, f=filename)) from err

	return ReferenceDataStore(abbreviations, authorurns, worktables, singleworkauthors, rules)
