# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import json
from multiprocessing import Value


class ResolutionOutcome(object):
	"""

	what resolveidentifier() hands back: a URN or else the reason there is none

	"""

	def __init__(self, reference: str, urn: str, sourcelabel: str, context=None, reason=str(), errorcode=str()):
		self.reference = reference
		self.urn = urn
		self.sourcelabel = sourcelabel
		self.context = context
		self.reason = reason
		self.errorcode = errorcode

	@property
	def resolved(self) -> bool:
		return bool(self.urn)

	def __repr__(self):
		if self.resolved:
			return 'ResolutionOutcome({r} -> {u})'.format(r=self.reference, u=self.urn)
		return 'ResolutionOutcome({r} failed: {e})'.format(r=self.reference, e=self.errorcode)


class Citation(object):
	"""

	one <bibl> (or <cit>, or <ref>) found in one file, with its resolution

	the json field names are those of the older jsonl dumps and should not be changed

	"""

	def __init__(self, nattribute: str, bibl: str, quote: str, context: str, filename: str, tag: str):
		self.nattribute = nattribute
		self.bibl = bibl
		self.quote = quote
		self.context = context
		self.filename = filename
		self.tag = tag
		self.reference = str()
		self.urn = str()
		self.reason = str()
		self.errorcode = str()

	def applyoutcome(self, outcome: ResolutionOutcome):
		self.reference = outcome.reference
		self.urn = outcome.urn
		self.reason = outcome.reason
		self.errorcode = outcome.errorcode

	@property
	def resolved(self) -> bool:
		return bool(self.urn) and bool(self.reference)

	def asdict(self) -> dict:
		citation = {
			'n_attrib': self.nattribute,
			'bibl': self.bibl,
			'ref': self.reference,
			'urn': self.urn,
			'quote': self.quote,
			'xml_context': self.context,
			'filename': self.filename,
			'doc_cit_urn': self.tag,
		}
		if not self.resolved:
			citation['reason'] = self.reason
		return citation

	def tojson(self) -> str:
		return json.dumps(self.asdict(), ensure_ascii=False)

	def __repr__(self):
		return 'Citation({t}: {r} -> {u})'.format(t=self.tag, r=self.reference, u=self.urn)


class MPCounter(object):
	def __init__(self):
		self.val = Value('i', 0)

	def increment(self, n=1) -> int:
		with self.val.get_lock():
			self.val.value += n
			newvalue = self.val.value
		return newvalue

	@property
	def value(self):
		return self.val.value


class CitationTagger(object):
	"""

	hands out ':citations-1.1', ':citations-1.2', ... without duplicates even when
	several workers are asking at once

	"""

	def __init__(self, documentnumber=1, counter=None):
		self.documentnumber = documentnumber
		if not counter:
			counter = MPCounter()
		self.counter = counter

	def nexttag(self) -> str:
		return ':citations-{d}.{n}'.format(d=self.documentnumber, n=self.counter.increment())
