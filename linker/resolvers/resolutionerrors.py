# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""


class CitationResolutionError(Exception):
	"""

	a single citation could not be resolved

	these never escape resolveidentifier(): they are turned into an empty
	ResolutionOutcome that carries the message and the code

	"""

	defaultcode = 'RESOLUTION_ERROR'
	defaultmessage = 'citation could not be resolved'

	def __init__(self, detail=None, code=None):
		self.code = code or self.defaultcode
		self.detail = detail
		if detail:
			message = '{m}: {d}'.format(m=self.defaultmessage, d=detail)
		else:
			message = self.defaultmessage
		super().__init__(message)


class NoReferenceSelected(CitationResolutionError):
	defaultcode = 'NO_REFERENCE_SELECTED'
	defaultmessage = 'neither the n attribute nor the bibl text yielded a usable reference'


class NoAuthorToken(CitationResolutionError):
	defaultcode = 'NO_AUTHOR_TOKEN'
	defaultmessage = 'no author found in reference'


class AuthorNotRecognized(CitationResolutionError):
	defaultcode = 'AUTHOR_NOT_RECOGNIZED'
	defaultmessage = 'author not recognized'


class NoIdentifierStem(CitationResolutionError):
	defaultcode = 'NO_IDENTIFIER_STEM'
	defaultmessage = 'no URN found for author'


class WorkUnresolved(CitationResolutionError):
	"""

	should not happen once an author is known: the fallbacks always yield a work

	the exception is a range of works (e.g. the orations of Demosthenes) cited
	with an ordinal that is out of bounds or missing

	"""

	defaultcode = 'WORK_UNRESOLVED'
	defaultmessage = 'no work URN found'


class ReferenceDataError(Exception):
	"""

	the static author/work tables are missing or malformed

	unlike the errors above this one is fatal: nothing can be resolved without the tables

	"""
	pass
