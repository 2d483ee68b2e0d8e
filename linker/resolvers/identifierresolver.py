# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re
from typing import Tuple

from linker.linkerclasses import ResolutionOutcome
from linker.parsers.referenceparser import lookslikebookreference, parsereference
from linker.referencedata.traditions import determineliteraturesuffix, determinetradition
from linker.resolvers.authordisambiguator import resolveauthor
from linker.resolvers.embeddedidentifiers import formatembeddedidentifier
from linker.resolvers.resolutionerrors import AuthorNotRecognized, CitationResolutionError, NoAuthorToken, \
	NoIdentifierStem, NoReferenceSelected, WorkUnresolved

numericwork = re.compile(r'^[0-9]+$')
numerictail = re.compile(r'\s*\d.*$')
leadingordinal = re.compile(r'(\d+)')


def resolveidentifier(reference: str, context: str, sourcelabel: str, referencedata) -> ResolutionOutcome:
	"""

	the one call that the rest of the world makes: turn a selected reference into a URN

	never raises for a bad citation; the outcome carries either the URN or the
	reason there is none

	:param reference: the output of selectreference()
	:param context: opaque; handed back untouched
	:param sourcelabel: usually the file the citation came from
	:param referencedata:
	:return:
	"""

	try:
		urn = findurn(reference, referencedata)
	except CitationResolutionError as err:
		return ResolutionOutcome(reference, str(), sourcelabel, context=context, reason=str(err), errorcode=err.code)

	return ResolutionOutcome(reference, urn, sourcelabel, context=context)


def findurn(reference: str, referencedata) -> str:
	"""

	the resolution pipeline proper; raises CitationResolutionError subclasses

	:param reference:
	:param referencedata:
	:return:
	"""

	if not reference or not reference.strip():
		raise NoReferenceSelected()

	reference = closeupfollowingpages(reference.strip())

	embeddedurn = formatembeddedidentifier(reference)
	if embeddedurn:
		return embeddedurn

	author, work, passage = parsereference(reference, referencedata)
	if not author:
		raise NoAuthorToken(reference)

	authorkey = resolveauthor(author, work, referencedata)
	if not authorkey:
		raise AuthorNotRecognized(author)

	stem = referencedata.authorurnstem(authorkey)
	if not stem:
		raise NoIdentifierStem(authorkey)

	if referencedata.issingleworkauthor(authorkey) and (not work or lookslikebookreference(work)):
		return singleworkurn(stem, reference, work, passage)

	workcode, passage = resolveworkcode(authorkey, stem, work, passage, referencedata)

	return assembleurn(stem, workcode, passage)


def closeupfollowingpages(reference: str) -> str:
	"""

	'151 ff.' and '151 ff' both become '151ff'

	:param reference:
	:return:
	"""

	reference = re.sub(r'\s+ff\.?(\s|$)', r'ff\1', reference)
	reference = re.sub(r'ff\.(\s|$)', r'ff\1', reference)
	return reference.strip()


def singleworkurn(stem: str, reference: str, work: str, passage: str) -> str:
	"""

	herodotus wrote one book: 'hdt. 1.1' has no work in it, only a location

	:param stem:
	:param reference:
	:param work:
	:param passage:
	:return:
	"""

	location = '.'.join(t for t in re.split(r'[\s,.:]', reference) if re.search(r'^\d+', t))
	if not location:
		location = '.'.join(x.strip('.') for x in [work, passage] if x)

	tradition = determinetradition(stem)
	return assembleurn(stem, tradition.firstworkcode, location)


def resolveworkcode(authorkey: str, stem: str, work: str, passage: str, referencedata) -> Tuple[str, str]:
	"""

	find the work code for a work string, tier by tier:

		i)		the expanded table
		ii)		a scan of every form every title can take
		iii)	a bare number becomes a numbered work: '19' -> 'tlg019'
		iv)		the first work of the tradition

	:param authorkey:
	:param stem:
	:param work:
	:param passage:
	:param referencedata:
	:return: (workcode, passage); a range of works can swallow the first part of the passage
	"""

	work = work.lower().strip()
	table = referencedata.worktable(authorkey)

	identifier = table.get(work)
	ordinalsource = work

	if identifier is None:
		# 'or. 15': the ordinal of a range travelled with the title
		head = re.sub(numerictail, str(), work).strip()
		if head and head != work and head in table and table[head].isrange:
			identifier = table[head]

	if identifier is None:
		identifier = referencedata.scanworktable(authorkey, work)

	if identifier is not None:
		if identifier.isrange:
			return workfromrange(identifier, ordinalsource, passage)
		return identifier.code, passage

	tradition = determinetradition(stem)

	if re.search(numericwork, work):
		workcode = constructnumericworkcode(tradition, work)
		if workcode:
			return workcode, passage

	return tradition.firstworkcode, passage


def workfromrange(identifier, work: str, passage: str) -> Tuple[str, str]:
	"""

	'or. 15' or 'or.' + '15.3': pick the ordinal out of the work or else off the front of the passage

	:param identifier:
	:param work:
	:param passage:
	:return:
	"""

	ordinal = re.search(leadingordinal, work)
	if ordinal:
		number = int(ordinal.group(1))
	else:
		components = passage.split('.', 1) if passage else list()
		if not components or not re.search(numericwork, components[0]):
			raise WorkUnresolved('no ordinal for {w}'.format(w=work))
		number = int(components[0])
		passage = components[1] if len(components) > 1 else str()

	if not identifier.contains(number):
		raise WorkUnresolved('{n} is outside {a}-{b}'.format(n=number, a=identifier.lowerbound, b=identifier.upperbound))

	return identifier.workcode(number), passage


def constructnumericworkcode(tradition, work: str) -> str:
	"""

	'5' -> 'tlg005'; '019' -> 'tlg019'

	a leading zero is kept; otherwise one is added before padding to three digits

	:param tradition:
	:param work:
	:return: '' if the tradition does not number its works
	"""

	if not tradition.numericworkprefix:
		return str()

	if not work.startswith('0'):
		work = '0' + work

	return '{p}{w}'.format(p=tradition.numericworkprefix, w=work.zfill(3))


def assembleurn(stem: str, workcode: str, passage: str) -> str:
	suffix = determineliteraturesuffix(stem)
	urn = '{s}.{w}.{x}'.format(s=stem, w=workcode, x=suffix)
	if passage:
		urn = '{u}:{p}'.format(u=urn, p=passage)
	return urn
