# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""


def resolveauthor(abbreviation: str, work: str, referencedata) -> str:
	"""

	turn whatever stood in the author slot into a canonical author key

		'soph.' -> 'sophocles'
		'sophocles' -> 'sophocles'
		'plin.' + 'ep.' -> 'pliny_junior'

	:param abbreviation:
	:param work: only consulted when the abbreviation is shared by more than one author
	:param referencedata:
	:return: the key or '' if the author is unknown
	"""

	abbreviation = abbreviation.lower().strip()

	if referencedata.isauthorkey(abbreviation):
		return abbreviation

	mapping = referencedata.authormapping(abbreviation)
	if not mapping:
		return str()

	if not mapping.needsworkcontext:
		return mapping.key

	return disambiguatebywork(mapping.marker, work, referencedata)


def disambiguatebywork(marker: str, work: str, referencedata) -> str:
	"""

	the first candidate whose table knows the work; failing that the rule's default

	:param marker:
	:param work:
	:param referencedata:
	:return:
	"""

	rule = referencedata.disambiguationrule(marker)
	work = work.lower().strip() if work else str()

	if work:
		for candidate in rule.candidates:
			if referencedata.worktablerecognizes(candidate, work):
				return candidate

	return rule.default
