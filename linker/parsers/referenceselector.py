# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re
from typing import List

from linker.resolvers.authordisambiguator import resolveauthor
from linker.resolvers.embeddedidentifiers import detectembeddedidentifier

# most specific first: 'soph. o. t. 151.3' before 'soph. ot 151' before 'hdt. 1.1' before 'hdt. 1'
referencepatterns = [
	re.compile(r'([a-zA-Z]+\.?\s?[a-zA-Z]*) ([a-zA-Z]+\.?\s?[a-zA-Z]*) \d+(\s|\.|:)\d+'),
	re.compile(r'([a-zA-Z]+\.?\s?[a-zA-Z]*) ([a-zA-Z]+\.?\s?[a-zA-Z]*) \d+'),
	re.compile(r'([a-zA-Z]+\.?) \d+(\s|\.|:)\d+'),
	re.compile(r'([a-zA-Z]+\.?) \d+'),
]


def normalizereference(reference: str) -> str:
	"""

	'Soph. <title>O. T.</title> 151 (lyr.)' -> 'soph. o. t. 151lyr.'

	:param reference:
	:return:
	"""

	if not reference:
		return str()

	reference = reference.lower().strip()
	reference = re.sub(r'\s+', ' ', reference)
	reference = re.sub(r'<title.*?>', str(), reference)
	reference = reference.replace('</title>', str())
	reference = re.sub(r'[()]', str(), reference)
	reference = reference.replace(', ', ' ')
	reference = re.sub(r' *§ *', '.', reference)
	reference = re.sub(r'(\d+) ([a-z])', r'\1\2', reference)

	return reference.strip()


def selectreference(nattribute: str, bibltext: str, referencedata) -> str:
	"""

	a <bibl> offers two candidate references: its n attribute and its text

		<bibl n="Soph. OT 151">O. T. 151 lyr.</bibl>

	decide which one to hand to the resolver

	:param nattribute:
	:param bibltext:
	:param referencedata:
	:return: the normalized winner or '' if neither will do
	"""

	attribute = normalizereference(nattribute)
	inline = normalizereference(bibltext)

	if not attribute:
		return inline
	if not inline:
		return attribute

	if detectembeddedidentifier(attribute):
		return attribute

	for pattern in referencepatterns:
		for candidate in [attribute, inline]:
			if re.search(pattern, candidate) and hasrecognizedauthor(candidate.split(), referencedata):
				return candidate

	attributeauthor = hasrecognizedauthor(attribute.split(), referencedata)
	inlineauthor = hasrecognizedauthor(inline.split(), referencedata)

	if attributeauthor and not inlineauthor:
		return attribute
	if inlineauthor and not attributeauthor:
		return inline

	if attributeauthor and inlineauthor:
		if hasrecognizedwork(attribute, referencedata):
			return attribute
		if hasrecognizedwork(inline, referencedata):
			return inline

	return str()


def hasrecognizedauthor(tokens: List[str], referencedata) -> bool:
	"""

	does the reference open with a known author in one, two or three tokens?

	:param tokens:
	:param referencedata:
	:return:
	"""

	for i in range(1, min(3, len(tokens)) + 1):
		if referencedata.isrecognizedauthor(' '.join(tokens[:i])):
			return True
	return False


def hasrecognizedwork(reference: str, referencedata) -> bool:
	"""

	is there an author followed by one of that author's works?

	:param reference:
	:param referencedata:
	:return:
	"""

	tokens = reference.split()
	if len(tokens) < 2:
		return False

	for authorlength in range(1, min(3, len(tokens) - 1) + 1):
		candidate = ' '.join(tokens[:authorlength])
		if not referencedata.isrecognizedauthor(candidate):
			continue
		workpart = re.sub(r'\d.*', str(), ' '.join(tokens[authorlength:])).strip()
		if not workpart:
			continue
		author = resolveauthor(candidate, workpart, referencedata)
		table = referencedata.worktable(author)
		worktokens = workpart.split()
		for worklength in range(1, min(3, len(worktokens)) + 1):
			if ' '.join(worktokens[:worklength]) in table:
				return True

	return False
