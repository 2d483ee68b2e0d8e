# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re
from functools import lru_cache
from typing import List

functionwords = {'the', 'a', 'an', 'of', 'in', 'by', 'for', 'on', 'and', 'de', 'ad'}
keepablefunctionwords = {'de', 'on'}
vowels = set('aeiouy')
plosives = set('tpdgkxcb')

numericonly = re.compile(r'^\d+$')


def generateworkabbreviations(title: str) -> List[str]:
	"""

	every form in which a scholar might plausibly cite a work title

		'electra' -> ['electrs', 'e', 'e.', 'el', 'el.', 'ele', ... 'elect.', 'electra']

	the result is ordered and free of duplicates; a fresh list is handed back each time
	since the real work is memoized

	:param title:
	:return:
	"""

	return list(_generateworkabbreviations(title.lower().strip()))


@lru_cache(maxsize=None)
def _generateworkabbreviations(title: str) -> tuple:
	if not title or re.search(numericonly, title):
		return tuple()

	words = title.split()
	abbreviations = list()

	if len(words) == 1:
		# singular and plural forms of latin titles get swapped by the citers
		if title.endswith('s'):
			abbreviations.append(title[:-1] + 'a')
		elif title.endswith('a'):
			abbreviations.append(title[:-1] + 's')

	abbreviations.append(title[0])
	abbreviations.append(title[0] + '.')

	for i in range(2, min(6, len(words[0])) + 1):
		abbreviations.append(words[0][:i])
		abbreviations.append(words[0][:i] + '.')

	if len(words) > 1:
		abbreviations += initialforms(words)
		contentwords = [w for w in words if w not in functionwords]
		if contentwords and len(contentwords) < len(words):
			abbreviations += initialforms(contentwords)
		abbreviations.append(words[0])

	if len(words) >= 3:
		abbreviations.append(' '.join(words[:2]))
		abbreviations.append('_'.join(words[:2]))
		abbreviations.append(' '.join(words[:3]))
		abbreviations.append('_'.join(words[:3]))

	abbreviations.append(smartsuspension(words, skipde=True))
	abbreviations.append(smartsuspension(words, skipde=False))

	if len(words) > 1:
		abbreviations.append('_'.join(words))

	abbreviations.append(title)

	seen = set()
	unique = list()
	for a in abbreviations:
		if a and a not in seen:
			seen.add(a)
			unique.append(a)

	return tuple(unique)


def initialforms(words: List[str]) -> List[str]:
	"""

	['oedipus', 'tyrannus'] -> ['ot', 'o.t.', 'o_t', 'o._t.']

	:param words:
	:return:
	"""

	initials = [w[0] for w in words]
	return [
		''.join(initials),
		'.'.join(initials) + '.',
		'_'.join(initials),
		'._'.join(initials) + '.',
	]


def smartsuspension(words: List[str], skipde=True) -> str:
	"""

	abbreviate each content word the way a philologist would: keep the word up to
	the point where a consonant that follows the first vowel ends a syllable

		['naturalis', 'historia'] -> 'nat.hist.'
		['de', 'rerum', 'natura'] -> 'rer.nat.' or 'de.rer.nat.'

	:param words:
	:param skipde: drop 'de' and 'on' instead of keeping them whole
	:return:
	"""

	spans = list()
	for w in words:
		if w in keepablefunctionwords:
			if not skipde:
				spans.append(w)
			continue
		if w in functionwords:
			continue
		spans.append(suspendword(w))

	spans = [s for s in spans if s]
	if not spans:
		return str()

	suspension = '.'.join(spans)
	if not suspension.endswith('.'):
		suspension += '.'
	return suspension


def suspendword(word: str) -> str:
	vowelseen = False
	consonantlast = False
	span = list()

	for c in word:
		if c in vowels:
			if vowelseen and consonantlast:
				break
			vowelseen = True
			consonantlast = False
			span.append(c)
		else:
			if vowelseen and c in plosives:
				span.append(c)
				break
			consonantlast = True
			span.append(c)

	return ''.join(span)
