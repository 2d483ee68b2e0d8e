# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re
from typing import Tuple

from linker.resolvers.authordisambiguator import resolveauthor

booklabel = re.compile(r'^(i|ii|iii|iv|v|vi|vii|viii|ix|x|xi|xii|xiii|xiv|xv|xvi|xvii|xviii|xix|xx)\.?$', re.IGNORECASE)
arabicbook = re.compile(r'^\d+\.?$')


def parsereference(reference: str, referencedata) -> Tuple[str, str, str]:
	"""

	split a normalized reference into (author, work, passage)

		'soph. ot 151' -> ('soph.', 'ot', '151')
		'hom. il. 1.1' -> ('hom.', 'il.', '1.1')
		'ap. rh. 3.1265' -> ('ap. rh.', '3', '1265')
		'soph. oedipus tyrannus 151' -> ('soph.', 'oedipus_tyrannus', '151')

	:param reference:
	:param referencedata:
	:return:
	"""

	tokens = reference.strip().split()
	if not tokens:
		return str(), str(), str()

	author = tokens[0]
	authorlength = 1
	if len(tokens) > 1:
		bigram = ' '.join(tokens[:2])
		if referencedata.isrecognizedauthor(bigram):
			author = bigram
			authorlength = 2

	if authorlength >= len(tokens):
		return author, str(), str()

	table = referencedata.worktable(resolveauthor(author, str(), referencedata))
	remainder = underscoremultiwordtitles(' '.join(tokens[authorlength:]), table)
	parts = remainder.split()

	# 'ot.151' or '1.1'
	if len(parts) == 1 and '.' in parts[0]:
		work, passage = parts[0].split('.', 1)
		return author, work, passage

	for i, p in enumerate(parts):
		# 'hor. c. 1.1': a title that happens to be spelled like a numeral
		if i == 0 and p in table:
			continue
		if re.search(r'^\d', p) or looksliketromannumeral(p):
			work = ' '.join(parts[:i])
			passage = tidypassage(' '.join(parts[i:]))
			return author, work, passage

	return author, ' '.join(parts), str()


def underscoremultiwordtitles(remainder: str, table) -> str:
	"""

	glue the longest run of words that the author's table knows as a title so that
	it survives being split on whitespace

		'oedipus tyrannus 151' -> 'oedipus_tyrannus 151'

	:param remainder:
	:param table: the author's expanded work table
	:return:
	"""

	words = remainder.split()
	if len(words) < 2 or not table:
		return remainder

	for i in range(len(words), 1, -1):
		candidate = ' '.join(words[:i]).lower()
		if candidate in table:
			return ' '.join(['_'.join(words[:i])] + words[i:])

	return remainder


def tidypassage(passage: str) -> str:
	"""

	'iv. 2' -> 'iv.2'; '1 2 3' -> '1.2.3'

	:param passage:
	:return:
	"""

	passage = re.sub(r'\s+', '.', passage.strip())
	passage = passage.strip('.')
	passage = re.sub(r'\.{2,}', '.', passage)
	return passage


def looksliketromannumeral(token: str) -> bool:
	"""

	only i through xx count: 'mil.' and 'civ.' are titles, not numbers

	:param token:
	:return:
	"""

	return re.search(booklabel, token.strip()) is not None


def lookslikebookreference(work: str) -> bool:
	"""

	does the 'work' slot actually hold a book number: 'ii', 'xiv.', '7'?

	:param work:
	:return:
	"""

	work = work.strip()
	return re.search(booklabel, work) is not None or re.search(arabicbook, work) is not None
