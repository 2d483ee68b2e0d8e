# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import re
from typing import List

from linker.linkerclasses import Citation, CitationTagger
from linker.parsers.referenceselector import selectreference
from linker.resolvers.identifierresolver import resolveidentifier

biblfinder = re.compile(r'<bibl\b[^>]*>(.*?)</bibl>')
citfinder = re.compile(r'<cit\b[^>]*>.*?</cit>', re.DOTALL)
quotefinder = re.compile(r'<quote[^>]*>(.*?)</quote>', re.DOTALL)
barequotefinder = re.compile(r'<quote[^>]*>([^<]+)</quote>')
nattributefinder = re.compile(r'(?:^|\s)n="([^"]*)"')
# bibls with an n attribute and plain text may run over several lines
multilinebiblfinder = re.compile(r'<bibl\b[^>]*\bn\s*=\s*"([^"]+)"[^>]*>([^<]*)</bibl>')
reffinder = re.compile(r'<ref\b[^>]*>([^<]+)</ref>')
refcitationshape = re.compile(r'[A-Za-z]+\.\s*[A-Za-z]*\s*\d+')
markup = re.compile(r'<[^>]+>')
whitespace = re.compile(r'\s+')

quotereach = 200
nearbyquotereach = 250


def extractcitations(xmlcontent: str, filename: str, referencedata, tagger=None, usecittags=False, contextsize=500) -> List[Citation]:
	"""

	find and resolve every citation in a document

	in the default mode only <bibl> elements count; with usecittags the <cit>
	containers, multi-line <bibl>s and citation-shaped <ref>s are picked up too

	:param xmlcontent:
	:param filename:
	:param referencedata:
	:param tagger:
	:param usecittags:
	:param contextsize:
	:return:
	"""

	if not tagger:
		tagger = CitationTagger()

	if usecittags:
		return extractallcitationpatterns(xmlcontent, filename, referencedata, tagger, contextsize)

	citations = list()
	for bibl in re.finditer(biblfinder, xmlcontent):
		quote = findquoteafter(xmlcontent, bibl.end())
		context = extractcontext(xmlcontent, bibl.start(), bibl.end(), contextsize)
		citations.append(buildcitation(extractnattribute(bibl.group(0)), bibl.group(1).strip(), quote, context, filename, referencedata, tagger))

	return citations


def extractallcitationpatterns(xmlcontent: str, filename: str, referencedata, tagger, contextsize) -> List[Citation]:
	"""

	cit mode; a <bibl> at a given offset is only ever reported once

	:param xmlcontent:
	:param filename:
	:param referencedata:
	:param tagger:
	:param contextsize:
	:return:
	"""

	citations = list()
	seen = set()

	citspans = list()
	for cit in re.finditer(citfinder, xmlcontent):
		citspans.append(cit.span())
		bibl = re.search(biblfinder, cit.group(0))
		if not bibl:
			continue
		seen.add(cit.start() + bibl.start())
		quote = re.search(quotefinder, cit.group(0))
		quote = quote.group(1).strip() if quote else str()
		context = extractcontext(xmlcontent, cit.start(), cit.end(), contextsize)
		citations.append(buildcitation(extractnattribute(bibl.group(0)), bibl.group(1).strip(), quote, context, filename, referencedata, tagger))

	for bibl in re.finditer(biblfinder, xmlcontent):
		if insidespans(bibl.start(), citspans) or bibl.start() in seen:
			continue
		seen.add(bibl.start())
		quote = findquoteafter(xmlcontent, bibl.end())
		context = extractcontext(xmlcontent, bibl.start(), bibl.end(), contextsize)
		citations.append(buildcitation(extractnattribute(bibl.group(0)), bibl.group(1).strip(), quote, context, filename, referencedata, tagger))

	for bibl in re.finditer(multilinebiblfinder, xmlcontent):
		if bibl.start() in seen:
			continue
		seen.add(bibl.start())
		nearby = xmlcontent[max(0, bibl.start() - nearbyquotereach):bibl.end() + nearbyquotereach]
		quote = re.search(barequotefinder, nearby)
		quote = quote.group(1).strip() if quote else str()
		context = extractcontext(xmlcontent, bibl.start(), bibl.end(), contextsize)
		citations.append(buildcitation(bibl.group(1), bibl.group(2).strip(), quote, context, filename, referencedata, tagger))

	for ref in re.finditer(reffinder, xmlcontent):
		reftext = ref.group(1).strip()
		if not reftext or not re.search(refcitationshape, reftext):
			continue
		context = extractcontext(xmlcontent, ref.start(), ref.end(), contextsize)
		citation = buildcitation(str(), reftext, str(), context, filename, referencedata, tagger, keepunresolved=False)
		if citation:
			citations.append(citation)

	return citations


def buildcitation(nattribute: str, bibl: str, quote: str, context: str, filename: str, referencedata, tagger, keepunresolved=True):
	"""

	select, resolve and tag one citation

	:param nattribute:
	:param bibl: the inner text of the element, markup and all
	:param quote:
	:param context:
	:param filename:
	:param referencedata:
	:param tagger:
	:param keepunresolved: if False an unresolvable citation yields None and burns no tag
	:return:
	"""

	bibltext = re.sub(markup, ' ', bibl)
	reference = selectreference(nattribute, bibltext, referencedata)
	outcome = resolveidentifier(reference, context, filename, referencedata)

	if not keepunresolved and not outcome.resolved:
		return None

	citation = Citation(nattribute, bibl, quote, context, filename, tagger.nexttag())
	citation.applyoutcome(outcome)
	return citation


def extractnattribute(element: str) -> str:
	opentag = element[:element.find('>') + 1]
	found = re.search(nattributefinder, opentag)
	if found:
		return found.group(1)
	return str()


def findquoteafter(xmlcontent: str, position: int) -> str:
	"""

	the first <quote> that opens and closes within a short reach after the citation

	:param xmlcontent:
	:param position:
	:return:
	"""

	found = re.search(quotefinder, xmlcontent[position:position + quotereach])
	if found:
		return found.group(1).strip()
	return str()


def extractcontext(xmlcontent: str, start: int, end: int, contextsize: int) -> str:
	context = xmlcontent[max(0, start - contextsize):end + contextsize]
	return re.sub(whitespace, ' ', context).strip()


def insidespans(position: int, spans: list) -> bool:
	for s, e in spans:
		if s <= position < e:
			return True
	return False
