# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

from collections import Counter
from multiprocessing import Pool
from pathlib import Path

from click import secho

from linker.extraction.citationextraction import extractcitations
from linker.file_io.filereaders import findxmlfiles, loadxmlfile
from linker.file_io.filewriters import prepareoutputfiles, writecitations
from linker.linkerclasses import CitationTagger

# set in each worker by initializeworker()
workerreferencedata = None
workertagger = None


class RunSummary(object):
	def __init__(self):
		self.files = 0
		self.resolved = 0
		self.unresolved = 0
		self.reasons = Counter()

	def register(self, citations):
		self.files += 1
		for c in citations:
			if c.resolved:
				self.resolved += 1
			else:
				self.unresolved += 1
				self.reasons[c.errorcode or 'NO_REFERENCE_SELECTED'] += 1

	def report(self):
		print('{f} files examined'.format(f=self.files))
		print('\t{r} citations resolved'.format(r=self.resolved))
		print('\t{u} citations unresolved'.format(u=self.unresolved))
		for reason, count in self.reasons.most_common():
			secho('\t\t{c}\t{r}'.format(c=count, r=reason), fg='bright_black')


def initializeworker(referencedata, tagger):
	global workerreferencedata
	global workertagger
	workerreferencedata = referencedata
	workertagger = tagger


def processallxmlfiles(settings: dict, referencedata, workercount: int) -> RunSummary:
	"""

	find every xml file under the input directory, extract and resolve its
	citations in parallel and write them out

	only the parent process writes: the workers hand back their citations

	:param settings: see buildrunsettings()
	:param referencedata:
	:param workercount:
	:return:
	"""

	resolvedpath, unresolvedpath = prepareoutputfiles(settings['outputdir'], settings['resolvedfile'], settings['unresolvedfile'])
	xmlfiles = findxmlfiles(settings['inputdir'])
	summary = RunSummary()

	if not xmlfiles:
		secho('no .xml files found in {d}'.format(d=settings['inputdir']), fg='yellow')
		return summary

	tagger = CitationTagger()
	thework = [(f, settings['usecittags'], settings['contextsize']) for f in xmlfiles]

	print('{w} workers dispatched to examine {n} files'.format(w=workercount, n=len(xmlfiles)))

	if workercount < 2:
		initializeworker(referencedata, tagger)
		results = map(parallelworker, thework)
		for filename, citations in results:
			recordfile(filename, citations, resolvedpath, unresolvedpath, summary, settings['verbose'])
	else:
		with Pool(processes=workercount, initializer=initializeworker, initargs=(referencedata, tagger)) as pool:
			for filename, citations in pool.imap(parallelworker, thework):
				recordfile(filename, citations, resolvedpath, unresolvedpath, summary, settings['verbose'])

	return summary


def parallelworker(thework):
	filename, usecittags, contextsize = thework
	citations = processonefile(filename, workerreferencedata, workertagger, usecittags, contextsize)
	return filename, citations


def processonefile(filename: str, referencedata, tagger, usecittags=False, contextsize=500) -> list:
	"""

	a file that cannot be read costs us that file, not the run

	:param filename:
	:param referencedata:
	:param tagger:
	:param usecittags:
	:param contextsize:
	:return:
	"""

	try:
		xmlcontent = loadxmlfile(filename)
	except OSError as err:
		secho('could not read {f}: {e}'.format(f=filename, e=err), fg='red')
		return list()

	return extractcitations(xmlcontent, filename, referencedata, tagger, usecittags=usecittags, contextsize=contextsize)


def recordfile(filename, citations, resolvedpath, unresolvedpath, summary, verbose):
	resolved, unresolved = writecitations(citations, resolvedpath, unresolvedpath)
	summary.register(citations)
	print('{f}: {r} resolved, {u} unresolved'.format(f=Path(filename).name, r=resolved, u=unresolved))
	if verbose:
		for c in citations:
			if not c.resolved:
				secho('\t{t}\t{b}\t{why}'.format(t=c.tag, b=c.reference or c.bibl, why=c.reason), fg='yellow')
