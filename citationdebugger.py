#!../bin/python
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import argparse

from click import secho

from linker.configureatlaunch import loadconfiguration
from linker.parsers.abbreviations import generateworkabbreviations
from linker.parsers.referenceparser import parsereference
from linker.parsers.referenceselector import normalizereference, selectreference
from linker.referencedata.datastore import loadreferencedata
from linker.resolvers.authordisambiguator import resolveauthor
from linker.resolvers.identifierresolver import resolveidentifier

"""
use this script to watch one citation go through every stage of the resolver

	python citationdebugger.py --n "Soph. OT 151" --bibl "O. T. 151 lyr."
	python citationdebugger.py --abbreviate "oedipus tyrannus"

"""

config = loadconfiguration('config.ini')

debugcitation = 'Soph. OT 151'
commandlineparser = argparse.ArgumentParser(description='trace a single citation; default is currently "{d}"'.format(d=debugcitation))
commandlineparser.add_argument('--n', required=False, type=str, help='the n attribute of the <bibl>')
commandlineparser.add_argument('--bibl', required=False, type=str, help='the text inside the <bibl>')
commandlineparser.add_argument('--abbreviate', required=False, type=str, help='just list the abbreviations of a work title')
commandlineargs = commandlineparser.parse_args()

if commandlineargs.abbreviate:
	for a in generateworkabbreviations(commandlineargs.abbreviate):
		print('\t', a)
	raise SystemExit

nattribute = commandlineargs.n or str()
bibltext = commandlineargs.bibl or str()
if not nattribute and not bibltext:
	nattribute = debugcitation

referencedata = loadreferencedata(config['io']['referencedatadir'])

print('n attribute:\t', nattribute)
print('\tnormalized:\t', normalizereference(nattribute))
print('bibl text:\t', bibltext)
print('\tnormalized:\t', normalizereference(bibltext))

reference = selectreference(nattribute, bibltext, referencedata)
print('selected:\t', reference)

author, work, passage = parsereference(reference, referencedata)
print('author:\t\t', author)
print('work:\t\t', work)
print('passage:\t', passage)
print('author key:\t', resolveauthor(author, work, referencedata))

outcome = resolveidentifier(reference, str(), 'citationdebugger', referencedata)
if outcome.resolved:
	secho(outcome.urn, fg='green')
else:
	secho('{c}: {r}'.format(c=outcome.errorcode, r=outcome.reason), fg='red')
