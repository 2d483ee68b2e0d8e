# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import argparse
import configparser

# anything missing from config.ini falls back to these
defaultconfiguration = {
	'io': {
		'inputdir': '.',
		'outputdir': 'cit_data',
		'resolvedfile': 'resolved.jsonl',
		'unresolvedfile': 'unresolved.jsonl',
		'referencedatadir': '',
		'autoconfigworkercount': 'yes',
		'workers': '2',
	},
	'extraction': {
		'usecittags': 'n',
		'contextsize': '500',
	},
	'reporting': {
		'verbose': 'n',
	},
}


def getcommandlineargs(argv=None):
	"""
	what, if anything, was passed to "linkcitations.py"?
	:return:
	"""

	commandlineparser = argparse.ArgumentParser(description='available overrides to "config.ini" for "linkcitations.py"')

	commandlineparser.add_argument('--input', required=False, type=str, help='directory to search for .xml files')
	commandlineparser.add_argument('--output', required=False, type=str, help='directory for resolved.jsonl and unresolved.jsonl')
	commandlineparser.add_argument('--cit', action='store_true', help='also harvest <cit> containers, multi-line <bibl>s and <ref>s')
	commandlineparser.add_argument('--workers', required=False, type=int, help='number of worker processes; 1 means no pool at all')
	commandlineparser.add_argument('--verbose', action='store_true', help='report every unresolved citation as it is found')
	commandlineargs = commandlineparser.parse_args(argv)

	return commandlineargs


def loadconfiguration(configfile='config.ini') -> configparser.ConfigParser:
	"""

	config.ini on top of the defaults; a missing file is not an error

	:param configfile:
	:return:
	"""

	config = configparser.ConfigParser()
	config.read_dict(defaultconfiguration)
	config.read(configfile, encoding='utf8')

	return config


def buildrunsettings(config: configparser.ConfigParser, commandlineargs) -> dict:
	"""

	the command line beats the config file

	:param config:
	:param commandlineargs:
	:return:
	"""

	settings = dict()
	settings['inputdir'] = config['io']['inputdir']
	settings['outputdir'] = config['io']['outputdir']
	settings['resolvedfile'] = config['io']['resolvedfile']
	settings['unresolvedfile'] = config['io']['unresolvedfile']
	settings['referencedatadir'] = config['io']['referencedatadir']
	settings['usecittags'] = config['extraction']['usecittags'] == 'y'
	settings['contextsize'] = int(config['extraction']['contextsize'])
	settings['verbose'] = config['reporting']['verbose'] == 'y'
	settings['workers'] = None

	if commandlineargs.input:
		settings['inputdir'] = commandlineargs.input
	if commandlineargs.output:
		settings['outputdir'] = commandlineargs.output
	if commandlineargs.cit:
		settings['usecittags'] = True
	if commandlineargs.verbose:
		settings['verbose'] = True
	if commandlineargs.workers:
		settings['workers'] = commandlineargs.workers

	return settings
