#!../bin/python
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import multiprocessing
import sys
import time
from multiprocessing import freeze_support

from click import secho

from linker.citationprocessor import processallxmlfiles
from linker.configureatlaunch import buildrunsettings, getcommandlineargs, loadconfiguration
from linker.referencedata.datastore import loadreferencedata
from linker.resolvers.resolutionerrors import ReferenceDataError
from linker.workers import setworkercount


def setmultiprocessingmethod() -> str:
	mpmethod = str()
	try:
		# 'fork' is a lot faster than 'spawn' and the reference data is big
		mpmethod = 'fork'
		multiprocessing.set_start_method(mpmethod)
	except RuntimeError:
		# RuntimeError: context has already been set
		mpmethod = multiprocessing.get_start_method()
	except ValueError:
		# ValueError: cannot find context for 'fork'
		mpmethod = 'spawn'
		multiprocessing.set_start_method(mpmethod)
	finally:
		print('multiprocessing method set to: {m}'.format(m=mpmethod))
	return mpmethod


if __name__ == '__main__':
	freeze_support()
	setmultiprocessingmethod()

	config = loadconfiguration('config.ini')
	commandlineargs = getcommandlineargs()
	settings = buildrunsettings(config, commandlineargs)

	start = time.time()

	try:
		referencedata = loadreferencedata(settings['referencedatadir'])
	except ReferenceDataError as err:
		secho('cannot load the author and work tables: {e}'.format(e=err), fg='red')
		sys.exit(1)

	workercount = settings['workers'] or setworkercount(config)

	summary = processallxmlfiles(settings, referencedata, workercount)
	summary.report()

	stop = time.time()
	took = round((stop - start), 2)
	print('\nlinking took', str(took), 'seconds')
