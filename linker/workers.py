# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

from os import cpu_count

try:
	import psutil
except ModuleNotFoundError:
	psutil = None


def setworkercount(config) -> int:
	"""

	return the number of workers to use

	half the physical cores plus one: the work is all regex and the hyperthreads do not help

	:return:
	"""

	if config['io']['autoconfigworkercount'] != 'yes':
		return max(1, int(config['io']['workers']))

	cores = None
	if psutil:
		cores = psutil.cpu_count(logical=False)
	if not cores:
		cores = cpu_count() or 1

	workercount = int(cores / 2) + 1

	return workercount
