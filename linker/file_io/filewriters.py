# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

from pathlib import Path
from typing import List, Tuple

from linker.linkerclasses import Citation


def prepareoutputfiles(outputdir, resolvedfile: str, unresolvedfile: str) -> Tuple[str, str]:
	"""

	make sure the output directory exists and that each run starts with empty files

	:param outputdir:
	:param resolvedfile:
	:param unresolvedfile:
	:return: the two paths
	"""

	outputdir = Path(outputdir)
	outputdir.mkdir(parents=True, exist_ok=True)

	paths = list()
	for name in [resolvedfile, unresolvedfile]:
		p = outputdir / name
		f = open(p, encoding='utf-8', mode='w')
		f.close()
		paths.append(str(p))

	return paths[0], paths[1]


def writecitations(citations: List[Citation], resolvedpath: str, unresolvedpath: str) -> Tuple[int, int]:
	"""

	one json object per line; a citation goes to the resolved file only if it has both a reference and a urn

	:param citations:
	:param resolvedpath:
	:param unresolvedpath:
	:return: (number resolved, number unresolved)
	"""

	resolved = [c.tojson() for c in citations if c.resolved]
	unresolved = [c.tojson() for c in citations if not c.resolved]

	for path, lines in [(resolvedpath, resolved), (unresolvedpath, unresolved)]:
		if not lines:
			continue
		f = open(path, encoding='utf-8', mode='a')
		f.write('\n'.join(lines) + '\n')
		f.close()

	return len(resolved), len(unresolved)
