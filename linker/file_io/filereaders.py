# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

from pathlib import Path
from typing import List


def findxmlfiles(inputdir) -> List[str]:
	"""
	tell me the directory that holds the TEI files
	I will give you a sorted list of every .xml file under it
	:param inputdir:
	:return:
	"""

	return sorted(str(p) for p in Path(inputdir).rglob('*.xml') if p.is_file())


def loadxmlfile(filepath) -> str:
	"""
	read a whole document; stray bytes are replaced rather than allowed to kill the run
	:param filepath:
	:return:
	"""

	f = open(filepath, encoding='utf-8', errors='replace', mode='r')
	xmlcontent = f.read()
	f.close()

	return xmlcontent
