# -*- coding: utf-8 -*-
"""
	PerseusCitationLinker: link classical citations to CTS URNs
	Copyright: the PerseusCitationLinker contributors 2024-26
	License: GNU GENERAL PUBLIC LICENSE 3
		(see LICENSE in the top level directory of the distribution)
"""

import pytest

from linker.referencedata.datastore import loadreferencedata


@pytest.fixture(scope='session')
def referencedata():
	return loadreferencedata()
