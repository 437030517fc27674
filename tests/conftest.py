"""
Shared fixtures.

Earth Engine is never contacted: the ``ee`` module is replaced by a
MagicMock inside the module under test, so request construction can be
checked without credentials.
"""

from unittest.mock import MagicMock, patch

import ee
import pytest


def make_mock_ee():
    mock_ee = MagicMock(name='ee')
    # ``except ee.EEException`` needs a real exception class.
    mock_ee.EEException = ee.EEException
    return mock_ee


@pytest.fixture
def mock_ee_factory():
    """Patch ``ee`` in the given GoesMapPy module and return the mock."""
    patchers = []

    def _factory(module_path):
        mock_ee = make_mock_ee()
        patcher = patch(f'{module_path}.ee', mock_ee)
        patcher.start()
        patchers.append(patcher)
        return mock_ee

    yield _factory

    for patcher in patchers:
        patcher.stop()
