"""
Tests for Earth Engine initialization
"""

import os
from unittest.mock import patch

import ee
import pytest

from GoesMapPy.cloud import auth


@pytest.fixture
def mock_ee(mock_ee_factory):
    return mock_ee_factory('GoesMapPy.cloud.auth')


class TestResolveProject:
    """Test cases for project resolution"""

    def test_explicit_project(self):
        with patch.dict(os.environ, {'EE_PROJECT': 'env-project'}):
            assert auth.resolve_project('my-project') == 'my-project'

    def test_env_order(self):
        env = {'EE_PROJECT': 'ee-project', 'GOOGLE_CLOUD_PROJECT': 'gcp-project'}
        with patch.dict(os.environ, env, clear=True):
            assert auth.resolve_project() == 'ee-project'
        with patch.dict(os.environ, {'GOOGLE_CLOUD_PROJECT': 'gcp-project'}, clear=True):
            assert auth.resolve_project() == 'gcp-project'

    def test_nothing_set(self):
        with patch.dict(os.environ, {}, clear=True):
            assert auth.resolve_project() is None


class TestInitializeEarthEngine:
    """Test cases for initialize_earth_engine"""

    def test_existing_credentials(self, mock_ee):
        assert auth.initialize_earth_engine('my-project') is True
        mock_ee.Initialize.assert_called_once_with(project='my-project')
        mock_ee.Authenticate.assert_not_called()

    def test_opt_url(self, mock_ee):
        url = 'https://earthengine-highvolume.googleapis.com'
        auth.initialize_earth_engine('my-project', opt_url=url)
        mock_ee.Initialize.assert_called_once_with(project='my-project', opt_url=url)

    def test_authenticates_when_needed(self, mock_ee):
        mock_ee.Initialize.side_effect = [ee.EEException('no credentials'), None]
        assert auth.initialize_earth_engine('my-project') is True
        mock_ee.Authenticate.assert_called_once_with(auth_mode='browser', force=False)
        assert mock_ee.Initialize.call_count == 2

    def test_force_auth(self, mock_ee):
        assert auth.initialize_earth_engine('my-project', force_auth=True) is True
        mock_ee.Authenticate.assert_called_once_with(auth_mode='browser', force=True)
        mock_ee.Initialize.assert_called_once()

    @pytest.mark.parametrize('message, expected', [
        ('Project not registered', 'not found or not registered'),
        ('Quota exceeded', 'quota exceeded'),
        ('Permission denied', 'No permission'),
        ('Something else', 'Earth Engine error'),
    ])
    def test_failure_messages(self, mock_ee, capsys, message, expected):
        mock_ee.Initialize.side_effect = ee.EEException(message)
        assert auth.initialize_earth_engine('my-project') is False
        assert expected in capsys.readouterr().out

    def test_no_project(self, mock_ee):
        with patch.dict(os.environ, {}, clear=True):
            assert auth.initialize_earth_engine() is False
        mock_ee.Initialize.assert_not_called()
