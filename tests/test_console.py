"""
Tests for console output helpers
"""

from unittest.mock import patch

from GoesMapPy.core import console


class TestConsole:
    """Test cases for coloured console output"""

    def test_messages(self, capsys):
        console.print_info('building collection')
        console.print_warning('timed out')
        console.print_error('bad project')
        console.print_config('Collection', 'NOAA/GOES/16/MCMIPF')
        out = capsys.readouterr().out
        assert 'building collection' in out
        assert 'timed out' in out
        assert 'bad project' in out
        assert 'Collection:' in out and 'NOAA/GOES/16/MCMIPF' in out

    def test_plain_text_without_color(self, capsys):
        with patch.dict(console._STYLES, {name: '' for name in console._STYLES}):
            console.print_success('saved')
            console.print_section('Output', width=6)
        assert capsys.readouterr().out == '✓ saved\n\nOutput\n------\n'

    def test_complete_with_elapsed_time(self, capsys):
        console.print_complete(elapsed_seconds=12.34)
        out = capsys.readouterr().out
        assert 'Done!' in out
        assert '12.3s' in out

    def test_banner_version(self, capsys):
        console.print_banner(version='9.9')
        assert 'GoesMapPy v9.9' in capsys.readouterr().out
