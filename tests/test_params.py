"""
Tests for default-parameter merging
"""

from GoesMapPy.core.params import update_params


class TestUpdateParams:
    """Test cases for update_params"""

    def setup_method(self):
        self.preset = {'color': '000000', 'opacity': 0.6, 'width': 1}

    def test_no_update_returns_defaults(self):
        """None or empty updates leave the defaults as they are"""
        assert update_params(None, self.preset) == self.preset
        assert update_params({}, self.preset) == self.preset

    def test_truthy_override_wins(self):
        """Supplied non-falsy values replace the defaults"""
        result = update_params({'width': 3, 'color': 'ff0000'}, self.preset)
        assert result == {'color': 'ff0000', 'opacity': 0.6, 'width': 3}

    def test_falsy_override_keeps_default(self):
        """0, '', None and False never replace a default"""
        result = update_params(
            {'width': 0, 'color': '', 'opacity': None}, self.preset
        )
        assert result == self.preset

        assert update_params({'width': False}, self.preset)['width'] == 1

    def test_unknown_keys_are_carried_over(self):
        """Keys without a default are added; falsy ones become None"""
        result = update_params({'format': 'gif', 'extra': 0}, self.preset)
        assert result['format'] == 'gif'
        assert 'extra' in result
        assert result['extra'] is None

    def test_preset_not_mutated(self):
        """The caller's defaults dictionary is left untouched"""
        original = dict(self.preset)
        result = update_params({'width': 5}, self.preset)
        assert self.preset == original
        assert result is not self.preset
