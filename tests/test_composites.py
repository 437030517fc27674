"""
Tests for local composites
"""

import numpy as np
import pytest
import xarray as xr

from GoesMapPy.core.composites import (
    scale_and_offset,
    compute_green_band,
    compute_nt_micro,
    add_green_band_local,
    nt_micro_dataset,
)


class TestGreenBand:
    """Test cases for the synthetic green band"""

    def test_known_value(self):
        green = compute_green_band(np.array([0.1]), np.array([0.2]), np.array([0.3]))
        # 0.45 * 0.2 + 0.10 * 0.3 + 0.45 * 0.1
        assert green[0] == pytest.approx(0.165)

    def test_shape_preserved(self):
        blue = np.full((3, 4), 0.2)
        green = compute_green_band(blue, blue, blue)
        assert green.shape == (3, 4)
        assert np.allclose(green, 0.2)

    def test_nan_propagates(self):
        green = compute_green_band(
            np.array([np.nan, 0.1]), np.array([0.1, 0.1]), np.array([0.1, 0.1])
        )
        assert np.isnan(green[0])
        assert green[1] == pytest.approx(0.1)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="Band shapes differ"):
            compute_green_band(np.zeros(3), np.zeros(4), np.zeros(3))


class TestNtMicro:
    """Test cases for the Nighttime Microphysics RGB"""

    def test_range_endpoints(self):
        # C15 - C13 = -6.7 -> R 0; C13 - C07 = 5.2 -> G 255; C13 = 243.55 -> B 0
        rgb = compute_nt_micro(
            np.array([238.35]), np.array([243.55]), np.array([236.85])
        )
        assert rgb.shape == (1, 3)
        assert rgb[0, 0] == pytest.approx(0.0, abs=1e-9)
        assert rgb[0, 1] == pytest.approx(255.0)
        assert rgb[0, 2] == pytest.approx(0.0, abs=1e-9)

    def test_midpoints(self):
        rgb = compute_nt_micro(
            np.array([267.05]), np.array([268.1]), np.array([266.05])
        )
        assert rgb[0].tolist() == pytest.approx([127.5, 127.5, 127.5])

    def test_clip(self):
        c07, c13, c15 = np.array([290.0]), np.array([300.0]), np.array([310.0])
        clipped = compute_nt_micro(c07, c13, c15)
        raw = compute_nt_micro(c07, c13, c15, clip=False)
        assert clipped[0, 2] == 255.0
        assert raw[0, 2] > 255.0
        assert np.all((clipped >= 0) & (clipped <= 255))

    def test_nan_propagates(self):
        rgb = compute_nt_micro(np.array([np.nan]), np.array([268.1]), np.array([266.05]))
        assert np.isnan(rgb[0, 1])
        assert not np.isnan(rgb[0, 0])


def test_scale_and_offset():
    result = scale_and_offset(np.array([[1, 2], [3, 4]]), 2.0, 1.0)
    assert result.tolist() == [[3.0, 5.0], [7.0, 9.0]]


def _dataset(**bands):
    dims = ('time', 'lat', 'lon')
    return xr.Dataset({name: (dims, np.full((2, 3, 4), value)) for name, value in bands.items()})


def test_add_green_band_local():
    ds = _dataset(CMI_C01=0.1, CMI_C02=0.2, CMI_C03=0.3)
    result = add_green_band_local(ds)
    assert 'GREEN' in result
    assert result['GREEN'].dims == ('time', 'lat', 'lon')
    assert np.allclose(result['GREEN'].values, 0.165)


def test_add_green_band_local_missing_band():
    with pytest.raises(ValueError, match="missing bands"):
        add_green_band_local(_dataset(CMI_C01=0.1, CMI_C02=0.2))


def test_nt_micro_dataset():
    ds = _dataset(CMI_C07=267.05, CMI_C13=268.1, CMI_C15=266.05)
    result = nt_micro_dataset(ds)
    assert set(result.data_vars) == {'red', 'green', 'blue'}
    for name in ('red', 'green', 'blue'):
        assert result[name].shape == (2, 3, 4)
        assert np.allclose(result[name].values, 127.5)
