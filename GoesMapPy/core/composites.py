"""
Local Composites
================

Build GOES composites from MCMIP arrays that have already been pulled
out of Earth Engine (see ``cloud.loader``). The same coefficients as the
server-side expressions in ``core.formulas`` are used, so local and
remote results agree.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import numpy as np
import xarray as xr

from .formulas import (
    BLUE_BAND, RED_BAND, VEGGIE_BAND, GREEN_BAND,
    SHORTWAVE_IR_BAND, CLEAN_IR_BAND, DIRTY_IR_BAND,
    GREEN_COEFFICIENTS, NT_MICRO_RANGES, NT_MICRO_MAX,
)
from .._numba_kernels import (
    scale_offset_1d,
    green_band_1d,
    normalize_1d,
    difference_1d,
    clip_values_1d,
)


def _flat(data):
    arr = np.ascontiguousarray(data, dtype=np.float64)
    return arr.ravel(), arr.shape


def scale_and_offset(data, scale, offset):
    """Calibrate raw CMI counts: ``data * scale + offset``."""
    flat, shape = _flat(data)
    return scale_offset_1d(flat, float(scale), float(offset)).reshape(shape)


def compute_green_band(blue, red, veggie):
    """
    Compute the synthetic green reflectance from C01, C02 and C03.

    Parameters
    ----------
    blue, red, veggie : array-like
        Scaled reflectance for CMI_C01, CMI_C02 and CMI_C03. Must share a shape.

    Returns
    -------
    np.ndarray
        ``0.45 * red + 0.10 * veggie + 0.45 * blue``
    """
    b, shape = _flat(blue)
    r, r_shape = _flat(red)
    v, v_shape = _flat(veggie)
    if not (shape == r_shape == v_shape):
        raise ValueError(
            f"Band shapes differ: blue {shape}, red {r_shape}, veggie {v_shape}"
        )
    green = green_band_1d(
        b, r, v,
        GREEN_COEFFICIENTS[BLUE_BAND],
        GREEN_COEFFICIENTS[RED_BAND],
        GREEN_COEFFICIENTS[VEGGIE_BAND],
    )
    return green.reshape(shape)


def compute_nt_micro(c07, c13, c15, clip=True):
    """
    Compute the Nighttime Microphysics RGB from brightness temperatures.

    Parameters
    ----------
    c07, c13, c15 : array-like
        Brightness temperatures (K) for CMI_C07, CMI_C13 and CMI_C15.
    clip : bool
        Clamp the result to [0, 255], matching Earth Engine's
        ``visualize(min=0, max=255)``.

    Returns
    -------
    np.ndarray
        Array with a trailing axis of length 3 holding R, G, B.
    """
    sw, shape = _flat(c07)
    clean, clean_shape = _flat(c13)
    dirty, dirty_shape = _flat(c15)
    if not (shape == clean_shape == dirty_shape):
        raise ValueError(
            f"Band shapes differ: C07 {shape}, C13 {clean_shape}, C15 {dirty_shape}"
        )

    values = {
        'red': difference_1d(dirty, clean),
        'green': difference_1d(clean, sw),
        'blue': clean,
    }

    channels = []
    for channel in ('red', 'green', 'blue'):
        low, high = NT_MICRO_RANGES[channel]
        out = normalize_1d(values[channel], low, high, float(NT_MICRO_MAX))
        if clip:
            out = clip_values_1d(out, 0.0, float(NT_MICRO_MAX))
        channels.append(out.reshape(shape))

    return np.stack(channels, axis=-1)


def add_green_band_local(ds: xr.Dataset) -> xr.Dataset:
    """Return ``ds`` with a ``GREEN`` variable computed from its C01/C02/C03 variables."""
    missing = [b for b in (BLUE_BAND, RED_BAND, VEGGIE_BAND) if b not in ds.data_vars]
    if missing:
        raise ValueError(f"Dataset is missing bands required for the green band: {missing}")

    green = xr.apply_ufunc(
        compute_green_band,
        ds[BLUE_BAND], ds[RED_BAND], ds[VEGGIE_BAND],
        dask='parallelized',
        output_dtypes=[np.float64],
    )
    return ds.assign({GREEN_BAND: green})


def nt_micro_dataset(ds: xr.Dataset, clip=True) -> xr.Dataset:
    """Return a Dataset with ``red``, ``green`` and ``blue`` Nighttime Microphysics variables."""
    missing = [b for b in (SHORTWAVE_IR_BAND, CLEAN_IR_BAND, DIRTY_IR_BAND) if b not in ds.data_vars]
    if missing:
        raise ValueError(f"Dataset is missing bands required for Nighttime Microphysics: {missing}")

    rgb = xr.apply_ufunc(
        compute_nt_micro,
        ds[SHORTWAVE_IR_BAND], ds[CLEAN_IR_BAND], ds[DIRTY_IR_BAND],
        kwargs={'clip': clip},
        output_core_dims=[['channel']],
        dask='parallelized',
        output_dtypes=[np.float64],
        dask_gufunc_kwargs={'output_sizes': {'channel': 3}},
    )
    return xr.Dataset(
        {name: rgb.isel(channel=i, drop=True) for i, name in enumerate(('red', 'green', 'blue'))},
        attrs=dict(ds.attrs),
    )
