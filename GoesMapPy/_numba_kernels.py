"""
Numba-Accelerated Kernels for MCMIP Band Math
=============================================

JIT-compiled versions of the GOES composite formulas, used when MCMIP
data has been pulled down from Earth Engine and composites are built
locally instead of on the server.

The kernels handle:
    - CMI scale/offset calibration
    - Synthetic green band
    - Nighttime Microphysics RGB normalization
    - Clipping to the display range

All kernels operate element-wise on flattened arrays; the wrappers in
``core.composites`` take care of shapes. NaN inputs give NaN outputs.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import numpy as np
from numba import njit, prange


@njit(parallel=True, cache=True)
def scale_offset_1d(data, scale, offset):
    """Apply ``data * scale + offset``."""
    n = data.shape[0]
    result = np.empty(n, dtype=np.float64)
    for i in prange(n):
        result[i] = data[i] * scale + offset
    return result


@njit(parallel=True, cache=True)
def green_band_1d(blue, red, veggie, blue_coef, red_coef, veggie_coef):
    """
    Combine blue, red and near-infrared reflectance into a green band.

    Args:
        blue, red, veggie: 1D reflectance arrays of equal length
        blue_coef, red_coef, veggie_coef: linear weights

    Returns:
        1D green reflectance array
    """
    n = blue.shape[0]
    result = np.empty(n, dtype=np.float64)
    for i in prange(n):
        result[i] = red_coef * red[i] + veggie_coef * veggie[i] + blue_coef * blue[i]
    return result


@njit(parallel=True, cache=True)
def normalize_1d(value, low, high, out_max):
    """
    Linearly map ``value`` from [low, high] onto [0, out_max].

    Values outside the range are not clipped.
    """
    n = value.shape[0]
    result = np.empty(n, dtype=np.float64)
    span = high - low
    for i in prange(n):
        result[i] = ((value[i] - low) / span) * out_max
    return result


@njit(parallel=True, cache=True)
def difference_1d(a, b):
    n = a.shape[0]
    result = np.empty(n, dtype=np.float64)
    for i in prange(n):
        result[i] = a[i] - b[i]
    return result


@njit(parallel=True, cache=True)
def clip_values_1d(data, min_val, max_val):
    """
    Constrain values to a display range, leaving NaN untouched.
    """
    n = data.shape[0]
    result = data.copy()
    for i in prange(n):
        val = result[i]
        if not np.isnan(val):
            if val < min_val:
                result[i] = min_val
            elif val > max_val:
                result[i] = max_val
    return result
