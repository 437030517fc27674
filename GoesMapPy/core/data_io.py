"""
Data I/O Operations
===================

Persist MCMIP data pulled from Earth Engine.

Uses Zarr format with ZSTD compression so downloaded frame stacks can be
re-opened without another round trip to Earth Engine.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import os
import numpy as np
import xarray as xr
from typing import Optional, Tuple

from numcodecs.zarr3 import Zstd

from .utils import calculate_optimal_chunks


VALID_DTYPES = {'float16': np.float16, 'float32': np.float32, 'float64': np.float64}


def save_as_zarr(
    ds: xr.Dataset,
    output_folder: str,
    file_name: str,
    chunks: Optional[Tuple[int, ...]] = None,
    compression_level: int = 3,
    dtype: Optional[str] = 'float32',
) -> str:
    """
    Save xarray Dataset as a compressed Zarr store.

    Only data variables are converted to ``dtype``; coordinates keep
    their precision.

    Parameters
    ----------
    ds : xr.Dataset
        Dataset to save, e.g. the result of ``load_mcmip_dataset``.
    output_folder : str
        Directory to save the Zarr store.
    file_name : str
        Name for the Zarr store (without .zarr extension).
    chunks : tuple of int, optional
        Chunk sizes per dimension (time first). Computed with
        ``calculate_optimal_chunks`` when omitted.
    compression_level : int, optional
        ZSTD compression level (1-22). Default is 3.
    dtype : str, optional
        'float16', 'float32' (default) or 'float64'. Integer types are
        rejected because masked pixels are NaN. ``None`` keeps the
        dataset's own types.

    Returns
    -------
    str
        Path to the saved Zarr store.

    Raises
    ------
    ValueError
        If ``output_folder`` is empty or ``dtype`` is not a float type.
    """
    if not output_folder:
        raise ValueError("Output folder must be provided.")

    if dtype is not None:
        dtype_lower = dtype.lower().strip()
        if dtype_lower not in VALID_DTYPES:
            raise ValueError(
                f"Unsupported dtype '{dtype}'. MCMIP data needs NaN for masked pixels.\n"
                f"Valid options: {', '.join(VALID_DTYPES)}"
            )
        target_dtype = VALID_DTYPES[dtype_lower]
        ds = ds.copy()
        for var in list(ds.data_vars):
            if ds[var].dtype != target_dtype:
                ds[var] = ds[var].astype(target_dtype)

    os.makedirs(output_folder, exist_ok=True)
    zarr_path = os.path.join(output_folder, f"{file_name}.zarr")

    compressor = Zstd(level=compression_level)

    ds = ds.copy()
    encoding = {}
    for var in list(ds.data_vars):
        var_shape = ds[var].shape
        var_chunks = chunks or calculate_optimal_chunks(var_shape, dtype=ds[var].dtype)
        var_chunks = tuple(min(c, s) for c, s in zip(var_chunks, var_shape))
        encoding[var] = {
            'compressors': (compressor,),
            'chunks': var_chunks,
        }
        # Dask chunks must line up with the Zarr chunks on write.
        if ds[var].chunks is not None:
            ds[var] = ds[var].chunk(dict(zip(ds[var].dims, var_chunks)))

    ds.to_zarr(zarr_path, mode='w', encoding=encoding)

    return zarr_path


def load_zarr_dataset(zarr_path: str) -> xr.Dataset:
    """Open a Zarr store written by ``save_as_zarr``."""
    if not os.path.exists(zarr_path):
        raise FileNotFoundError(f"Zarr store not found: {zarr_path}")
    return xr.open_zarr(zarr_path)
