"""
MCMIP Data Loader
=================

Pull a calibrated MCMIP collection out of Earth Engine as an xarray
Dataset, for local analysis or for building composites with
``core.composites``.

Reprojection and clipping run on the Earth Engine side through xee;
only the requested bands and region are transferred, lazily, as Dask
arrays.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import numpy as np
import xarray as xr

from ..core.utils import calculate_optimal_chunks
from ..core.console import print_info, print_success, suppress_warnings

suppress_warnings()


def _standardize_dims(ds):
    """Rename x/y (or X/Y) to lon/lat."""
    rename_dict = {}
    for src, dst in (('x', 'lon'), ('X', 'lon'), ('y', 'lat'), ('Y', 'lat')):
        if src in ds.dims:
            rename_dict[src] = dst
    if rename_dict:
        ds = ds.rename(rename_dict)
    return ds


def load_mcmip_dataset(col, region, scale=2000, crs='EPSG:4326', bands=None,
                       chunks=True, verbose=True):
    """
    Load an MCMIP collection from Earth Engine into xarray.

    Parameters
    ----------
    col : ee.ImageCollection
        Usually the result of ``get_mcmip_col``.
    region : ee.Geometry
        Area to load.
    scale : float
        Pixel size in metres for projected CRSs. For EPSG:4326 it is
        converted to degrees.
    crs : str
        Target coordinate reference system; reprojection happens on the
        Earth Engine server.
    bands : list of str, optional
        Bands to keep, e.g. ['CMI_C01', 'CMI_C02', 'CMI_C03', 'GREEN'].
    chunks : bool
        Chunk the result with Dask using ``calculate_optimal_chunks``.

    Returns
    -------
    xr.Dataset
        Dimensions (time, lat, lon), latitude descending.
    """
    if bands:
        col = col.select(list(bands))

    # Nominal degrees per metre at the equator.
    scale_value = scale / 111000.0 if crs == 'EPSG:4326' else scale

    if verbose:
        print_info("Loading MCMIP data from Earth Engine...")
    ds = xr.open_dataset(col, engine='ee', crs=crs, scale=scale_value, geometry=region)
    ds = _standardize_dims(ds)

    order = [d for d in ('time', 'lat', 'lon') if d in ds.dims]
    ds = ds.transpose(*order, ...)

    if chunks and ds.data_vars:
        sample = ds[next(iter(ds.data_vars))]
        optimal = calculate_optimal_chunks(sample.shape, dtype=np.float32)
        ds = ds.chunk(dict(zip(sample.dims, optimal)))

    if 'lat' in ds.dims:
        ds = ds.sortby('lat', ascending=False)

    if verbose:
        print_success(f"Loaded {dict(ds.sizes)}")
    return ds
