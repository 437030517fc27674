"""
Utility Functions
=================

Collection ids, argument validation and chunk sizing helpers.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import numpy as np
import pandas as pd
from typing import Optional, Sequence, Tuple


# =============================================================================
# GOES MCMIP COLLECTIONS
# =============================================================================

# Satellites with MCMIP collections in the Earth Engine catalog.
GOES_SATELLITES = (16, 17, 18, 19)

# ABI scan sectors: Full disk, CONUS, Mesoscale.
MCMIP_SCANS = {
    'F': 'Full Disk',
    'C': 'CONUS',
    'M': 'Mesoscale',
}

MCMIP_COLLECTIONS = {
    (sat, scan): f'NOAA/GOES/{sat}/MCMIP{scan}'
    for sat in GOES_SATELLITES
    for scan in MCMIP_SCANS
}


def get_mcmip_col_id(satellite: int = 16, scan: str = 'F') -> str:
    """
    Build the Earth Engine id of a GOES MCMIP image collection.

    Parameters
    ----------
    satellite : int
        GOES satellite number (16, 17, 18 or 19).
    scan : str
        'F' (Full Disk), 'C' (CONUS) or 'M' (Mesoscale). Case-insensitive.

    Returns
    -------
    str
        Collection id, e.g. 'NOAA/GOES/16/MCMIPF'.

    Raises
    ------
    ValueError
        If the satellite or scan is unknown.
    """
    try:
        satellite = int(satellite)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid GOES satellite '{satellite}'.")

    scan = str(scan).upper()
    if satellite not in GOES_SATELLITES:
        raise ValueError(
            f"Unknown GOES satellite {satellite}. "
            f"Valid options: {', '.join(str(s) for s in GOES_SATELLITES)}"
        )
    if scan not in MCMIP_SCANS:
        raise ValueError(
            f"Unknown ABI scan '{scan}'. Valid options: {', '.join(MCMIP_SCANS)}"
        )
    return MCMIP_COLLECTIONS[(satellite, scan)]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_time_range(start_time: str, end_time: str) -> Tuple[str, str]:
    """
    Validate a UTC time range for collection filtering.

    Parameters
    ----------
    start_time, end_time : str
        Anything pandas can parse, e.g. '2021-09-01T12:00'.

    Returns
    -------
    Tuple[str, str]
        ISO formatted (start, end).

    Raises
    ------
    ValueError
        If either value cannot be parsed or the range is empty.
    """
    try:
        start_dt = pd.Timestamp(start_time)
        end_dt = pd.Timestamp(end_time)
    except Exception as e:
        raise ValueError(f"Invalid date/time format. Use ISO 8601 (YYYY-MM-DDTHH:MM). Error: {e}") from e

    if end_dt <= start_dt:
        raise ValueError(
            f"End time ({end_time}) must be after start time ({start_time})"
        )

    return start_dt.isoformat(), end_dt.isoformat()


def validate_filter_hours(hours: Optional[Sequence[int]]) -> Optional[Tuple[int, int]]:
    """
    Validate an inclusive [start, end] UTC hour window.

    ``None`` is returned unchanged. Windows that wrap midnight (e.g. [22, 4])
    are accepted; Earth Engine's calendarRange handles them.
    """
    if hours is None:
        return None
    if len(hours) != 2:
        raise ValueError(f"filterHours must be [start_hour, end_hour], got {list(hours)}")

    start, end = (int(h) for h in hours)
    for h in (start, end):
        if not 0 <= h <= 23:
            raise ValueError(f"filterHours values must be between 0 and 23, got {h}")
    return start, end


def validate_step(step: Optional[int]) -> Optional[int]:
    """Validate a series sampling step (keep every n-th image)."""
    if step is None:
        return None
    step = int(step)
    if step < 1:
        raise ValueError(f"step must be a positive integer, got {step}")
    return step


# =============================================================================
# OPTIMAL CHUNKING UTILITIES
# =============================================================================

def calculate_optimal_chunks(
    shape: Tuple[int, ...],
    dtype: np.dtype = np.float32,
    target_chunk_mb: float = 64.0,
) -> Tuple[int, ...]:
    """
    Calculate chunk sizes for Dask arrays of MCMIP frames.

    The first dimension is assumed to be time. Spatial dimensions are
    kept whole when possible and the number of frames per chunk is
    chosen to stay near ``target_chunk_mb``. If a single frame is larger
    than the target, the spatial dimensions are halved until it fits.

    Parameters
    ----------
    shape : tuple of int
        Array shape, time first.
    dtype : np.dtype
        Element type.
    target_chunk_mb : float
        Approximate chunk size in megabytes.

    Returns
    -------
    tuple of int
        Chunk size per dimension.
    """
    if not shape:
        return ()

    itemsize = np.dtype(dtype).itemsize
    target_bytes = target_chunk_mb * 1024 ** 2

    if len(shape) == 1:
        return (int(max(1, min(shape[0], target_bytes // itemsize))),)

    spatial = list(shape[1:])
    frame_bytes = int(np.prod(spatial)) * itemsize

    while frame_bytes > target_bytes and max(spatial) > 1:
        idx = int(np.argmax(spatial))
        spatial[idx] = max(1, spatial[idx] // 2)
        frame_bytes = int(np.prod(spatial)) * itemsize

    time_chunk = int(max(1, min(shape[0], target_bytes // max(frame_bytes, 1))))
    return (time_chunk, *spatial)
