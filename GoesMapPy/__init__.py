"""
GoesMapPy - GOES MCMIP Visualization on Google Earth Engine
===========================================================

Helpers for turning GOES-R series ABI Multi-Channel Multi-band Imagery
(MCMIP) in the Earth Engine catalog into true color and Nighttime
Microphysics animations.

All image processing (calibration, band math, reprojection, rendering)
runs on Earth Engine; GoesMapPy builds the requests with sensible
defaults. Every function takes an optional ``params`` dictionary whose
non-empty values override the defaults.

Key Features:
    - Calibrated MCMIP collections with a synthetic green band
    - True color (land/cloud) and Nighttime Microphysics RGB
    - State boundary overlays and feature-following frame shifts
    - Animated GIFs (URL, notebook display, download)
    - MP4 export to Google Drive
    - Local composites on xee-loaded data with Numba kernels
    - Interactive command-line interface

Quick Start:
    >>> import ee
    >>> import GoesMapPy as gmp
    >>> gmp.initialize_earth_engine("your-gee-project")
    >>> col = gmp.get_mcmip_col(
    ...     "NOAA/GOES/16/MCMIPC", "2021-08-29T12:00", "2021-08-29T20:00",
    ...     {"step": 2},
    ... )
    >>> rgb = gmp.visualize_mcmip(col, {"visParams": gmp.TRUE_COLOR_CLOUD})
    >>> region = gmp.region_from_bbox([-97, 24, -84, 33])
    >>> url = gmp.get_gif_url(rgb, region)

License: Apache-2.0
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from .core import (
    # Params
    update_params,

    # Formulas
    CMI_BAND_PATTERN,
    GREEN_BAND,
    GREEN_COEFFICIENTS,
    NT_MICRO_RANGES,
    cmi_band_names,
    green_expression,
    nt_micro_expression,
    nt_micro_expressions,

    # Local composites
    scale_and_offset,
    compute_green_band,
    compute_nt_micro,
    add_green_band_local,
    nt_micro_dataset,

    # Utilities
    GOES_SATELLITES,
    MCMIP_SCANS,
    MCMIP_COLLECTIONS,
    get_mcmip_col_id,
    validate_time_range,
    validate_filter_hours,
    validate_step,
    calculate_optimal_chunks,

    # Data I/O
    save_as_zarr,
    load_zarr_dataset,

    # Console utilities
    suppress_warnings,
    print_banner,
    print_section,
    print_config,
    print_success,
    print_error,
    print_warning,
    print_info,
    print_complete,
)

from .cloud import (
    initialize_earth_engine,
    resolve_project,
    apply_scale_and_offset,
    add_green_band,
    get_mcmip_col,
    TRUE_COLOR_LAND,
    TRUE_COLOR_CLOUD,
    get_states_overlay,
    visualize_mcmip,
    visualize_nt_micro,
    calc_nt_micro,
    add_overlay,
    shift_frames,
    get_gif_url,
    show_gif,
    download_gif,
    export_mp4,
    wait_for_task,
    region_from_bbox,
    region_from_shapefile,
    load_mcmip_dataset,
)


__all__ = [
    '__version__',

    # Main entry points
    'initialize_earth_engine',
    'get_mcmip_col',
    'visualize_mcmip',
    'visualize_nt_micro',
    'get_gif_url',
    'show_gif',
    'export_mp4',

    # Cloud
    'resolve_project',
    'apply_scale_and_offset',
    'add_green_band',
    'TRUE_COLOR_LAND',
    'TRUE_COLOR_CLOUD',
    'get_states_overlay',
    'calc_nt_micro',
    'add_overlay',
    'shift_frames',
    'download_gif',
    'wait_for_task',
    'region_from_bbox',
    'region_from_shapefile',
    'load_mcmip_dataset',

    # Core - Params and formulas
    'update_params',
    'CMI_BAND_PATTERN',
    'GREEN_BAND',
    'GREEN_COEFFICIENTS',
    'NT_MICRO_RANGES',
    'cmi_band_names',
    'green_expression',
    'nt_micro_expression',
    'nt_micro_expressions',

    # Core - Local composites
    'scale_and_offset',
    'compute_green_band',
    'compute_nt_micro',
    'add_green_band_local',
    'nt_micro_dataset',

    # Core - Utils
    'GOES_SATELLITES',
    'MCMIP_SCANS',
    'MCMIP_COLLECTIONS',
    'get_mcmip_col_id',
    'validate_time_range',
    'validate_filter_hours',
    'validate_step',
    'calculate_optimal_chunks',

    # Core - Data I/O
    'save_as_zarr',
    'load_zarr_dataset',

    # Core - Console utilities
    'suppress_warnings',
    'print_banner',
    'print_section',
    'print_config',
    'print_success',
    'print_error',
    'print_warning',
    'print_info',
    'print_complete',
]
