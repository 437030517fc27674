"""
GoesMapPy Cloud Module
======================

Build GOES MCMIP visualizations on Google Earth Engine.

This module handles everything that issues requests to Earth Engine:
    - Authentication and session initialization
    - MCMIP collection filtering, calibration and green band synthesis
    - True color and Nighttime Microphysics visualization
    - Overlays and frame shifting
    - Animated GIFs and MP4 Drive exports
    - Loading data into xarray through xee

Authors: GoesMapPy contributors
Version: 0.1.0
"""

from .auth import initialize_earth_engine, resolve_project
from .collection import apply_scale_and_offset, add_green_band, get_mcmip_col
from .visualize import (
    TRUE_COLOR_LAND,
    TRUE_COLOR_CLOUD,
    get_states_overlay,
    visualize_mcmip,
    visualize_nt_micro,
    calc_nt_micro,
    add_overlay,
    shift_frames,
)
from .export import get_gif_url, show_gif, download_gif, export_mp4, wait_for_task
from .regions import region_from_bbox, region_from_shapefile
from .loader import load_mcmip_dataset


__all__ = [
    # Authentication
    'initialize_earth_engine',
    'resolve_project',

    # Collections
    'apply_scale_and_offset',
    'add_green_band',
    'get_mcmip_col',

    # Visualization
    'TRUE_COLOR_LAND',
    'TRUE_COLOR_CLOUD',
    'get_states_overlay',
    'visualize_mcmip',
    'visualize_nt_micro',
    'calc_nt_micro',
    'add_overlay',
    'shift_frames',

    # Output
    'get_gif_url',
    'show_gif',
    'download_gif',
    'export_mp4',
    'wait_for_task',

    # Regions
    'region_from_bbox',
    'region_from_shapefile',

    # Data loading
    'load_mcmip_dataset',
]
