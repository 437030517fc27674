"""
GoesMapPy Core Module
=====================

Local functionality that does not talk to Earth Engine.

This module provides the building blocks used by the cloud wrappers
and by local post-processing:
    - Default-parameter merging
    - Band-math constants and Earth Engine expressions
    - Numba-backed local composites
    - Argument validation and collection ids
    - Zarr persistence
    - Console utilities for colored output

Authors: GoesMapPy contributors
Version: 0.1.0
"""

from .params import update_params

from .formulas import (
    CMI_BAND_PATTERN,
    GREEN_BAND,
    GREEN_COEFFICIENTS,
    NT_MICRO_RANGES,
    cmi_band_names,
    green_expression,
    nt_micro_expression,
    nt_micro_expressions,
)

from .composites import (
    scale_and_offset,
    compute_green_band,
    compute_nt_micro,
    add_green_band_local,
    nt_micro_dataset,
)

from .utils import (
    GOES_SATELLITES,
    MCMIP_SCANS,
    MCMIP_COLLECTIONS,
    get_mcmip_col_id,
    validate_time_range,
    validate_filter_hours,
    validate_step,
    calculate_optimal_chunks,
)

from .data_io import (
    save_as_zarr,
    load_zarr_dataset,
)

from .console import (
    suppress_warnings,
    print_banner,
    print_section,
    print_config,
    print_success,
    print_error,
    print_warning,
    print_info,
    print_complete
)


__all__ = [
    # Params
    'update_params',

    # Formulas
    'CMI_BAND_PATTERN',
    'GREEN_BAND',
    'GREEN_COEFFICIENTS',
    'NT_MICRO_RANGES',
    'cmi_band_names',
    'green_expression',
    'nt_micro_expression',
    'nt_micro_expressions',

    # Local composites
    'scale_and_offset',
    'compute_green_band',
    'compute_nt_micro',
    'add_green_band_local',
    'nt_micro_dataset',

    # Utils
    'GOES_SATELLITES',
    'MCMIP_SCANS',
    'MCMIP_COLLECTIONS',
    'get_mcmip_col_id',
    'validate_time_range',
    'validate_filter_hours',
    'validate_step',
    'calculate_optimal_chunks',

    # Data I/O
    'save_as_zarr',
    'load_zarr_dataset',

    # Console
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
