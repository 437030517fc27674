"""
MCMIP Band Math
===============

Band names, coefficients and Earth Engine expression strings for the
GOES ABI composites computed by GoesMapPy.

Green band:
    ABI has no green channel. A synthetic one is built from a linear
    combination of the blue (C01), red (C02) and "veggie" near-infrared
    (C03) reflectances, see https://doi.org/10.1029/2018EA000379

Nighttime Microphysics RGB:
    Brightness-temperature differences normalized to 0-255, see
    https://www.star.nesdis.noaa.gov/GOES/documents/QuickGuide_GOESR_NtMicroRGB_final.pdf
    http://oiswww.eumetsat.int/~idds/html/doc/best_practices.pdf

Authors: GoesMapPy contributors
Version: 0.1.0
"""

from typing import Dict, Optional, Tuple


# =============================================================================
# BAND NAMES
# =============================================================================

# Regex matching every CMI reflectance / brightness temperature band.
CMI_BAND_PATTERN = 'CMI_C..'

BLUE_BAND = 'CMI_C01'
RED_BAND = 'CMI_C02'
VEGGIE_BAND = 'CMI_C03'
GREEN_BAND = 'GREEN'

SHORTWAVE_IR_BAND = 'CMI_C07'
CLEAN_IR_BAND = 'CMI_C13'
DIRTY_IR_BAND = 'CMI_C15'

SCALE_SUFFIX = '_scale'
OFFSET_SUFFIX = '_offset'


def cmi_band_names():
    """Return the names of the 16 ABI CMI bands, CMI_C01 to CMI_C16."""
    return [f'CMI_C{i:02d}' for i in range(1, 17)]


# =============================================================================
# GREEN BAND
# =============================================================================

# green = 0.45 * red + 0.10 * nir + 0.45 * blue
GREEN_COEFFICIENTS: Dict[str, float] = {
    RED_BAND: 0.45,
    VEGGIE_BAND: 0.10,
    BLUE_BAND: 0.45,
}


def to_band_expression(band_name: str) -> str:
    """Return the Earth Engine expression reference for a band, e.g. ``b('CMI_C01')``."""
    return f"b('{band_name}')"


def green_expression() -> str:
    """Return the Earth Engine expression that defines the ``GREEN`` band."""
    terms = ' + '.join(
        f"{coef:.2f} * {to_band_expression(band)}"
        for band, coef in GREEN_COEFFICIENTS.items()
    )
    return f"{GREEN_BAND} = {terms}"


# =============================================================================
# NIGHTTIME MICROPHYSICS RGB
# =============================================================================

# (minuend, subtrahend) band pairs per channel; None means the channel is a
# single brightness temperature rather than a difference.
NT_MICRO_BANDS: Dict[str, Tuple[str, Optional[str]]] = {
    'red': (DIRTY_IR_BAND, CLEAN_IR_BAND),
    'green': (CLEAN_IR_BAND, SHORTWAVE_IR_BAND),
    'blue': (CLEAN_IR_BAND, None),
}

# Physical range (K) mapped onto 0-255 for each channel.
NT_MICRO_RANGES: Dict[str, Tuple[float, float]] = {
    'red': (-6.7, 2.6),
    'green': (-3.1, 5.2),
    'blue': (243.55, 292.65),
}

NT_MICRO_MAX = 255


def nt_micro_expression(channel: str) -> str:
    """
    Return the Earth Engine expression for one Nighttime Microphysics channel.

    The expression uses the variables ``b1`` (and ``b2`` for difference
    channels), which are bound to images through the expression map.

    Raises
    ------
    ValueError
        If ``channel`` is not one of 'red', 'green', 'blue'.
    """
    if channel not in NT_MICRO_RANGES:
        raise ValueError(
            f"Unknown Nighttime Microphysics channel '{channel}'. "
            f"Valid options: {', '.join(NT_MICRO_RANGES)}"
        )
    low, high = NT_MICRO_RANGES[channel]
    value = '(b1 - b2)' if NT_MICRO_BANDS[channel][1] else '(b1)'
    return f"(({value} - {low}) / ({high} - {low})) * {NT_MICRO_MAX}"


def nt_micro_expressions() -> Dict[str, str]:
    """Return the red, green and blue Nighttime Microphysics expressions."""
    return {channel: nt_micro_expression(channel) for channel in NT_MICRO_RANGES}
