"""
MCMIP Visualization
===================

Turn calibrated MCMIP collections into RGB image collections ready for
animation or export.

    - True color (land and cloud presets) with the synthetic green band
    - Nighttime Microphysics RGB
    - State/province boundary overlays
    - Progressive frame shifting to follow a moving feature

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import ee

from ..core.params import update_params
from ..core.formulas import (
    BLUE_BAND, RED_BAND, GREEN_BAND, NT_MICRO_BANDS, NT_MICRO_MAX,
    nt_micro_expressions,
)


# =============================================================================
# VISUALIZATION PRESETS
# =============================================================================

TRUE_COLOR_LAND = {
    'bands': [RED_BAND, GREEN_BAND, BLUE_BAND],
    'min': 0,
    'max': 0.35,
    'gamma': 1,
}

TRUE_COLOR_CLOUD = {
    'bands': [RED_BAND, GREEN_BAND, BLUE_BAND],
    'min': 0,
    'max': 1,
    'gamma': 1.3,
}

RESAMPLE_METHODS = ('bilinear', 'bicubic')

STATES_COLLECTION = 'FAO/GAUL/2015/level1'

TIME_START = 'system:time_start'

# Approximate metres per degree, used to turn point offsets into shifts.
METERS_PER_DEGREE = 111000
SHIFT_PROJECTION = 'EPSG:5070'


def get_states_overlay(params=None):
    """
    Return a states overlay image.

    Parameters
    ----------
    params : dict, optional
        ``color``: outline color (default '000000').
        ``opacity``: outline opacity (default 0.6).
        ``width``: outline width (default 1).

    Returns
    -------
    ee.Image
    """
    _params = update_params(params, {
        'color': '000000',
        'opacity': 0.6,
        'width': 1,
    })

    states = ee.FeatureCollection(STATES_COLLECTION)
    return (ee.Image().byte()
            .paint(featureCollection=states, color=1, width=_params['width'])
            .visualize(palette=_params['color'], opacity=_params['opacity']))


def _resample_and_reproject(col, resample, reproject):
    if resample is not None and resample not in RESAMPLE_METHODS:
        raise ValueError(
            f"Unknown resample method '{resample}'. "
            f"Valid options: {', '.join(RESAMPLE_METHODS)}"
        )

    if resample:
        col = col.map(lambda img: img.resample(resample))

    if reproject:
        col = col.map(lambda img: img.reproject(**reproject))

    return col


def visualize_mcmip(col, params=None):
    """
    Create a GOES MCMIP visualization image collection.

    Parameters
    ----------
    col : ee.ImageCollection
        A collection returned by ``get_mcmip_col``.
    params : dict, optional
        ``resample``: 'bilinear' or 'bicubic'.
        ``visParams``: visualization parameters (default TRUE_COLOR_LAND).
        ``reproject``: keyword arguments for ``ee.Image.reproject``, e.g.
        {'crs': 'EPSG:3857', 'scale': 1500}.

    Returns
    -------
    ee.ImageCollection
        RGB images carrying ``system:time_start``.
    """
    _params = update_params(params, {
        'resample': None,
        'visParams': TRUE_COLOR_LAND,
        'reproject': None,
    })
    col = _resample_and_reproject(col, _params['resample'], _params['reproject'])
    vis_params = _params['visParams']

    return col.map(
        lambda img: img.visualize(**vis_params).set(TIME_START, img.get(TIME_START))
    )


def calc_nt_micro(img):
    """
    Calculate the Nighttime Microphysics RGB for one scaled MCMIP image.

    Returns
    -------
    ee.Image
        8-bit RGB visualization carrying ``system:time_start``.
    """
    img = ee.Image(img)
    expressions = nt_micro_expressions()

    channels = []
    for channel in ('red', 'green', 'blue'):
        minuend, subtrahend = NT_MICRO_BANDS[channel]
        band_map = {'b1': img.select(minuend)}
        if subtrahend:
            band_map['b2'] = img.select(subtrahend)
        channels.append(img.expression(expressions[channel], band_map))

    return (ee.Image.cat(*channels)
            .visualize(min=0, max=NT_MICRO_MAX)
            .set(TIME_START, img.get(TIME_START)))


def visualize_nt_micro(col, params=None):
    """
    Create a GOES Nighttime Microphysics RGB visualization image collection.

    Parameters
    ----------
    col : ee.ImageCollection
        A collection returned by ``get_mcmip_col``.
    params : dict, optional
        ``resample``: 'bilinear' or 'bicubic'.
        ``reproject``: keyword arguments for ``ee.Image.reproject``.
        ``overlay``: an ee.Image blended over every frame with ``add_overlay``.

    Returns
    -------
    ee.ImageCollection
    """
    _params = update_params(params, {
        'resample': None,
        'reproject': None,
        'overlay': None,
    })
    col = _resample_and_reproject(col, _params['resample'], _params['reproject'])

    col = col.map(calc_nt_micro)
    if _params['overlay'] is not None:
        col = add_overlay(col, _params['overlay'])
    return col


def add_overlay(col, overlay, crs='EPSG:4326', scale=2000):
    """
    Add an overlay image to all images in a collection.

    Parameters
    ----------
    col : ee.ImageCollection
        Collection of RGB visualization images.
    overlay : ee.Image
        Image blended on top of every frame, e.g. ``get_states_overlay()``.
    crs : str
        Output projection of the blended frames.
    scale : float
        Output pixel size in metres.

    Returns
    -------
    ee.ImageCollection
    """
    return col.map(
        lambda img: (img.blend(overlay)
                     .set(TIME_START, img.get(TIME_START))
                     .reproject(crs=crs, scale=scale))
    )


def shift_frames(col, start_point, end_point):
    """
    Create a progressively shifted image collection to track events.

    The shift from ``start_point`` to ``end_point`` is spread evenly over the
    frames (sorted by time) so that a moving feature stays in place.

    Parameters
    ----------
    col : ee.ImageCollection
        Collection to shift.
    start_point : ee.Geometry.Point
        Location of the feature in the first frame.
    end_point : ee.Geometry.Point
        Location of the feature in the last frame.

    Returns
    -------
    ee.ImageCollection
    """
    start_loc = ee.List(start_point.coordinates())
    end_loc = ee.List(end_point.coordinates())
    n_frames = col.size()

    x_delta = ee.Number(end_loc.get(0)).subtract(ee.Number(start_loc.get(0))).multiply(-1)
    y_delta = ee.Number(end_loc.get(1)).subtract(ee.Number(start_loc.get(1))).multiply(-1)
    x_move = ee.Number(x_delta.divide(n_frames).multiply(METERS_PER_DEGREE))
    y_move = ee.Number(y_delta.divide(n_frames).multiply(METERS_PER_DEGREE))

    timestamps = col.sort(TIME_START).aggregate_array(TIME_START)
    seq = ee.List.sequence(0, ee.Number(timestamps.size()).subtract(1))

    def _shift(i):
        i = ee.Number(i)
        img = ee.Image(col.filter(ee.Filter.eq(TIME_START, timestamps.get(i))).first())
        return (img.translate(
                    x=x_move.multiply(i),
                    y=y_move.multiply(i),
                    units='meters',
                    proj=SHIFT_PROJECTION)
                .set(TIME_START, img.get(TIME_START)))

    return ee.ImageCollection.fromImages(seq.map(_shift))
