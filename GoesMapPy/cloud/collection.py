"""
GOES MCMIP Collections
======================

Query GOES MCMIP image collections from Earth Engine and prepare them
for visualization.

MCMIP images store CMI bands as scaled integers; each band's scale and
offset are image properties (``CMI_C01_scale``, ``CMI_C01_offset``, ...).
Every image returned by ``get_mcmip_col`` is calibrated and carries a
synthetic ``GREEN`` band.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import ee

from ..core.params import update_params
from ..core.formulas import (
    CMI_BAND_PATTERN, GREEN_BAND, SCALE_SUFFIX, OFFSET_SUFFIX, green_expression,
)
from ..core.utils import validate_filter_hours, validate_step


def apply_scale_and_offset(img):
    """
    Properly scale an MCMIP image.

    Parameters
    ----------
    img : ee.Image
        An unaltered MCMIP image.

    Returns
    -------
    ee.Image
        The image with every ``CMI_C..`` band replaced by
        ``band * <band>_scale + <band>_offset``.
    """
    img = ee.Image(img)
    names = img.select(CMI_BAND_PATTERN).bandNames()

    scales = names.map(lambda name: img.getNumber(ee.String(name).cat(SCALE_SUFFIX)))
    offsets = names.map(lambda name: img.getNumber(ee.String(name).cat(OFFSET_SUFFIX)))
    scaled = (img.select(CMI_BAND_PATTERN)
              .multiply(ee.Image.constant(scales))
              .add(ee.Image.constant(offsets)))

    return img.addBands(srcImg=scaled, overwrite=True)


def add_green_band(img):
    """
    Compute and add a green reflectance band to an MCMIP image.

    The image must already have been scaled with ``apply_scale_and_offset``.
    """
    img = ee.Image(img)
    green = img.expression(green_expression()).select(GREEN_BAND)
    return img.addBands(green)


def get_mcmip_col(col_id, start_time, end_time, params=None):
    """
    Get a calibrated GOES MCMIP image collection.

    Parameters
    ----------
    col_id : str
        A GOES MCMIP image collection ID, e.g. 'NOAA/GOES/16/MCMIPF'
        (see ``get_mcmip_col_id``).
    start_time : str
        Collection start date/time as UTC.
    end_time : str
        Collection end date/time as UTC (exclusive).
    params : dict, optional
        ``filterHours``: [start_hour, end_hour] UTC window applied to
        every day, e.g. [9, 22].
        ``step``: keep every n-th image of the series, e.g. 3. The last
        image of the series is dropped when sampling.

    Returns
    -------
    ee.ImageCollection
        Scaled images with a ``GREEN`` band and a ``col_id`` property.
    """
    _params = update_params(params, {
        'filterHours': None,
        'step': None,
    })
    filter_hours = validate_filter_hours(_params['filterHours'])
    step = validate_step(_params['step'])

    col = ee.ImageCollection(col_id).filterDate(ee.Date(start_time), end_time)
    if filter_hours:
        col = col.filter(ee.Filter.calendarRange(filter_hours[0], filter_hours[1], 'hour'))
    if step:
        col = ee.ImageCollection.fromImages(col.toList(col.size()).slice(0, -1, step))

    return (col
            .map(apply_scale_and_offset)
            .map(add_green_band)
            .map(lambda img: img.set({'col_id': col_id})))
