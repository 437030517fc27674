"""
Render Regions
==============

Build the Earth Engine geometry that frames an animation, either from a
longitude/latitude bounding box or from a shapefile.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import os

import ee
import geemap
import geopandas as gpd


def region_from_bbox(bbox):
    """
    Return a planar rectangle for ``[west, south, east, north]`` in degrees.

    Raises
    ------
    ValueError
        If the box does not have four numbers or its bounds are inverted
        or outside valid longitude/latitude.
    """
    try:
        west, south, east, north = (float(v) for v in bbox)
    except (TypeError, ValueError):
        raise ValueError(f"bbox must be [west, south, east, north], got {bbox!r}")

    if not (-180 <= west < east <= 180):
        raise ValueError(f"Invalid longitude bounds: west={west}, east={east}")
    if not (-90 <= south < north <= 90):
        raise ValueError(f"Invalid latitude bounds: south={south}, north={north}")

    return ee.Geometry.Rectangle([west, south, east, north], None, False)


def region_from_shapefile(shapefile_path):
    """
    Convert a shapefile into an Earth Engine geometry.

    The features are reprojected to EPSG:4326 (required by geemap) and
    their union is returned.
    """
    if not os.path.exists(shapefile_path):
        raise FileNotFoundError(f"Shapefile not found: {shapefile_path}")

    roi = gpd.read_file(shapefile_path)
    if roi.empty:
        raise ValueError(f"Shapefile has no features: {shapefile_path}")
    if roi.crs is not None and roi.crs.to_string() != "EPSG:4326":
        roi = roi.to_crs("EPSG:4326")

    try:
        fc = geemap.gdf_to_ee(roi)
    except Exception as e:
        raise RuntimeError(
            f"Failed to convert shapefile to Earth Engine geometry. "
            f"Please check if the shapefile '{shapefile_path}' is valid. "
            f"Error: {e}"
        ) from e

    return fc.geometry()
