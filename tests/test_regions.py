"""
Tests for render region helpers
"""

from unittest.mock import patch

import geopandas as gpd
import pytest
from shapely.geometry import box

from GoesMapPy.cloud import regions


@pytest.fixture
def mock_ee(mock_ee_factory):
    return mock_ee_factory('GoesMapPy.cloud.regions')


def test_region_from_bbox(mock_ee):
    result = regions.region_from_bbox([-97, 24, -84, 33])
    mock_ee.Geometry.Rectangle.assert_called_once_with([-97.0, 24.0, -84.0, 33.0], None, False)
    assert result is mock_ee.Geometry.Rectangle.return_value


@pytest.mark.parametrize('bbox', [
    [-97, 24, -84],
    [-84, 24, -97, 33],
    [-97, 33, -84, 24],
    [-200, 24, -84, 33],
    [-97, 24, -84, 95],
    'somewhere',
])
def test_region_from_bbox_invalid(mock_ee, bbox):
    with pytest.raises(ValueError):
        regions.region_from_bbox(bbox)
    mock_ee.Geometry.Rectangle.assert_not_called()


def test_region_from_shapefile(tmp_path):
    shp = tmp_path / 'roi.shp'
    gdf = gpd.GeoDataFrame({'name': ['gulf']}, geometry=[box(-1.0e7, 2.8e6, -9.4e6, 3.9e6)],
                           crs='EPSG:3857')
    gdf.to_file(shp)

    with patch.object(regions.geemap, 'gdf_to_ee') as gdf_to_ee:
        result = regions.region_from_shapefile(str(shp))

    sent = gdf_to_ee.call_args[0][0]
    assert sent.crs.to_epsg() == 4326
    assert -90 < sent.total_bounds[0] < -80
    assert result is gdf_to_ee.return_value.geometry.return_value


def test_region_from_shapefile_conversion_error(tmp_path):
    shp = tmp_path / 'roi.shp'
    gpd.GeoDataFrame(geometry=[box(0, 0, 1, 1)], crs='EPSG:4326').to_file(shp)

    with patch.object(regions.geemap, 'gdf_to_ee', side_effect=Exception('bad geometry')):
        with pytest.raises(RuntimeError, match="bad geometry"):
            regions.region_from_shapefile(str(shp))


def test_region_from_shapefile_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        regions.region_from_shapefile(str(tmp_path / 'missing.shp'))
