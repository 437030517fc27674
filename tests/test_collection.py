"""
Tests for MCMIP collection request construction
"""

from unittest.mock import MagicMock

import pytest

from GoesMapPy.cloud import collection
from GoesMapPy.core.formulas import green_expression

COL_ID = 'NOAA/GOES/16/MCMIPC'


@pytest.fixture
def mock_ee(mock_ee_factory):
    return mock_ee_factory('GoesMapPy.cloud.collection')


class TestGetMcmipCol:
    """Test cases for get_mcmip_col"""

    def test_base_collection(self, mock_ee):
        collection.get_mcmip_col(COL_ID, '2021-08-29T12:00', '2021-08-29T20:00')

        mock_ee.ImageCollection.assert_called_once_with(COL_ID)
        mock_ee.Date.assert_called_once_with('2021-08-29T12:00')
        base = mock_ee.ImageCollection.return_value
        base.filterDate.assert_called_once_with(mock_ee.Date.return_value, '2021-08-29T20:00')
        mock_ee.Filter.calendarRange.assert_not_called()
        mock_ee.ImageCollection.fromImages.assert_not_called()

    def test_maps_scale_green_and_col_id(self, mock_ee):
        result = collection.get_mcmip_col(COL_ID, '2021-08-29', '2021-08-30')

        col = mock_ee.ImageCollection.return_value.filterDate.return_value
        col.map.assert_called_once_with(collection.apply_scale_and_offset)
        col.map.return_value.map.assert_called_once_with(collection.add_green_band)

        set_col_id = col.map.return_value.map.return_value.map.call_args[0][0]
        img = MagicMock()
        set_col_id(img)
        img.set.assert_called_once_with({'col_id': COL_ID})
        assert result is col.map.return_value.map.return_value.map.return_value

    def test_filter_hours(self, mock_ee):
        collection.get_mcmip_col(COL_ID, '2021-08-29', '2021-08-30', {'filterHours': [9, 22]})

        mock_ee.Filter.calendarRange.assert_called_once_with(9, 22, 'hour')
        col = mock_ee.ImageCollection.return_value.filterDate.return_value
        col.filter.assert_called_once_with(mock_ee.Filter.calendarRange.return_value)

    def test_step(self, mock_ee):
        collection.get_mcmip_col(COL_ID, '2021-08-29', '2021-08-30', {'step': 3})

        col = mock_ee.ImageCollection.return_value.filterDate.return_value
        col.toList.assert_called_once_with(col.size.return_value)
        col.toList.return_value.slice.assert_called_once_with(0, -1, 3)
        mock_ee.ImageCollection.fromImages.assert_called_once_with(
            col.toList.return_value.slice.return_value
        )

    def test_falsy_options_ignored(self, mock_ee):
        collection.get_mcmip_col(COL_ID, '2021-08-29', '2021-08-30',
                                 {'filterHours': None, 'step': 0})
        mock_ee.Filter.calendarRange.assert_not_called()
        mock_ee.ImageCollection.fromImages.assert_not_called()

    def test_invalid_hours(self, mock_ee):
        with pytest.raises(ValueError):
            collection.get_mcmip_col(COL_ID, '2021-08-29', '2021-08-30', {'filterHours': [9, 30]})
        mock_ee.ImageCollection.assert_not_called()


def test_apply_scale_and_offset(mock_ee):
    img = mock_ee.Image.return_value

    result = collection.apply_scale_and_offset(MagicMock())

    img.select.assert_any_call('CMI_C..')
    selected = img.select.return_value
    selected.multiply.assert_called_once_with(mock_ee.Image.constant.return_value)
    img.addBands.assert_called_once_with(
        srcImg=selected.multiply.return_value.add.return_value, overwrite=True
    )
    assert result is img.addBands.return_value

    # Per-band scale and offset are read from image properties.
    names = selected.bandNames.return_value
    get_scale = names.map.call_args_list[0][0][0]
    get_offset = names.map.call_args_list[1][0][0]
    get_scale('CMI_C01')
    mock_ee.String.return_value.cat.assert_called_with('_scale')
    get_offset('CMI_C01')
    mock_ee.String.return_value.cat.assert_called_with('_offset')


def test_add_green_band(mock_ee):
    img = mock_ee.Image.return_value

    result = collection.add_green_band(MagicMock())

    img.expression.assert_called_once_with(green_expression())
    img.expression.return_value.select.assert_called_once_with('GREEN')
    img.addBands.assert_called_once_with(img.expression.return_value.select.return_value)
    assert result is img.addBands.return_value
