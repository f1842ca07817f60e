import numpy as np
import pandas as pd
import pytest

from iot_timeseries.data.loader import DataLoader
from iot_timeseries.utils.validation import validate_data


@pytest.fixture
def sensor_csv(tmp_path):
    frame = pd.DataFrame({
        'time': ['2024-01-01 12:02:00', '2024-01-01 12:00:00', '2024-01-01 12:01:00', '2024-01-01 12:03:00'],
        'temperature': [21.0, 20.0, -1, 22.5],
        'humidity': [40.0, 41.0, 42.0, 43.0],
    })
    path = tmp_path / 'zone_1.csv'
    frame.to_csv(path, index=False)
    return path


def test_load_series_drops_invalid_readings(sensor_csv):
    series = DataLoader.load_series(str(sensor_csv), 'time', 'temperature', invalid_value=-1)

    assert series.description == 'temperature'
    assert series.extract_values() == [21.0, 20.0, 22.5]


def test_default_keeps_every_numeric_reading(sensor_csv):
    series = DataLoader.load_series(str(sensor_csv), 'time', 'temperature')
    assert series.extract_values() == [21.0, 20.0, -1.0, 22.5]


def test_missing_value_column_is_reported_before_preprocessing(sensor_csv):
    with pytest.raises(ValueError, match='Missing required columns'):
        DataLoader.load_series(str(sensor_csv), 'time', 'pressure', invalid_value=-1)


def test_custom_invalid_value(sensor_csv):
    series = DataLoader.load_series(str(sensor_csv), 'time', 'humidity', invalid_value=42.0)
    assert len(series) == 3


def test_load_data_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DataLoader.load_data(str(tmp_path / 'nope.csv'))


def test_validate_data_requires_columns():
    with pytest.raises(ValueError, match='Missing required columns'):
        validate_data(pd.DataFrame({'time': []}), 'time', 'temperature')


def test_validate_data_rejects_infinite_values():
    frame = pd.DataFrame({'time': ['2024-01-01'], 'temperature': [np.inf]})
    with pytest.raises(ValueError, match='infinite'):
        validate_data(frame, 'time', 'temperature')


def test_validate_data_rejects_non_numeric_values():
    frame = pd.DataFrame({'time': ['2024-01-01'], 'temperature': ['warm']})
    with pytest.raises(ValueError, match='numeric'):
        validate_data(frame, 'time', 'temperature')


def test_validate_data_rejects_bad_timestamps():
    frame = pd.DataFrame({'time': ['2024-01-01', 'not a date'], 'temperature': [1.0, 2.0]})
    with pytest.raises(ValueError, match='unparseable'):
        validate_data(frame, 'time', 'temperature')
