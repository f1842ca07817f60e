from datetime import datetime, timedelta, timezone

import pytest

from iot_timeseries.core.errors import MalformedFrequencySpecError
from iot_timeseries.core.frequency import (
    Frequency,
    add_duration_param,
    interpret_duration_param,
    rounded_start_time,
)


@pytest.mark.parametrize('spec, expected', [
    ('30s', (30, 's')),
    ('5m', (5, 'm')),
    ('2h', (2, 'h')),
    ('1d', (1, 'd')),
    ('abc', (0, 'c')),
    ('', (0, '')),
])
def test_interpret_duration_param(spec, expected):
    assert interpret_duration_param(spec) == expected


@pytest.mark.parametrize('spec', ['5x', 'm', '5', '', '1.5h'])
def test_strict_parsing_rejects_malformed_specs(spec):
    with pytest.raises(MalformedFrequencySpecError):
        interpret_duration_param(spec, strict=True)


def test_add_duration_param():
    start = datetime(2024, 1, 1, 12, 0, 0)
    assert add_duration_param(start, '30s') == datetime(2024, 1, 1, 12, 0, 30)
    assert add_duration_param(start, '5m') == datetime(2024, 1, 1, 12, 5)
    assert add_duration_param(start, '2h') == datetime(2024, 1, 1, 14, 0)
    assert add_duration_param(start, '1d') == datetime(2024, 1, 2, 12, 0)


def test_unknown_unit_leaves_timestamps_unchanged():
    start = datetime(2024, 1, 1, 12, 7, 31)
    assert add_duration_param(start, '5x') == start
    assert rounded_start_time(start, '5x') == start


def test_rounded_start_time_truncates_to_grid():
    ts = datetime(2024, 1, 1, 13, 37, 31)
    assert rounded_start_time(ts, '30s') == datetime(2024, 1, 1, 13, 37, 30)
    assert rounded_start_time(ts, '5m') == datetime(2024, 1, 1, 13, 35)
    assert rounded_start_time(ts, '2h') == datetime(2024, 1, 1, 12, 0)


def test_day_rounding_steps_back_instead_of_truncating():
    ts = datetime(2024, 1, 3, 13, 37, 31)
    assert rounded_start_time(ts, '2d') == ts - timedelta(days=2)


def test_rounding_aware_timestamps_keeps_timezone():
    tz = timezone(timedelta(hours=2))
    ts = datetime(2024, 1, 1, 13, 37, 31, tzinfo=tz)
    rounded = rounded_start_time(ts, '15m')
    assert rounded == datetime(2024, 1, 1, 13, 30, tzinfo=tz)
    assert rounded.utcoffset() == timedelta(hours=2)


def test_frequency_step_and_advance():
    freq = Frequency.parse('15m')
    assert freq.step == timedelta(minutes=15)
    assert str(freq) == '15m'
    assert freq.advance(datetime(2024, 1, 1)) == datetime(2024, 1, 1, 0, 15)
    assert Frequency.parse('5x').step == timedelta(0)
