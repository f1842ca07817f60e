from datetime import datetime, timedelta

import pytest

from iot_timeseries.core.series import Series


T0 = datetime(2024, 1, 1, 12, 0, 0)


def build_series(points, description='sensor'):
    """Series from (seconds after T0, value) pairs, in the given order."""
    series = Series(description)
    for offset, value in points:
        series.add_point(T0 + timedelta(seconds=offset), value)
    return series


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def make_series():
    return build_series


@pytest.fixture
def ramp_series():
    """Values 1..20, one per minute, delivered out of order."""
    points = [(60 * i, float(i + 1)) for i in range(20)]
    return build_series(points[10:] + points[:10], 'ramp')
