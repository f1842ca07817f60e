import threading

import pytest

from iot_timeseries.container import TsContainer
from iot_timeseries.core.errors import DegenerateSeriesError
from iot_timeseries.core.series import Sample, Series


@pytest.fixture
def container(make_series):
    values = [20.0, 21.0, 19.5, 80.0, 20.5, 22.0, -40.0, 21.5, 20.0, 19.0,
              20.2, 20.8, 21.1, 19.9, 55.0, 20.4, 20.6, 21.3, 19.7, 20.1]
    return TsContainer(make_series([(i * 30, v) for i, v in enumerate(values)], 'zone_1'))


def test_ingestion_completes_a_copy(make_series):
    raw = make_series([(60, 2.0), (0, 1.0), (30, 3.0)])
    container = TsContainer(raw)

    assert container.original.extract_values() == [1.0, 3.0, 2.0]
    assert container.original.summary.count == 3
    assert raw.extract_values() == [2.0, 1.0, 3.0]


def test_ingestion_of_a_single_sample_is_rejected(make_series):
    with pytest.raises(DegenerateSeriesError):
        TsContainer(make_series([(0, 1.0)]))


def test_cleaned_starts_equal_to_original(container):
    assert container.cleaned.samples == container.original.samples
    assert len(container.rejected) == 0
    assert len(container.resampled) == 0


def test_original_is_never_mutated(container, make_series, t0):
    before = container.original.samples
    container.device_limits_cleaning(-20.0, 60.0)
    container.zscore_cleaning(1.0)
    container.cleaned.add(Sample(timestamp=t0, value=1000.0))
    container.original.add(Sample(timestamp=t0, value=1000.0))

    assert container.original.samples == before


def test_passes_compose_on_the_cleaned_series(container):
    first = container.device_limits_cleaning(-20.0, 60.0)
    assert first.removed == 2
    assert len(container.cleaned) == 18

    second = container.percentile_cleaning(0.1)
    assert len(container.cleaned) == 18 - second.removed
    assert len(container.rejected) == first.removed + second.removed
    assert [r.cause for r in container.history] == [first.cause, second.cause]


def test_zscore_twice_is_monotonic(container):
    container.zscore_cleaning(1.0)
    kept_after_first = len(container.cleaned)
    rejected_after_first = len(container.rejected)

    second = container.zscore_cleaning(1.0)

    assert len(container.cleaned) <= kept_after_first
    assert len(container.rejected) == rejected_after_first + second.removed


def test_rejected_is_an_audit_log(container):
    container.device_limits_cleaning(-20.0, 60.0)
    container.slice_cleaned(19.5, 21.5, 'manual review')

    causes = [s.origin for s in container.rejected]
    assert sum(c.startswith('DeviceLimit') for c in causes) == 2
    assert all(c == 'manual review' for c in causes[2:])
    assert sorted(s.value for s in container.rejected[:2]) == [-40.0, 80.0]


def test_downsampling_is_rebuilt_on_every_call(container):
    first = len(container.downsampling('1m', 'avg'))
    second = len(container.downsampling('1m', 'avg'))
    assert first == second == 10

    assert len(container.downsampling('5m', 'max')) == 2


def test_downsampling_reads_the_cleaned_series(container):
    container.device_limits_cleaning(-20.0, 50.0)
    resampled = container.downsampling('10m', 'max')
    assert resampled[0].value == 22.0


def test_reset_restores_cleaned_and_keeps_rejected(container):
    container.device_limits_cleaning(-20.0, 60.0)
    container.downsampling('1m')
    rejected = list(container.rejected.samples)

    container.reset_cleaned_series()

    assert container.cleaned.samples == container.original.samples
    assert len(container.resampled) == 0
    assert container.rejected.samples == rejected


def test_reset_can_clear_the_audit_log(make_series, container):
    container.device_limits_cleaning(-20.0, 60.0)
    container.reset_cleaned_series(clear_rejected=True)
    assert len(container.rejected) == 0
    assert container.history == []

    other = TsContainer(make_series([(0, 1.0), (1, 2.0), (2, 50.0)]), clear_rejected_on_reset=True)
    other.device_limits_cleaning(0.0, 10.0)
    other.reset_cleaned_series()
    assert len(other.rejected) == 0
    assert len(other.cleaned) == 3


def test_reset_cleaned_is_independent_of_original(container, t0):
    container.reset_cleaned_series()
    container.cleaned.add(Sample(timestamp=t0, value=-1.0))
    assert len(container.original) == 20


def test_concurrent_passes_are_serialized(make_series):
    series = make_series([(i, float(i % 50)) for i in range(1000)])
    container = TsContainer(series)
    limits = [(1.0, 48.0), (2.0, 47.0), (3.0, 46.0), (4.0, 45.0)]
    threads = [threading.Thread(target=container.device_limits_cleaning, args=lim) for lim in limits]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(container.cleaned) + len(container.rejected) == 1000
    assert set(container.cleaned.extract_values()) == {float(v) for v in range(4, 46)}


def test_failed_pass_leaves_no_trace(make_series):
    container = TsContainer(make_series([(0, 1.0), (1, None), (2, None), (3, 5.0)]))
    before = container.cleaned.samples

    with pytest.raises(DegenerateSeriesError):
        container.device_limits_cleaning(100.0, 200.0)

    assert container.cleaned.samples == before
    assert len(container.rejected) == 0
    assert container.history == []
