"""
Ordered series of timestamped sensor samples.

Sensor feeds do not arrive at a constant interval nor in order, so a Series
keeps every measurement next to its timestamp together with the time and
value difference from the preceding sample. ``complete()`` is the single
normalization entry point: call it after anything that changes membership or
order.
"""
import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from . import stats
from .errors import DegenerateSeriesError

logger = logging.getLogger(__name__)

# Marker for "no data" (empty resampling bucket). Never a measured value.
MISSING = None


@dataclass(frozen=True)
class Sample:
    """One timestamped measurement plus its derived deltas."""
    timestamp: datetime
    value: Optional[float]
    delta_time: timedelta = timedelta(0)
    delta_value: Optional[float] = 0.0
    origin: str = ''

    @property
    def is_missing(self) -> bool:
        return self.value is MISSING


@dataclass(frozen=True)
class SummaryStat:
    """Cached summary of a completed series."""
    count: int
    time_min: datetime
    time_max: datetime
    gap_mean: Optional[timedelta]
    gap_std: timedelta
    value_min: float
    value_max: float
    value_mean: float
    value_std: float


class Series:
    """A named, ordered collection of samples with cached summary statistics."""

    def __init__(self, description: str = '', samples: Optional[Iterable[Sample]] = None):
        self.description = description
        self.samples: List[Sample] = list(samples) if samples is not None else []
        self.summary: Optional[SummaryStat] = None

    def __len__(self):
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    def __repr__(self):
        return f"Series({self.description!r}, {len(self.samples)} samples)"

    def add(self, sample: Sample) -> None:
        """Append a sample; ordering is restored later by complete()."""
        self.samples.append(sample)

    def add_point(self, timestamp: datetime, value: Optional[float], origin: str = '') -> None:
        self.add(Sample(timestamp=timestamp, value=value, origin=origin))

    def reset(self) -> None:
        self.samples = []
        self.summary = None

    def copy(self, description: Optional[str] = None) -> 'Series':
        """Deep copy: the new series never shares its sample list."""
        new = Series(self.description if description is None else description, self.samples)
        new.summary = self.summary
        return new

    def sort_ascending(self) -> None:
        self.samples.sort(key=lambda s: s.timestamp)

    def sort_descending(self) -> None:
        # reverse=True keeps equal timestamps in their original relative order
        self.samples.sort(key=lambda s: s.timestamp, reverse=True)

    def sort_by_value(self) -> None:
        """Ascending by value, missing values last."""
        self.samples.sort(key=lambda s: (s.is_missing, s.value if not s.is_missing else 0.0))

    def extract_values(self) -> List[Optional[float]]:
        return [s.value for s in self.samples]

    def extract_timestamps(self) -> List[datetime]:
        return [s.timestamp for s in self.samples]

    def complete(self) -> None:
        """Sort chronologically, recompute every delta and the summary."""
        if len(self.samples) < 2:
            raise DegenerateSeriesError('complete', len(self.samples))
        self.sort_ascending()
        completed = [replace(self.samples[0], delta_time=timedelta(0), delta_value=0.0)]
        for previous, current in zip(self.samples, self.samples[1:]):
            if previous.is_missing or current.is_missing:
                delta_value = None
            else:
                delta_value = current.value - previous.value
            completed.append(replace(current,
                                     delta_time=current.timestamp - previous.timestamp,
                                     delta_value=delta_value))
        self.samples = completed
        self.compute_summary_stat()

    def compute_summary_stat(self) -> SummaryStat:
        """
        Recompute the cached summary from the current deltas and values.

        The gap mean sums the gaps of samples 1..n-1 and divides by n-2,
        whereas the gap standard deviation is the population figure over all
        n gaps (the first one being zero). The variance subtracts the square
        of its own mean, sum / n, and not the square of the n-2 gap mean:
        mixing both divisors in one formula can make the variance negative.
        The gap mean is None when n == 2.
        """
        count = len(self.samples)
        if count < 2:
            raise DegenerateSeriesError('summary statistics', count)

        gaps = [s.delta_time.total_seconds() for s in self.samples]
        gap_sum = sum(gaps[1:])
        gap_mean = timedelta(seconds=gap_sum / (count - 2)) if count > 2 else None
        gap_var = sum(g * g for g in gaps) / count - (sum(gaps) / count) ** 2
        gap_std = timedelta(seconds=math.sqrt(max(gap_var, 0.0)))

        values = stats.strip_missing(self.extract_values())
        value_mean, _ = stats.tmean(values)
        value_min, value_max = stats.bounds(values)
        timestamps = self.extract_timestamps()

        self.summary = SummaryStat(
            count=count,
            time_min=min(timestamps),
            time_max=max(timestamps),
            gap_mean=gap_mean,
            gap_std=gap_std,
            value_min=value_min,
            value_max=value_max,
            value_mean=value_mean,
            value_std=stats.std_dev(values, ddof=0),
        )
        return self.summary

    def remove_at(self, index: int) -> Sample:
        """Remove one sample by position, then restore chronological order."""
        removed = self.samples.pop(index)
        self.sort_ascending()
        return removed

    def to_frame(self) -> pd.DataFrame:
        """Tabular view for reporting and export; missing values become NaN."""
        return pd.DataFrame({
            'timestamp': pd.to_datetime(self.extract_timestamps()),
            'value': [float('nan') if s.is_missing else s.value for s in self.samples],
            'delta_time': pd.to_timedelta([s.delta_time for s in self.samples]),
            'delta_value': [float('nan') if s.delta_value is None else s.delta_value
                            for s in self.samples],
            'origin': [s.origin for s in self.samples],
        })

    @classmethod
    def from_frame(cls, data: pd.DataFrame, time_column: str = 'time',
                   value_column: str = 'value', description: str = '') -> 'Series':
        """Build a series from two DataFrame columns, NaN values become missing."""
        series = cls(description or value_column)
        timestamps = pd.to_datetime(data[time_column])
        for ts, value in zip(timestamps, data[value_column]):
            series.add_point(ts.to_pydatetime(), None if pd.isna(value) else float(value))
        return series


def merge(first: Series, second: Series, description: str = '') -> Series:
    """New series holding the samples of ``first`` followed by those of ``second``."""
    merged = Series(description or f"{first.description}+{second.description}")
    merged.samples = first.samples + second.samples
    return merged
