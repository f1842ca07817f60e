"""
Fixed-interval downsampling of a cleaned series.

Buckets are identified by their exclusive upper edge. The first edge is the
earliest timestamp rounded down to the frequency grid plus one interval.
Every bucket produces exactly one output sample: the aggregate of the samples
strictly before its edge, or a MISSING gap sample when the bucket is empty.
"""
import logging
from typing import Callable, Dict, List, Literal, Optional

from ..core import stats
from ..core.errors import DegenerateSeriesError, MalformedFrequencySpecError
from ..core.frequency import Frequency
from ..core.series import MISSING, Sample, Series

logger = logging.getLogger(__name__)

AggregationRule = Literal["avg", "max", "min", "last"]

GAP_ORIGIN = 'gap'

_AGGREGATORS: Dict[str, Callable[[List[float]], Optional[float]]] = {
    'avg': stats.mean,
    'max': lambda values: stats.bounds(values)[1],
    'min': lambda values: stats.bounds(values)[0],
    'last': lambda values: values[-1],
}


class Downsampler:
    """Resample a series onto a fixed time grid."""

    def __init__(self, frequency: str, rule: str = 'avg', strict: bool = False):
        """
        Args:
            frequency: bucket width, e.g. "30s", "5m", "2h", "1d"
            rule: aggregation rule, one of avg, max, min, last. Any other
                rule yields MISSING for every bucket.
            strict: reject frequency strings outside the grammar
        """
        self.frequency = Frequency.parse(frequency, strict=strict)
        self.rule = rule
        if rule not in _AGGREGATORS:
            logger.warning(f"Unknown aggregation rule {rule!r}, buckets will hold no data")

    def aggregate(self, values: List[float]) -> Optional[float]:
        aggregator = _AGGREGATORS.get(self.rule)
        if aggregator is None:
            return MISSING
        return aggregator(values)

    def resample(self, series: Series) -> Series:
        """
        Build the resampled series, leaving ``series`` untouched.

        Raises:
            DegenerateSeriesError: the series has no sample
            MalformedFrequencySpecError: the frequency does not advance time
        """
        if len(series) == 0:
            raise DegenerateSeriesError('downsampling', 0, required=1)
        if self.frequency.step.total_seconds() <= 0:
            raise MalformedFrequencySpecError(
                f"Frequency {self.frequency.spec!r} does not advance time"
            )

        source = series.copy()
        source.sort_ascending()
        samples = [s for s in source.samples if not s.is_missing]
        resampled = Series(f"{series.description} resampled {self.frequency} {self.rule}")
        if not samples:
            return resampled

        edge = self.frequency.advance(self.frequency.floor(samples[0].timestamp))
        logger.debug(f"Downsampling {len(samples)} samples from {samples[0].timestamp} "
                     f"to {samples[-1].timestamp}, first edge {edge}")

        i = 0
        while i < len(samples):
            bucket = []
            while i < len(samples) and samples[i].timestamp < edge:
                bucket.append(samples[i].value)
                i += 1

            if bucket:
                resampled.add(Sample(timestamp=edge, value=self.aggregate(bucket)))
            else:
                resampled.add(Sample(timestamp=edge, value=MISSING, origin=GAP_ORIGIN))
            edge = self.frequency.advance(edge)

            while i < len(samples) and samples[i].timestamp >= edge:
                resampled.add(Sample(timestamp=edge, value=MISSING, origin=GAP_ORIGIN))
                edge = self.frequency.advance(edge)

        gaps = sum(1 for s in resampled if s.is_missing)
        logger.info(f"Resampled {len(samples)} samples into {len(resampled)} buckets "
                    f"of {self.frequency} ({gaps} without data)")
        return resampled
