"""
Cleaning and resampling of irregularly sampled IoT sensor series.

Raw readings are ingested into a TsContainer, trimmed of outliers by
percentile, z-score or device limits, and downsampled onto a fixed grid.
"""

from .container import TsContainer
from .core import (
    MISSING,
    DegenerateSeriesError,
    EmptyPopulationError,
    ExportError,
    Frequency,
    MalformedFrequencySpecError,
    Sample,
    Series,
    SummaryStat,
    TimeSeriesError,
    merge,
)
from .resampling import Downsampler
from .trimming import DeviceLimitTrimmer, PercentileTrimmer, TrimResult, ZScoreTrimmer

__version__ = '0.1.0'

__all__ = [
    'TsContainer', 'MISSING', 'DegenerateSeriesError', 'EmptyPopulationError',
    'ExportError', 'Frequency', 'MalformedFrequencySpecError', 'Sample', 'Series',
    'SummaryStat', 'TimeSeriesError', 'merge', 'Downsampler', 'DeviceLimitTrimmer',
    'PercentileTrimmer', 'TrimResult', 'ZScoreTrimmer',
]
