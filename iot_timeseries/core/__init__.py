from .errors import (
    DegenerateSeriesError,
    EmptyPopulationError,
    ExportError,
    MalformedFrequencySpecError,
    TimeSeriesError,
)
from .frequency import Frequency
from .series import MISSING, Sample, Series, SummaryStat, merge

__all__ = [
    'DegenerateSeriesError', 'EmptyPopulationError', 'ExportError',
    'MalformedFrequencySpecError', 'TimeSeriesError', 'Frequency',
    'MISSING', 'Sample', 'Series', 'SummaryStat', 'merge',
]
