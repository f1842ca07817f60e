"""
Outlier trimming policies.

Every policy computes an inclusive [min, max] acceptance interval and moves
the samples outside of it to an audit series, tagged with the pass that
removed them.
"""

from .base import BaseTrimmer, TrimResult, slice_series
from .device_limit import DeviceLimitTrimmer
from .percentile import PercentileTrimmer
from .zscore import ZScoreTrimmer

__all__ = ['BaseTrimmer', 'TrimResult', 'slice_series', 'DeviceLimitTrimmer',
           'PercentileTrimmer', 'ZScoreTrimmer']
