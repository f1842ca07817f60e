from typing import Tuple
import logging

from .base import BaseTrimmer
from ..core import stats
from ..core.series import Series

logger = logging.getLogger(__name__)


class ZScoreTrimmer(BaseTrimmer):
    """
    Keep the values inside [(mean - std) * level, (mean + std) * level].

    The standard deviation is the sample estimate. Note that the level scales
    the whole bound, not only the deviation.
    """

    name = 'zscore'

    def __init__(self, level: float):
        self.level = level

    def compute_bounds(self, series: Series) -> Tuple[float, float]:
        values = stats.strip_missing(series.extract_values())
        mean, _ = stats.tmean(values)
        std = stats.std_dev(values, ddof=1)
        logger.debug(f"z-score statistics: mean={mean}, std={std}")
        return (mean - std) * self.level, (mean + std) * self.level

    def describe(self, lower: float, upper: float) -> str:
        return f"zScore at {self.level:.2f} ({lower:.2f},{upper:.2f})"
