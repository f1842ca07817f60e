from typing import Tuple

from .base import BaseTrimmer
from ..core import stats
from ..core.series import Series


class PercentileTrimmer(BaseTrimmer):
    """Keep the values between the p and 1-p quantiles."""

    name = 'percentile'

    def __init__(self, percentile: float):
        if not 0.0 < percentile < 0.5:
            raise ValueError(f"Percentile must lie in (0, 0.5), got {percentile}")
        self.percentile = percentile

    def compute_bounds(self, series: Series) -> Tuple[float, float]:
        values = stats.strip_missing(series.extract_values())
        return (stats.quantile(self.percentile, values),
                stats.quantile(1 - self.percentile, values))

    def describe(self, lower: float, upper: float) -> str:
        return f"Percentile {self.percentile:.2f} ({lower:.2f},{upper:.2f})"
