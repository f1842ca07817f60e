from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime
import logging
from typing import Tuple

from ..core.errors import DegenerateSeriesError
from ..core.series import Series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimResult:
    """Outcome of one trimming pass."""
    lower: float
    upper: float
    low_count: int
    high_count: int
    kept: int
    cause: str

    @property
    def removed(self) -> int:
        return self.low_count + self.high_count


class BaseTrimmer(ABC):
    """Base class for outlier trimming policies."""

    name = 'base'

    @abstractmethod
    def compute_bounds(self, series: Series) -> Tuple[float, float]:
        """
        Compute the acceptance interval for the values of a series.

        Args:
            series: Series to be trimmed

        Returns:
            tuple: (min, max) inclusive bounds
        """
        pass

    @abstractmethod
    def describe(self, lower: float, upper: float) -> str:
        """Human readable pass description, without the execution time."""
        pass

    def cause(self, lower: float, upper: float) -> str:
        return f"{self.describe(lower, upper)} - {datetime.now().isoformat()}"

    def trim(self, cleaned: Series, rejected: Series) -> TrimResult:
        """
        Move every sample of ``cleaned`` outside its bounds into ``rejected``.

        Args:
            cleaned: Series trimmed in place
            rejected: Audit series the removed samples are appended to

        Returns:
            TrimResult: bounds and counts of the pass
        """
        lower, upper = self.compute_bounds(cleaned)
        return slice_series(cleaned, rejected, lower, upper, self.cause(lower, upper))


def slice_series(cleaned: Series, rejected: Series, lower: float, upper: float,
                 cause: str) -> TrimResult:
    """
    Remove the values below ``lower`` and above ``upper`` from ``cleaned``.

    Samples are sorted by value, low outliers are collected from the front and
    high outliers from the back. Survivors are the slice [low, len - high),
    which is restored to ``cleaned`` and completed. Missing values are never
    trimmed. Nothing is modified if fewer than two samples, or no measured
    value, would survive.
    """
    cleaned.sort_by_value()
    samples = [s for s in cleaned.samples if not s.is_missing]
    missing = cleaned.samples[len(samples):]
    length = len(samples)

    low_count = 0
    while low_count < length and samples[low_count].value < lower:
        low_count += 1
    high_count = 0
    while (length - high_count - 1 >= low_count
           and samples[length - high_count - 1].value > upper):
        high_count += 1

    present = samples[low_count:length - high_count]
    survivors = present + missing
    if len(survivors) < 2 or not present:
        cleaned.sort_ascending()
        raise DegenerateSeriesError(f"trimming to [{lower}, {upper}]", len(present))

    for sample in samples[:low_count]:
        rejected.add(replace(sample, origin=cause))
    for sample in reversed(samples[length - high_count:]):
        rejected.add(replace(sample, origin=cause))

    cleaned.samples = survivors
    cleaned.complete()
    logger.info(f"{cause}: removed {low_count} low and {high_count} high outliers, "
                f"{len(survivors)} samples kept")
    return TrimResult(lower=lower, upper=upper, low_count=low_count,
                      high_count=high_count, kept=len(survivors), cause=cause)
