"""
Statistics helpers working on plain value sequences extracted from a Series.

Missing observations are represented by ``None`` (see ``series.MISSING``) and
are skipped wherever a helper would otherwise treat them as a number.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import EmptyPopulationError

logger = logging.getLogger(__name__)


def strip_missing(values: Iterable[Optional[float]]) -> List[float]:
    """Drop missing entries, keep the order of the remaining ones."""
    return [v for v in values if v is not None]


def mean(values: Sequence[float]) -> Optional[float]:
    """Running mean, ``None`` for an empty sequence."""
    if len(values) == 0:
        return None
    m = 0.0
    for i, x in enumerate(values):
        m += (x - m) / (i + 1)
    return m


def tmean(values: Iterable[Optional[float]]) -> Tuple[float, int]:
    """
    Mean over the non-missing observations.

    Returns:
        tuple: (mean, number of observations used)

    Raises:
        EmptyPopulationError: every observation is missing
    """
    present = strip_missing(values)
    if not present:
        raise EmptyPopulationError("Population is empty")
    return float(np.sum(present)) / len(present), len(present)


def bounds(values: Sequence[float]) -> Tuple[Optional[float], Optional[float]]:
    if len(values) == 0:
        return None, None
    return min(values), max(values)


def quantile(p: float, values: Sequence[float]) -> float:
    """Linear-interpolation quantile of ``values`` (order does not matter)."""
    if len(values) == 0:
        raise EmptyPopulationError("Cannot compute a quantile of an empty population")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Quantile level must lie in [0, 1], got {p}")
    return float(np.quantile(np.asarray(values, dtype=float), p))


def std_dev(values: Sequence[float], ddof: int = 0) -> float:
    """Standard deviation, population (ddof=0) or sample (ddof=1)."""
    if len(values) <= ddof:
        raise EmptyPopulationError(
            f"Standard deviation with ddof={ddof} needs more than {ddof} values, got {len(values)}"
        )
    return float(np.std(np.asarray(values, dtype=float), ddof=ddof))


def variance(values: Sequence[float], ddof: int = 0) -> float:
    return std_dev(values, ddof) ** 2
