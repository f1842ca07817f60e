"""
Container tracking one sensor feed through cleaning and resampling.

The original series is never transformed. Cleaning passes are applied to the
cleaned series in place, so several passes compose on each other, and every
removed sample is appended to the rejected series with the pass that removed
it. The resampled series is rebuilt on every downsampling call.
"""
import logging
import threading
from typing import List, Optional

from .core.series import Series
from .resampling.downsampler import Downsampler
from .trimming import (
    BaseTrimmer,
    DeviceLimitTrimmer,
    PercentileTrimmer,
    TrimResult,
    ZScoreTrimmer,
    slice_series,
)

logger = logging.getLogger(__name__)


class TsContainer:
    """Original, Cleaned, Resampled and Rejected series of one feed."""

    def __init__(self, original: Series, clear_rejected_on_reset: bool = False):
        """
        Args:
            original: raw series, copied and completed on ingestion
            clear_rejected_on_reset: also drop the rejection history when the
                cleaned series is reset. By default the audit log persists.
        """
        self._original = original.copy()
        self._original.complete()
        self.cleaned = self._original.copy(f"{original.description} cleaned")
        self.resampled = Series(f"{original.description} resampled")
        self.rejected = Series(f"{original.description} rejected")
        self.clear_rejected_on_reset = clear_rejected_on_reset
        self.history: List[TrimResult] = []
        # One writer at a time: passes read and overwrite the same cleaned series
        self._lock = threading.RLock()
        logger.info(f"Ingested {len(self._original)} samples for {original.description!r}")

    @property
    def original(self) -> Series:
        """Copy of the ingested series; the stored one is never mutated."""
        return self._original.copy()

    def apply(self, trimmer: BaseTrimmer) -> TrimResult:
        """Run one trimming pass on the cleaned series."""
        with self._lock:
            result = trimmer.trim(self.cleaned, self.rejected)
            self.history.append(result)
            return result

    def percentile_cleaning(self, percentile: float) -> TrimResult:
        return self.apply(PercentileTrimmer(percentile))

    def zscore_cleaning(self, level: float) -> TrimResult:
        return self.apply(ZScoreTrimmer(level))

    def device_limits_cleaning(self, minimum: float, maximum: float) -> TrimResult:
        return self.apply(DeviceLimitTrimmer(minimum, maximum))

    def slice_cleaned(self, minimum: float, maximum: float, cause: str) -> TrimResult:
        """Trim the cleaned series to [minimum, maximum] tagging removals with ``cause``."""
        with self._lock:
            result = slice_series(self.cleaned, self.rejected, minimum, maximum, cause)
            self.history.append(result)
            return result

    def downsampling(self, frequency: str, rule: str = 'avg', strict: bool = False) -> Series:
        """Rebuild the resampled series from the cleaned one and return it."""
        with self._lock:
            self.resampled.reset()
            result = Downsampler(frequency, rule, strict=strict).resample(self.cleaned)
            self.resampled.samples = result.samples
            self.resampled.description = result.description
            return self.resampled

    def reset_cleaned_series(self, clear_rejected: Optional[bool] = None) -> None:
        """
        Drop the resampled series and start cleaning again from the original.

        Args:
            clear_rejected: override ``clear_rejected_on_reset`` for this call
        """
        if clear_rejected is None:
            clear_rejected = self.clear_rejected_on_reset
        with self._lock:
            self.resampled.reset()
            self.cleaned = self._original.copy(self.cleaned.description)
            if clear_rejected:
                self.rejected.reset()
                self.history = []
            logger.info(f"Reset cleaned series of {self._original.description!r} "
                        f"({len(self.rejected)} rejected samples kept)")
