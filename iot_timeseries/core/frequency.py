"""
Frequency specifications such as ``"30s"``, ``"5m"``, ``"2h"`` or ``"1d"``.

Parsing is permissive by default: a magnitude that is not a number reads as
zero and an unknown unit letter leaves timestamps unchanged. Pass
``strict=True`` to get a MalformedFrequencySpecError instead.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

from .errors import MalformedFrequencySpecError

logger = logging.getLogger(__name__)

_UNITS = {
    's': timedelta(seconds=1),
    'm': timedelta(minutes=1),
    'h': timedelta(hours=1),
    'd': timedelta(days=1),
}
_FREQUENCY_PATTERN = re.compile(r'^(\d+)([smhd])$')

# Truncation is counted from the first instant of year 1, like the grid
# used by most time libraries for absolute instants.
_ORIGIN_NAIVE = datetime(1, 1, 1)
_ORIGIN_UTC = datetime(1, 1, 1, tzinfo=timezone.utc)


def interpret_duration_param(freq_spec: str, strict: bool = False) -> Tuple[int, str]:
    """
    Split a frequency string into its magnitude and unit letter.

    Args:
        freq_spec: frequency string, e.g. "15m"
        strict: raise on anything that is not '<digits><s|m|h|d>'

    Returns:
        tuple: (magnitude, unit)
    """
    if strict and not _FREQUENCY_PATTERN.match(freq_spec or ''):
        raise MalformedFrequencySpecError(
            f"Frequency must be digits followed by one of s, m, h, d, got {freq_spec!r}"
        )
    if not freq_spec:
        return 0, ''
    magnitude, unit = freq_spec[:-1], freq_spec[-1:]
    try:
        return int(magnitude), unit
    except ValueError:
        logger.debug(f"Unparsable frequency magnitude in {freq_spec!r}, using 0")
        return 0, unit


def add_duration_param(start: datetime, freq_spec: str) -> datetime:
    """Advance ``start`` by one interval; unknown units return it unchanged."""
    magnitude, unit = interpret_duration_param(freq_spec)
    if unit not in _UNITS:
        return start
    return start + _UNITS[unit] * magnitude


def rounded_start_time(ts: datetime, freq_spec: str) -> datetime:
    """
    Round ``ts`` down to the frequency grid.

    Day frequencies do not truncate to midnight: they step ``magnitude`` days
    back instead, so that adding one interval lands back on ``ts``.
    """
    magnitude, unit = interpret_duration_param(freq_spec)
    if unit == 'd':
        return ts - timedelta(days=magnitude)
    if unit not in _UNITS or magnitude <= 0:
        return ts
    return _truncate(ts, _UNITS[unit] * magnitude)


def _truncate(ts: datetime, step: timedelta) -> datetime:
    if ts.tzinfo is None:
        return ts - (ts - _ORIGIN_NAIVE) % step
    floored = ts - (ts - _ORIGIN_UTC) % step
    return floored.astimezone(ts.tzinfo)


@dataclass(frozen=True)
class Frequency:
    """A parsed frequency specification."""
    magnitude: int
    unit: str

    @classmethod
    def parse(cls, freq_spec: str, strict: bool = False) -> 'Frequency':
        magnitude, unit = interpret_duration_param(freq_spec, strict=strict)
        return cls(magnitude, unit)

    @property
    def spec(self) -> str:
        return f"{self.magnitude}{self.unit}"

    @property
    def step(self) -> timedelta:
        """Interval width, zero when advancing would be a no-op."""
        if self.unit not in _UNITS:
            return timedelta(0)
        return _UNITS[self.unit] * self.magnitude

    def floor(self, ts: datetime) -> datetime:
        return rounded_start_time(ts, self.spec)

    def advance(self, ts: datetime) -> datetime:
        return add_duration_param(ts, self.spec)

    def __str__(self):
        return self.spec
