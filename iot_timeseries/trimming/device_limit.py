from typing import Tuple

from .base import BaseTrimmer
from ..core.series import Series


class DeviceLimitTrimmer(BaseTrimmer):
    """Drop values outside the physical range of the sensor."""

    name = 'device_limits'

    def __init__(self, minimum: float, maximum: float):
        if minimum > maximum:
            raise ValueError(f"Device minimum {minimum} is above maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum

    def compute_bounds(self, series: Series) -> Tuple[float, float]:
        return self.minimum, self.maximum

    def describe(self, lower: float, upper: float) -> str:
        return f"DeviceLimit ({lower:.2f},{upper:.2f})"
