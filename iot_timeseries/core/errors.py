class TimeSeriesError(Exception):
    """Base class for every error raised by the cleaning pipeline."""


class EmptyPopulationError(TimeSeriesError, ValueError):
    """A statistic was requested over zero usable observations."""


class DegenerateSeriesError(TimeSeriesError, ValueError):
    """A series is too short for the requested operation."""

    def __init__(self, operation: str, length: int, required: int = 2):
        self.operation = operation
        self.length = length
        self.required = required
        super().__init__(
            f"{operation} requires at least {required} samples, got {length}"
        )


class MalformedFrequencySpecError(TimeSeriesError, ValueError):
    """A frequency string does not match '<digits><s|m|h|d>'."""


class ExportError(TimeSeriesError, OSError):
    """Writing a series to its destination failed."""
