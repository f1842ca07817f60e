from abc import ABC, abstractmethod

from ..core.series import Series


class SeriesStore(ABC):
    """Persistence collaborator: the cleaning pipeline never calls it itself."""

    @abstractmethod
    def save_series(self, key: str, series: Series) -> None:
        """Persist ``series`` under ``key``, replacing any previous one"""
        pass

    @abstractmethod
    def load_series(self, key: str) -> Series:
        """Load the series stored under ``key``"""
        pass
