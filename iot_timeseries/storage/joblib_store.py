import logging
from pathlib import Path

import joblib

from .base import SeriesStore
from ..core.series import Series

logger = logging.getLogger(__name__)


class JoblibSeriesStore(SeriesStore):
    """Store each series as a joblib file under a base directory."""

    def __init__(self, base_dir: str):
        self.base_dir = Path(base_dir)

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{key}.joblib"

    def save_series(self, key: str, series: Series) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(series, path)
        logger.info(f"Series saved to {path}")

    def load_series(self, key: str) -> Series:
        path = self.path_for(key)
        if not path.exists():
            raise FileNotFoundError(f"No series found at {path}")

        series = joblib.load(path)
        logger.info(f"Series loaded from {path}")
        return series
