from .base import SeriesStore
from .joblib_store import JoblibSeriesStore

__all__ = ['SeriesStore', 'JoblibSeriesStore']
