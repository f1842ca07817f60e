from .plotting import SeriesVisualizer

__all__ = ['SeriesVisualizer']
