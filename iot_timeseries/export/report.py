"""Tabular views of a series and of its summary statistics."""
from typing import Optional

import pandas as pd

from ..core.series import Series, SummaryStat


def series_table(series: Series, start: int = 0, stop: Optional[int] = None) -> pd.DataFrame:
    """Rows ``start`` to ``stop`` (exclusive) with index, time, value and deltas."""
    frame = series.to_frame().iloc[start:stop]
    frame.index.name = 'index'
    return frame[['timestamp', 'value', 'delta_time', 'delta_value']]


def summary_table(stat: SummaryStat) -> pd.DataFrame:
    """Time and value statistics side by side, one row per statistic."""
    return pd.DataFrame(
        {
            'time': [stat.count, stat.gap_mean, stat.time_min, stat.time_max, stat.gap_std],
            'value': [stat.count, stat.value_mean, stat.value_min, stat.value_max, stat.value_std],
        },
        index=['count', 'mean', 'min', 'max', 'std'],
    )


def render_series(series: Series, start: int = 0, stop: Optional[int] = None) -> str:
    return f"{series.description}\n{series_table(series, start, stop).to_string()}"


def render_summary(stat: SummaryStat) -> str:
    return summary_table(stat).to_string()
