from .report import render_series, render_summary, series_table, summary_table
from .text_export import output_to_csv, output_to_txt

__all__ = ['render_series', 'render_summary', 'series_table', 'summary_table',
           'output_to_csv', 'output_to_txt']
