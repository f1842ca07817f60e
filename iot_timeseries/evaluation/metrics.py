from typing import Dict
import logging

from ..core.series import Series

logger = logging.getLogger(__name__)


def _value_stats(series: Series) -> Dict[str, float]:
    summary = series.summary or series.compute_summary_stat()
    return {
        'count': summary.count,
        'mean': round(summary.value_mean, 5),
        'std': round(summary.value_std, 5),
        'min': round(summary.value_min, 5),
        'max': round(summary.value_max, 5),
    }


def evaluate_cleaning(original: Series, cleaned: Series, method_name: str) -> Dict:
    """
    Compare summary statistics between the original and the cleaned series.

    Args:
        original: Series before cleaning.
        cleaned: Series after cleaning.
        method_name: Name of the cleaning passes.

    Returns:
        Dict: original and cleaned statistics with their differences.
    """
    try:
        original_stats = _value_stats(original)
        cleaned_stats = _value_stats(cleaned)
        differences = {
            'removed': original_stats['count'] - cleaned_stats['count'],
            'mean_diff': round(abs(cleaned_stats['mean'] - original_stats['mean']), 5),
            'std_diff': round(abs(cleaned_stats['std'] - original_stats['std']), 5),
        }
        metrics = {
            'original': original_stats,
            'cleaned': cleaned_stats,
            'differences': differences,
        }

        logger.info(f"Summary statistics comparison for {method_name}")
        logger.info(metrics)
        return metrics

    except Exception as e:
        logger.error(f"Error during evaluation: {e}")
        raise
