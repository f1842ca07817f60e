import numpy as np
import pandas as pd
import logging

logger = logging.getLogger(__name__)


def validate_data(data: pd.DataFrame, time_column: str, value_column: str) -> bool:
    """Validate that a frame holds parseable timestamps and numeric readings."""
    try:
        missing_cols = {time_column, value_column} - set(data.columns)
        if missing_cols:
            raise ValueError(f"Missing required columns: {missing_cols}")

        if not pd.api.types.is_numeric_dtype(data[value_column]):
            raise ValueError(f"Column {value_column} must be numeric")

        if data[value_column].isin([np.inf, -np.inf]).any():
            raise ValueError("Data contains infinite values")

        timestamps = pd.to_datetime(data[time_column], errors='coerce')
        unparsed = int(timestamps.isna().sum())
        if unparsed:
            raise ValueError(f"Column {time_column} has {unparsed} unparseable timestamps")

        return True

    except Exception as e:
        logger.error(f"Data validation error: {e}")
        raise
