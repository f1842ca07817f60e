import pandas as pd
import numpy as np
import logging
from typing import Optional

from ..core.series import Series
from ..utils.validation import validate_data

logger = logging.getLogger(__name__)


class DataLoader:
    """Handle sensor data loading and conversion to a Series."""

    @staticmethod
    def load_data(file_path: str) -> pd.DataFrame:
        """
        Load data from CSV file.

        Args:
            file_path: Path to the CSV file

        Returns:
            pd.DataFrame: Loaded data
        """
        try:
            logger.info(f"Loading data from {file_path}")
            data = pd.read_csv(file_path)
            return data
        except Exception as e:
            logger.error(f"Error loading data: {e}")
            raise

    @staticmethod
    def preprocess_data(data: pd.DataFrame,
                        value_column: str,
                        invalid_value: Optional[float] = None) -> pd.DataFrame:
        """
        Replace the device invalid value with NaN and drop the unusable rows.

        Args:
            data: Input DataFrame
            value_column: Column holding the sensor readings
            invalid_value: Value the device reports when it has no reading,
                None when every numeric reading is genuine

        Returns:
            pd.DataFrame: Preprocessed data
        """
        try:
            data = data.copy()
            if invalid_value is not None:
                data[value_column] = data[value_column].replace(invalid_value, np.nan)
            dropped = int(data[value_column].isna().sum())
            data = data.dropna(subset=[value_column])
            logger.info(f"Preprocessing completed. Dropped {dropped} rows without a {value_column} reading")
            return data
        except Exception as e:
            logger.error(f"Error preprocessing data: {e}")
            raise

    @classmethod
    def to_series(cls, data: pd.DataFrame, time_column: str = 'time',
                  value_column: str = 'value', invalid_value: Optional[float] = None,
                  description: str = '') -> Series:
        """Validate, clean and convert a frame into an unordered Series."""
        validate_data(data, time_column, value_column)
        data = cls.preprocess_data(data, value_column, invalid_value)
        series = Series.from_frame(data, time_column, value_column, description or value_column)
        logger.info(f"Built series {series.description!r} with {len(series)} samples")
        return series

    @classmethod
    def load_series(cls, file_path: str, time_column: str = 'time',
                    value_column: str = 'value', invalid_value: Optional[float] = None) -> Series:
        return cls.to_series(cls.load_data(file_path), time_column, value_column, invalid_value)
