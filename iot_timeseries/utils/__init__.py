from .logger import setup_logger
from .validation import validate_data

__all__ = ['setup_logger', 'validate_data']
