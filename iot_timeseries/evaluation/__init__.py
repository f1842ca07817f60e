from .metrics import evaluate_cleaning

__all__ = ['evaluate_cleaning']
