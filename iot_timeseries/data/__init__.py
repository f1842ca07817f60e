from .loader import DataLoader

__all__ = ['DataLoader']
