from .downsampler import AggregationRule, Downsampler, GAP_ORIGIN

__all__ = ['AggregationRule', 'Downsampler', 'GAP_ORIGIN']
