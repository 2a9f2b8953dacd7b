from .aggregator import ResultAggregator
from .config import load_config

__all__ = ['ResultAggregator', 'load_config']
