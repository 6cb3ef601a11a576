"""Upload strategies."""
from .retry import RetryStrategy, ExponentialBackoffStrategy, TransferBudget

__all__ = [
    'RetryStrategy',
    'ExponentialBackoffStrategy',
    'TransferBudget',
]
