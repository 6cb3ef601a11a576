"""Retry strategies for resumable transfers using Strategy Pattern."""
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ...config import RetryConfig


class RetryStrategy(ABC):
    """Abstract delay strategy between transfer retries."""

    @abstractmethod
    def wait(self, retry_count: int) -> None:
        """Waits before the given retry (0-based)."""
        pass


class ExponentialBackoffStrategy(RetryStrategy):
    """Exponential backoff driven by RetryConfig; no delay when base_delay is 0."""

    def __init__(self, config: Optional[RetryConfig] = None, sleep: Callable[[float], None] = time.sleep):
        self.config = config or RetryConfig()
        self._sleep = sleep

    def wait(self, retry_count: int) -> None:
        delay = self.config.calculate_delay(retry_count)
        if delay > 0:
            self._sleep(delay)


class TransferBudget:
    """
    Bounded retry budget for one chunk.

    The last remaining attempt is made with ``allow_throw`` so its failure
    propagates. Progress on a new chunk restores the full budget.
    """

    def __init__(self, max_tries: int):
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {max_tries}")
        self.max_tries = max_tries
        self.remaining = max_tries

    @property
    def allow_throw(self) -> bool:
        return self.remaining <= 1

    @property
    def retries(self) -> int:
        return self.max_tries - self.remaining

    def consume(self) -> None:
        self.remaining -= 1

    def reset(self) -> None:
        self.remaining = self.max_tries
