"""Retry strategies using Strategy Pattern."""
import asyncio
from abc import ABC, abstractmethod
from typing import Sequence

from .config import RetryConfig


class RetryStrategy(ABC):
    """Abstract retry strategy."""

    @abstractmethod
    def select_url(self, base_urls: Sequence[str], attempt: int) -> str:
        """Picks the endpoint for a given attempt."""
        pass

    @abstractmethod
    def should_retry(self, attempt: int, total_attempts: int) -> bool:
        """Determines if another attempt follows this one."""
        pass

    @abstractmethod
    async def wait_async(self, attempt: int):
        """Waits before the next attempt."""
        pass


class RoundRobinRetryStrategy(RetryStrategy):
    """Rotates through the endpoint pool with a fixed delay between attempts."""

    def __init__(self, config: RetryConfig):
        self._config = config

    def select_url(self, base_urls: Sequence[str], attempt: int) -> str:
        """Attempt N goes to base_urls[N % len(base_urls)]."""
        return base_urls[attempt % len(base_urls)]

    def should_retry(self, attempt: int, total_attempts: int) -> bool:
        """Every attempt but the last is followed by another."""
        return attempt < total_attempts - 1

    async def wait_async(self, attempt: int):
        """Sleeps the configured delay."""
        await asyncio.sleep(self._config.retry_delay)
