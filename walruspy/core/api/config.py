"""
API configuration module.

Provides configuration for the Walrus HTTP client: endpoint pools,
retry policy, timeouts and upload limits.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List

from .endpoints import DEFAULT_TESTNET_AGGREGATORS, DEFAULT_TESTNET_PUBLISHERS


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Granular control over different timeout types.
    """
    total: float = 300.0  # Total request timeout
    connect: float = 30.0  # Connection timeout
    sock_read: float = 60.0  # Socket read timeout

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class RetryConfig:
    """
    Retry configuration.

    Every attempt goes to the next endpoint in the pool; the client
    sleeps retry_delay seconds between attempts.
    """
    max_retries: int = 5
    retry_delay: float = 0.5

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1


@dataclass
class ClientConfig:
    """
    Complete client configuration.

    Centralizes all configuration options for the Walrus client.
    """
    # Endpoint pools
    aggregator_urls: List[str] = field(default_factory=lambda: list(DEFAULT_TESTNET_AGGREGATORS))
    publisher_urls: List[str] = field(default_factory=lambda: list(DEFAULT_TESTNET_PUBLISHERS))

    # Sub-configurations
    retry: RetryConfig = field(default_factory=RetryConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Maximum upload size when the content length is unknown (5 MiB)
    max_unknown_length_upload_size: int = 5 * 1024 * 1024

    # User agent
    user_agent: str = 'walruspy/1.0.0'

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> 'ClientConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def testnet(cls, **kwargs) -> 'ClientConfig':
        """Create configuration pointing at the public testnet endpoints."""
        return cls(**kwargs)

    @classmethod
    def with_endpoints(
        cls,
        aggregator_urls: List[str],
        publisher_urls: List[str],
        **kwargs
    ) -> 'ClientConfig':
        """Create configuration for custom endpoints."""
        return cls(
            aggregator_urls=list(aggregator_urls),
            publisher_urls=list(publisher_urls),
            **kwargs
        )

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
