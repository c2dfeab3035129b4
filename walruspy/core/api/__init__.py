"""Walrus HTTP API module."""
from .config import ClientConfig, RetryConfig, TimeoutConfig
from .endpoints import (
    DEFAULT_TESTNET_AGGREGATORS,
    DEFAULT_TESTNET_PUBLISHERS,
    BLOBS_PATH,
    API_SPEC_PATH,
)
from .http_client import AsyncHTTPClient, HTTPResponse
from .retry import RetryStrategy, RoundRobinRetryStrategy

__all__ = [
    # Configuration
    'ClientConfig',
    'RetryConfig',
    'TimeoutConfig',

    # Endpoints
    'DEFAULT_TESTNET_AGGREGATORS',
    'DEFAULT_TESTNET_PUBLISHERS',
    'BLOBS_PATH',
    'API_SPEC_PATH',

    # HTTP
    'AsyncHTTPClient',
    'HTTPResponse',
    'RetryStrategy',
    'RoundRobinRetryStrategy',
]
