"""
WalrusPy - Async Python client for the Walrus decentralized storage network.

Usage:
    >>> from walruspy import WalrusClient, StoreOptions, EncryptionOptions
    >>>
    >>> async with WalrusClient() as walrus:
    ...     options = StoreOptions(encryption=EncryptionOptions(key=key))
    ...     response = await walrus.store(b"secret", options)
"""
import logging
from .client import WalrusClient, create_client

# Configuration
from .core.api import (
    ClientConfig,
    RetryConfig,
    TimeoutConfig,
    AsyncHTTPClient,
    DEFAULT_TESTNET_AGGREGATORS,
    DEFAULT_TESTNET_PUBLISHERS,
)

# Encryption
from .core.crypto import (
    CipherSuite,
    CipherOptions,
    ContentCipher,
    create_cipher,
    validate_aes_key,
    validate_bytes,
)

# Models
from .core.models import (
    EncryptionOptions,
    StoreOptions,
    ReadOptions,
    StoreResponse,
    BlobInfo,
    BlobObject,
    StorageInfo,
    EventInfo,
    BlobMetadata,
)

# Errors
from .core.exceptions import (
    WalrusError,
    ValidationError,
    FormatError,
    PaddingError,
    CryptoError,
    StreamSizeError,
    WalrusRequestError,
    WalrusRetryError,
)

from .core.logging import LogLevel, configure_logging, get_logger
from .core.utils import combine_urls

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for walruspy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'walruspy',
        'walruspy.client',
        'walruspy.http',
        'walruspy.crypto',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'WalrusClient',
    'create_client',
    'ClientConfig',
    'RetryConfig',
    'TimeoutConfig',
    'AsyncHTTPClient',
    'DEFAULT_TESTNET_AGGREGATORS',
    'DEFAULT_TESTNET_PUBLISHERS',
    'CipherSuite',
    'CipherOptions',
    'ContentCipher',
    'create_cipher',
    'validate_aes_key',
    'validate_bytes',
    'EncryptionOptions',
    'StoreOptions',
    'ReadOptions',
    'StoreResponse',
    'BlobInfo',
    'BlobObject',
    'StorageInfo',
    'EventInfo',
    'BlobMetadata',
    'WalrusError',
    'ValidationError',
    'FormatError',
    'PaddingError',
    'CryptoError',
    'StreamSizeError',
    'WalrusRequestError',
    'WalrusRetryError',
    'LogLevel',
    'configure_logging',
    'get_logger',
    'combine_urls',
    'setup_logging',
]
