"""
Custom exceptions for Walrus storage operations.

This module defines the exception hierarchy shared by the encryption
core and the HTTP client.
"""
from typing import Optional, Any


class WalrusError(Exception):
    """Base exception for all Walrus-related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status_code: HTTP status code (if available)
            cause: Underlying exception (if any)
        """
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class ValidationError(WalrusError):
    """
    Exception raised for malformed keys, IVs or cipher options.

    Always a caller bug, never retryable.
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Any = None,
        actual: Any = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            parameter: Name of the offending parameter
            expected: Expected value or length
            actual: Actual value or length
        """
        self.parameter = parameter
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class FormatError(WalrusError):
    """Exception raised when input is not a valid encrypted container."""
    pass


class PaddingError(WalrusError):
    """Exception raised when PKCS#7 padding is invalid after decryption."""
    pass


class CryptoError(WalrusError):
    """Exception raised when the underlying cryptographic primitive fails."""
    pass


class StreamSizeError(WalrusError):
    """Exception raised when a stream of unknown length is too large to upload."""

    def __init__(self, message: str, limit: int) -> None:
        self.limit = limit
        super().__init__(message)


class WalrusRequestError(WalrusError):
    """Exception raised for failed HTTP requests."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status_code: HTTP status code (if available)
            url: Requested URL (if available)
            cause: Underlying exception (if any)
        """
        self.url = url
        super().__init__(message, status_code=status_code, cause=cause)


class WalrusRetryError(WalrusRequestError):
    """Exception raised when every retry attempt against the endpoint pool failed."""

    def __init__(self, last_error: Optional[BaseException], attempts: int) -> None:
        self.last_error = last_error
        self.attempts = attempts
        detail = str(last_error) if last_error else 'Unknown error'
        super().__init__(
            f"All retry attempts failed: {detail}",
            status_code=getattr(last_error, 'status_code', None),
            url=getattr(last_error, 'url', None),
            cause=last_error
        )
