"""Cipher factory: maps a cipher suite to its strategy."""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..exceptions import ValidationError
from .strategies import AESCBCCipher, AESGCMCipher, ContentCipher
from .validators import is_bytes_like


class CipherSuite(str, Enum):
    """Supported cipher suites. Values are stable wire/config identifiers."""
    AES256GCM = 'AES256GCM'
    AES256CBC = 'AES256CBC'

    def __str__(self) -> str:
        return self.value


@dataclass
class CipherOptions:
    """
    Options for creating a cipher.

    Attributes:
        key: 16, 24 or 32 byte AES key
        suite: Cipher suite (AES256GCM by default)
        iv: 16 byte IV, required for AES256CBC and ignored for AES256GCM
    """
    key: bytes
    suite: Union[CipherSuite, str] = CipherSuite.AES256GCM
    iv: Optional[bytes] = None


def _create_gcm(options: CipherOptions) -> ContentCipher:
    return AESGCMCipher(options.key)


def _create_cbc(options: CipherOptions) -> ContentCipher:
    if options.iv is None:
        raise ValidationError(
            "Initialization vector (IV) is required for AES-CBC mode",
            parameter='IV'
        )
    return AESCBCCipher(options.key, options.iv)


_CIPHER_REGISTRY: Dict[CipherSuite, Callable[[CipherOptions], ContentCipher]] = {
    CipherSuite.AES256GCM: _create_gcm,
    CipherSuite.AES256CBC: _create_cbc,
}


def _resolve_suite(suite: Union[CipherSuite, str]) -> CipherSuite:
    try:
        return CipherSuite(suite)
    except ValueError:
        raise ValidationError(
            f"Unsupported cipher suite: {suite}",
            parameter='suite',
            expected=[s.value for s in CipherSuite],
            actual=suite
        ) from None


def create_cipher(options: CipherOptions) -> ContentCipher:
    """
    Creates a cipher implementation based on the given options.

    Args:
        options: Cipher options

    Returns:
        ContentCipher for the requested suite

    Raises:
        ValidationError: If the key is not bytes, the suite is unknown,
            or a CBC cipher is requested without an IV
    """
    if not is_bytes_like(options.key):
        raise ValidationError(
            "Encryption key must be bytes",
            parameter='key',
            expected='bytes',
            actual=type(options.key).__name__
        )

    suite = _resolve_suite(options.suite)
    return _CIPHER_REGISTRY[suite](options)
