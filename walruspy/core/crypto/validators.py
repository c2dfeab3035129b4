"""Key and IV validation run before any cryptographic call."""
from typing import Any, Optional

from ..exceptions import ValidationError

AES_KEY_SIZES = (16, 24, 32)
BLOCK_SIZE = 16
CBC_IV_SIZE = 16
GCM_IV_SIZE = 12
GCM_TAG_SIZE = 16

BYTES_TYPES = (bytes, bytearray, memoryview)


def is_bytes_like(value: Any) -> bool:
    """Returns True for bytes, bytearray and memoryview."""
    return isinstance(value, BYTES_TYPES)


def validate_bytes(value: Any, name: str, required_length: Optional[int] = None) -> None:
    """
    Validates a byte sequence and, optionally, its exact length.

    Args:
        value: Value to check
        name: Parameter name used in the error message
        required_length: Exact length the value must have

    Raises:
        ValidationError: If value is not bytes-like or has the wrong length
    """
    if not is_bytes_like(value):
        raise ValidationError(
            f"{name} must be bytes, got {type(value).__name__}",
            parameter=name,
            expected='bytes',
            actual=type(value).__name__
        )

    if required_length is not None and len(value) != required_length:
        raise ValidationError(
            f"{name} must be {required_length} bytes long, got {len(value)}",
            parameter=name,
            expected=required_length,
            actual=len(value)
        )


def validate_aes_key(key: Any) -> None:
    """
    Validates an AES key (16, 24 or 32 bytes).

    Raises:
        ValidationError: If key is not bytes-like or has an invalid length
    """
    validate_bytes(key, 'key')

    if len(key) not in AES_KEY_SIZES:
        raise ValidationError(
            f"AES key must be 16, 24, or 32 bytes (128, 192, or 256 bits), got {len(key)}",
            parameter='key',
            expected=AES_KEY_SIZES,
            actual=len(key)
        )
