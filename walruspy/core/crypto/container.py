"""
Framed container codec.

Wire layout shared by every cipher suite:

    [3 bytes magic "WAL"] [IV: 12 or 16 bytes] [ciphertext (+ tag)]

The magic is a format tag only and carries no integrity guarantee.
"""
from typing import Tuple

from ..exceptions import FormatError

MAGIC = b'WAL'


def frame(iv: bytes, payload: bytes) -> bytes:
    """Concatenates magic, IV and payload into a new buffer."""
    return b''.join((MAGIC, bytes(iv), bytes(payload)))


def unframe(data: bytes, iv_length: int) -> Tuple[bytes, bytes]:
    """
    Splits a container into its IV and payload.

    Args:
        data: Framed container
        iv_length: IV length used by the calling suite (12 or 16)

    Returns:
        Tuple of (iv, payload)

    Raises:
        FormatError: If data is too short or the magic bytes don't match
    """
    header_length = len(MAGIC) + iv_length
    if len(data) < header_length:
        raise FormatError(
            f"Invalid encrypted data: too short "
            f"({len(data)} bytes, need at least {header_length})"
        )

    if bytes(data[:len(MAGIC)]) != MAGIC:
        raise FormatError("Invalid encrypted data: invalid magic bytes")

    return bytes(data[len(MAGIC):header_length]), bytes(data[header_length:])


def is_framed(data: bytes) -> bool:
    """Returns True if data starts with the container magic."""
    return bytes(data[:len(MAGIC)]) == MAGIC
