"""
Content cipher strategies using Strategy Pattern.

Both strategies share the framed container format (see container.py)
and the full-buffering streaming adapters defined on ContentCipher.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from Crypto.Random import get_random_bytes
from Crypto.Util.Padding import pad, unpad
from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..exceptions import CryptoError, PaddingError, ValidationError
from ..logging import get_logger
from .container import frame, unframe
from .streams import AsyncWritable, Source, read_all, write_and_close
from .validators import (
    BLOCK_SIZE,
    CBC_IV_SIZE,
    GCM_IV_SIZE,
    validate_aes_key,
    validate_bytes,
)

logger = get_logger('walruspy.crypto')


class ContentCipher(ABC):
    """
    Abstract base class for content ciphers.

    Each instance owns exactly one key. The key handle is imported on
    first use and cached for the lifetime of the instance; it is always
    created on the calling thread before the primitive is dispatched to
    the executor, so concurrent first calls never import twice.
    """

    suite: str = ''
    iv_length: int = 0

    def __init__(self, key: bytes):
        validate_aes_key(key)
        self._key_data = bytes(key)
        self._key: Optional[Any] = None

    @abstractmethod
    def _import_key(self) -> Any:
        """Builds the primitive's key object from the raw key bytes."""
        pass

    def _ensure_key(self) -> Any:
        if self._key is None:
            try:
                self._key = self._import_key()
            except (ValueError, TypeError, UnsupportedAlgorithm) as e:
                raise CryptoError(f"Failed to import key for {self.suite}", cause=e) from e
        return self._key

    @staticmethod
    async def _run(fn: Callable[..., bytes], *args: Any) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, fn, *args)

    @abstractmethod
    async def encrypt(self, data: bytes) -> bytes:
        """Encrypts data and returns a framed container."""
        pass

    @abstractmethod
    async def decrypt(self, data: bytes) -> bytes:
        """Decrypts a framed container and returns the plaintext."""
        pass

    async def encrypt_stream(self, src: Source, dst: AsyncWritable) -> None:
        """
        Encrypts everything read from src and writes it to dst.

        The whole source is buffered before encrypting and the result is
        written as a single chunk. dst is closed once the write step is
        reached; if reading src or encrypting fails, dst is left to the
        caller.

        Args:
            src: Source of plaintext (async readable or async iterable)
            dst: Destination for the container
        """
        data = await read_all(src)
        encrypted = await self.encrypt(data)
        await write_and_close(dst, encrypted)

    async def decrypt_stream(self, src: Source, dst: AsyncWritable) -> None:
        """
        Decrypts everything read from src and writes the plaintext to dst.

        Same buffering and closing behavior as encrypt_stream.
        """
        data = await read_all(src)
        decrypted = await self.decrypt(data)
        await write_and_close(dst, decrypted)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} suite={self.suite} key_bits={len(self._key_data) * 8}>"


class AESCBCCipher(ContentCipher):
    """
    AES-CBC content cipher with two PKCS#7 padding layers.

    The plaintext is padded, then the cipher step pads again, as WebCrypto's
    AES-CBC does. Containers written by WebCrypto-based clients therefore
    decrypt here byte for byte, and the other way round.

    The caller-supplied IV is reused for every encrypt() call, so output
    is deterministic for a given (key, iv, plaintext). This path has no
    authentication: tampering is only caught incidentally by padding
    checks.
    """

    suite = 'AES256CBC'
    iv_length = CBC_IV_SIZE

    def __init__(self, key: bytes, iv: Optional[bytes] = None):
        """
        Initializes CBC cipher.

        Args:
            key: 16, 24 or 32 byte AES key
            iv: 16 byte initialization vector (required)

        Raises:
            ValidationError: If key or IV is missing or malformed
        """
        super().__init__(key)

        if iv is None:
            raise ValidationError(
                "Initialization vector (IV) is required for CBC mode",
                parameter='IV',
                expected=CBC_IV_SIZE,
                actual=None
            )
        validate_bytes(iv, 'IV', CBC_IV_SIZE)
        self._iv = bytes(iv)

    @property
    def iv(self) -> bytes:
        return self._iv

    def _import_key(self) -> algorithms.AES:
        return algorithms.AES(self._key_data)

    @staticmethod
    def _transform(key: algorithms.AES, iv: bytes, data: bytes, encrypting: bool) -> bytes:
        cipher = Cipher(key, modes.CBC(iv), backend=default_backend())
        context = cipher.encryptor() if encrypting else cipher.decryptor()
        return context.update(data) + context.finalize()

    async def encrypt(self, data: bytes) -> bytes:
        """Pads, encrypts with the instance IV and frames the result."""
        validate_bytes(data, 'data')
        key = self._ensure_key()

        # Aligned input still gets a full block of padding
        padded = pad(bytes(data), BLOCK_SIZE, style='pkcs7')
        # Outer layer applied by the cipher step, always one full block
        padded = pad(padded, BLOCK_SIZE, style='pkcs7')

        try:
            ciphertext = await self._run(self._transform, key, self._iv, padded, True)
        except ValueError as e:
            raise CryptoError("Encryption failed", cause=e) from e

        logger.debug(f"CBC encrypted {len(data)} bytes into {len(ciphertext)} bytes")
        return frame(self._iv, ciphertext)

    async def decrypt(self, data: bytes) -> bytes:
        """
        Decrypts a CBC container.

        The IV embedded in the container is used, not the instance IV.

        Raises:
            FormatError: If the container is too short or has bad magic
            CryptoError: If the primitive rejects the ciphertext or the
                outer padding layer is invalid
            PaddingError: If the inner PKCS#7 padding is invalid
        """
        validate_bytes(data, 'data')
        iv, ciphertext = unframe(data, CBC_IV_SIZE)
        key = self._ensure_key()

        try:
            decrypted = await self._run(self._transform, key, iv, ciphertext, False)
        except ValueError as e:
            raise CryptoError("Decryption failed", cause=e) from e

        try:
            decrypted = unpad(decrypted, BLOCK_SIZE, style='pkcs7')
        except ValueError as e:
            raise CryptoError("Decryption failed", cause=e) from e

        if not decrypted:
            raise PaddingError("Invalid padding: no data to unpad")

        try:
            return unpad(decrypted, BLOCK_SIZE, style='pkcs7')
        except ValueError as e:
            raise PaddingError(f"Invalid padding: {e}", cause=e) from e


class AESGCMCipher(ContentCipher):
    """
    AES-GCM content cipher.

    A fresh random 12 byte IV is generated on every encrypt() call and
    the 16 byte authentication tag is appended to the ciphertext.
    """

    suite = 'AES256GCM'
    iv_length = GCM_IV_SIZE

    DECRYPT_ERROR = "Decryption failed: invalid key or corrupted data"

    def _import_key(self) -> AESGCM:
        return AESGCM(self._key_data)

    async def encrypt(self, data: bytes) -> bytes:
        """Encrypts data under a fresh IV and frames IV + ciphertext + tag."""
        validate_bytes(data, 'data')
        key = self._ensure_key()
        iv = get_random_bytes(GCM_IV_SIZE)

        try:
            ciphertext = await self._run(key.encrypt, iv, bytes(data), None)
        except (ValueError, OverflowError) as e:
            raise CryptoError("Encryption failed", cause=e) from e

        logger.debug(f"GCM encrypted {len(data)} bytes")
        return frame(iv, ciphertext)

    async def decrypt(self, data: bytes) -> bytes:
        """
        Decrypts and authenticates a GCM container.

        Wrong keys and tampered data raise the same CryptoError.
        """
        validate_bytes(data, 'data')
        iv, ciphertext = unframe(data, GCM_IV_SIZE)
        key = self._ensure_key()

        try:
            return await self._run(key.decrypt, iv, ciphertext, None)
        except (InvalidTag, ValueError) as e:
            raise CryptoError(self.DECRYPT_ERROR, cause=e) from e
