"""Client-side content encryption: container codec, cipher strategies and factory."""
from .container import MAGIC, frame, unframe, is_framed
from .factory import CipherSuite, CipherOptions, create_cipher
from .strategies import ContentCipher, AESCBCCipher, AESGCMCipher
from .streams import AsyncReadable, AsyncWritable, read_all, write_and_close
from .validators import (
    AES_KEY_SIZES,
    BLOCK_SIZE,
    CBC_IV_SIZE,
    GCM_IV_SIZE,
    GCM_TAG_SIZE,
    validate_aes_key,
    validate_bytes,
)

__all__ = [
    'MAGIC',
    'frame',
    'unframe',
    'is_framed',
    'CipherSuite',
    'CipherOptions',
    'create_cipher',
    'ContentCipher',
    'AESCBCCipher',
    'AESGCMCipher',
    'AsyncReadable',
    'AsyncWritable',
    'read_all',
    'write_and_close',
    'AES_KEY_SIZES',
    'BLOCK_SIZE',
    'CBC_IV_SIZE',
    'GCM_IV_SIZE',
    'GCM_TAG_SIZE',
    'validate_aes_key',
    'validate_bytes',
]
