"""Tests for the streaming adapters."""
import pytest
from Crypto.Random import get_random_bytes

from walruspy.core.crypto import CipherOptions, CipherSuite, create_cipher
from walruspy.core.crypto.streams import read_all, write_and_close
from walruspy.core.exceptions import CryptoError, FormatError

PLAINTEXT = b"streamed content " * 100


def split(data, size):
    return [data[i:i + size] for i in range(0, len(data), size)]


async def agen(chunks):
    for chunk in chunks:
        yield chunk


class TestReadAll:
    """Test suite for read_all."""

    @pytest.mark.asyncio
    async def test_concatenates_in_order(self, make_source):
        """Test chunks are joined in arrival order."""
        source = make_source([b"a", b"bc", b"def"])

        assert await read_all(source) == b"abcdef"

    @pytest.mark.asyncio
    async def test_empty_source(self, make_source):
        """Test an empty source gives empty bytes."""
        assert await read_all(make_source([])) == b""

    @pytest.mark.asyncio
    async def test_async_iterable(self):
        """Test async iterables are drained too."""
        assert await read_all(agen([b"1", b"2", b"3"])) == b"123"

    @pytest.mark.asyncio
    async def test_error_propagates(self, failing_source):
        """Test read errors propagate unchanged."""
        with pytest.raises(OSError):
            await read_all(failing_source(OSError("disk gone")))


class TestWriteAndClose:
    """Test suite for write_and_close."""

    @pytest.mark.asyncio
    async def test_single_write_then_close(self, sink):
        """Test data is written once and the sink is closed."""
        await write_and_close(sink, b"payload")

        assert sink.chunks == [b"payload"]
        assert sink.closed


@pytest.mark.parametrize("suite,suite_iv", [
    (CipherSuite.AES256GCM, None),
    (CipherSuite.AES256CBC, b"\x02" * 16),
])
class TestCipherStreams:
    """Test suite for encrypt_stream / decrypt_stream on both suites."""

    @pytest.fixture
    def cipher(self, key, suite, suite_iv):
        return create_cipher(CipherOptions(key=key, suite=suite, iv=suite_iv))

    @pytest.mark.asyncio
    async def test_encrypt_stream_single_chunk(self, cipher, make_source, sink):
        """Test output is written as one chunk and the sink is closed."""
        await cipher.encrypt_stream(make_source(split(PLAINTEXT, 100)), sink)

        assert len(sink.chunks) == 1
        assert sink.closed
        assert await cipher.decrypt(sink.data) == PLAINTEXT

    @pytest.mark.asyncio
    async def test_stream_roundtrip(self, cipher, make_source, sink):
        """Test stream encryption then stream decryption restores plaintext."""
        await cipher.encrypt_stream(make_source(split(PLAINTEXT, 37)), sink)

        plain_sink = type(sink)()
        await cipher.decrypt_stream(make_source(split(sink.data, 11)), plain_sink)

        assert plain_sink.data == PLAINTEXT
        assert plain_sink.closed

    @pytest.mark.asyncio
    async def test_whole_buffer_to_stream(self, cipher, make_source, sink):
        """Test whole-buffer ciphertext decrypts through the stream path."""
        encrypted = await cipher.encrypt(PLAINTEXT)

        await cipher.decrypt_stream(make_source([encrypted]), sink)

        assert sink.data == PLAINTEXT

    @pytest.mark.asyncio
    async def test_empty_stream(self, cipher, make_source, sink):
        """Test an empty source still produces a valid container."""
        await cipher.encrypt_stream(make_source([]), sink)

        assert await cipher.decrypt(sink.data) == b""

    @pytest.mark.asyncio
    async def test_source_failure_leaves_sink_untouched(self, cipher, failing_source, sink):
        """Test a failing source propagates and the sink is neither written nor closed."""
        with pytest.raises(ConnectionError):
            await cipher.encrypt_stream(failing_source(ConnectionError("reset")), sink)

        assert sink.chunks == []
        assert not sink.closed

    @pytest.mark.asyncio
    async def test_decrypt_failure_leaves_sink_open(self, cipher, make_source, sink):
        """Test malformed input fails before anything is written."""
        with pytest.raises(FormatError):
            await cipher.decrypt_stream(make_source([bytes(10)]), sink)

        assert sink.chunks == []
        assert not sink.closed


@pytest.mark.asyncio
async def test_gcm_stream_tamper(key, make_source, sink):
    """Test tampered GCM data fails through the stream path."""
    cipher = create_cipher(CipherOptions(key=key))
    encrypted = bytearray(await cipher.encrypt(get_random_bytes(64)))
    encrypted[-5] ^= 0x10

    with pytest.raises(CryptoError):
        await cipher.decrypt_stream(make_source([bytes(encrypted)]), sink)
