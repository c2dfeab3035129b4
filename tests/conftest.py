"""Pytest fixtures for WalrusPy tests."""
import pytest
from unittest.mock import AsyncMock, Mock
from Crypto.Random import get_random_bytes


class ChunkSource:
    """Async readable yielding predefined chunks, then b''."""

    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.reads = 0

    async def read(self, size=-1):
        self.reads += 1
        if not self._chunks:
            return b''
        return self._chunks.pop(0)


class FailingSource:
    """Async readable that fails after the first chunk."""

    def __init__(self, error):
        self._error = error
        self._sent = False

    async def read(self, size=-1):
        if not self._sent:
            self._sent = True
            return b'partial'
        raise self._error


class MemorySink:
    """Async writable collecting written chunks."""

    def __init__(self):
        self.chunks = []
        self.closed = False

    async def write(self, data):
        self.chunks.append(bytes(data))

    async def close(self):
        self.closed = True

    @property
    def data(self):
        return b''.join(self.chunks)


@pytest.fixture
def key():
    """Generates a 32-byte AES-256 key for testing."""
    return get_random_bytes(32)


@pytest.fixture
def iv():
    """Generates a 16-byte CBC IV for testing."""
    return get_random_bytes(16)


@pytest.fixture
def make_source():
    """Factory for chunked async sources."""
    return ChunkSource


@pytest.fixture
def failing_source():
    """Factory for sources that raise mid-read."""
    return FailingSource


@pytest.fixture
def sink():
    """Collecting async destination."""
    return MemorySink()


def make_response(status=200, body=b'', headers=None):
    """Builds a mock aiohttp.ClientResponse."""
    response = Mock()
    response.status = status
    response.headers = headers or {}
    response.read = AsyncMock(return_value=body)
    response.release = Mock()
    return response


@pytest.fixture
def mock_response():
    """Factory for mock aiohttp responses."""
    return make_response


@pytest.fixture
def mock_session():
    """Mock aiohttp.ClientSession whose request() is an AsyncMock."""
    session = Mock()
    session.closed = False
    session.request = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def store_payload():
    """Returns a sample newlyCreated store response from a publisher."""
    return {
        'newlyCreated': {
            'blobObject': {
                'id': '0xabc',
                'storedEpoch': 10,
                'blobId': 'blob_123',
                'size': 42,
                'erasureCodeType': 'RedStuff',
                'certifiedEpoch': 10,
                'storage': {
                    'id': '0xdef',
                    'startEpoch': 10,
                    'endEpoch': 15,
                    'storageSize': 66034000,
                },
            },
            'encodedSize': 65023000,
            'cost': 132300,
        }
    }


@pytest.fixture
def certified_payload():
    """Returns a sample alreadyCertified store response."""
    return {
        'alreadyCertified': {
            'blobId': 'blob_456',
            'event': {'txDigest': '4XQHF', 'eventSeq': '0'},
            'endEpoch': 30,
        }
    }
