"""
Walrus client.

Stores blobs on publisher endpoints and reads them back from aggregator
endpoints, optionally encrypting payloads on the client side.

Usage:
    >>> async with WalrusClient() as walrus:
    ...     response = await walrus.store(b"hello")
    ...     data = await walrus.read(response.blob_id)
"""
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import quote

import aiofiles
import aiohttp

from .core.api import (
    API_SPEC_PATH,
    BLOBS_PATH,
    AsyncHTTPClient,
    ClientConfig,
)
from .core.crypto import ContentCipher, create_cipher
from .core.crypto.streams import AsyncReadable, AsyncWritable, DEFAULT_READ_SIZE, Source
from .core.exceptions import StreamSizeError
from .core.logging import get_logger, time_async
from .core.models import (
    BlobMetadata,
    EncryptionOptions,
    ReadOptions,
    StoreOptions,
    StoreResponse,
)
from .core.utils import guess_content_type

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def _cipher_for(encryption: EncryptionOptions) -> ContentCipher:
    return create_cipher(encryption.to_cipher_options())


def _blob_path(blob_id: str) -> str:
    return f"{BLOBS_PATH}/{quote(blob_id, safe='')}"


class WalrusClient:
    """
    Async client for the Walrus storage network.

    Features:
    - Round-robin retries over publisher / aggregator pools
    - Optional client-side AES-GCM or AES-CBC encryption
    - File, URL and stream helpers

    Example:
        >>> config = ClientConfig.with_endpoints([aggregator], [publisher])
        >>> async with WalrusClient(config) as walrus:
        ...     info = await walrus.store_file("report.pdf")
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        http: Optional[AsyncHTTPClient] = None
    ):
        """
        Initialize client.

        Args:
            config: Client configuration (uses defaults if not provided)
            session: Optional aiohttp session to share
            http: Optional preconfigured HTTP client (overrides session)
        """
        self._config = config or ClientConfig.default()
        self._http = http or AsyncHTTPClient(self._config, session=session)
        self._logger = get_logger('walruspy.client')

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> 'WalrusClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close client and release resources."""
        await self._http.close()

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    async def store(self, data: bytes, options: Optional[StoreOptions] = None) -> StoreResponse:
        """
        Stores data on a Walrus publisher.

        Args:
            data: Data to store
            options: Storage options (epochs, encryption, content type)

        Returns:
            Normalized StoreResponse
        """
        options = options or StoreOptions()
        body = bytes(data)

        if options.encryption:
            cipher = _cipher_for(options.encryption)
            body = await cipher.encrypt(body)

        path = BLOBS_PATH
        if options.epochs and options.epochs > 0:
            path += f"?epochs={options.epochs}"

        headers = {'Content-Type': options.content_type or DEFAULT_CONTENT_TYPE}

        response = await time_async(
            'store',
            lambda: self._http.request('PUT', path, self._config.publisher_urls, data=body, headers=headers),
            self._logger,
            size=len(body)
        )
        result = StoreResponse.from_dict(response.json())
        self._logger.info(f"Stored blob {result.blob_id} ({len(body)} bytes)")
        return result

    async def store_from_stream(self, src: Source, options: Optional[StoreOptions] = None) -> StoreResponse:
        """
        Stores everything read from an async stream.

        The stream is buffered in memory first, bounded by
        max_unknown_length_upload_size.

        Raises:
            StreamSizeError: If the stream exceeds the configured limit
        """
        data = await self._read_bounded(src, self._config.max_unknown_length_upload_size)
        return await self.store(data, options)

    async def store_from_url(self, url: str, options: Optional[StoreOptions] = None) -> StoreResponse:
        """Downloads content from a URL and stores it."""
        response = await self._http.fetch(url)
        self._logger.debug(f"Downloaded {len(response.body)} bytes from {url}")
        return await self.store(response.body, options)

    async def store_file(self, file_path: Union[str, Path], options: Optional[StoreOptions] = None) -> StoreResponse:
        """
        Stores a local file.

        The content type is guessed from the file name unless given.
        """
        options = options or StoreOptions()
        async with aiofiles.open(file_path, 'rb') as f:
            data = await f.read()

        if not options.content_type and not options.encryption:
            options = StoreOptions(
                epochs=options.epochs,
                encryption=options.encryption,
                content_type=guess_content_type(file_path)
            )

        return await self.store(data, options)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def read(self, blob_id: str, options: Optional[ReadOptions] = None) -> bytes:
        """
        Retrieves a blob from a Walrus aggregator.

        Args:
            blob_id: Blob ID to retrieve
            options: Read options; decrypts when encryption is given

        Returns:
            Blob content (plaintext when decrypting)
        """
        options = options or ReadOptions()
        response = await time_async(
            'read',
            lambda: self._http.request('GET', _blob_path(blob_id), self._config.aggregator_urls),
            self._logger,
            blob_id=blob_id
        )

        if options.encryption:
            cipher = _cipher_for(options.encryption)
            return await cipher.decrypt(response.body)

        return response.body

    async def read_to_file(
        self,
        blob_id: str,
        file_path: Union[str, Path],
        options: Optional[ReadOptions] = None
    ) -> None:
        """Retrieves a blob and writes it to a local file."""
        data = await self.read(blob_id, options)
        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(data)
        self._logger.info(f"Saved blob {blob_id} to {file_path} ({len(data)} bytes)")

    async def read_to_stream(
        self,
        blob_id: str,
        dst: AsyncWritable,
        options: Optional[ReadOptions] = None
    ) -> None:
        """
        Copies a blob into an async writable.

        Unencrypted blobs are copied chunk by chunk as they arrive;
        encrypted blobs are buffered, decrypted and written in one chunk.
        dst is closed once writing starts; if decryption fails it is left
        to the caller.
        """
        options = options or ReadOptions()

        async with self._http.stream('GET', _blob_path(blob_id), self._config.aggregator_urls) as response:
            if options.encryption:
                cipher = _cipher_for(options.encryption)
                await cipher.decrypt_stream(response.content, dst)
                return

            try:
                async for chunk in response.content.iter_chunked(DEFAULT_READ_SIZE):
                    await dst.write(chunk)
            finally:
                await dst.close()

    async def head(self, blob_id: str) -> BlobMetadata:
        """Retrieves blob metadata without downloading the content."""
        response = await self._http.request('HEAD', _blob_path(blob_id), self._config.aggregator_urls)
        return BlobMetadata.from_headers(response.headers)

    async def get_api_spec(self, aggregator: bool = True) -> bytes:
        """Retrieves the OpenAPI specification of an aggregator or publisher."""
        urls = self._config.aggregator_urls if aggregator else self._config.publisher_urls
        response = await self._http.request('GET', API_SPEC_PATH, urls)
        return response.body

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    async def _read_bounded(src: Source, limit: int) -> bytes:
        chunks = []
        total = 0

        async def _chunks():
            if isinstance(src, AsyncReadable):
                while True:
                    chunk = await src.read(DEFAULT_READ_SIZE)
                    if not chunk:
                        return
                    yield chunk
            else:
                async for chunk in src:
                    yield chunk

        async for chunk in _chunks():
            total += len(chunk)
            if total > limit:
                raise StreamSizeError(
                    f"Stream size exceeds maximum allowed ({limit} bytes). "
                    f"Use a file or buffer with known size instead.",
                    limit=limit
                )
            chunks.append(bytes(chunk))

        return b''.join(chunks)


def create_client(**kwargs: Any) -> WalrusClient:
    """Creates a WalrusClient from ClientConfig keyword arguments."""
    return WalrusClient(ClientConfig(**kwargs))
