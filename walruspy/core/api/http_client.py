"""
Async HTTP client for Walrus endpoints.

Every request is tried against a pool of base URLs in round-robin
order until one answers with a 2xx status or the attempts run out.
"""
import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Sequence, Tuple
import json

import aiohttp

from .config import ClientConfig
from .retry import RetryStrategy, RoundRobinRetryStrategy
from ..exceptions import ValidationError, WalrusRequestError, WalrusRetryError
from ..logging import get_logger
from ..utils import combine_urls, parse_error_message


@dataclass
class HTTPResponse:
    """Fully read HTTP response. Header names are lower-cased."""
    status: int
    body: bytes
    url: str
    headers: Dict[str, str] = field(default_factory=dict)

    def header(self, name: str, default: str = '') -> str:
        return self.headers.get(name.lower(), default)

    def json(self) -> Any:
        return json.loads(self.body)


def _lower_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {key.lower(): value for key, value in headers.items()}


class AsyncHTTPClient:
    """
    Asynchronous HTTP client with endpoint rotation.

    Example:
        >>> async with AsyncHTTPClient(ClientConfig.default()) as http:
        ...     response = await http.request('GET', '/v1/api', urls)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        retry_strategy: Optional[RetryStrategy] = None
    ):
        """
        Initialize HTTP client.

        Args:
            config: Client configuration (uses defaults if not provided)
            session: Optional shared session; the client creates and owns one otherwise
            retry_strategy: Endpoint selection / delay policy
        """
        self._config = config or ClientConfig.default()
        self._session = session
        self._owns_session = session is None
        self._retry = retry_strategy or RoundRobinRetryStrategy(self._config.retry)
        self._logger = get_logger('walruspy.http')

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> 'AsyncHTTPClient':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(**self._config.get_session_kwargs())
            self._owns_session = True
        return self._session

    async def close(self):
        """Close session if we own it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def _open(
        self,
        method: str,
        path: str,
        base_urls: Sequence[str],
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Tuple[aiohttp.ClientResponse, str]:
        """
        Sends a request with retries and returns the first 2xx response.

        The caller must release the returned response.

        Raises:
            ValidationError: If no base URLs are given
            WalrusRetryError: If every attempt failed
        """
        if not base_urls:
            raise ValidationError("No valid base URLs provided", parameter='base_urls')

        session = await self._ensure_session()
        total_attempts = self._config.retry.total_attempts
        last_error: Optional[WalrusRequestError] = None

        for attempt in range(total_attempts):
            url = combine_urls(self._retry.select_url(base_urls, attempt), path)

            try:
                response = await session.request(method, url, data=data, headers=headers)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = WalrusRequestError(
                    f"Request to {url} failed: {str(e) or type(e).__name__}", url=url, cause=e
                )
            else:
                if 200 <= response.status < 300:
                    self._logger.debug(f"{method} {url} -> {response.status} (attempt {attempt + 1})")
                    return response, url

                try:
                    body = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError):
                    body = b''
                finally:
                    response.release()
                message = parse_error_message(
                    response.status, response.headers.get('Content-Type', ''), body
                )
                last_error = WalrusRequestError(
                    f"Request failed with status code {response.status}: {message}",
                    status_code=response.status,
                    url=url
                )

            self._logger.warning(
                f"Attempt {attempt + 1}/{total_attempts} for {method} {path} failed: {last_error}"
            )
            if self._retry.should_retry(attempt, total_attempts):
                await self._retry.wait_async(attempt)

        raise WalrusRetryError(last_error, total_attempts)

    async def request(
        self,
        method: str,
        path: str,
        base_urls: Sequence[str],
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Sends a request with retries and reads the whole body.

        Args:
            method: HTTP method
            path: Path appended to each base URL
            base_urls: Endpoint pool
            data: Optional request body
            headers: Optional request headers

        Returns:
            HTTPResponse of the first successful attempt
        """
        response, url = await self._open(method, path, base_urls, data, headers)
        try:
            body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise WalrusRequestError(
                f"Failed to read response from {url}: {str(e) or type(e).__name__}",
                status_code=response.status,
                url=url,
                cause=e
            ) from e
        finally:
            response.release()

        return HTTPResponse(
            status=response.status,
            body=body,
            url=url,
            headers=_lower_headers(response.headers)
        )

    @asynccontextmanager
    async def stream(
        self,
        method: str,
        path: str,
        base_urls: Sequence[str]
    ) -> AsyncIterator[aiohttp.ClientResponse]:
        """Yields the live response of the first successful attempt."""
        response, _ = await self._open(method, path, base_urls)
        try:
            yield response
        finally:
            response.release()

    async def fetch(self, url: str) -> HTTPResponse:
        """
        Single GET against an absolute URL, without retries.

        Raises:
            WalrusRequestError: On network failure or non-2xx status
        """
        session = await self._ensure_session()
        try:
            response = await session.request('GET', url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise WalrusRequestError(
                f"Failed to download from URL {url}: {str(e) or type(e).__name__}", url=url, cause=e
            ) from e

        try:
            if not 200 <= response.status < 300:
                raise WalrusRequestError(
                    f"Failed to download from URL {url}: HTTP status {response.status}",
                    status_code=response.status,
                    url=url
                )
            body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise WalrusRequestError(
                f"Failed to download from URL {url}: {str(e) or type(e).__name__}",
                status_code=response.status,
                url=url,
                cause=e
            ) from e
        finally:
            response.release()

        return HTTPResponse(status=response.status, body=body, url=url, headers=_lower_headers(response.headers))
