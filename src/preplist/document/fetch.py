"""Fetching recipe documents over HTTP."""

from typing import Any

import httpx
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from preplist.config import get_settings
from preplist.logging_config import get_logger

logger = get_logger(__name__)


class FetchError(Exception):
    """Raised when a recipe document cannot be fetched."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DocumentFetcher:
    """Fetches recipe pages with timeouts and retry logic."""

    DEFAULT_TIMEOUT: float = 30.0
    MAX_RETRIES: int = 3

    def __init__(self, timeout: float | None = None, max_retries: int | None = None):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds.
            max_retries: Maximum attempts for requests that time out or hit
                network errors.
        """
        settings = get_settings()
        self.timeout = timeout or settings.fetch_timeout or self.DEFAULT_TIMEOUT
        self.max_retries = max_retries or settings.fetch_max_retries or self.MAX_RETRIES
        self._client: httpx.AsyncClient | None = None

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            "User-Agent": "preplist/0.1",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_headers(),
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "DocumentFetcher":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def fetch(self, url: str) -> str:
        """
        Fetch a document and return its body as text.

        Raises:
            FetchError: If the request fails after retries or returns an
                error status.
        """
        client = await self._get_client()

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, max=30),
        )
        async def _do_request() -> httpx.Response:
            return await client.get(url)

        try:
            response = await _do_request()
        except RetryError as e:
            logger.error(f"Request failed after {self.max_retries} retries: {url}")
            raise FetchError(
                f"Request failed after {self.max_retries} retries",
                url=url,
            ) from e

        if response.status_code >= 400:
            logger.error(f"Request error {response.status_code} for {url}")
            raise FetchError(
                f"Request failed with status {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        logger.info(f"Fetched {url} ({len(response.text)} chars)")
        return response.text
