"""Tests for the recipe document fetcher."""

import httpx
import pytest

from preplist.document.fetch import DocumentFetcher, FetchError

RECIPE_URL = "https://recipes.example.com/tarka-dal"


def _fetcher_with(handler, max_retries: int = 1) -> DocumentFetcher:
    """Create a fetcher whose client is served by handler."""
    fetcher = DocumentFetcher(timeout=5.0, max_retries=max_retries)
    fetcher._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return fetcher


class TestDocumentFetcher:
    """Tests for DocumentFetcher."""

    def test_defaults_from_settings(self, monkeypatch):
        """Test timeout and retries come from settings."""
        monkeypatch.setenv("PREPLIST_FETCH_TIMEOUT", "12.5")
        monkeypatch.setenv("PREPLIST_FETCH_MAX_RETRIES", "7")

        fetcher = DocumentFetcher()
        assert fetcher.timeout == 12.5
        assert fetcher.max_retries == 7

    @pytest.mark.asyncio
    async def test_fetch_returns_body(self):
        """Test a successful fetch returns the page text."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == RECIPE_URL
            return httpx.Response(200, text="<article></article>")

        async with _fetcher_with(handler) as fetcher:
            assert await fetcher.fetch(RECIPE_URL) == "<article></article>"

    @pytest.mark.asyncio
    async def test_error_status(self):
        """Test error statuses raise FetchError with the status code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="Not found")

        async with _fetcher_with(handler) as fetcher:
            with pytest.raises(FetchError) as exc_info:
                await fetcher.fetch(RECIPE_URL)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == RECIPE_URL

    @pytest.mark.asyncio
    async def test_network_error_after_retries(self):
        """Test network errors surface as FetchError once retries run out."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        async with _fetcher_with(handler, max_retries=1) as fetcher:
            with pytest.raises(FetchError) as exc_info:
                await fetcher.fetch(RECIPE_URL)

        assert len(calls) == 1
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_retries_transient_errors(self):
        """Test a timeout followed by success returns the page."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(200, text="<article></article>")

        async with _fetcher_with(handler, max_retries=2) as fetcher:
            assert await fetcher.fetch(RECIPE_URL) == "<article></article>"

        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_close(self):
        """Test closing releases the client."""
        fetcher = _fetcher_with(lambda request: httpx.Response(200))
        await fetcher.close()
        assert fetcher._client is None
