"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_TIMEOUT, CONFIG_BASE_URL, MAX_CONCURRENT

JSON_ACCEPT = "application/json,*/*;q=0.8"
HTML_ACCEPT = "text/html,*/*;q=0.8"


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff."""

    def __init__(
        self,
        base_url: str = CONFIG_BASE_URL,
        max_concurrent: int = MAX_CONCURRENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: base_url={}, max_concurrent={}", self.__class__.__name__, base_url, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=API_TIMEOUT,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _fetch(self, path: str, accept: str = JSON_ACCEPT) -> httpx.Response:
        """GET request with retry logic; the caller inspects status and body."""
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(path, headers={"Accept": accept})
            if resp.status_code >= 500:
                resp.raise_for_status()
            return resp

    async def _get_json(self, path: str) -> dict | list:
        """GET a JSON document, raising on non-2xx."""
        resp = await self._fetch(path)
        resp.raise_for_status()
        return resp.json()

