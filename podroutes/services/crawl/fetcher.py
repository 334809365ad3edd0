from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import httpx

from podroutes.config import DEFAULT_FETCH_TIMEOUT, DEFAULT_MAX_CONCURRENCY


logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store",
    "Pragma": "no-cache",
    "User-Agent": "podroutes/0.1",
}


class DocumentFetcher:
    """Cache-disabled GET with a cap on in-flight requests.

    Use as an async context manager so the underlying client is shared across a
    whole crawl and closed afterwards::

        async with DocumentFetcher() as fetcher:
            html = await fetcher.fetch("https://www.amroutes.org/")

    ``fetch`` never raises for transport errors or non-2xx responses; it logs and
    returns None, which callers treat the same as an empty page.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = float(timeout)
        self.headers = headers or dict(NO_CACHE_HEADERS)
        self.max_concurrency = max(1, int(max_concurrency))
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._semaphore: Optional[asyncio.Semaphore] = None

    async def __aenter__(self) -> "DocumentFetcher":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self._transport,
        )
        self._semaphore = asyncio.Semaphore(self.max_concurrency)
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
        self._client = None
        self._semaphore = None

    async def fetch(self, url: str) -> Optional[str]:
        if self._client is None or self._semaphore is None:
            raise RuntimeError("DocumentFetcher must be used inside 'async with'")
        async with self._semaphore:
            try:
                resp = await self._client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
                logger.warning("Error fetching %s: %s", url, exc)
                return None
        if not resp.is_success:
            logger.warning("Failed to fetch %s: %s", url, resp.status_code)
            return None
        return resp.text
