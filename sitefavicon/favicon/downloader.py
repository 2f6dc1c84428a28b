"""Async downloader for homepages and favicon candidates"""

import asyncio
import logging

import httpx

from sitefavicon.exceptions import FetchFailed, FetchTimeout
from sitefavicon.utils.storage.models import Image

logger = logging.getLogger(__name__)


class AsyncFaviconDownloader:
    """Fetch documents and icon bytes, each request bounded by its own deadline."""

    session: httpx.AsyncClient
    timeout_ms: int

    def __init__(self, session: httpx.AsyncClient, timeout_ms: int) -> None:
        self.session = session
        self.timeout_ms = timeout_ms

    async def requests_get(self, url: str) -> httpx.Response:
        """GET `url` and return the response if its status is 2xx.

        Raises:
            FetchTimeout: if the request does not complete within `timeout_ms`.
            FetchFailed: on a non-2xx status, a transport error or a malformed URL.
        """
        try:
            response = await asyncio.wait_for(
                self.session.get(url), timeout=self.timeout_ms / 1000
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise FetchTimeout(url, self.timeout_ms) from e
        except httpx.HTTPError as e:
            raise FetchFailed(url, None, reason=str(e) or type(e).__name__) from e
        except (httpx.InvalidURL, UnicodeError) as e:
            raise FetchFailed(url, None, reason=f"Invalid URL: {e}") from e

        if not response.is_success:
            raise FetchFailed(url, response.status_code)
        return response

    async def fetch_text(self, url: str) -> str:
        """Fetch a document and return its decoded body."""
        response = await self.requests_get(url)
        return response.text

    async def download_favicon(self, url: str) -> Image:
        """Fetch an icon and return its raw bytes with the served content type."""
        response = await self.requests_get(url)
        content_type = response.headers.get("Content-Type", "image/unknown")
        logger.debug(f"Downloaded {len(response.content)} bytes ({content_type}) from {url}")
        return Image(content=response.content, content_type=str(content_type))
