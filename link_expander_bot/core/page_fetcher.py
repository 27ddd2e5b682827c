"""HTTP helper that downloads the pages we build previews from.

The fetcher keeps the transport small and depends only on ``httpx`` so it can
be unit tested with ``httpx.MockTransport`` and without discord.py.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from link_expander_bot.config import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when a page could not be downloaded."""


class PageFetcher:
    """Downloads page bodies as text; every failure becomes :class:`FetchError`."""

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._headers = {"User-Agent": user_agent}
        self._timeout = timeout
        self._transport = transport

    async def fetch_text(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as exc:
            logger.warning("Fetching %s returned HTTP %s", url, exc.response.status_code)
            raise FetchError(f"{url} returned HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc


__all__ = ["FetchError", "PageFetcher"]
