from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config import Settings


logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    status_code: int = 0
    body: bytes = b""
    content_type: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=httpx.Timeout(settings.fetch_timeout),
        follow_redirects=True,
        transport=transport,
    )


async def fetch(client: httpx.AsyncClient, url: str) -> FetchResult:
    """GET ``url`` once.

    Any HTTP response, whatever its status, is a result. Transport failures
    (DNS, refused connections, timeouts, bad URLs, redirect loops) are
    captured with status 0 instead of raised.
    """
    try:
        resp = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Fetch failed for {url}: {e!r}")
        return FetchResult(status_code=0, error=str(e) or type(e).__name__)

    logger.info(f"Response received {resp.status_code}")
    return FetchResult(
        status_code=resp.status_code,
        body=resp.content,
        content_type=resp.headers.get("content-type"),
    )
