"""Fetch the blog page and make sure it is an HTML document.

A single GET is issued per call with no retry.  Transport errors (timeouts,
refused connections, TLS failures) and any final status other than ``200`` are
reported as ``UnreachablePage``; a body that is not ``text/html`` is reported
as ``NonHtmlContentType``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from blogfeeds.main.config import get_settings
from blogfeeds.main.errors import NonHtmlContentType, UnreachablePage

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html"

# Transport used by every client; ``None`` means the real network.
_transport: Optional[httpx.AsyncBaseTransport] = None


@dataclass
class FetchedDocument:
    text: str
    content_type: str
    url: str


def media_type(content_type: Optional[str]) -> str:
    """Strip parameters (``; charset=...``) from a Content-Type value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _build_client() -> httpx.AsyncClient:
    settings = get_settings()
    return httpx.AsyncClient(
        transport=_transport,
        follow_redirects=True,
        timeout=settings.fetch_timeout,
        headers={"User-Agent": settings.user_agent},
    )


async def fetch_blog_page(blog_url: str) -> FetchedDocument:
    """GET *blog_url* and return its HTML body."""
    try:
        async with _build_client() as client:
            response = await client.get(blog_url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("Failed to fetch blog page %s: %s", blog_url, exc)
        raise UnreachablePage() from exc

    if response.status_code != 200:
        logger.warning("Blog page %s answered with status %d", blog_url, response.status_code)
        raise UnreachablePage()

    content_type = response.headers.get("content-type", "")
    if media_type(content_type) != HTML_MEDIA_TYPE:
        logger.warning("Blog page %s has content type %r", blog_url, content_type)
        raise NonHtmlContentType()

    return FetchedDocument(text=response.text, content_type=content_type, url=str(response.url))
