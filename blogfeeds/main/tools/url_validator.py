"""Syntax check for the submitted blog URL."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from blogfeeds.main.errors import InvalidUrlFormat

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = {"http", "https"}


def is_valid_url(url: Optional[str]) -> bool:
    """Return ``True`` if *url* is an absolute http(s) URL with a host.

    The URL must also be one httpx can build a request from, so control
    characters and hostnames IDNA cannot encode or decode are rejected here.
    """
    if not url or not isinstance(url, str):
        return False
    if any(ch.isspace() for ch in url):
        return False
    try:
        result = urlparse(url)
        host = result.hostname
        # Raises ValueError for a non-numeric or out-of-range port.
        result.port
        request_url = httpx.URL(url)
        request_url.host
    except (httpx.InvalidURL, ValueError):
        return False
    return result.scheme.lower() in ALLOWED_SCHEMES and bool(host)


def check_valid_url(blog_url: Optional[str]) -> str:
    """Return *blog_url* unchanged, or raise ``InvalidUrlFormat``."""
    if not is_valid_url(blog_url):
        logger.info("Rejected blog URL %r", blog_url)
        raise InvalidUrlFormat()
    return blog_url
