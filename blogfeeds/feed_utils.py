"""Shared discovery workflow for BlogFeeds.

Both the FastAPI HTTP server (`blogfeeds/app_server.py`) and the FastMCP tool
server (`blogfeeds/server.py`) run the same three stages for a blog URL:

1. ``check_valid_url`` – reject anything that is not an absolute http(s) URL.
2. ``fetch_blog_page`` – GET the page, require ``200`` and ``text/html``.
3. ``extract_feed_urls`` – collect the RSS/Atom ``<link>`` hrefs.

Any stage may raise a ``FeedDiscoveryError``; it is propagated untouched so the
caller can render it.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from blogfeeds.main.errors import FeedDiscoveryError
from blogfeeds.main.tools.feed_extractor import extract_feed_urls
from blogfeeds.main.tools.page_fetcher import fetch_blog_page
from blogfeeds.main.tools.url_validator import check_valid_url

logger = logging.getLogger(__name__)


async def discover_blog_feeds(blog_url: Optional[str]) -> List[str]:
    """Return the feed URLs declared by the page at *blog_url*."""
    url = check_valid_url(blog_url)
    document = await fetch_blog_page(url)
    feed_urls = extract_feed_urls(document.text)
    logger.info("Found %d feed(s) for %s", len(feed_urls), url)
    return feed_urls


def render_error_html(error: FeedDiscoveryError) -> str:
    return f"<h1>{error.status_code} Error</h1><p>{error.message}</p>"


async def discover_as_text(blog_url: str) -> str:
    """Run discovery and format the outcome as a plain string.

    Success yields the JSON document ``{"feedUrls": [...]}``; a failure yields
    ``"<status> Error: <message>"``.
    """
    try:
        feed_urls = await discover_blog_feeds(blog_url)
    except FeedDiscoveryError as exc:
        return f"{exc.status_code} Error: {exc.message}"
    return json.dumps({"feedUrls": feed_urls})
