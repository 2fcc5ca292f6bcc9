"""Collect feed URLs declared by ``<link>`` tags in a blog page."""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from blogfeeds.main.errors import NoFeedDiscovered

logger = logging.getLogger(__name__)

FEED_MIME_TYPES = {"application/rss+xml", "application/atom+xml"}


def _is_feed_link(tag) -> bool:
    if tag.name != "link":
        return False
    type_attr = (tag.get("type") or "").strip().lower()
    return type_attr in FEED_MIME_TYPES


def find_feed_links(html: str) -> List[str]:
    """Return the ``href`` of every RSS/Atom ``<link>`` in document order.

    Duplicates are kept; links with a missing or blank ``href`` are ignored.
    The values are returned exactly as written in the markup.
    """
    soup = BeautifulSoup(html, "html.parser")
    feed_urls: List[str] = []
    for link in soup.find_all(_is_feed_link):
        href = link.get("href")
        if href and href.strip():
            feed_urls.append(href)
    return feed_urls


def extract_feed_urls(html: str) -> List[str]:
    """Like ``find_feed_links`` but raise ``NoFeedDiscovered`` on an empty result."""
    feed_urls = find_feed_links(html)
    if not feed_urls:
        raise NoFeedDiscovered()
    logger.info("Discovered %d feed link(s)", len(feed_urls))
    return feed_urls
