"""Error taxonomy for the feed discovery pipeline.

Every stage raises one of these when it rejects a request.  The HTTP and MCP
servers render ``status_code`` and ``message`` back to the caller; nothing in
the pipeline catches them.
"""

from __future__ import annotations


class FeedDiscoveryError(Exception):
    """Base exception for discovery failures."""

    status_code: int = 400
    message: str = "Feed discovery failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidUrlFormat(FeedDiscoveryError):
    """The submitted blog URL is not an absolute http(s) URL."""
    status_code = 400
    message = "Invalid Blog URL"


class UnreachablePage(FeedDiscoveryError):
    """The blog page could not be fetched or did not answer ``200 OK``."""
    status_code = 400
    message = "Could not retrieve the blog page"


class NonHtmlContentType(FeedDiscoveryError):
    status_code = 400
    message = "Blog page is not an HTML document"


class NoFeedDiscovered(FeedDiscoveryError):
    status_code = 404
    message = "No Feed Url Discovered"
