"""FastMCP server exposing BlogFeeds discovery as a tool.

Available tools:
* ``discover_feeds(blog_url: str) -> str`` – returns ``{"feedUrls": [...]}`` as
  JSON, or ``"<status> Error: <message>"`` when discovery fails.
"""

import logging

from fastmcp import FastMCP

from blogfeeds.feed_utils import discover_as_text
from blogfeeds.main.config import get_settings

mcp = FastMCP("BlogFeeds")


@mcp.tool
async def discover_feeds(blog_url: str) -> str:
    """Find the RSS/Atom feed URLs declared by the page at *blog_url*."""
    return await discover_as_text(blog_url)


def main() -> None:
    """Entry point – start the FastMCP server on stdio transport."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
