import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from blogfeeds.feed_utils import discover_blog_feeds, render_error_html
from blogfeeds.main.config import get_settings
from blogfeeds.main.errors import FeedDiscoveryError, InvalidUrlFormat

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BlogFeeds API",
    description="Discover the RSS/Atom feed URLs declared by a blog page.",
    version="0.1.0",
    docs_url="/docs",        # Swagger UI
    redoc_url="/redoc",      # ReDoc UI
    openapi_url="/openapi.json",
)


class DiscoveryRequest(BaseModel):
    blogUrl: Optional[str] = None


class DiscoveryResponse(BaseModel):
    feedUrls: List[str]


@app.exception_handler(FeedDiscoveryError)
async def feed_discovery_error_handler(request: Request, exc: FeedDiscoveryError) -> HTMLResponse:
    return HTMLResponse(render_error_html(exc), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> HTMLResponse:
    # A missing, non-JSON or mistyped body carries no usable blog URL.
    logger.info("Rejected malformed discovery request: %s", exc.errors())
    return await feed_discovery_error_handler(request, InvalidUrlFormat())


@app.get("/", tags=["Root"], summary="API root")
async def read_root():
    return {"message": "Welcome to the BlogFeeds FastAPI server!"}


@app.post(
    "/",
    tags=["Feed"],
    summary="Discover feed URLs",
    description=(
        "Fetch the page at ``blogUrl`` and return the ``href`` of every "
        "RSS/Atom ``<link>`` it declares, in document order."
    ),
    response_model=DiscoveryResponse,
)
async def discover_feeds(payload: Optional[DiscoveryRequest] = None) -> DiscoveryResponse:
    blog_url = payload.blogUrl if payload is not None else None
    feed_urls = await discover_blog_feeds(blog_url)
    return DiscoveryResponse(feedUrls=feed_urls)


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    uvicorn.run(app, host=settings.host, port=settings.port)

if __name__ == "__main__":
    main()
