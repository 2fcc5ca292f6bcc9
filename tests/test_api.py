"""Tests for the FastAPI discovery endpoint.

Outbound GETs never reach the network: ``page_fetcher._transport`` is patched
with an ``httpx.MockTransport`` that serves canned blog pages.
"""

from typing import Dict, Tuple
from unittest import TestCase, mock

import httpx
from fastapi.testclient import TestClient

from blogfeeds.app_server import app

BLOGSPOT_PAGE = """
<!doctype html>
<html lang="en">
  <head>
    <link rel="alternate" type="application/atom+xml" href="https://test321.blogspot.com/feeds/posts/default/-/open-source"/>
    <link rel="alternate" type="application/rss+xml" href="https://test321.blogspot.com/feeds/posts/default/-/open-source?alt=rss"/>
  </head>
  <body></body>
</html>
"""

EMPTY_PAGE = """
<html>
  <head></head>
  <body></body>
</html>
"""


def _serve(pages: Dict[str, Tuple[int, str, str]]) -> httpx.MockTransport:
    """Build a transport answering ``host -> (status, content_type, body)``."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, content_type, body = pages[request.url.host.lower()]
        headers = {"content-type": content_type} if content_type else {}
        return httpx.Response(status, headers=headers, content=body.encode("utf-8"))

    return httpx.MockTransport(handler)


class TestAPI(TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def _post_with(self, pages, body):
        with mock.patch("blogfeeds.main.tools.page_fetcher._transport", _serve(pages)):
            return self.client.post("/", json=body)

    def test_routes_registered(self) -> None:
        routes = {(route.path, method) for route in app.routes for method in getattr(route, "methods", ())}
        self.assertIn(("/", "POST"), routes)
        self.assertIn(("/", "GET"), routes)

    def test_invalid_url_format(self) -> None:
        response = self.client.post("/", json={"blogUrl": "invalidLink.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.text, "<h1>400 Error</h1><p>Invalid Blog URL</p>")
        self.assertTrue(response.headers["content-type"].startswith("text/html"))

    def test_malformed_urls_rejected(self) -> None:
        for blog_url in ["", "example.com/blog", "//example.com", "https://", "mailto:me@example.com"]:
            with self.subTest(blog_url=blog_url):
                response = self.client.post("/", json={"blogUrl": blog_url})
                self.assertEqual(response.status_code, 400)
                self.assertIn("Invalid Blog URL", response.text)

    def test_missing_blog_url(self) -> None:
        response = self.client.post("/", json={})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.text, "<h1>400 Error</h1><p>Invalid Blog URL</p>")

    def test_non_json_body(self) -> None:
        response = self.client.post(
            "/", content=b"blogUrl=https://example.com", headers={"content-type": "application/json"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid Blog URL", response.text)

    def test_non_string_blog_url(self) -> None:
        response = self.client.post("/", json={"blogUrl": 42})
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid Blog URL", response.text)

    def test_non_ok_page(self) -> None:
        pages = {"notexistblogpage.com": (404, "text/html", "not found")}
        response = self._post_with(pages, {"blogUrl": "https://notExistBlogPage.com/"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.text, "<h1>400 Error</h1><p>Could not retrieve the blog page</p>")

    def test_non_html_content_type(self) -> None:
        pages = {"nothtmlresponse.com": (200, "text/xml", "<rss/>")}
        response = self._post_with(pages, {"blogUrl": "https://notHtmlResponse.com/"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("<h1>400 Error</h1>", response.text)

    def test_no_feed_discovered(self) -> None:
        pages = {"linkwithnofeedurls.com": (200, "text/html", EMPTY_PAGE)}
        response = self._post_with(pages, {"blogUrl": "https://LinkWithNoFeedUrls.com/"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.text, "<h1>404 Error</h1><p>No Feed Url Discovered</p>")

    def test_feeds_discovered(self) -> None:
        blog_url = "https://test321.blogspot.com/"
        pages = {"test321.blogspot.com": (200, "text/html", BLOGSPOT_PAGE)}
        response = self._post_with(pages, {"blogUrl": blog_url})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "feedUrls": [
                    "https://test321.blogspot.com/feeds/posts/default/-/open-source",
                    "https://test321.blogspot.com/feeds/posts/default/-/open-source?alt=rss",
                ]
            },
        )

    def test_unrequestable_urls_are_client_errors(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        pages = {"example.com": (200, "text/html", BLOGSPOT_PAGE)}
        urls = [
            "http://example.com/\x7f",
            "http://example.com/a\x01b",
            "http://xn--.com/",
            "http://" + "ä" * 70 + ".com/",
        ]
        with mock.patch("blogfeeds.main.tools.page_fetcher._transport", _serve(pages)):
            for blog_url in urls:
                with self.subTest(blog_url=blog_url):
                    response = client.post("/", json={"blogUrl": blog_url})
                    self.assertEqual(response.status_code, 400)
                    self.assertIn("<h1>400 Error</h1>", response.text)

    def test_charset_parameter_ignored(self) -> None:
        blog_url = "https://test321.blogspot.com/"
        pages = {"test321.blogspot.com": (200, "text/html; charset=UTF-8", BLOGSPOT_PAGE)}
        response = self._post_with(pages, {"blogUrl": blog_url})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()["feedUrls"]), 2)
