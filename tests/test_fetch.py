from __future__ import annotations

from tests import path_setup  # noqa: F401

import unittest
from datetime import datetime

import httpx

from html2plain.fetch.fetcher import FetchedDoc, content_charset, decode_content, fetch_url


class FetchTests(unittest.TestCase):
    def test_fetch_and_decode_declared_charset(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["user_agent"] = request.headers["user-agent"]
            return httpx.Response(
                200,
                content="<p>Café</p>".encode("latin-1"),
                headers={"Content-Type": "text/html; charset=ISO-8859-1"},
            )

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            doc = fetch_url("http://example.com/page", user_agent="test-agent", client=client)

        self.assertEqual(seen["user_agent"], "test-agent")
        self.assertEqual(doc.status_code, 200)
        self.assertEqual(doc.url, "http://example.com/page")
        self.assertEqual(decode_content(doc), "<p>Café</p>")

    def test_http_errors_propagate(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="missing")

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            with self.assertRaises(httpx.HTTPStatusError):
                fetch_url("http://example.com/missing", client=client)

    def test_decode_falls_back_to_utf8(self) -> None:
        doc = FetchedDoc(
            url="http://example.com",
            status_code=200,
            content="naïve".encode("utf-8"),
            headers={"content-type": "text/html; charset=x-not-a-charset"},
            retrieved_at=datetime.utcnow(),
        )
        self.assertEqual(decode_content(doc), "naïve")
        doc.headers = {}
        self.assertEqual(decode_content(doc), "naïve")

    def test_content_charset(self) -> None:
        self.assertEqual(content_charset({"content-type": "text/html; charset=UTF-8"}), "utf-8")
        self.assertIsNone(content_charset({"content-type": "text/html"}))
        self.assertIsNone(content_charset({}))


if __name__ == "__main__":
    unittest.main()
