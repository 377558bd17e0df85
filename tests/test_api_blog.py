"""Tests for the /blog API endpoints.

``fetch_document`` is patched where the router imports it, so no network
calls are made; the FastAPI TestClient drives the app in-process.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from blogseo.api.app import create_app
from blogseo.scraper.fetcher import FetchError, FetchErrorKind
from blogseo.scraper.models import Document, Heading, Image, Link, Metadata, ParsedContent, Platform

_URL = "https://example.com/post"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client():
    with TestClient(create_app(), raise_server_exceptions=True) as c:
        yield c


def _document() -> Document:
    content = ParsedContent(
        html='<h1>Hi</h1><p>Short answer.</p><img src="https://example.com/a.png">',
        plain_text="Hi Short answer.",
        headings=[Heading(level=1, text="Hi")],
        images=[Image(src="https://example.com/a.png")],
        links=[Link(href="https://other.com", text="ext", is_external=True)],
        word_count=3,
        reading_time=1,
    )
    return Document(
        url=_URL,
        metadata=Metadata(title="Hello", lang="en"),
        content=content,
        platform=Platform.GHOST,
    )


# ---------------------------------------------------------------------------
# POST /blog/fetch
# ---------------------------------------------------------------------------

class TestFetchEndpoint:
    def test_success(self, client) -> None:
        with patch("blogseo.api.routers.blog.fetch_document", return_value=_document()) as mock_fetch:
            resp = client.post("/blog/fetch", json={"url": _URL})

        mock_fetch.assert_called_once_with(_URL)
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert data["url"] == _URL
        assert data["platform"] == "ghost"
        assert data["metadata"]["title"] == "Hello"
        assert data["metadata"]["url"] == _URL
        assert data["structure"]["headings"] == [{"level": 1, "text": "Hi"}]
        assert data["structure"]["links"][0]["isExternal"] is True
        assert data["structure"]["readingTime"] == 1

    def test_missing_url(self, client) -> None:
        resp = client.post("/blog/fetch", json={})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "URL is required"}

    def test_missing_body(self, client) -> None:
        resp = client.post("/blog/fetch")
        assert resp.status_code == 400
        assert resp.json()["error"] == "URL is required"

    def test_wrong_type_is_400(self, client) -> None:
        resp = client.post("/blog/fetch", json={"url": 123})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Invalid request body"
        assert "details" in body

    def test_invalid_json_is_400(self, client) -> None:
        resp = client.post(
            "/blog/fetch", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid request body"

    @pytest.mark.parametrize("url", ["example.com", "ftp://example.com/x", "not a url"])
    def test_invalid_url(self, client, url: str) -> None:
        with patch("blogseo.api.routers.blog.fetch_document") as mock_fetch:
            resp = client.post("/blog/fetch", json={"url": url})

        mock_fetch.assert_not_called()
        assert resp.status_code == 400
        assert resp.json()["error"] == (
            "Invalid URL format. Please provide a valid HTTP or HTTPS URL."
        )

    @pytest.mark.parametrize(
        "kind, fragment",
        [
            (FetchErrorKind.FORBIDDEN, "blocking automated access"),
            (FetchErrorKind.NOT_FOUND, "not found"),
            (FetchErrorKind.TIMEOUT, "took too long"),
        ],
    )
    def test_fetch_errors_pass_through(self, client, kind: FetchErrorKind, fragment: str) -> None:
        with patch("blogseo.api.routers.blog.fetch_document", side_effect=FetchError(kind)):
            resp = client.post("/blog/fetch", json={"url": _URL})

        assert resp.status_code == 500
        body = resp.json()
        assert body["success"] is False
        assert fragment in body["error"]
        assert body["code"] == kind.value

    def test_unexpected_error(self, client) -> None:
        with patch(
            "blogseo.api.routers.blog.fetch_document", side_effect=RuntimeError("boom")
        ):
            resp = client.post("/blog/fetch", json={"url": _URL})

        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "An error occurred while fetching the blog",
            "details": "boom",
        }


# ---------------------------------------------------------------------------
# POST /blog/analyze
# ---------------------------------------------------------------------------

class TestAnalyzeEndpoint:
    def test_scores_html(self, client) -> None:
        resp = client.post(
            "/blog/analyze",
            json={
                "html": "<h1>Q?</h1><p>A.</p><h2>More</h2><ul><li>x</li></ul>",
                "metadata": {"title": "T", "publishDate": "2024-01-01"},
            },
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        analysis = data["analysis"]
        assert analysis["hasMainQuestion"] is True
        assert analysis["hasDirectAnswer"] is True
        assert analysis["hasProperFormatting"] is True
        assert analysis["hasAuthorInfo"] is True
        assert analysis["score"] == 15 + 15 + 13 + 12
        assert data["checklist"]["formatting"]["status"] == "complete"
        assert data["checklist"]["visuals"]["status"] == "incomplete"

    def test_plain_text_derived_when_omitted(self, client) -> None:
        resp = client.post("/blog/analyze", json={"html": "<p>Key takeaways below</p>"})
        assert resp.json()["data"]["analysis"]["hasTldr"] is True

    def test_explicit_plain_text_used(self, client) -> None:
        resp = client.post(
            "/blog/analyze", json={"html": "<p>Prose</p>", "plainText": "TL;DR prose"}
        )
        assert resp.json()["data"]["analysis"]["hasTldr"] is True

    def test_missing_html(self, client) -> None:
        resp = client.post("/blog/analyze", json={})
        assert resp.status_code == 400
        assert resp.json()["error"] == "HTML content is required"


class TestHealth:
    def test_health(self, client) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
