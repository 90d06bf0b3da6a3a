"""Tests for the ArticleClient class."""

import asyncio

import httpx
import pytest

from article_widget.clients import (
    APIError,
    ArticleClient,
    ClientError,
    NotFoundError,
    ValidationError,
)
from schemas.article import RawArticleData


def run(coro):
    """Run a coroutine to completion from a synchronous test."""
    return asyncio.run(coro)


def mock_http_client(base_url, handler):
    """Create an httpx.AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))


def make_client(config, handler):
    client = ArticleClient(config)
    client._client = mock_http_client(client.base_url, handler)
    return client


class TestArticleClientFetch:
    """Tests for ArticleClient.fetch() method."""

    def test_fetch_returns_raw_article(self, api_config, sample_article_record):
        """fetch() returns a validated RawArticleData."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, json=sample_article_record)
        )

        raw = run(client.fetch("66ce0559b660075a0efc7800"))

        assert isinstance(raw, RawArticleData)
        assert raw.content_for("en_US").title == "Quarterly results"

    def test_fetch_requests_article_path(self, api_config, sample_article_record):
        """fetch() sends a GET to /articles/{id} under the base URL."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=sample_article_record)

        client = make_client(api_config, handler)
        run(client.fetch("66ce0559b660075a0efc7800"))

        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert (
            str(seen[0].url)
            == "https://app.example.com/api/articles/66ce0559b660075a0efc7800"
        )

    def test_fetch_sends_session_cookies(self, sample_article_record):
        """fetch() includes configured cookies with the request."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=sample_article_record)

        client = ArticleClient(
            {"base_url": "https://app.example.com/api", "cookies": {"session": "abc"}}
        )
        client._client = httpx.AsyncClient(
            base_url=client.base_url,
            cookies=client.cookies,
            transport=httpx.MockTransport(handler),
        )
        run(client.fetch("1"))

        assert seen[0].headers["cookie"] == "session=abc"

    def test_fetch_without_validation(self, api_config, sample_article_record):
        """fetch(validate=False) returns the decoded body."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, json=sample_article_record)
        )

        data = run(client.fetch("1", validate=False))

        assert data == sample_article_record

    def test_fetch_rejects_empty_id(self, api_config):
        """fetch() raises ValueError for an empty identifier."""
        client = ArticleClient(api_config)

        with pytest.raises(ValueError, match="article_id"):
            run(client.fetch(""))

    def test_fetch_not_found(self, api_config):
        """A 404 raises NotFoundError."""
        client = make_client(api_config, lambda request: httpx.Response(404))

        with pytest.raises(NotFoundError):
            run(client.fetch("missing"))

    def test_fetch_server_error(self, api_config):
        """A 5xx raises APIError, a ClientError."""
        client = make_client(api_config, lambda request: httpx.Response(503))

        with pytest.raises(APIError) as exc_info:
            run(client.fetch("1"))

        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value, ClientError)

    def test_fetch_invalid_json(self, api_config):
        """A non-JSON body raises ValidationError."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, text="<html></html>")
        )

        with pytest.raises(ValidationError):
            run(client.fetch("1"))

    def test_fetch_schema_mismatch(self, api_config):
        """A body that does not match the schema raises ValidationError."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, json={"contents": "oops"})
        )

        with pytest.raises(ValidationError, match="Article 1 failed validation") as exc_info:
            run(client.fetch("1"))

        assert exc_info.value.errors

    def test_fetch_allows_missing_contents(self, api_config):
        """A body without contents is still a valid document."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, json={"published": True})
        )

        raw = run(client.fetch("1"))

        assert raw.contents is None
        assert raw.published is True

    def test_fetch_null_body_returns_none(self, api_config):
        """A JSON null body is returned as None rather than a failure."""
        client = make_client(
            api_config, lambda request: httpx.Response(200, content=b"null")
        )

        assert run(client.fetch("1")) is None

    def test_fetch_tolerates_malformed_unused_language(self, api_config):
        """A bad entry in one language does not reject the document."""
        body = {
            "contents": {"en_US": {"title": "Hi"}, "de_DE": {"title": 5}},
            "published": True,
        }
        client = make_client(api_config, lambda request: httpx.Response(200, json=body))

        raw = run(client.fetch("1"))

        assert raw.content_for("en_US").title == "Hi"
        assert raw.content_for("de_DE") is None
