"""Tests for the MediaClient class."""

import asyncio
import json

import httpx
import pytest

from article_widget.clients import APIError, MediaClient, ValidationError
from schemas.media import MediaUploadResponse


def run(coro):
    """Run a coroutine to completion from a synchronous test."""
    return asyncio.run(coro)


def mock_http_client(base_url, handler):
    """Create an httpx.AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))


@pytest.fixture
def media_config():
    """Configuration for MediaClient."""
    return {"base_url": "https://app.example.com/api", "auth_token": "dG9rZW4="}


@pytest.fixture
def bundle(tmp_path):
    """A built widget bundle on disk."""
    path = tmp_path / "widget.js"
    path.write_text("console.log('widget');")
    return path


def make_client(config, handler):
    client = MediaClient(config)
    client._client = mock_http_client(client.base_url, handler)
    return client


class TestMediaClientConfiguration:
    """Tests for MediaClient configuration."""

    def test_requires_auth_token(self):
        """MediaClient raises ValueError without an auth token."""
        with pytest.raises(ValueError, match="auth_token"):
            MediaClient({"base_url": "https://app.example.com/api"})

    def test_basic_authorization_header(self, media_config):
        """MediaClient adds a Basic Authorization header."""
        client = MediaClient(media_config)

        assert client.headers["Authorization"] == "Basic dG9rZW4="


class TestMediaClientUpload:
    """Tests for MediaClient.upload()."""

    def test_upload_returns_media(self, media_config, bundle, sample_media_record):
        """upload() returns the created media resource."""
        client = make_client(
            media_config, lambda request: httpx.Response(200, json=sample_media_record)
        )

        media = run(client.upload(bundle))

        assert isinstance(media, MediaUploadResponse)
        assert media.resource_info.url == "https://cdn.example.com/raw/upload/widget.js"

    def test_upload_posts_multipart(self, media_config, bundle, sample_media_record):
        """upload() posts the file and metadata as multipart form data."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=sample_media_record)

        client = make_client(media_config, handler)
        run(client.upload(bundle, "my-widget.js"))

        request = seen[0]
        body = request.content.decode()
        assert request.method == "POST"
        assert str(request.url) == "https://app.example.com/api/media"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert 'filename="my-widget.js"' in body
        assert "console.log('widget');" in body
        assert json.dumps({"type": "raw", "fileName": "my-widget.js"}) in body

    def test_upload_missing_file(self, media_config, tmp_path):
        """upload() raises FileNotFoundError for a missing file."""
        client = MediaClient(media_config)

        with pytest.raises(FileNotFoundError):
            run(client.upload(tmp_path / "missing.js"))

    def test_upload_api_error(self, media_config, bundle):
        """A rejected upload raises APIError."""
        client = make_client(media_config, lambda request: httpx.Response(401))

        with pytest.raises(APIError) as exc_info:
            run(client.upload(bundle))

        assert exc_info.value.status_code == 401

    def test_upload_invalid_response(self, media_config, bundle):
        """A response without resource info raises ValidationError."""
        client = make_client(
            media_config, lambda request: httpx.Response(200, json={"id": "1"})
        )

        with pytest.raises(ValidationError):
            run(client.upload(bundle))
