"""Pytest fixtures for article-widget tests."""

import pytest


@pytest.fixture
def sample_article_record():
    """Sample article document for testing.

    This matches the structure returned by the article API, with an
    English and a German entry and a localized channel.
    """
    return {
        "id": "66ce0559b660075a0efc7800",
        "published": "2024-08-27T16:48:57.000Z",
        "contents": {
            "en_US": {
                "title": "Quarterly results",
                "teaser": "Our numbers at a glance",
                "content": "<p>Revenue grew again.</p>",
                "image": {
                    "original": {
                        "url": "https://cdn.example.com/image/upload/results.jpg",
                        "width": 1200,
                        "height": 800,
                    }
                },
            },
            "de_DE": {
                "title": "Quartalszahlen",
                "teaser": None,
                "content": "<p>Der Umsatz ist wieder gestiegen.</p>",
            },
        },
        "channel": {
            "id": "5f1f0a",
            "config": {
                "localization": {
                    "en_US": {"title": "News"},
                    "de_DE": {"title": "Neuigkeiten"},
                }
            },
        },
    }


@pytest.fixture
def sample_media_record():
    """Sample media API response for an uploaded bundle."""
    return {
        "id": "66db0f3c",
        "name": "widget.js",
        "url": "https://app.example.com/api/media/66db0f3c",
        "created_at": "2024-09-06T16:29:48.000Z",
        "resourceInfo": {
            "type": "raw",
            "bytes": 2048,
            "url": "https://cdn.example.com/raw/upload/widget.js",
            "format": "js",
            "mimeType": "application/javascript",
        },
    }


@pytest.fixture
def api_config():
    """Configuration for the API clients."""
    return {"base_url": "https://app.example.com/api"}
