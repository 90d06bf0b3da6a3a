"""Network clients for the CMS APIs."""

from .article_client import ArticleClient
from .client import Client
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .media_client import MediaClient

__all__ = [
    "Client",
    "ArticleClient",
    "MediaClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
]
