"""Exceptions raised by the widget API clients.

Every failure to obtain a usable response is a ClientError, so callers
that only care whether a fetch worked can catch the base class.
"""


class ClientError(Exception):
    """Base exception for all client errors.

    Attributes:
        message: Human-readable description
        url: URL of the failed request, when known
    """

    def __init__(self, message: str, *args, url: str | None = None, **kwargs):
        self.message = message
        self.url = url
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when a request gets no response (network failure or timeout)."""


class APIError(ClientError):
    """Raised when the API returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised when the API returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded", url: str | None = None):
        super().__init__(message, status_code=429, url=url)


class NotFoundError(APIError):
    """Raised when the API returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found", url: str | None = None):
        super().__init__(message, status_code=404, url=url)


class ValidationError(ClientError):
    """Raised when a response body is not JSON or does not match its schema."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
