"""Base client for the widget's API requests."""

import logging
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class Client:
    """Base class for asynchronous API clients.

    Provides a lazy-initialized httpx.AsyncClient with async context manager
    support and configurable timeout, headers and cookies via dict config.
    Requests are sent once; failures are mapped to ClientError subclasses
    and never retried.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 30)
        headers: Additional headers to include in requests
        cookies: Session cookies sent with every request
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"]).rstrip("/")

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def cookies(self) -> dict[str, str]:
        return dict(self._config.get("cookies", {}))

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                cookies=self.cookies,
            )
        return self._client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP errors to exceptions.

        Args:
            response: The HTTP response to check

        Returns:
            The response if successful

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        url = str(response.url)

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {url}", url=url)
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {url}", url=url)
        else:
            raise APIError(
                f"API error {status_code}: {url}",
                status_code=status_code,
                url=url,
            )

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> httpx.Response:
        """Send a single request and check its status.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (appended to base_url)
            **kwargs: Additional arguments passed to httpx.AsyncClient.request

        Returns:
            The HTTP response

        Raises:
            ConnectionError: If the request fails due to network issues or a timeout
            APIError: If the API returns a non-2xx response
        """
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {method} {path}: {e}")
            raise ConnectionError(
                f"Request timed out: {method} {path}", url=f"{self.base_url}{path}"
            ) from e
        except httpx.TransportError as e:
            logger.warning(f"Connection error on {method} {path}: {e}")
            raise ConnectionError(
                f"Connection failed: {method} {path}", url=f"{self.base_url}{path}"
            ) from e

        return self._handle_response(response)

    async def get(self, path: str, **kwargs) -> httpx.Response:
        """Convenience method for GET requests."""
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> httpx.Response:
        """Convenience method for POST requests."""
        return await self._request("POST", path, **kwargs)

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON response body.

        Raises:
            ValidationError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(
                f"Response from {response.url} is not valid JSON",
                errors=[str(e)],
                url=str(response.url),
            ) from e
