"""Base HTTP client for Mailisk SDK."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..errors import ApiError, NetworkError, TimeoutError
from ..types import ClientConfig, LongPollPolicy, RequestOptions

logger = logging.getLogger("mailisk")

# Redirect ceiling for requests that do not override it
STANDARD_MAX_REDIRECTS = 20


def encode_path_segment(value: str) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode.

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(value, safe="")


class BaseApiClient:
    """Base HTTP client for the Mailisk API.

    Provides common HTTP operations used by all domain-specific clients.
    Errors are raised once; there is no retry.

    httpx fixes the redirect ceiling per client, so one underlying client
    is kept per ceiling in use. Every one of them carries the same base
    URL, API key header and basic-auth credentials.

    Attributes:
        config: Client configuration.
        long_poll: Defaults applied to waiting searches.
    """

    def __init__(self, config: ClientConfig, long_poll: LongPollPolicy | None = None) -> None:
        """Initialize the base API client.

        Args:
            config: Client configuration with API key and settings.
            long_poll: Defaults for waiting searches.
        """
        self.config = config
        self.long_poll = long_poll or LongPollPolicy()
        self._clients: dict[int, httpx.AsyncClient] = {}

    async def _get_client(self, max_redirects: int = STANDARD_MAX_REDIRECTS) -> httpx.AsyncClient:
        """Get or create the HTTP client for a redirect ceiling.

        Args:
            max_redirects: Maximum number of redirects the client follows.

        Returns:
            The HTTP client instance.
        """
        client = self._clients.get(max_redirects)
        if client is None or client.is_closed:
            auth = None
            if self.config.auth is not None:
                auth = httpx.BasicAuth(self.config.auth.username, self.config.auth.password)
            client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={"X-Api-Key": self.config.api_key},
                auth=auth,
                timeout=httpx.Timeout(self.config.timeout / 1000),
                follow_redirects=True,
                max_redirects=max_redirects,
            )
            self._clients[max_redirects] = client
        return client

    async def close(self) -> None:
        """Close all HTTP clients."""
        clients = list(self._clients.values())
        self._clients.clear()
        for client in clients:
            if not client.is_closed:
                await client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        """Make an HTTP request against the API.

        Args:
            method: HTTP method (GET, POST).
            path: API path, relative to the base URL.
            json: JSON body for the request.
            params: Query parameters.
            options: Per-request timeout and redirect overrides.

        Returns:
            The HTTP response.

        Raises:
            ApiError: If the server answers with an error status.
            TimeoutError: If the request times out.
            NetworkError: If there's a network communication failure.
        """
        options = options or RequestOptions()
        max_redirects = options.max_redirects
        if max_redirects is None:
            max_redirects = STANDARD_MAX_REDIRECTS
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        if options.timeout is not None:
            timeout = httpx.Timeout(options.timeout / 1000)

        client = await self._get_client(max_redirects)
        logger.debug("%s %s", method, path)
        try:
            response = await client.request(method, path, json=json, params=params, timeout=timeout)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error: {e}") from e

        if response.status_code >= 400:
            self._handle_error_response(response)

        return response

    async def _fetch_url(self, url: str) -> bytes:
        """Fetch raw bytes from an absolute, pre-authorised URL.

        The request goes through a throwaway client so that neither the
        API key nor basic-auth credentials are sent to the URL's host.

        Args:
            url: Absolute URL to download.

        Returns:
            The response body.

        Raises:
            ApiError: If the server answers with an error status.
            TimeoutError: If the request times out.
            NetworkError: If there's a network communication failure.
        """
        logger.debug("GET %s (unauthenticated)", url.split("?", 1)[0])
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout / 1000),
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(url)
            except httpx.TimeoutException as e:
                raise TimeoutError(f"Request timed out: {e}") from e
            except httpx.RequestError as e:
                raise NetworkError(f"Network error: {e}") from e

        if response.status_code >= 400:
            self._handle_error_response(response)

        return response.content

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        Args:
            response: The HTTP response.

        Raises:
            ApiError: Always.
        """
        try:
            data = response.json()
            message = data.get("message", data.get("error", response.text))
        except (ValueError, AttributeError, json.JSONDecodeError):
            message = response.text or f"HTTP {response.status_code}"

        raise ApiError(response.status_code, str(message))
