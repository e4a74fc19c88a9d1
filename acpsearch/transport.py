"""
HTTP Transport for ACP search.

Handles HTTP communication with the agent directory service and turns
failures into typed exceptions. Every call is a single attempt.
"""

import time
from typing import Any

import httpx

from acpsearch.exceptions import (
    ClientError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from acpsearch.logging import log_http_request, log_http_response


class HTTPTransport:
    """
    HTTP transport layer for the directory service.

    Handles:
    - A bounded request timeout
    - Request/response debug logging with sensitive data masked
    - Error response parsing into typed exceptions
    """

    def __init__(self, timeout: float = 30.0) -> None:
        """
        Initialize HTTP transport.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

        self._client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """
        Make a GET request.

        Args:
            url: Absolute endpoint URL
            params: Query parameters

        Returns:
            Parsed JSON response, or None when a successful response has no JSON body

        Raises:
            TransportError: On network errors, timeouts, or error status codes
        """
        return self.request("GET", url, params=params)

    def request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """
        Make a single request and parse its JSON body.

        Args:
            method: HTTP method
            url: Absolute endpoint URL
            params: Query parameters

        Returns:
            Parsed JSON response, or None when a successful response has no JSON body

        Raises:
            TransportError: On network errors, timeouts, or error status codes
        """
        log_http_request(method, url, params=params)
        started = time.monotonic()

        try:
            response = self._client.request(method, url, params=params)
        except httpx.TimeoutException as e:
            raise TransportError(
                "TIMEOUT", f"Request timed out after {self.timeout}s: {e}"
            ) from e
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", str(e)) from e
        except httpx.InvalidURL as e:
            # Not a RequestError: raised while building the request
            raise TransportError("INVALID_URL", f"Invalid search URL {url!r}: {e}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        log_http_response(response.status_code, url, response.text, elapsed_ms)

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        try:
            return response.json()
        except ValueError:
            return None

    def _parse_error_response(self, response: httpx.Response) -> TransportError:
        """
        Parse an error response into a typed exception.

        The backend reports errors in several shapes; the message is taken from
        ``error.message``, a top-level ``message``, or the raw body text.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate TransportError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            data = {}

        error = data.get("error")
        if isinstance(error, dict):
            code = error.get("code", "UNKNOWN_ERROR")
            message = error.get("message")
        else:
            code = data.get("code", "UNKNOWN_ERROR")
            message = error if isinstance(error, str) else None
        message = message or data.get("message") or response.text.strip()
        if not message:
            message = f"HTTP {response.status_code}"
        meta = data.get("meta")
        request_id = meta.get("requestId") if isinstance(meta, dict) else None

        status_code = response.status_code

        if status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(str(code), str(message), retry_after, request_id)
        elif status_code >= 500:
            return ServerError(str(code), str(message), request_id, status_code)
        else:
            return ClientError(str(code), str(message), request_id, status_code)
