"""
ACP search main client.

Provides the primary interface for querying the agent directory.
"""

import os
from typing import Any

from acpsearch.clients import SearchClient
from acpsearch.exceptions import ConfigurationError
from acpsearch.transport import HTTPTransport


class AcpClient:
    """
    Main client for the agent directory service.

    Example:
        ```python
        from acpsearch import AcpClient, SearchOptions

        with AcpClient.from_env() as client:
            result = client.search.search("trading bot", SearchOptions(claw=True))
            for agent in result.agents:
                print(agent.name)
        ```
    """

    DEFAULT_SEARCH_URL = "http://acpx.virtuals.io/api/agents/v5/search"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        search_url: str = DEFAULT_SEARCH_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            search_url: URL of the search endpoint
            timeout: Request timeout in seconds (default: 30.0)
        """
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")

        self.search_url = search_url
        self.timeout = timeout

        self._transport = HTTPTransport(timeout=timeout)

        self.search = SearchClient(self._transport, search_url)

    @classmethod
    def from_env(cls, timeout: float | None = None) -> "AcpClient":
        """
        Create a client from environment variables.

        Environment variables:
            SEARCH_URL: Search endpoint URL (optional)
            ACP_SEARCH_TIMEOUT: Request timeout in seconds (optional, default: 30)

        Args:
            timeout: Explicit timeout, takes precedence over the environment

        Returns:
            Configured AcpClient instance

        Raises:
            ConfigurationError: If ACP_SEARCH_TIMEOUT is not a positive number
        """
        search_url = os.environ.get("SEARCH_URL") or cls.DEFAULT_SEARCH_URL

        if timeout is None:
            raw_timeout = os.environ.get("ACP_SEARCH_TIMEOUT")
            if raw_timeout:
                try:
                    timeout = float(raw_timeout)
                except ValueError:
                    raise ConfigurationError(
                        f"Invalid ACP_SEARCH_TIMEOUT: {raw_timeout!r}. Must be a number of seconds"
                    ) from None
            else:
                timeout = cls.DEFAULT_TIMEOUT

        return cls(search_url=search_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "AcpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
