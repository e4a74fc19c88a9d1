"""ACP search testing utilities.

Provides a mock client and factories for testing applications that use the
search client.
"""

from acpsearch.testing.fixtures import (
    create_agent_payload,
    create_mock_agent,
    create_mock_metrics,
)
from acpsearch.testing.mock import MockAcpClient, MockCall, MockResponse, MockSearchClient

__all__ = [
    # Mock client
    "MockAcpClient",
    "MockSearchClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_agent",
    "create_mock_metrics",
    "create_agent_payload",
]
