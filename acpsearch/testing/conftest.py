"""
Pytest plugin for ACP search testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["acpsearch.testing.conftest"]

Or import the fixtures directly:

    from acpsearch.testing.fixtures import mock_client, sample_agent
"""

# Re-export all fixtures for pytest auto-discovery
from acpsearch.testing.fixtures import (
    agent_payload,
    mock_client,
    mock_client_with_agents,
    sample_agent,
    sample_agents,
)

__all__ = [
    "mock_client",
    "sample_agent",
    "sample_agents",
    "agent_payload",
    "mock_client_with_agents",
]
