"""
Integration tests against a live agent directory.

These tests send real requests to the search endpoint configured by SEARCH_URL.
"""

import os

import pytest

from acpsearch.client import AcpClient
from acpsearch.types.search import SearchOptions

# Skip all integration tests unless explicitly enabled
pytestmark = pytest.mark.skipif(
    os.environ.get("ACP_INTEGRATION_TESTS") != "1",
    reason="Integration tests require ACP_INTEGRATION_TESTS=1 and network access",
)


@pytest.fixture
def client():
    with AcpClient.from_env() as client:
        yield client


class TestLiveSearch:
    """End-to-end searches against the directory service."""

    def test_default_search(self, client: AcpClient) -> None:
        result = client.search.search("trading bot")

        assert result.params["isOnline"] == "true"
        assert result.params["hasGraduated"] == "true"
        for agent in result.agents:
            assert agent.name
            assert agent.metrics.is_online

    def test_claw_search(self, client: AcpClient) -> None:
        result = client.search.search("trading bot", SearchOptions(claw=True))

        for agent in result.agents:
            assert agent.cluster == "OPENCLAW"

    def test_impossible_filter_is_empty_not_error(self, client: AcpClient) -> None:
        result = client.search.search(
            "zzzz-no-such-agent-zzzz",
            SearchOptions(contains="zzzz-no-such-agent-zzzz", match="all", similarity_cutoff=1.0),
        )

        assert result.is_empty
