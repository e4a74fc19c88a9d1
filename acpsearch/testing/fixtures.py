"""
Pytest fixtures for ACP search testing.

Provides agent factories and common fixtures for testing code that uses
the search client.
"""

from typing import Any, Generator

import pytest

from acpsearch.testing.mock import MockAcpClient
from acpsearch.types.agents import Agent, AgentJob, AgentMetrics, AgentResource, JobPrice


# ============================================================================
# Factories
# ============================================================================


def create_mock_metrics(**kwargs: Any) -> AgentMetrics:
    """
    Create AgentMetrics with customizable fields.

    Args:
        **kwargs: Fields to override

    Returns:
        AgentMetrics object
    """
    defaults: dict[str, Any] = {
        "successful_job_count": 42,
        "success_rate": 97.5,
        "unique_buyer_count": 12,
        "mins_from_last_online_time": 3,
        "is_online": True,
    }
    defaults.update(kwargs)
    return AgentMetrics(**defaults)


def create_mock_agent(
    agent_id: int = 1001,
    name: str = "test-agent",
    metrics: AgentMetrics | None = None,
    **kwargs: Any,
) -> Agent:
    """
    Create an Agent with customizable fields.

    Args:
        agent_id: Agent ID
        name: Agent name
        metrics: Agent metrics (default: create_mock_metrics())
        **kwargs: Additional fields to override

    Returns:
        Agent object
    """
    defaults: dict[str, Any] = {
        "description": "A test agent",
        "contract_address": "0x" + "1" * 40,
        "wallet_address": "0x" + "2" * 40,
        "twitter_handle": "test_agent",
        "profile_pic": "",
        "token_address": None,
        "cluster": None,
        "category": "Trading",
        "symbol": None,
        "virtual_agent_id": None,
        "is_virtual_agent": False,
        "jobs": [],
        "resources": [],
    }
    defaults.update(kwargs)
    return Agent(
        id=agent_id,
        name=name,
        metrics=metrics or create_mock_metrics(),
        **defaults,
    )


def create_agent_payload(
    agent_id: int = 1001,
    name: str = "test-agent",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create an agent record as the search endpoint returns it (camelCase JSON).

    Args:
        agent_id: Agent ID
        name: Agent name
        **kwargs: Top-level fields to override

    Returns:
        JSON-compatible agent dictionary
    """
    payload: dict[str, Any] = {
        "id": agent_id,
        "name": name,
        "description": "A test agent",
        "contractAddress": "0x" + "1" * 40,
        "walletAddress": "0x" + "2" * 40,
        "twitterHandle": "test_agent",
        "profilePic": "",
        "tokenAddress": None,
        "cluster": None,
        "category": "Trading",
        "symbol": None,
        "virtualAgentId": None,
        "isVirtualAgent": False,
        "metrics": {
            "successfulJobCount": 42,
            "successRate": 97.5,
            "uniqueBuyerCount": 12,
            "minsFromLastOnlineTime": 3,
            "isOnline": True,
        },
        "jobs": [
            {
                "id": 7,
                "name": "market_scan",
                "description": "Scan markets",
                "type": "service",
                "price": 1.5,
                "priceV2": {"type": "fixed", "value": 1.5},
                "requiredFunds": False,
                "slaMinutes": 5,
                "requirement": {"symbol": "string"},
                "deliverable": {"report": "string"},
            }
        ],
        "resources": [
            {
                "name": "price_feed",
                "description": "Live prices",
                "url": "https://example.com/feed",
                "params": {"interval": 60, "live": True},
                "version": "2",
            }
        ],
    }
    payload.update(kwargs)
    return payload


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockAcpClient, None, None]:
    """
    Provide a MockAcpClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.search.configure_search(agents=[create_mock_agent()])
            run_my_feature(mock_client)
            assert mock_client.was_called("search.search")
        ```
    """
    client = MockAcpClient()
    yield client
    client.reset()


@pytest.fixture
def sample_agent() -> Agent:
    """Provide a sample Agent for testing."""
    return create_mock_agent(
        jobs=[
            AgentJob(
                id=7,
                name="market_scan",
                description="Scan markets",
                type="service",
                price=1.5,
                price_v2=JobPrice(type="fixed", value=1.5),
                required_funds=False,
                sla_minutes=5,
            )
        ],
        resources=[AgentResource(name="price_feed", params={"interval": 60})],
    )


@pytest.fixture
def sample_agents() -> list[Agent]:
    """Provide a small ranked list of agents, including one with unknown metrics."""
    return [
        create_mock_agent(agent_id=1, name="Alpha Trader"),
        create_mock_agent(
            agent_id=2,
            name="A very long agent name exceeding twenty chars",
            category=None,
            metrics=create_mock_metrics(
                successful_job_count=None,
                success_rate=None,
                unique_buyer_count=None,
                is_online=False,
            ),
        ),
    ]


@pytest.fixture
def agent_payload() -> dict[str, Any]:
    """Provide a raw agent record as returned by the search endpoint."""
    return create_agent_payload()


@pytest.fixture
def mock_client_with_agents(
    mock_client: MockAcpClient, sample_agents: list[Agent]
) -> MockAcpClient:
    """Provide a mock client whose searches return sample_agents."""
    mock_client.search.configure_search(agents=sample_agents)
    return mock_client


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "sample_agent",
    "sample_agents",
    "agent_payload",
    "mock_client_with_agents",
    # Helper functions
    "create_mock_metrics",
    "create_mock_agent",
    "create_agent_payload",
]
