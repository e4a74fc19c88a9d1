"""Agent search resource client."""

import math
from typing import TYPE_CHECKING, Any

from acpsearch.exceptions import TransportError
from acpsearch.logging import get_logger
from acpsearch.params import build_params
from acpsearch.types.agents import (
    Agent,
    AgentJob,
    AgentMetrics,
    AgentResource,
    JobPrice,
)
from acpsearch.types.search import SearchOptions, SearchResult

if TYPE_CHECKING:
    from acpsearch.transport import HTTPTransport

_logger = get_logger("search")

# Substrings the backend emits when a filter combination produces an invalid
# SQL query (e.g. an empty ``WHERE ... IN ()``)
_EMPTY_RESULT_ERROR_MARKERS = ("syntax", "SQL")

_RESOURCE_FIELDS = ("name", "description", "url", "params")


def is_empty_result_error(message: str) -> bool:
    """Return True if a failure message is the backend's empty-result quirk."""
    return any(marker in message for marker in _EMPTY_RESULT_ERROR_MARKERS)


def _metric(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def parse_metrics(data: dict[str, Any]) -> AgentMetrics:
    """Parse an agent metrics object. Missing or non-numeric values become None."""
    return AgentMetrics(
        successful_job_count=_metric(data.get("successfulJobCount")),
        success_rate=_metric(data.get("successRate")),
        unique_buyer_count=_metric(data.get("uniqueBuyerCount")),
        mins_from_last_online_time=_metric(data.get("minsFromLastOnlineTime")),
        is_online=bool(data.get("isOnline", False)),
    )


def parse_job(data: dict[str, Any]) -> AgentJob:
    price_v2 = data.get("priceV2")
    return AgentJob(
        id=data.get("id", 0),
        name=data.get("name", ""),
        description=data.get("description", ""),
        type=data.get("type", ""),
        price=data.get("price", 0),
        price_v2=(
            JobPrice(type=price_v2.get("type", ""), value=price_v2.get("value", 0))
            if isinstance(price_v2, dict)
            else None
        ),
        required_funds=bool(data.get("requiredFunds", False)),
        sla_minutes=data.get("slaMinutes"),
        requirement=_mapping(data.get("requirement")),
        deliverable=_mapping(data.get("deliverable")),
    )


def parse_resource(data: dict[str, Any]) -> AgentResource:
    # Resources may carry arbitrary additional fields
    return AgentResource(
        name=data.get("name", ""),
        description=data.get("description"),
        url=data.get("url"),
        params=_mapping(data.get("params")),
        extra={k: v for k, v in data.items() if k not in _RESOURCE_FIELDS},
    )


def parse_agent(data: dict[str, Any]) -> Agent:
    """
    Parse an agent record from the search response.

    Args:
        data: Agent object as returned by the directory service

    Returns:
        Agent record
    """
    return Agent(
        id=data.get("id", 0),
        name=data.get("name") or "",
        description=data.get("description") or "",
        contract_address=data.get("contractAddress") or "",
        wallet_address=data.get("walletAddress") or "",
        twitter_handle=data.get("twitterHandle") or "",
        profile_pic=data.get("profilePic") or "",
        token_address=data.get("tokenAddress"),
        cluster=data.get("cluster"),
        category=data.get("category"),
        symbol=data.get("symbol"),
        virtual_agent_id=data.get("virtualAgentId"),
        is_virtual_agent=bool(data.get("isVirtualAgent", False)),
        metrics=parse_metrics(_mapping(data.get("metrics"))),
        jobs=[parse_job(job) for job in data.get("jobs") or [] if isinstance(job, dict)],
        resources=[
            parse_resource(resource)
            for resource in data.get("resources") or []
            if isinstance(resource, dict)
        ],
    )


class SearchClient:
    """Client for the agent search endpoint."""

    def __init__(self, transport: "HTTPTransport", search_url: str) -> None:
        """
        Initialize the search client.

        Args:
            transport: HTTP transport for making requests
            search_url: Absolute URL of the search endpoint
        """
        self.transport = transport
        self.search_url = search_url

    def search(self, query: str, options: SearchOptions | None = None) -> SearchResult:
        """
        Search agents.

        Exactly one request is made. A successful response without a usable
        ``data`` list, and a failure caused by the backend's SQL quirk, both
        yield an empty result instead of an error.

        Args:
            query: Free-text query
            options: Filters and reranking options

        Returns:
            SearchResult with agents in server rank order

        Raises:
            UsageError: If the search mode is unknown
            TransportError: On any other request failure
        """
        options = options or SearchOptions()
        params = build_params(query, options)

        try:
            response = self.transport.get(self.search_url, params=params)
        except TransportError as e:
            if is_empty_result_error(e.message):
                _logger.info("Backend query error treated as empty result: %s", e.message)
                return SearchResult(query, params, empty_reason="backend_query_error")
            raise

        data = response.get("data") if isinstance(response, dict) else None

        if not isinstance(data, list):
            _logger.info("Search response has no data list; treating as empty result")
            return SearchResult(query, params, empty_reason="malformed_payload")

        if not data:
            return SearchResult(query, params, empty_reason="empty")

        agents = [parse_agent(item) for item in data if isinstance(item, dict)]
        return SearchResult(
            query,
            params,
            agents=agents,
            empty_reason=None if agents else "malformed_payload",
        )
