"""Agent directory data models.

Records returned by the search endpoint. They are parsed once per response
and never mutated.
"""

from dataclasses import dataclass, field
from typing import Union

# Values allowed in open-ended maps (resource params, job requirements, ...)
ResourceValue = Union[str, int, float, bool, None, dict[str, "ResourceValue"], list["ResourceValue"]]


@dataclass(frozen=True)
class AgentMetrics:
    """Performance metrics. A None metric has not been computed."""

    successful_job_count: int | None
    success_rate: float | None  # percentage, 0-100
    unique_buyer_count: int | None
    mins_from_last_online_time: float | None
    is_online: bool


@dataclass(frozen=True)
class JobPrice:
    """Structured job price."""

    type: str
    value: float


@dataclass(frozen=True)
class AgentJob:
    """A service offering published by an agent."""

    id: int
    name: str
    description: str
    type: str
    price: float
    price_v2: JobPrice | None
    required_funds: bool
    sla_minutes: int | None
    requirement: dict[str, ResourceValue] = field(default_factory=dict)
    deliverable: dict[str, ResourceValue] = field(default_factory=dict)


@dataclass(frozen=True)
class AgentResource:
    """A named capability exposed by an agent."""

    name: str
    description: str | None = None
    url: str | None = None
    params: dict[str, ResourceValue] = field(default_factory=dict)
    extra: dict[str, ResourceValue] = field(default_factory=dict)


@dataclass(frozen=True)
class Agent:
    """An agent record from the directory."""

    id: int
    name: str
    description: str
    contract_address: str
    wallet_address: str
    twitter_handle: str
    profile_pic: str
    token_address: str | None
    cluster: str | None
    category: str | None
    symbol: str | None
    virtual_agent_id: int | None
    is_virtual_agent: bool
    metrics: AgentMetrics
    jobs: list[AgentJob] = field(default_factory=list)
    resources: list[AgentResource] = field(default_factory=list)
