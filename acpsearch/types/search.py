"""Search request and result models."""

from dataclasses import dataclass, field
from typing import Literal

from acpsearch.types.agents import Agent

SearchMode = Literal["hybrid", "vector", "keyword"]
GraduationFilter = Literal["graduated", "ungraduated", "all"]
OnlineFilter = Literal["online", "offline", "all"]
MatchMode = Literal["all", "any"]

# Why a search came back without agents
EmptyReason = Literal["empty", "malformed_payload", "backend_query_error"]


@dataclass
class SearchOptions:
    """User-facing search options. None means "not supplied"."""

    mode: SearchMode | str | None = None
    graduation: GraduationFilter | str | None = None
    online: OnlineFilter | str | None = None
    claw: bool = False
    contains: str | None = None
    match: MatchMode | str | None = None
    performance_weight: float | None = None
    similarity_cutoff: float | None = None
    sparse_cutoff: float | None = None


@dataclass(frozen=True)
class SearchDefaults:
    """Server-side defaults, documented for help text and the summary line."""

    mode: SearchMode = "hybrid"
    online: OnlineFilter = "online"
    performance_weight: float = 0.97
    similarity_cutoff: float = 0.5
    sparse_cutoff: float = 0.0
    match: MatchMode = "all"


@dataclass
class SearchResult:
    """Outcome of one search call."""

    query: str
    params: dict[str, str]
    agents: list[Agent] = field(default_factory=list)
    empty_reason: EmptyReason | None = None

    @property
    def is_empty(self) -> bool:
        return not self.agents
