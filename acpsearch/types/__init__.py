"""ACP search type definitions.

This module exports all data model types used by the package.
"""

from acpsearch.types.agents import (
    Agent,
    AgentJob,
    AgentMetrics,
    AgentResource,
    JobPrice,
    ResourceValue,
)
from acpsearch.types.search import (
    EmptyReason,
    GraduationFilter,
    MatchMode,
    OnlineFilter,
    SearchDefaults,
    SearchMode,
    SearchOptions,
    SearchResult,
)

__all__ = [
    # Agent records
    "Agent",
    "AgentJob",
    "AgentMetrics",
    "AgentResource",
    "JobPrice",
    "ResourceValue",
    # Search types
    "SearchOptions",
    "SearchDefaults",
    "SearchResult",
    "SearchMode",
    "GraduationFilter",
    "OnlineFilter",
    "MatchMode",
    "EmptyReason",
]
