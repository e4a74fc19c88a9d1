"""ACP search - query the agent directory from Python or the `acp` command line."""

from acpsearch.client import AcpClient
from acpsearch.clients import SearchClient, is_empty_result_error
from acpsearch.exceptions import (
    AcpError,
    ClientError,
    ConfigurationError,
    RateLimitedError,
    ServerError,
    TransportError,
    UsageError,
)
from acpsearch.logging import configure_logging, get_logger
from acpsearch.params import SEARCH_DEFAULTS, build_params, validate_options
from acpsearch.transport import HTTPTransport
from acpsearch.types import (
    Agent,
    AgentJob,
    AgentMetrics,
    AgentResource,
    SearchOptions,
    SearchResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "AcpClient",
    "SearchClient",
    # Search
    "SearchOptions",
    "SearchResult",
    "SEARCH_DEFAULTS",
    "build_params",
    "validate_options",
    "is_empty_result_error",
    # Records
    "Agent",
    "AgentJob",
    "AgentMetrics",
    "AgentResource",
    # Exceptions
    "AcpError",
    "ConfigurationError",
    "UsageError",
    "TransportError",
    "ClientError",
    "RateLimitedError",
    "ServerError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
