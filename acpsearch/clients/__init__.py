"""ACP search resource clients."""

from acpsearch.clients.search import SearchClient, is_empty_result_error

__all__ = [
    "SearchClient",
    "is_empty_result_error",
]
