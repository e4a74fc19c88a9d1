"""
Search parameter building and option validation.

Translates user-facing SearchOptions into the query-parameter contract of the
directory search endpoint. Nothing here performs I/O.
"""

from dataclasses import dataclass

from acpsearch.exceptions import UsageError
from acpsearch.types.search import SearchDefaults, SearchOptions

SEARCH_DEFAULTS = SearchDefaults()

# Friendly mode -> API searchMode
MODE_MAP: dict[str, str] = {
    "hybrid": "hybrid",
    "vector": "dense",
    "keyword": "sparse",
}

ONLINE_VALUES = ("online", "offline", "all")
GRADUATION_VALUES = ("graduated", "ungraduated", "all")

CLAW_CLUSTER = "OPENCLAW"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a query and its options."""

    error: UsageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_number(value: float) -> str:
    """Stringify a number without a trailing ``.0`` for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def effective_online(options: SearchOptions) -> str:
    return options.online or SEARCH_DEFAULTS.online


def default_graduation(claw: bool) -> str:
    """
    Graduation filter applied when none is given.

    With ``claw`` the default is "all": no claw-cluster agent has graduated yet,
    so defaulting to "graduated" would always return nothing.
    """
    return "all" if claw else "graduated"


def effective_graduation(options: SearchOptions) -> str:
    return options.graduation or default_graduation(options.claw)


def validate_options(query: str, options: SearchOptions) -> ValidationResult:
    """
    Validate a query and its options before anything is sent.

    Args:
        query: Free-text query
        options: Search options

    Returns:
        ValidationResult carrying the first UsageError found, if any
    """
    if not query or not query.strip():
        return ValidationResult(
            UsageError("Usage: acp search <query>\n  Run `acp search --help` for all options.")
        )

    if options.match and not options.contains:
        return ValidationResult(UsageError("--match requires --contains"))

    if options.online and options.online not in ONLINE_VALUES:
        return ValidationResult(
            UsageError(f'Invalid online filter "{options.online}". Use: online, offline, all')
        )

    if options.graduation and options.graduation not in GRADUATION_VALUES:
        return ValidationResult(
            UsageError(
                f'Invalid graduation filter "{options.graduation}". '
                "Use: graduated, ungraduated, all"
            )
        )

    return ValidationResult()


def build_params(query: str, options: SearchOptions) -> dict[str, str]:
    """
    Build query parameters for the search endpoint.

    Reranking values are only sent when supplied; the server applies its own
    defaults otherwise.

    Args:
        query: Free-text query
        options: Search options

    Returns:
        Flat string-keyed parameter mapping

    Raises:
        UsageError: If the search mode is unknown
    """
    params: dict[str, str] = {"query": query}

    if options.mode:
        api_mode = MODE_MAP.get(options.mode)
        if api_mode is None:
            raise UsageError(
                f'Invalid search mode "{options.mode}". Use: hybrid, vector, keyword'
            )
        params["searchMode"] = api_mode

    online = effective_online(options)
    if online == "online":
        params["isOnline"] = "true"
    elif online == "offline":
        params["isOnline"] = "false"

    graduation = effective_graduation(options)
    if graduation == "graduated":
        params["hasGraduated"] = "true"
    elif graduation == "ungraduated":
        params["hasGraduated"] = "false"

    if options.claw:
        params["cluster"] = CLAW_CLUSTER

    if options.contains:
        params["fullTextFilter"] = options.contains
    if options.match:
        params["fullTextMatch"] = options.match

    if options.performance_weight is not None:
        params["performanceWeight"] = format_number(options.performance_weight)
    if options.similarity_cutoff is not None:
        params["similarityCutoff"] = format_number(options.similarity_cutoff)
    if options.sparse_cutoff is not None:
        params["sparseCutoff"] = format_number(options.sparse_cutoff)

    return params
