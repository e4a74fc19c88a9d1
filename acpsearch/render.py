"""Rendering of search settings and result tables."""

from typing import TYPE_CHECKING

from acpsearch.params import (
    SEARCH_DEFAULTS,
    default_graduation,
    effective_graduation,
    effective_online,
    format_number,
)
from acpsearch.types.agents import Agent
from acpsearch.types.search import SearchOptions

if TYPE_CHECKING:
    from acpsearch.output import Console

ELLIPSIS = "…"

# (header, width, right-aligned)
COLUMNS = (
    ("#", 4, True),
    ("Name", 20, False),
    ("ID", 6, False),
    ("Category", 16, False),
    ("Success", 9, True),
    ("Jobs", 6, True),
    ("Buyers", 8, True),
    ("Online", 6, False),
)

# Columns whose values are cut to fit
_TRUNCATED = {"Name", "Category"}


def truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 1] + ELLIPSIS
    return text


def _count(value: float | None) -> str:
    return "-" if value is None else format_number(value)


def _format_row(cells: list[str]) -> str:
    parts = []
    for (header, width, right), cell in zip(COLUMNS, cells):
        if header in _TRUNCATED:
            cell = truncate(cell, width)
        parts.append(cell.rjust(width) if right else cell.ljust(width))
    return "  " + "  ".join(parts)


def format_agent_cells(rank: int, agent: Agent) -> list[str]:
    metrics = agent.metrics
    return [
        str(rank),
        agent.name,
        str(agent.id),
        agent.category if agent.category is not None else "-",
        f"{metrics.success_rate:.1f}%" if metrics.success_rate is not None else "-",
        _count(metrics.successful_job_count),
        _count(metrics.unique_buyer_count),
        "Yes" if metrics.is_online else "No",
    ]


def format_table(agents: list[Agent]) -> list[str]:
    """
    Format agents as fixed-width table lines.

    The first line is the header. Agents keep the order the server ranked them in.
    """
    lines = [_format_row([header for header, _, _ in COLUMNS])]
    for rank, agent in enumerate(agents, start=1):
        lines.append(_format_row(format_agent_cells(rank, agent)))
    return lines


def render_table(agents: list[Agent], console: "Console") -> None:
    header, *rows = format_table(agents)
    console.log(console.dim(header))
    for row in rows:
        console.log(row)


def format_summary(options: SearchOptions) -> str:
    """
    Describe the effective search settings in one line.

    Mode and rerank weight are always shown. Filters are listed only when
    they differ from what the server applies by default.
    """
    parts = [
        f"mode={options.mode or SEARCH_DEFAULTS.mode}",
        "rerank weight="
        + format_number(
            options.performance_weight
            if options.performance_weight is not None
            else SEARCH_DEFAULTS.performance_weight
        ),
    ]

    filters: list[str] = []
    graduation = effective_graduation(options)
    if graduation not in ("all", default_graduation(options.claw)):
        filters.append(graduation)
    online = effective_online(options)
    if online not in ("all", SEARCH_DEFAULTS.online):
        filters.append(online)
    if options.claw:
        filters.append("claw")
    if options.contains:
        match = options.match or SEARCH_DEFAULTS.match
        filters.append(f'contains="{options.contains}" (match={match})')

    if filters:
        parts.append(", ".join(filters))

    return " · ".join(parts)
