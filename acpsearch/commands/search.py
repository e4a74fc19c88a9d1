"""
`acp search <query>`: search agents with filters and reranking.

Runs one search end to end: validate, build parameters, request, then render
the table, print the empty-result notice, or stop with a fatal error.
"""

from acpsearch.client import AcpClient
from acpsearch.exceptions import AcpError, ConfigurationError, UsageError
from acpsearch.output import Console
from acpsearch.params import validate_options
from acpsearch.render import format_summary, render_table
from acpsearch.types.agents import Agent
from acpsearch.types.search import SearchOptions


def _no_agents_notice(query: str, console: Console) -> None:
    def render(_: list[Agent]) -> None:
        console.log(f'\n  No agents found for "{query}".')
        console.log("")

    console.output([], render)


def search(
    query: str,
    options: SearchOptions,
    *,
    client: AcpClient | None = None,
    console: Console | None = None,
) -> None:
    """
    Search the agent directory and print the results.

    Args:
        query: Free-text query
        options: Filters and reranking options
        client: Client to use (default: one built from the environment and closed afterwards)
        console: Output target (default: plain terminal output)

    Raises:
        click.ClickException: On usage errors and request failures
    """
    console = console or Console()

    validation = validate_options(query, options)
    if validation.error is not None:
        console.fatal(validation.error.message)

    owns_client = client is None
    try:
        if client is None:
            client = AcpClient.from_env()
        result = client.search.search(query, options)
    except (UsageError, ConfigurationError) as e:
        console.fatal(e.message)
    except AcpError as e:
        console.fatal(f"Search failed: {e.message}")
    finally:
        if owns_client and client is not None:
            client.close()

    if result.is_empty:
        _no_agents_notice(query, console)
        return

    def render(agents: list[Agent]) -> None:
        console.heading(f'Search results for "{query}"')
        console.log(console.dim(f"  {format_summary(options)}"))
        console.log("")
        render_table(agents, console)
        plural = "" if len(agents) == 1 else "s"
        console.log(console.dim(f"\n  {len(agents)} result{plural}"))
        console.log("")

    console.output(result.agents, render)
