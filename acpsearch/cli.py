"""Command line entry point for `acp`."""

import logging
import sys

import click

from acpsearch import __version__
from acpsearch.client import AcpClient
from acpsearch.commands.search import search as search_command
from acpsearch.exceptions import ConfigurationError
from acpsearch.logging import configure_logging
from acpsearch.output import Console
from acpsearch.params import SEARCH_DEFAULTS
from acpsearch.types.search import SearchOptions


@click.group()
@click.version_option(__version__)
def cli() -> None:
    """Agent Commerce Protocol command line."""


@cli.command()
@click.argument("query", nargs=-1)
@click.option(
    "--mode",
    metavar="[hybrid|vector|keyword]",
    help=f"Search algorithm. Default: {SEARCH_DEFAULTS.mode}.",
)
@click.option(
    "--graduation",
    metavar="[graduated|ungraduated|all]",
    help="Graduation filter. Default: graduated (all with --claw).",
)
@click.option(
    "--online",
    metavar="[online|offline|all]",
    help=f"Online status filter. Default: {SEARCH_DEFAULTS.online}.",
)
@click.option("--claw", is_flag=True, help="Only agents in the OpenClaw cluster.")
@click.option("--contains", metavar="TEXT", help="Full-text filter on agent text fields.")
@click.option(
    "--match",
    metavar="[all|any]",
    help=f"How --contains terms combine. Default: {SEARCH_DEFAULTS.match}.",
)
@click.option(
    "--performance-weight",
    "--performanceWeight",
    "performance_weight",
    type=float,
    help=f"Rerank weight toward performance metrics. Default: {SEARCH_DEFAULTS.performance_weight}.",
)
@click.option(
    "--similarity-cutoff",
    "--similarityCutoff",
    "similarity_cutoff",
    type=float,
    help=f"Minimum vector similarity score. Default: {SEARCH_DEFAULTS.similarity_cutoff}.",
)
@click.option(
    "--sparse-cutoff",
    "--sparseCutoff",
    "sparse_cutoff",
    type=float,
    help=f"Minimum keyword score. Default: {SEARCH_DEFAULTS.sparse_cutoff}.",
)
@click.option("--json", "json_mode", is_flag=True, help="Print results as JSON.")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help=f"Request timeout in seconds. Default: {AcpClient.DEFAULT_TIMEOUT:g}.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic to stderr.")
def search(
    query: tuple[str, ...],
    mode: str | None,
    graduation: str | None,
    online: str | None,
    claw: bool,
    contains: str | None,
    match: str | None,
    performance_weight: float | None,
    similarity_cutoff: float | None,
    sparse_cutoff: float | None,
    json_mode: bool,
    timeout: float | None,
    verbose: bool,
) -> None:
    """Search agents by QUERY with filters and reranking."""
    if verbose:
        configure_logging(level=logging.DEBUG, handler=logging.StreamHandler(sys.stderr))

    options = SearchOptions(
        mode=mode,
        graduation=graduation,
        online=online,
        claw=claw,
        contains=contains,
        match=match,
        performance_weight=performance_weight,
        similarity_cutoff=similarity_cutoff,
        sparse_cutoff=sparse_cutoff,
    )

    try:
        client = AcpClient.from_env(timeout=timeout)
    except ConfigurationError as e:
        raise click.ClickException(e.message) from e

    with client:
        search_command(" ".join(query), options, client=client, console=Console(json_mode=json_mode))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
