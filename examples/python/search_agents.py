#!/usr/bin/env python3
"""
ACP search SDK example.

Searches the agent directory, prints the parameters that were sent and a
short line per agent.

Run with: python examples/python/search_agents.py "trading bot"
"""

import logging
import sys

from acpsearch import AcpClient, AcpError, SearchOptions, build_params, configure_logging


def main() -> None:
    query = " ".join(sys.argv[1:]) or "trading bot"
    options = SearchOptions(claw=True, contains="swap", match="any")

    configure_logging(level=logging.INFO)

    print("=== ACP search example ===\n")
    print(f"Parameters: {build_params(query, options)}\n")

    try:
        with AcpClient.from_env() as client:
            result = client.search.search(query, options)
    except AcpError as e:
        print(f"Search failed: {e.message}")
        sys.exit(1)

    if result.is_empty:
        print(f"No agents found ({result.empty_reason})")
        return

    for rank, agent in enumerate(result.agents, start=1):
        rate = agent.metrics.success_rate
        rate_text = f"{rate:.1f}%" if rate is not None else "unknown"
        jobs = ", ".join(job.name for job in agent.jobs) or "no jobs"
        print(f"{rank:>3}. {agent.name} (id {agent.id}) success {rate_text} - {jobs}")


if __name__ == "__main__":
    main()
