"""``agentcli search-web`` — search the internet."""

from __future__ import annotations

import asyncio

import click

from agentcli.cli_commands._output import console


@click.command("search-web")
@click.argument("query")
@click.option("--max-results", default=5, show_default=True, type=click.IntRange(1, 20))
@click.option(
    "--api-key",
    envvar="TAVILY_API_KEY",
    default=None,
    help="Tavily API key (defaults to $TAVILY_API_KEY).",
)
def search_web_cmd(query: str, max_results: int, api_key: str | None) -> None:
    """Search the web for QUERY and print the top results."""
    from agentcli.features.errors import FeatureError
    from agentcli.features.search import format_results, search_web

    try:
        results = asyncio.run(search_web(query, api_key=api_key or "", max_results=max_results))
    except FeatureError as exc:
        console.print(f"❌ Error searching the web: {exc}", markup=False)
        return

    console.print(f"🔎 {format_results(results)}", markup=False)
