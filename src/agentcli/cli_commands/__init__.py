"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from agentcli.cli_commands.agents import agents
    from agentcli.cli_commands.chat import chat
    from agentcli.cli_commands.search import search_web_cmd
    from agentcli.cli_commands.tweets import get_tweets_cmd

    cli.add_command(agents)
    cli.add_command(chat)
    cli.add_command(search_web_cmd)
    cli.add_command(get_tweets_cmd)
