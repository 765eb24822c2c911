"""``agentcli chat`` — talk to an agent, one-shot or interactively."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from agentcli.cli_commands._output import console, print_run_result

if TYPE_CHECKING:
    from agentcli.core.agents.agent import Agent

_EXIT_WORDS = {"exit", "quit"}


def _parse_variables(pairs: tuple[str, ...]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--var")
        variables[key] = value
    return variables


@click.command()
@click.argument("name", required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Load the agent from a definition file instead of by name.",
)
@click.option(
    "--dir",
    "directories",
    multiple=True,
    type=click.Path(exists=False),
    help="Directory containing agent definitions (repeatable).",
)
@click.option("--message", "-m", default=None, help="Send one message and exit.")
@click.option("--var", "variables", multiple=True, help="Prompt variable as KEY=VALUE (repeatable).")
@click.option("--json", "as_json", is_flag=True, help="Print the run result as JSON.")
def chat(
    name: str | None,
    config_path: str | None,
    directories: tuple[str, ...],
    message: str | None,
    variables: tuple[str, ...],
    as_json: bool,
) -> None:
    """Chat with agent NAME (or the agent defined in --config).

    With --message, runs a single turn. Otherwise starts an interactive
    session; type 'exit' or 'quit' to leave.
    """
    from agentcli.core.agents.agent import Agent
    from agentcli.core.agents.errors import AgentError
    from agentcli.core.agents.registry import AgentRegistry

    dynamic_variables = _parse_variables(variables)
    registry = AgentRegistry([Path(d) for d in directories]) if directories else None

    try:
        agent = Agent(
            agent_name=name,
            agent_config_path=config_path,
            registry=registry,
        )
    except AgentError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if message is not None:
        result = asyncio.run(agent.run(message, dynamic_variables))
        print_run_result(result, as_json=as_json)
        if not result.success:
            sys.exit(1)
        return

    _interactive(agent, dynamic_variables, as_json=as_json)


def _interactive(agent: Agent, dynamic_variables: dict[str, str], *, as_json: bool) -> None:
    console.print(f"[bold]{escape(agent.name)}[/bold] — {escape(agent.description or 'agent')}")
    console.print("[dim]Type 'exit' or 'quit' to leave.[/dim]")

    async def _loop() -> None:
        while True:
            try:
                text = click.prompt("you", prompt_suffix="> ")
            except (EOFError, click.Abort):
                return
            if text.strip().lower() in _EXIT_WORDS:
                return
            result = await agent.run(text, dynamic_variables)
            print_run_result(result, as_json=as_json)

    asyncio.run(_loop())
