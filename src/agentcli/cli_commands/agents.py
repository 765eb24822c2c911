"""``agentcli agents`` — list and inspect agent definitions."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from agentcli.cli_commands._output import console, print_agent_detail, print_agents_table


@click.group()
def agents() -> None:
    """Manage agent definitions."""


@agents.command("list")
@click.option(
    "--dir",
    "directories",
    multiple=True,
    type=click.Path(exists=False),
    help="Directory containing agent definitions (repeatable). "
    "Defaults to $AGENTCLI_AGENTS_DIR or ./agents.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
def list_agents(directories: tuple[str, ...], fmt: str) -> None:
    """List all agent definitions."""
    from agentcli.core.agents.registry import AgentRegistry

    registry = AgentRegistry([Path(d) for d in directories] if directories else None)
    missing = [d for d in registry.directories if not d.is_dir()]
    if len(missing) == len(registry.directories):
        where = ", ".join(str(d) for d in missing)
        console.print(f"[yellow]Directory not found: {escape(where)}[/yellow]")
        return

    definitions = registry.load_all()
    if registry.errors and not definitions:
        for error in registry.errors:
            console.print(f"[red]Error loading agents:[/red] {escape(str(error))}")
        sys.exit(1)

    if not definitions:
        console.print("[yellow]No agent definitions found.[/yellow]")
        return

    if fmt == "json":
        data = {name: d.model_dump() for name, d in definitions.items()}
        console.print_json(json.dumps(data, default=str))
    else:
        for error in registry.errors:
            console.print(f"[yellow]Skipped:[/yellow] {escape(str(error))}")
        print_agents_table(definitions)


@agents.command("show")
@click.argument("name")
@click.option(
    "--dir",
    "directories",
    multiple=True,
    type=click.Path(exists=False),
    help="Directory containing agent definitions (repeatable).",
)
def show_agent(name: str, directories: tuple[str, ...]) -> None:
    """Show one agent definition in full."""
    from agentcli.core.agents.errors import AgentError
    from agentcli.core.agents.registry import AgentRegistry

    registry = AgentRegistry([Path(d) for d in directories] if directories else None)
    try:
        definition = registry.get(name)
    except AgentError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_agent_detail(definition)
