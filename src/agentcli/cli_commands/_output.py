"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agentcli.core.agents.models import AgentDefinition, RunResult  # noqa: TC001

console = Console()


def print_agents_table(definitions: dict[str, AgentDefinition]) -> None:
    """Pretty-print agent definitions as a table."""
    table = Table(title="Agents")
    table.add_column("Name", style="cyan")
    table.add_column("Client")
    table.add_column("Model")
    table.add_column("Structured")
    table.add_column("Description")

    for definition in definitions.values():
        table.add_row(
            definition.name,
            definition.client,
            definition.model,
            "yes" if definition.output_schema else "-",
            _truncate(definition.description),
        )

    console.print(table)


def print_agent_detail(definition: AgentDefinition) -> None:
    """Print every field of one definition."""
    console.print(f"[bold]{definition.name}[/bold]")
    console.print(f"  Description: {definition.description or '(none)'}")
    console.print(f"  Client: {definition.client}")
    console.print(f"  Model: {definition.model}")
    if definition.dynamic_variables:
        console.print("  Variables:")
        for key, value in definition.dynamic_variables.items():
            console.print(f"    {key} = {value}")
    console.print("\n[bold]System prompt:[/bold]")
    console.print(definition.system_prompt, markup=False)
    if definition.output_schema:
        console.print("\n[bold]Output schema:[/bold]")
        console.print_json(json.dumps(definition.output_schema))


def print_run_result(result: RunResult, *, as_json: bool = False) -> None:
    """Print the output of a successful run, or its error."""
    if as_json:
        console.print_json(result.model_dump_json())
        return
    if not result.success:
        console.print(f"[red]Error:[/red] {escape(result.error or '')}")
        return
    output: Any = result.output
    if isinstance(output, str):
        console.print(output, markup=False)
    else:
        console.print_json(json.dumps(output, default=str))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
