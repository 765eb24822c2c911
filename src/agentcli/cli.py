"""agentcli CLI entrypoint."""

from __future__ import annotations

import logging

import click

from agentcli import __version__


@click.group()
@click.version_option(version=__version__, prog_name="agentcli")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--trace", is_flag=True, help="Print OpenTelemetry spans to stdout.")
@click.option(
    "--otlp-endpoint",
    envvar="AGENTCLI_OTLP_ENDPOINT",
    default=None,
    help="Export OpenTelemetry spans via OTLP/gRPC to this endpoint.",
)
def main(verbose: bool, trace: bool, otlp_endpoint: str | None) -> None:
    """agentcli — run agents and their feature commands."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if trace or otlp_endpoint:
        from agentcli.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=trace, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            raise click.UsageError(str(exc)) from exc


# Register subcommands
from agentcli.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
