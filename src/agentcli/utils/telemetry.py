"""Tracing for agent runs and model calls.

Two spans are emitted: ``agent.run`` around each :meth:`AgentRuntime.run`
and ``model.chat_completion`` around each provider call. Both go through the
OpenTelemetry API only, so they cost nothing until a tracer provider is
installed with :func:`configure_telemetry` (the ``otel`` extra)::

    from agentcli.utils.telemetry import configure_telemetry

    configure_telemetry(export_to_console=True)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from opentelemetry import trace

ATTR_AGENT_NAME = "agentcli.agent.name"
ATTR_MODEL = "agentcli.model"
ATTR_PROVIDER = "agentcli.provider"
ATTR_HISTORY_LENGTH = "agentcli.history.length"
ATTR_STRUCTURED_OUTPUT = "agentcli.structured_output"
ATTR_SUCCESS = "agentcli.success"
ATTR_ERROR = "agentcli.error"
ATTR_FINISH_REASON = "agentcli.finish_reason"

# ChatResponse.usage key -> span attribute
USAGE_ATTRIBUTES: dict[str, str] = {
    "prompt_tokens": "agentcli.tokens.prompt",
    "completion_tokens": "agentcli.tokens.completion",
    "total_tokens": "agentcli.tokens.total",
}

_INSTRUMENTATION_NAME = "agentcli"

_OTEL_EXTRA_HINT = "Install it with: pip install agentcli[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*; a no-op until :func:`configure_telemetry` runs."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def record_usage(span: trace.Span, usage: Mapping[str, int]) -> None:
    """Copy token counts from a response's ``usage`` onto *span*."""
    for key, attribute in USAGE_ATTRIBUTES.items():
        if key in usage:
            span.set_attribute(attribute, usage[key])


def record_outcome(span: trace.Span, success: bool, error: str | None = None) -> None:
    """Mark *span* with the result of an agent run."""
    span.set_attribute(ATTR_SUCCESS, success)
    if error:
        span.set_attribute(ATTR_ERROR, error)


def configure_telemetry(
    *,
    service_name: str = "agentcli",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider with the requested exporters.

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        export_to_console: Print finished spans as JSON on stdout.
        otlp_endpoint: Also ship spans over OTLP/gRPC to this endpoint.

    Raises:
        ImportError: ``opentelemetry-sdk`` (or, with *otlp_endpoint*,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        raise ImportError(
            f"opentelemetry-sdk is required for configure_telemetry(). {_OTEL_EXTRA_HINT}"
        ) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        # Synchronous export; CLI processes are short-lived.
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))
    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            raise ImportError(
                f"opentelemetry-exporter-otlp is required for OTLP export. {_OTEL_EXTRA_HINT}"
            ) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    return processors
