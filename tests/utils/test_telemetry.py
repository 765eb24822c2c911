"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, call, patch

import pytest
from click.testing import CliRunner
from opentelemetry import trace

from agentcli.cli import main
from agentcli.utils import telemetry
from agentcli.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    ATTR_AGENT_NAME,
    ATTR_ERROR,
    ATTR_SUCCESS,
    configure_telemetry,
    get_tracer,
    record_outcome,
    record_usage,
)


_LIST_ARGS = ["agents", "list", "--dir", "missing-dir"]


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        assert isinstance(get_tracer("agentcli.test"), trace.Tracer)

    def test_default_name(self) -> None:
        assert isinstance(get_tracer(), trace.Tracer)

    def test_noop_span_accepts_attributes(self) -> None:
        with get_tracer("agentcli.noop").start_as_current_span("agent.run") as span:
            span.set_attribute(ATTR_AGENT_NAME, "summarizer")


class TestSpanHelpers:
    def test_record_usage(self) -> None:
        span = MagicMock()
        record_usage(span, {"prompt_tokens": 10, "total_tokens": 15})
        assert span.set_attribute.call_args_list == [
            call("agentcli.tokens.prompt", 10),
            call("agentcli.tokens.total", 15),
        ]

    def test_record_usage_empty(self) -> None:
        span = MagicMock()
        record_usage(span, {})
        span.set_attribute.assert_not_called()

    def test_record_outcome_success(self) -> None:
        span = MagicMock()
        record_outcome(span, True)
        span.set_attribute.assert_called_once_with(ATTR_SUCCESS, True)

    def test_record_outcome_failure(self) -> None:
        span = MagicMock()
        record_outcome(span, False, "boom")
        assert span.set_attribute.call_args_list == [
            call(ATTR_SUCCESS, False),
            call(ATTR_ERROR, "boom"),
        ]


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")
        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(export_to_console=False, otlp_endpoint="http://localhost:4317")


class TestCliTracing:
    def test_trace_flag_configures(self) -> None:
        with patch.object(telemetry, "configure_telemetry") as configure:
            result = CliRunner().invoke(main, ["--trace", *_LIST_ARGS])

        assert result.exit_code == 0
        configure.assert_called_once_with(export_to_console=True, otlp_endpoint=None)

    def test_otlp_endpoint_from_env(self) -> None:
        with patch.object(telemetry, "configure_telemetry") as configure:
            result = CliRunner().invoke(
                main,
                _LIST_ARGS,
                env={"AGENTCLI_OTLP_ENDPOINT": "http://collector:4317"},
            )

        assert result.exit_code == 0
        configure.assert_called_once_with(
            export_to_console=False, otlp_endpoint="http://collector:4317"
        )

    def test_missing_sdk_is_usage_error(self) -> None:
        with patch.object(telemetry, "configure_telemetry", side_effect=ImportError("no sdk")):
            result = CliRunner().invoke(main, ["--trace", *_LIST_ARGS])

        assert result.exit_code == 2
        assert "no sdk" in result.output

    def test_not_configured_by_default(self) -> None:
        with patch.object(telemetry, "configure_telemetry") as configure:
            CliRunner().invoke(main, _LIST_ARGS, env={"AGENTCLI_OTLP_ENDPOINT": None})

        configure.assert_not_called()


class TestAttributeConstants:
    def test_constants_are_namespaced(self) -> None:
        assert ATTR_AGENT_NAME.startswith("agentcli.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "agentcli"
