"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import agentcli

    assert agentcli.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from agentcli.cli import main

    assert callable(main)
    assert set(main.commands) == {"agents", "chat", "search-web", "get-tweets"}


def test_public_imports() -> None:
    from agentcli.core.agents import (
        Agent,
        AgentDefinition,
        AgentRegistry,
        ConfigurationError,
        RunResult,
        SchemaCompilationError,
    )
    from agentcli.core.interface import LiteLLMClient, ModelClient
    from agentcli.core.schema import OutputValidator, compile_output_schema
    from agentcli.features import get_tweets, search_web

    assert Agent is not None
    assert AgentDefinition is not None
    assert AgentRegistry is not None
    assert ConfigurationError is not None
    assert RunResult is not None
    assert SchemaCompilationError is not None
    assert LiteLLMClient is not None
    assert ModelClient is not None
    assert OutputValidator is not None
    assert callable(compile_output_schema)
    assert callable(get_tweets)
    assert callable(search_web)


def test_lazy_import_from_agentcli() -> None:
    import agentcli

    assert agentcli.Agent is not None
    assert agentcli.RunResult is not None
