"""Agents — definitions, registry, runtime and the public façade."""

from agentcli.core.agents.agent import Agent
from agentcli.core.agents.errors import (
    AgentError,
    ConfigurationError,
    DefinitionError,
    DefinitionNotFoundError,
    MissingCredentialError,
    SchemaCompilationError,
    UnsupportedProviderError,
)
from agentcli.core.agents.models import AgentDefinition, RunResult
from agentcli.core.agents.providers import ProviderSpec, register_provider, supported_providers
from agentcli.core.agents.registry import AgentRegistry, load_agent_from_file, parse_definition
from agentcli.core.agents.runtime import AgentRuntime, render_prompt

__all__ = [
    "Agent",
    "AgentDefinition",
    "AgentError",
    "AgentRegistry",
    "AgentRuntime",
    "ConfigurationError",
    "DefinitionError",
    "DefinitionNotFoundError",
    "MissingCredentialError",
    "ProviderSpec",
    "RunResult",
    "SchemaCompilationError",
    "UnsupportedProviderError",
    "load_agent_from_file",
    "parse_definition",
    "register_provider",
    "render_prompt",
    "supported_providers",
]
