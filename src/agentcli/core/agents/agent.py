"""Agent façade — resolve a definition and wire up its runtime.

Usage::

    agent = Agent(agent_name="summarizer")
    result = await agent.run("Summarize: hello world")
    if result.success:
        print(result.output)

Construction resolves everything up front: the definition, the provider
client (with its credential) and the compiled output validator. Any problem
raises immediately, so a constructed :class:`Agent` is always usable.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from agentcli.core.agents.errors import ConfigurationError, SchemaCompilationError
from agentcli.core.agents.models import AgentDefinition, RunResult
from agentcli.core.agents.providers import build_client, get_provider
from agentcli.core.agents.registry import AgentRegistry, load_agent_from_file
from agentcli.core.agents.runtime import AgentRuntime
from agentcli.core.interface.credentials import CredentialProvider, EnvironmentCredentials
from agentcli.core.interface.models import Message
from agentcli.core.schema.translator import OutputValidator, compile_output_schema

logger = logging.getLogger(__name__)


class Agent:
    """A named, configured agent with its own conversation history.

    Exactly one of *agent_name* (looked up in *registry*) or
    *agent_config_path* (a definition file) must be given.

    Raises:
        ConfigurationError: Missing/ambiguous options, unknown agent,
            unsupported provider or missing credential.
        SchemaCompilationError: The definition's ``output_schema`` is malformed.
    """

    def __init__(
        self,
        agent_name: str | None = None,
        agent_config_path: str | Path | None = None,
        *,
        registry: AgentRegistry | None = None,
        credentials: CredentialProvider | None = None,
        client_params: dict[str, Any] | None = None,
    ) -> None:
        if (agent_name is None) == (agent_config_path is None):
            raise ConfigurationError(
                "You must provide exactly one of agent_name or agent_config_path"
            )

        if agent_config_path is not None:
            definition = load_agent_from_file(agent_config_path)
        else:
            assert agent_name is not None
            definition = (registry or AgentRegistry()).get(agent_name)

        provider = get_provider(definition.client)
        client = build_client(
            definition.client,
            definition.model,
            credentials or EnvironmentCredentials(),
            client_params,
        )
        validator = _compile_validator(definition)

        self._runtime = AgentRuntime(
            definition,
            client,
            validator,
            json_mode=provider.supports_json_mode,
        )
        logger.debug(
            "Agent '%s' ready (client=%s, model=%s, structured=%s)",
            definition.name,
            definition.client,
            definition.model,
            validator is not None,
        )

    @property
    def name(self) -> str:
        return self._runtime.definition.name

    @property
    def description(self) -> str:
        return self._runtime.definition.description

    @property
    def definition(self) -> AgentDefinition:
        return self._runtime.definition

    async def run(
        self,
        user_message: str | None = None,
        dynamic_variables: Mapping[str, Any] | None = None,
    ) -> RunResult:
        """Run one turn. Never raises for provider or validation failures."""
        return await self._runtime.run(user_message, dynamic_variables)

    def load_chat_history(self, messages: list[Message] | list[dict[str, Any]]) -> None:
        self._runtime.load_chat_history(messages)

    def get_last_agent_message(self) -> Message | None:
        return self._runtime.get_last_agent_message()

    def get_chat_history(self, limit: int | None = None) -> list[Message]:
        return self._runtime.get_chat_history(limit)

    def get_full_chat_history(self) -> list[Message]:
        return self._runtime.get_full_chat_history()

    def add_user_message(self, content: str) -> None:
        self._runtime.add_user_message(content)

    def add_agent_message(self, content: str) -> None:
        self._runtime.add_agent_message(content)


def _compile_validator(definition: AgentDefinition) -> OutputValidator | None:
    schema = definition.output_schema
    if schema is None or schema == {}:
        return None
    try:
        return compile_output_schema(schema, name=_model_name(definition.name))
    except Exception as exc:
        logger.error("Error converting output schema for '%s': %s", definition.name, exc)
        raise SchemaCompilationError(str(exc)) from exc


def _model_name(agent_name: str) -> str:
    parts = [p for p in agent_name.replace("-", "_").split("_") if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) + "Output"
