"""Agent runtime — one request/response cycle plus conversation history.

:class:`AgentRuntime` owns the message history of a single agent and turns
each :meth:`~AgentRuntime.run` call into exactly one model request. Every
failure during a run is reported through :class:`RunResult`; nothing past
construction raises.

History ordering: the user message of call *N* is recorded before call
*N*'s request is sent, and the agent message only after the response has
been validated. A failed call therefore leaves the user message in place so
a retry (``run()`` with no new message) resumes from the same point.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from string import Template
from typing import Any

from agentcli.core.agents.models import AgentDefinition, RunResult
from agentcli.core.interface.client import ModelClient  # noqa: TC001
from agentcli.core.interface.models import ChatRequest, ConversationHistory, Message
from agentcli.core.schema.translator import OutputValidationError, OutputValidator
from agentcli.utils.telemetry import (
    ATTR_AGENT_NAME,
    ATTR_HISTORY_LENGTH,
    ATTR_MODEL,
    ATTR_PROVIDER,
    ATTR_STRUCTURED_OUTPUT,
    get_tracer,
    record_outcome,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

_JSON_INSTRUCTION = (
    "Respond only with a single JSON value that matches this JSON schema, "
    "with no surrounding prose:\n"
)


def render_prompt(
    definition: AgentDefinition, variables: Mapping[str, Any] | None = None
) -> str:
    """Render the definition's system prompt template.

    Uses :class:`string.Template` (``$name`` / ``${name}``). Variables are
    layered as: ``name`` and ``description`` of the agent, then the
    definition's ``dynamic_variables`` defaults, then *variables*.
    Unknown placeholders are left as-is.
    """
    merged: dict[str, Any] = {
        "name": definition.name,
        "description": definition.description,
        **definition.dynamic_variables,
        **(variables or {}),
    }
    return Template(definition.system_prompt).safe_substitute(merged)


class AgentRuntime:
    """Executes runs against a model client and records the conversation.

    Only one :meth:`run` may be in flight per instance. A second concurrent
    call returns a failed :class:`RunResult` without touching history.
    """

    def __init__(
        self,
        definition: AgentDefinition,
        client: ModelClient,
        validator: OutputValidator | None = None,
        *,
        json_mode: bool = False,
    ) -> None:
        self.definition = definition
        self.client = client
        self.validator = validator
        self.json_mode = json_mode
        self.history = ConversationHistory()
        self._busy = False

    @property
    def busy(self) -> bool:
        """``True`` while a run is awaiting the model's response."""
        return self._busy

    async def run(
        self,
        user_message: str | None = None,
        dynamic_variables: Mapping[str, Any] | None = None,
    ) -> RunResult:
        """Send the conversation to the model and record its answer."""
        if self._busy:
            logger.warning("Agent '%s': run() called while a run is in flight", self.definition.name)
            return RunResult.failed(f"Agent '{self.definition.name}' is already running")

        self._busy = True
        try:
            return await self._run(user_message, dynamic_variables)
        finally:
            self._busy = False

    async def _run(
        self,
        user_message: str | None,
        dynamic_variables: Mapping[str, Any] | None,
    ) -> RunResult:
        with _tracer.start_as_current_span("agent.run") as span:
            span.set_attribute(ATTR_AGENT_NAME, self.definition.name)
            span.set_attribute(ATTR_PROVIDER, self.client.model_type)
            span.set_attribute(ATTR_MODEL, self.client.model_name)
            span.set_attribute(ATTR_STRUCTURED_OUTPUT, self.validator is not None)

            if user_message is not None:
                self.history.append(Message.user(user_message))
            span.set_attribute(ATTR_HISTORY_LENGTH, len(self.history))

            request = self._build_request(dynamic_variables)

            try:
                response = await self.client.chat_completion(request)
            except Exception as exc:
                # Provider failures are reported, never raised: the user
                # message stays recorded so the caller can retry.
                logger.warning("Agent '%s': model call failed: %s", self.definition.name, exc)
                error = str(exc) or exc.__class__.__name__
                record_outcome(span, False, error)
                return RunResult.failed(error)

            if self.validator is not None:
                try:
                    output = self.validator.parse_text(response.content)
                except OutputValidationError as exc:
                    logger.warning(
                        "Agent '%s': response did not match output schema: %s",
                        self.definition.name,
                        exc,
                    )
                    error = f"Output validation failed: {exc}"
                    record_outcome(span, False, error)
                    return RunResult.failed(error)
                self.history.append(Message.agent(_to_text(output)))
            else:
                output = response.content
                self.history.append(Message.agent(output))

            record_outcome(span, True)
            logger.debug(
                "Agent '%s': run complete, history has %d message(s)",
                self.definition.name,
                len(self.history),
            )
            return RunResult.ok(output)

    def _build_request(self, dynamic_variables: Mapping[str, Any] | None) -> ChatRequest:
        system_prompt = render_prompt(self.definition, dynamic_variables)
        parameters: dict[str, Any] = {}

        if self.validator is not None and not self.validator.accepts_anything:
            schema = json.dumps(self.validator.json_schema(), indent=2)
            system_prompt = f"{system_prompt}\n\n{_JSON_INSTRUCTION}{schema}".lstrip()
            # JSON mode only guarantees a top-level object.
            if self.json_mode and self.validator.shape.type == "object":
                parameters["response_format"] = {"type": "json_object"}

        messages = self.client.transpiler.to_provider(system_prompt, self.history)
        return ChatRequest(
            model=self.client.model_name,
            messages=messages,
            parameters=parameters,
        )

    # ------------------------------------------------------------------
    # History access
    # ------------------------------------------------------------------

    def load_chat_history(self, messages: list[Message] | list[dict[str, Any]]) -> None:
        """Replace the whole history with *messages*.

        Every entry is validated first; on error the existing history is
        left untouched.

        Raises:
            pydantic.ValidationError: If an entry is not a valid message.
        """
        validated = [Message.model_validate(m) for m in messages]
        self.history.replace(validated)

    def get_last_agent_message(self) -> Message | None:
        return self.history.last_agent_message()

    def get_chat_history(self, limit: int | None = None) -> list[Message]:
        return self.history.tail(limit)

    def get_full_chat_history(self) -> list[Message]:
        return self.history.tail()

    def add_user_message(self, content: str) -> None:
        self.history.append(Message.user(content))

    def add_agent_message(self, content: str) -> None:
        self.history.append(Message.agent(content))


def _to_text(output: Any) -> str:
    """Textual projection of a validated output, used for history."""
    if isinstance(output, str):
        return output
    return json.dumps(output, ensure_ascii=False)

