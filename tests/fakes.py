"""Shared test doubles for model clients and LiteLLM responses."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

from agentcli.core.agents.models import AgentDefinition
from agentcli.core.interface.models import ChatRequest, ChatResponse
from agentcli.core.interface.transpiler import Transpiler
from agentcli.core.interface.transpilers.openai import OpenAITranspiler


def make_mock_litellm_response(
    content: str | None = "Hello!",
    finish_reason: str = "stop",
    model: str = "gpt-4o",
) -> MagicMock:
    """Create a ``MagicMock`` matching LiteLLM's response structure."""
    message = MagicMock()
    message.content = content

    choice = MagicMock()
    choice.message = message
    choice.finish_reason = finish_reason

    usage = MagicMock()
    usage.prompt_tokens = 10
    usage.completion_tokens = 5
    usage.total_tokens = 15

    response = MagicMock()
    response.choices = [choice]
    response.usage = usage
    response.model = model

    return response


class FakeModelClient:
    """Scripted :class:`ModelClient`.

    Each ``chat_completion`` call pops the next scripted reply: a string
    becomes the response content, an exception is raised.
    """

    model_type = "openai"

    def __init__(
        self,
        replies: list[str | Exception] | None = None,
        *,
        model_name: str = "fake-model",
        transpiler: Transpiler | None = None,
    ) -> None:
        self.replies: list[str | Exception] = list(replies or [])
        self.model_name = model_name
        self.transpiler: Transpiler = transpiler or OpenAITranspiler()
        self.requests: list[ChatRequest] = []

    async def chat_completion(self, request: ChatRequest) -> ChatResponse:
        self.requests.append(request)
        reply = self.replies.pop(0) if self.replies else "ok"
        if isinstance(reply, Exception):
            raise reply
        return ChatResponse(content=reply, model=self.model_name, finish_reason="stop")


def make_definition(**overrides: Any) -> AgentDefinition:
    data: dict[str, Any] = {
        "name": "summarizer",
        "description": "Summarises text.",
        "system_prompt": "You are $name. Answer in $language.",
        "model": "gpt-4o-mini",
        "client": "openai",
        "dynamic_variables": {"language": "English"},
    }
    data.update(overrides)
    return AgentDefinition.model_validate(data)


def write_definition(path: Any, **overrides: Any) -> Any:
    """Write a definition file built from :func:`make_definition` defaults.

    ``.json`` paths get JSON, anything else YAML.
    """
    import json

    import yaml

    data = make_definition(**overrides).model_dump(exclude_none=True)
    if str(path).endswith(".json"):
        text = json.dumps(data, indent=2)
    else:
        text = yaml.safe_dump(data, sort_keys=False)
    path.write_text(text, encoding="utf-8")
    return path
