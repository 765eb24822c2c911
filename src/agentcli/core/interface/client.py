"""Model clients — a uniform async chat interface over LiteLLM.

Every provider adapter satisfies :class:`ModelClient`: it carries a
``model_type`` tag, a :class:`Transpiler` for its message rules, and a
single ``chat_completion`` coroutine. The concrete clients differ only in
their LiteLLM provider prefix and transpiler.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

import litellm

from agentcli.core.interface.config import ModelConfig
from agentcli.core.interface.models import ChatRequest, ChatResponse
from agentcli.core.interface.transpiler import Transpiler
from agentcli.core.interface.transpilers.anthropic import AnthropicTranspiler
from agentcli.core.interface.transpilers.openai import OpenAITranspiler
from agentcli.utils.telemetry import (
    ATTR_FINISH_REASON,
    ATTR_MODEL,
    ATTR_PROVIDER,
    get_tracer,
    record_usage,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


@runtime_checkable
class ModelClient(Protocol):
    """Capability exposed by every provider adapter."""

    model_type: str
    model_name: str
    transpiler: Transpiler

    async def chat_completion(self, request: ChatRequest) -> ChatResponse:
        """Send *request* to the provider and return the normalised response."""
        ...


class LiteLLMClient:
    """Base adapter that calls :func:`litellm.acompletion`.

    Usage::

        client = OpenAIClient(api_key="sk-...", model_name="gpt-4o")
        request = ChatRequest(model=client.model_name, messages=[...])
        response = await client.chat_completion(request)

    Subclasses set ``model_type`` (the provider identifier) and
    ``litellm_prefix`` (LiteLLM's routing prefix for that provider).
    """

    model_type: ClassVar[str] = "openai"
    litellm_prefix: ClassVar[str] = "openai"

    def __init__(
        self,
        api_key: str,
        model_name: str,
        params: dict[str, Any] | None = None,
        *,
        api_base: str | None = None,
    ) -> None:
        self.config = ModelConfig.with_defaults(
            model=model_name,
            provider_prefix=self.litellm_prefix,
            params=params,
            api_key=api_key,
            api_base=api_base,
        )
        self.transpiler: Transpiler = self._make_transpiler()

    @property
    def model_name(self) -> str:
        return self.config.model

    @property
    def default_params(self) -> dict[str, Any]:
        return dict(self.config.params)

    def _make_transpiler(self) -> Transpiler:
        return OpenAITranspiler()

    async def chat_completion(self, request: ChatRequest) -> ChatResponse:
        """Send a chat completion request through LiteLLM.

        Request parameters override the client's defaults. Provider errors
        propagate unchanged; callers decide how to report them.
        """
        with _tracer.start_as_current_span("model.chat_completion") as span:
            span.set_attribute(ATTR_MODEL, self.config.qualified_model)
            span.set_attribute(ATTR_PROVIDER, self.model_type)

            call_kwargs: dict[str, Any] = {
                **self.config.params,
                **request.parameters,
                "model": self.config.qualify(request.model),
                "messages": request.messages,
            }
            if self.config.api_key:
                call_kwargs["api_key"] = self.config.api_key
            if self.config.api_base:
                call_kwargs["api_base"] = self.config.api_base

            logger.debug(
                "%s: sending %d message(s) to %s",
                self.__class__.__name__,
                len(request.messages),
                call_kwargs["model"],
            )

            # Call LiteLLM (type stubs are incomplete)
            response = await litellm.acompletion(**call_kwargs)  # pyright: ignore[reportUnknownMemberType]

            result = self._parse_response(response)
            record_usage(span, result.usage)
            if result.finish_reason is not None:
                span.set_attribute(ATTR_FINISH_REASON, result.finish_reason)

            return result

    def _parse_response(self, response: Any) -> ChatResponse:
        """Convert a LiteLLM response to a :class:`ChatResponse`.

        LiteLLM returns OpenAI-compatible response objects regardless of
        the underlying provider.
        """
        choice = response.choices[0]
        content = choice.message.content or ""

        usage: dict[str, int] = {}
        if getattr(response, "usage", None):
            usage = {
                "prompt_tokens": int(response.usage.prompt_tokens or 0),
                "completion_tokens": int(response.usage.completion_tokens or 0),
                "total_tokens": int(response.usage.total_tokens or 0),
            }

        finish_reason = choice.finish_reason
        return ChatResponse(
            content=content,
            model=getattr(response, "model", None),
            finish_reason=str(finish_reason) if finish_reason is not None else None,
            usage=usage,
        )


class OpenAIClient(LiteLLMClient):
    """OpenAI chat models (``openai/<model>``)."""

    model_type = "openai"
    litellm_prefix = "openai"


class AnthropicClient(LiteLLMClient):
    """Anthropic Claude models (``anthropic/<model>``)."""

    model_type = "anthropic"
    litellm_prefix = "anthropic"

    def _make_transpiler(self) -> Transpiler:
        return AnthropicTranspiler()


class FireworksClient(LiteLLMClient):
    """Fireworks-hosted models (``fireworks_ai/<model>``).

    Fireworks exposes an OpenAI-compatible API, so the OpenAI transpiler
    applies unchanged.
    """

    model_type = "fireworks"
    litellm_prefix = "fireworks_ai"
