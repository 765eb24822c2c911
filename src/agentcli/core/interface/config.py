"""Model configuration — provider prefix, model name, default parameters."""

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PARAMS: dict[str, Any] = {
    "temperature": 0.8,
    "max_tokens": 1000,
}


class ModelConfig(BaseModel):
    """Configuration for a specific model/provider combination.

    ``model`` is the bare model name as written in an agent definition
    (``gpt-4o``) or an already-qualified LiteLLM name (``openai/gpt-4o``).
    :meth:`qualified_model` always returns the LiteLLM form.
    """

    model: str
    provider_prefix: str
    api_key: str | None = None
    api_base: str | None = None
    params: dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_PARAMS))

    @property
    def qualified_model(self) -> str:
        return self.qualify(self.model)

    def qualify(self, model: str) -> str:
        """Return ``<prefix>/<model>`` unless *model* already carries the prefix."""
        if model.startswith(f"{self.provider_prefix}/"):
            return model
        return f"{self.provider_prefix}/{model}"

    @classmethod
    def with_defaults(
        cls,
        model: str,
        provider_prefix: str,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> "ModelConfig":
        """Build a config whose params are the defaults overlaid with *params*."""
        merged = {**DEFAULT_PARAMS, **(params or {})}
        return cls(model=model, provider_prefix=provider_prefix, params=merged, **kwargs)
