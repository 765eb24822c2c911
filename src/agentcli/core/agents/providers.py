"""Provider registry — maps a definition's ``client`` field to a model client.

Adding a provider is a registration::

    register_provider(
        "groq",
        ProviderSpec(credential_key="GROQ_API_KEY", factory=GroqClient),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from agentcli.core.agents.errors import MissingCredentialError, UnsupportedProviderError
from agentcli.core.interface.client import (
    AnthropicClient,
    FireworksClient,
    ModelClient,
    OpenAIClient,
)
from agentcli.core.interface.credentials import CredentialProvider  # noqa: TC001

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., ModelClient]


@dataclass(frozen=True)
class ProviderSpec:
    """How to build a client for one provider.

    ``factory`` is called as ``factory(api_key, model_name, params)``.
    ``supports_json_mode`` controls whether agents with an output schema
    request ``response_format={"type": "json_object"}``.
    """

    credential_key: str
    factory: ClientFactory
    supports_json_mode: bool = False


_PROVIDERS: dict[str, ProviderSpec] = {
    "openai": ProviderSpec("OPENAI_API_KEY", OpenAIClient, supports_json_mode=True),
    "anthropic": ProviderSpec("ANTHROPIC_API_KEY", AnthropicClient),
    "fireworks": ProviderSpec("FIREWORKS_API_KEY", FireworksClient, supports_json_mode=True),
}


def register_provider(provider_id: str, spec: ProviderSpec) -> None:
    """Register (or replace) the spec for *provider_id*."""
    _PROVIDERS[provider_id] = spec


def supported_providers() -> list[str]:
    """Return the registered provider identifiers, sorted."""
    return sorted(_PROVIDERS)


def get_provider(provider_id: str) -> ProviderSpec:
    """Look up a provider spec.

    Raises:
        UnsupportedProviderError: If *provider_id* is not registered.
    """
    spec = _PROVIDERS.get(provider_id)
    if spec is None:
        raise UnsupportedProviderError(provider_id)
    return spec


def build_client(
    provider_id: str,
    model_name: str,
    credentials: CredentialProvider,
    params: dict[str, Any] | None = None,
) -> ModelClient:
    """Resolve the provider, fetch its credential, and build the client.

    The provider is checked before the credential, so an unknown provider
    is reported as such even when no keys are configured.

    Raises:
        UnsupportedProviderError: Unknown *provider_id*.
        MissingCredentialError: The provider's credential is not set.
    """
    spec = get_provider(provider_id)
    api_key = credentials.get(spec.credential_key)
    if not api_key:
        raise MissingCredentialError(spec.credential_key)

    logger.debug("Building %s client for model %s", provider_id, model_name)
    return spec.factory(api_key, model_name, params)
