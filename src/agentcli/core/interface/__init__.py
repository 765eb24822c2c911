"""Model client capability, message models and transpilation."""

from agentcli.core.interface.client import (
    AnthropicClient,
    FireworksClient,
    LiteLLMClient,
    ModelClient,
    OpenAIClient,
)
from agentcli.core.interface.config import ModelConfig
from agentcli.core.interface.credentials import (
    CredentialProvider,
    EnvironmentCredentials,
    StaticCredentials,
)
from agentcli.core.interface.models import (
    ChatRequest,
    ChatResponse,
    ConversationHistory,
    Message,
)
from agentcli.core.interface.transpiler import Transpiler

__all__ = [
    "AnthropicClient",
    "ChatRequest",
    "ChatResponse",
    "ConversationHistory",
    "CredentialProvider",
    "EnvironmentCredentials",
    "FireworksClient",
    "LiteLLMClient",
    "Message",
    "ModelClient",
    "ModelConfig",
    "OpenAIClient",
    "StaticCredentials",
    "Transpiler",
]
