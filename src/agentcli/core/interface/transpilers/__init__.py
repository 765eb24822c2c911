"""Provider-specific transpiler implementations."""

from agentcli.core.interface.transpilers.anthropic import AnthropicTranspiler
from agentcli.core.interface.transpilers.openai import OpenAITranspiler

__all__ = ["AnthropicTranspiler", "OpenAITranspiler"]
