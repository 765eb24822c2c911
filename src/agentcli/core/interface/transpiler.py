"""Transpiler protocol — converts agent history to provider chat messages.

Each provider family has a concrete transpiler that maps the rendered
system prompt and the ``user`` / ``agent`` history onto the message list the
provider expects. LiteLLM accepts OpenAI-shaped messages for every
provider, so transpilers only need to fix up role names and ordering rules.
"""

from typing import Any, Protocol

from agentcli.core.interface.models import ConversationHistory


class Transpiler(Protocol):
    """Protocol for provider-specific message format transpilers."""

    def to_provider(
        self, system_prompt: str, history: ConversationHistory
    ) -> list[dict[str, Any]]:
        """Return the chat ``messages`` list for a request.

        The system prompt is included as the first message when non-empty.
        """
        ...
