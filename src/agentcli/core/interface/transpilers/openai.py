"""OpenAI transpiler — history maps almost 1:1 onto ChatML."""

from typing import Any

from agentcli.core.interface.models import ConversationHistory, Message

_ROLE_MAP = {"user": "user", "agent": "assistant"}


class OpenAITranspiler:
    """Converts agent history to OpenAI's chat completion format."""

    def to_provider(
        self, system_prompt: str, history: ConversationHistory
    ) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        for msg in history:
            messages.append(self._message_to_openai(msg))
        return messages

    def _message_to_openai(self, msg: Message) -> dict[str, Any]:
        return {"role": _ROLE_MAP[msg.role], "content": msg.content}
