"""Anthropic transpiler — handles role alternation.

Key differences from the OpenAI shape:
- Messages must strictly alternate between user and assistant roles.
- Consecutive same-role messages must be merged.

LiteLLM lifts the leading system message into Anthropic's top-level
``system`` parameter, so it stays in the list here.
"""

from typing import Any

from agentcli.core.interface.models import ConversationHistory

_ROLE_MAP = {"user": "user", "agent": "assistant"}


class AnthropicTranspiler:
    """Converts agent history to an Anthropic-compatible message list."""

    def to_provider(
        self, system_prompt: str, history: ConversationHistory
    ) -> list[dict[str, Any]]:
        raw_messages = [
            {"role": _ROLE_MAP[msg.role], "content": msg.content} for msg in history
        ]
        merged = _merge_consecutive_roles(raw_messages)

        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.extend(merged)
        return messages


def _merge_consecutive_roles(
    messages: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Merge consecutive messages with the same role.

    Text content is joined with a blank line so each original turn stays
    readable to the model.
    """
    merged: list[dict[str, Any]] = []
    for msg in messages:
        if merged and merged[-1]["role"] == msg["role"]:
            merged[-1]["content"] = f"{merged[-1]['content']}\n\n{msg['content']}"
        else:
            merged.append(dict(msg))
    return merged
