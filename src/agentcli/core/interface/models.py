"""Message and request/response models shared by agents and model clients.

Agents speak in :class:`Message` objects with ``user`` / ``agent`` roles.
Transpilers turn a rendered system prompt plus those messages into the
provider-facing ``messages`` list carried by a :class:`ChatRequest`.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Conversation messages
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """A single entry in an agent's conversation history."""

    role: Literal["user", "agent"]
    content: str

    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message."""
        return cls(role="user", content=content)

    @classmethod
    def agent(cls, content: str) -> "Message":
        """Create an agent message."""
        return cls(role="agent", content=content)


class ConversationHistory(BaseModel):
    """An ordered, append-only sequence of messages.

    The only non-append mutation is :meth:`replace`, which swaps the whole
    sequence at once (used to resume a previous session).
    """

    messages: list[Message] = []

    def append(self, message: Message) -> None:
        """Append a message to the history."""
        self.messages.append(message)

    def replace(self, messages: list[Message]) -> None:
        """Discard the current sequence and adopt *messages*."""
        self.messages = list(messages)

    def tail(self, limit: int | None = None) -> list[Message]:
        """Return the most recent *limit* messages in original order.

        ``None`` returns everything; zero or a negative limit returns nothing.
        """
        if limit is None:
            return list(self.messages)
        if limit <= 0:
            return []
        return self.messages[-limit:]

    def last_agent_message(self) -> Message | None:
        """Return the most recent ``agent`` message, if any."""
        for message in reversed(self.messages):
            if message.role == "agent":
                return message
        return None

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):  # type: ignore[override]
        return iter(self.messages)


# ---------------------------------------------------------------------------
# Model client request / response
# ---------------------------------------------------------------------------


class ChatRequest(BaseModel):
    """A provider-neutral chat completion request.

    ``messages`` is already in OpenAI chat format (``role`` / ``content``
    dicts); ``parameters`` override the client's defaults for this call.
    """

    model: str
    messages: list[dict[str, Any]]
    parameters: dict[str, Any] = Field(default_factory=lambda: dict[str, Any]())


class ChatResponse(BaseModel):
    """Normalised result of a chat completion."""

    content: str = ""
    model: str | None = None
    finish_reason: str | None = None
    usage: dict[str, int] = Field(default_factory=lambda: dict[str, int]())
