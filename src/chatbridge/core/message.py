"""Message schema shared across adapters."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Canonical role names accepted by chatbridge.

    ``MODEL`` is Gemini's name for an assistant turn; both spellings are
    accepted on input and translated per provider.
    """

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    MODEL = "model"

    @property
    def is_model_turn(self) -> bool:
        return self in (MessageRole.ASSISTANT, MessageRole.MODEL)


class ChatMessage(BaseModel):
    """A single turn of a conversation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    role: MessageRole = Field(..., description="Author of the turn.")
    content: str | None = Field(None, description="Text of the turn, if any.")


__all__ = ["ChatMessage", "MessageRole"]
