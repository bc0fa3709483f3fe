"""Neutral request and result schemas in the chat-completion shape."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .finish_reason import FinishReason
from .message import ChatMessage


class CompletionRequest(BaseModel):
    """Provider-neutral chat completion request.

    Fields the layer does not understand are ignored so callers can pass
    through OpenAI-style payloads unchanged.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    model: str = Field(..., min_length=1, description="Model identifier used for routing.")
    messages: List[ChatMessage] = Field(default_factory=list, description="Conversation in chronological order.")
    temperature: float | None = Field(None, description="Sampling temperature.")
    top_p: float | None = Field(None, description="Nucleus sampling threshold.")
    max_tokens: int | None = Field(None, description="Upper bound on generated tokens.")
    stream: bool = Field(False, description="Whether to return an incremental stream.")
    api_key: str | None = Field(None, repr=False, description="Per-request credential override.")


class ResponseMessage(BaseModel):
    """Message produced by the model in a non-streaming result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    role: str
    content: str


class Choice(BaseModel):
    """A single candidate of a non-streaming result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    message: ResponseMessage
    finish_reason: FinishReason


class ChatCompletion(BaseModel):
    """Non-streaming result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    model: str
    created: int = Field(..., description="Wall-clock seconds when the result was built.")
    choices: List[Choice]


class Delta(BaseModel):
    """Incremental content carried by a streaming chunk."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: str = ""
    role: str


class StreamChoice(BaseModel):
    """A single candidate of a streaming chunk."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    delta: Delta
    index: int
    finish_reason: FinishReason


class ChatCompletionChunk(BaseModel):
    """One delta event of a streaming result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    model: str
    created: int = Field(..., description="Wall-clock seconds when the event was produced.")
    choices: List[StreamChoice]


__all__ = [
    "ChatCompletion",
    "ChatCompletionChunk",
    "Choice",
    "CompletionRequest",
    "Delta",
    "ResponseMessage",
    "StreamChoice",
]
