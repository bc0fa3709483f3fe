"""Core data structures and error types for chatbridge."""

from __future__ import annotations

from .errors import (
    AdapterError,
    AuthenticationError,
    BridgeError,
    UnsupportedModelError,
    ValidationError,
)
from .finish_reason import FinishReason, finish_reason_mapper
from .message import ChatMessage, MessageRole
from .schema import (
    ChatCompletion,
    ChatCompletionChunk,
    Choice,
    CompletionRequest,
    Delta,
    ResponseMessage,
    StreamChoice,
)

__all__ = [
    "AdapterError",
    "AuthenticationError",
    "BridgeError",
    "ChatCompletion",
    "ChatCompletionChunk",
    "ChatMessage",
    "Choice",
    "CompletionRequest",
    "Delta",
    "FinishReason",
    "MessageRole",
    "ResponseMessage",
    "StreamChoice",
    "UnsupportedModelError",
    "ValidationError",
    "finish_reason_mapper",
]
