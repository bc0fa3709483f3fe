"""Normalize chat completions across language-model providers.

Requests are written once in the OpenAI chat-completion shape and routed by
model name to a provider adapter, which returns either a single
:class:`ChatCompletion` or a :class:`ChunkStream` of incremental
:class:`ChatCompletionChunk` events.
"""

from __future__ import annotations

from .core import (
    AdapterError,
    AuthenticationError,
    BridgeError,
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    CompletionRequest,
    FinishReason,
    MessageRole,
    UnsupportedModelError,
    ValidationError,
)
from .config import BridgeConfig, CredentialSource, ProviderSettings
from .core.adapters import ChunkStream, GeminiAdapter, OpenAIAdapter, ProviderAdapter
from .dispatcher import AdapterDispatcher, default_dispatcher

__all__ = [
    "AdapterDispatcher",
    "AdapterError",
    "AuthenticationError",
    "BridgeConfig",
    "BridgeError",
    "ChatCompletion",
    "ChatCompletionChunk",
    "ChatMessage",
    "ChunkStream",
    "CompletionRequest",
    "CredentialSource",
    "FinishReason",
    "GeminiAdapter",
    "MessageRole",
    "OpenAIAdapter",
    "ProviderAdapter",
    "ProviderSettings",
    "UnsupportedModelError",
    "ValidationError",
    "default_dispatcher",
]

__version__ = "0.1.0"
