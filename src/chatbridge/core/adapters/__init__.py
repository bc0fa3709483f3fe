"""Adapter interfaces and provider implementations."""

from __future__ import annotations

from .base import ProviderAdapter
from .gemini import GeminiAdapter, GeminiStreamNormalizer
from .openai import OpenAIAdapter, OpenAIStreamNormalizer
from .stream import ChunkStream, StreamNormalizer, join_content, replay_stream

__all__ = [
    "ChunkStream",
    "GeminiAdapter",
    "GeminiStreamNormalizer",
    "OpenAIAdapter",
    "OpenAIStreamNormalizer",
    "ProviderAdapter",
    "StreamNormalizer",
    "join_content",
    "replay_stream",
]
