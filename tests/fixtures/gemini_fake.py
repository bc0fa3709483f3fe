"""Deterministic Gemini session fixtures for offline adapter tests."""

from __future__ import annotations

import asyncio
from collections import deque
from types import SimpleNamespace
from typing import Any, Deque, Iterable, Sequence

FIXED_CREATED = 1_700_000_000


def fixed_clock() -> int:
    return FIXED_CREATED


class FakeGeminiStream:
    """Async iterator that replays pre-defined Gemini chunks."""

    def __init__(self, chunks: Iterable[Any]) -> None:
        self._chunks: Deque[Any] = deque(chunks)
        self.pulled = 0
        self.closed = False

    def __aiter__(self) -> "FakeGeminiStream":
        return self

    async def __anext__(self) -> Any:
        if self.closed or not self._chunks:
            raise StopAsyncIteration
        await asyncio.sleep(0)
        self.pulled += 1
        return self._chunks.popleft()

    async def aclose(self) -> None:
        self.closed = True


class FakeGeminiChat:
    """Minimal stand-in for a Gemini chat session."""

    def __init__(self, *, response: Any = None, stream: FakeGeminiStream | None = None) -> None:
        self._response = response
        self._stream = stream
        self.sent: list[str] = []
        self.streamed: list[str] = []

    async def send_message(self, message: str) -> Any:
        self.sent.append(message)
        return self._response

    async def send_message_stream(self, message: str) -> FakeGeminiStream:
        self.streamed.append(message)
        assert self._stream is not None
        return self._stream


class FakeGeminiSession:
    def __init__(self, chat: FakeGeminiChat) -> None:
        self.chat = chat
        self.start_calls: list[dict[str, Any]] = []

    def start_chat(self, **kwargs: Any) -> FakeGeminiChat:
        self.start_calls.append(kwargs)
        return self.chat


class FakeGeminiClientFactory:
    """``client_factory`` recording every session it creates."""

    def __init__(self, chat: FakeGeminiChat) -> None:
        self.chat = chat
        self.calls: list[tuple[str, str]] = []
        self.sessions: list[FakeGeminiSession] = []

    def __call__(self, api_key: str, model: str) -> FakeGeminiSession:
        self.calls.append((api_key, model))
        session = FakeGeminiSession(self.chat)
        self.sessions.append(session)
        return session

    @property
    def start_call(self) -> dict[str, Any]:
        assert len(self.sessions) == 1
        assert len(self.sessions[0].start_calls) == 1
        return self.sessions[0].start_calls[0]


def chunk(text: str | None = None, *, role: str | None = "model", finish_reason: str | None = None) -> dict[str, Any]:
    """Build a Gemini chunk the way the REST API spells it."""

    content: dict[str, Any] = {}
    if role is not None:
        content["role"] = role
    if text is not None:
        content["parts"] = [{"text": text}]
    candidate: dict[str, Any] = {"content": content}
    if finish_reason is not None:
        candidate["finishReason"] = finish_reason
    return {"candidates": [candidate]}


def sdk_response(text: str, *, finish_reason: Any = "STOP") -> SimpleNamespace:
    """Build a response shaped like a ``google-genai`` SDK object."""

    part = SimpleNamespace(text=text)
    content = SimpleNamespace(role="model", parts=[part])
    candidate = SimpleNamespace(content=content, finish_reason=finish_reason)
    return SimpleNamespace(text=text, candidates=[candidate])


def build_completion_client(response: Any) -> FakeGeminiClientFactory:
    return FakeGeminiClientFactory(FakeGeminiChat(response=response))


def build_streaming_client(chunks: Sequence[Any]) -> tuple[FakeGeminiClientFactory, FakeGeminiStream]:
    stream = FakeGeminiStream(chunks)
    return FakeGeminiClientFactory(FakeGeminiChat(stream=stream)), stream


__all__ = [
    "FIXED_CREATED",
    "FakeGeminiChat",
    "FakeGeminiClientFactory",
    "FakeGeminiSession",
    "FakeGeminiStream",
    "build_completion_client",
    "build_streaming_client",
    "chunk",
    "fixed_clock",
    "sdk_response",
]
