"""Default Gemini session built on the ``google-genai`` SDK."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, AsyncIterable, Protocol

from google import genai
from google.genai import types


class GeminiChat(Protocol):
    """Provider-side conversation scoped to one call."""

    async def send_message(self, message: str) -> Any:
        """Send ``message`` and return the complete response."""

    async def send_message_stream(self, message: str) -> AsyncIterable[Any]:
        """Send ``message`` and return the native chunk stream."""


class GeminiSession(Protocol):
    def start_chat(
        self,
        *,
        system_instruction: str | None,
        history: Sequence[Mapping[str, Any]],
        generation_config: Mapping[str, Any],
    ) -> GeminiChat:
        """Open a conversation seeded with ``history``."""


class GenAISession:
    """Gemini session bound to one API key and one model."""

    def __init__(self, api_key: str, model: str, *, client: Any | None = None) -> None:
        self._client = client or genai.Client(api_key=api_key)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def start_chat(
        self,
        *,
        system_instruction: str | None,
        history: Sequence[Mapping[str, Any]],
        generation_config: Mapping[str, Any],
    ) -> GeminiChat:
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            **generation_config,
        )
        contents = [
            types.Content(
                role=entry["role"],
                parts=[types.Part(text=part["text"]) for part in entry["parts"]],
            )
            for entry in history
        ]
        return self._client.aio.chats.create(model=self._model, config=config, history=contents)


def create_genai_session(api_key: str, model: str) -> GeminiSession:
    """Default ``client_factory`` for :class:`~chatbridge.core.adapters.gemini.GeminiAdapter`."""

    return GenAISession(api_key, model)


__all__ = ["GeminiChat", "GeminiSession", "GenAISession", "create_genai_session"]
