"""Gemini provider adapter.

Gemini is chat-history based: the conversation minus its final turn seeds a
chat session, the system prompt travels separately as the session's system
instruction, and the final turn is sent as the new message. Replies and
stream chunks come back as candidates whose first text part carries the
content.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ...config import GEMINI_API_KEY_ENV, CredentialSource
from ..finish_reason import FinishReason, finish_reason_mapper
from ..message import ChatMessage, MessageRole
from ..schema import (
    ChatCompletion,
    ChatCompletionChunk,
    Choice,
    CompletionRequest,
    Delta,
    ResponseMessage,
    StreamChoice,
)
from .base import Clock, ProviderAdapter, wall_clock
from .genai import GeminiSession, create_genai_session
from .stream import ChunkStream, StreamNormalizer
from .utils import (
    first_item,
    get_field,
    require_final_content,
    split_system_instruction,
    tuning_options,
)

LOGGER = logging.getLogger(__name__)

MODEL_ROLE = "model"

map_finish_reason = finish_reason_mapper(
    {
        "STOP": FinishReason.STOP,
        "MAX_TOKENS": FinishReason.LENGTH,
        "SAFETY": FinishReason.CONTENT_FILTER,
        "RECITATION": FinishReason.CONTENT_FILTER,
    }
)

_GENERATION_CONFIG_FIELDS = {
    "temperature": "temperature",
    "top_p": "top_p",
    "max_tokens": "max_output_tokens",
}

GeminiClientFactory = Callable[[str, str], GeminiSession]


def _gemini_role(role: MessageRole) -> str:
    return MODEL_ROLE if role.is_model_turn else role.value


def messages_to_gemini_history(messages: Sequence[ChatMessage]) -> list[dict[str, Any]]:
    """Convert neutral history turns into Gemini ``Content`` payloads."""

    return [
        {"role": _gemini_role(message.role), "parts": [{"text": message.content or ""}]}
        for message in messages
    ]


def _first_candidate(payload: Any) -> Any:
    return first_item(get_field(payload, "candidates"))


def _candidate_text(candidate: Any) -> str:
    content = get_field(candidate, "content")
    part = first_item(get_field(content, "parts"))
    text = get_field(part, "text")
    return text if isinstance(text, str) else ""


def _candidate_role(candidate: Any) -> str:
    role = get_field(get_field(candidate, "content"), "role")
    return role if isinstance(role, str) and role else MODEL_ROLE


def _candidate_finish_reason(candidate: Any) -> FinishReason:
    return map_finish_reason(get_field(candidate, "finish_reason", "finishReason"))


class GeminiStreamNormalizer(StreamNormalizer):
    """Map Gemini stream chunks into neutral chunks, one for one."""

    def __init__(self, clock: Clock = wall_clock) -> None:
        self._clock = clock

    def normalize_chunk(self, chunk: Any) -> ChatCompletionChunk:
        candidate = _first_candidate(chunk)
        role = _candidate_role(candidate)
        return ChatCompletionChunk(
            model=role,
            created=self._clock(),
            choices=[
                StreamChoice(
                    delta=Delta(content=_candidate_text(candidate), role=role),
                    index=0,
                    finish_reason=_candidate_finish_reason(candidate),
                )
            ],
        )


class GeminiAdapter(ProviderAdapter):
    """Translate neutral chat requests into Gemini chat sessions."""

    name = "gemini"

    def __init__(
        self,
        *,
        client_factory: GeminiClientFactory | None = None,
        credentials: CredentialSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._client_factory = client_factory or create_genai_session
        self._credentials = credentials or CredentialSource(GEMINI_API_KEY_ENV)
        self._clock = clock or wall_clock

    async def complete(self, request: CompletionRequest) -> ChatCompletion:
        chat, text = self._open_chat(request)
        response = await chat.send_message(text)

        reply = get_field(response, "text")
        return ChatCompletion(
            model=request.model,
            created=self._clock(),
            choices=[
                Choice(
                    index=0,
                    message=ResponseMessage(
                        role=MODEL_ROLE,
                        content=reply if isinstance(reply, str) else "",
                    ),
                    finish_reason=_candidate_finish_reason(_first_candidate(response)),
                )
            ],
        )

    async def stream(self, request: CompletionRequest) -> ChunkStream:
        chat, text = self._open_chat(request)
        native_stream = await chat.send_message_stream(text)
        return ChunkStream(native_stream, GeminiStreamNormalizer(self._clock))

    def _open_chat(self, request: CompletionRequest) -> tuple[Any, str]:
        api_key = self._credentials.resolve(request.api_key)
        text = require_final_content(request.messages)

        session = self._client_factory(api_key, request.model)
        system_instruction, history = split_system_instruction(request.messages)
        generation_config = tuning_options(request, _GENERATION_CONFIG_FIELDS)

        LOGGER.debug(
            "starting gemini chat model=%s history=%d system_instruction=%s stream=%s",
            request.model,
            len(history),
            system_instruction is not None,
            request.stream,
        )
        chat = session.start_chat(
            system_instruction=system_instruction,
            history=messages_to_gemini_history(history),
            generation_config=generation_config,
        )
        return chat, text


__all__ = [
    "GeminiAdapter",
    "GeminiClientFactory",
    "GeminiStreamNormalizer",
    "MODEL_ROLE",
    "map_finish_reason",
    "messages_to_gemini_history",
]
