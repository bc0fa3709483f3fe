"""OpenAI chat-completions adapter speaking the neutral contract."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import openai

from ...config import OPENAI_API_KEY_ENV, CredentialSource
from ..errors import AdapterError
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
from .stream import ChunkStream, StreamNormalizer
from .utils import first_item, get_field, require_final_content, tuning_options

LOGGER = logging.getLogger(__name__)

ASSISTANT_ROLE = MessageRole.ASSISTANT.value

map_finish_reason = finish_reason_mapper({reason.value: reason for reason in FinishReason})

_TUNING_FIELDS = {"temperature": "temperature", "top_p": "top_p", "max_tokens": "max_tokens"}

OpenAIClientFactory = Callable[[str], Any]


def create_openai_client(api_key: str) -> Any:
    """Default ``client_factory`` returning an ``openai.AsyncOpenAI`` client."""

    return openai.AsyncOpenAI(api_key=api_key)


def messages_to_openai(messages: Sequence[ChatMessage]) -> list[dict[str, Any]]:
    """Convert neutral messages into the OpenAI Chat API format."""

    converted: list[dict[str, Any]] = []
    for message in messages:
        role = ASSISTANT_ROLE if message.role.is_model_turn else message.role.value
        converted.append({"role": role, "content": message.content or ""})
    return converted


class OpenAIStreamNormalizer(StreamNormalizer):
    """Map OpenAI stream chunks into neutral chunks, one for one."""

    def __init__(self, model: str, clock: Clock = wall_clock) -> None:
        self._model = model
        self._clock = clock

    def normalize_chunk(self, chunk: Any) -> ChatCompletionChunk:
        choice = first_item(get_field(chunk, "choices"))
        delta = get_field(choice, "delta")
        content = get_field(delta, "content")
        role = get_field(delta, "role")
        model = get_field(chunk, "model")
        return ChatCompletionChunk(
            model=model if isinstance(model, str) and model else self._model,
            created=self._clock(),
            choices=[
                StreamChoice(
                    delta=Delta(
                        content=content if isinstance(content, str) else "",
                        role=role if isinstance(role, str) and role else ASSISTANT_ROLE,
                    ),
                    index=0,
                    finish_reason=map_finish_reason(get_field(choice, "finish_reason")),
                )
            ],
        )


class OpenAIAdapter(ProviderAdapter):
    """Translate neutral chat requests into OpenAI chat completions."""

    name = "openai"

    def __init__(
        self,
        *,
        client_factory: OpenAIClientFactory | None = None,
        credentials: CredentialSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._client_factory = client_factory or create_openai_client
        self._credentials = credentials or CredentialSource(OPENAI_API_KEY_ENV)
        self._clock = clock or wall_clock

    async def complete(self, request: CompletionRequest) -> ChatCompletion:
        client, payload = self._prepare(request)
        response = await client.chat.completions.create(**payload)

        choice = self._extract_first_choice(response)
        message = get_field(choice, "message")
        if message is None:
            msg = "OpenAI choice missing message payload"
            raise AdapterError(msg)
        content = get_field(message, "content")

        return ChatCompletion(
            model=request.model,
            created=self._clock(),
            choices=[
                Choice(
                    index=0,
                    message=ResponseMessage(
                        role=ASSISTANT_ROLE,
                        content=content if isinstance(content, str) else "",
                    ),
                    finish_reason=map_finish_reason(get_field(choice, "finish_reason")),
                )
            ],
        )

    async def stream(self, request: CompletionRequest) -> ChunkStream:
        client, payload = self._prepare(request)
        payload["stream"] = True
        native_stream = await client.chat.completions.create(**payload)
        return ChunkStream(native_stream, OpenAIStreamNormalizer(request.model, self._clock))

    def _prepare(self, request: CompletionRequest) -> tuple[Any, dict[str, Any]]:
        api_key = self._credentials.resolve(request.api_key)
        require_final_content(request.messages)

        payload: dict[str, Any] = {
            "model": request.model,
            "messages": messages_to_openai(request.messages),
            **tuning_options(request, _TUNING_FIELDS),
        }
        LOGGER.debug(
            "sending openai chat completion model=%s messages=%d stream=%s",
            request.model,
            len(payload["messages"]),
            request.stream,
        )
        return self._client_factory(api_key), payload

    def _extract_first_choice(self, response: Any) -> Any:
        choices = get_field(response, "choices")
        if isinstance(choices, Mapping) or not isinstance(choices, Sequence) or not choices:
            msg = "OpenAI response missing choices"
            raise AdapterError(msg)
        return choices[0]


__all__ = [
    "OpenAIAdapter",
    "OpenAIClientFactory",
    "OpenAIStreamNormalizer",
    "create_openai_client",
    "map_finish_reason",
    "messages_to_openai",
]
