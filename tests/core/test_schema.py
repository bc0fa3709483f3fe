from __future__ import annotations

import pytest
from pydantic import ValidationError

from chatbridge.core import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    CompletionRequest,
    FinishReason,
    MessageRole,
)


def test_request_accepts_openai_style_payload() -> None:
    request = CompletionRequest.model_validate(
        {
            "model": "gemini-pro",
            "messages": [
                {"role": "system", "content": "Be terse."},
                {"role": "user", "content": "Hi", "name": "alice"},
            ],
            "temperature": 0.5,
            "stream": True,
            "n": 1,
        }
    )

    assert request.messages[0].role is MessageRole.SYSTEM
    assert request.messages[1] == ChatMessage(role=MessageRole.USER, content="Hi")
    assert request.temperature == 0.5
    assert request.top_p is None
    assert request.max_tokens is None
    assert request.stream is True


def test_request_defaults() -> None:
    request = CompletionRequest(model="gemini-pro")

    assert request.messages == []
    assert request.stream is False
    assert request.api_key is None


def test_request_rejects_unknown_role() -> None:
    with pytest.raises(ValidationError):
        CompletionRequest.model_validate(
            {"model": "gemini-pro", "messages": [{"role": "tool", "content": "42"}]}
        )


def test_request_rejects_empty_model() -> None:
    with pytest.raises(ValidationError):
        CompletionRequest(model="", messages=[])


def test_api_key_is_hidden_from_repr() -> None:
    request = CompletionRequest(model="gemini-pro", api_key="secret-value")

    assert "secret-value" not in repr(request)


def test_model_turn_roles() -> None:
    assert MessageRole.MODEL.is_model_turn
    assert MessageRole.ASSISTANT.is_model_turn
    assert not MessageRole.USER.is_model_turn
    assert not MessageRole.SYSTEM.is_model_turn


def test_completion_serializes_in_chat_completion_shape() -> None:
    completion = ChatCompletion.model_validate(
        {
            "model": "gemini-pro",
            "created": 1,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "model", "content": "Hello."},
                    "finish_reason": "length",
                }
            ],
        }
    )

    assert completion.choices[0].finish_reason is FinishReason.LENGTH
    assert completion.model_dump(mode="json") == {
        "model": "gemini-pro",
        "created": 1,
        "choices": [
            {
                "index": 0,
                "message": {"role": "model", "content": "Hello."},
                "finish_reason": "length",
            }
        ],
    }


def test_chunk_rejects_unknown_fields_and_is_frozen() -> None:
    payload = {
        "model": "model",
        "created": 1,
        "choices": [{"delta": {"content": "a", "role": "model"}, "index": 0, "finish_reason": "stop"}],
    }
    chunk = ChatCompletionChunk.model_validate(payload)

    with pytest.raises(ValidationError):
        ChatCompletionChunk.model_validate({**payload, "usage": {}})
    with pytest.raises(ValidationError):
        chunk.model = "other"
