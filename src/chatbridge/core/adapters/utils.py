"""Pure helpers shared by adapter implementations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import ValidationError
from ..message import ChatMessage, MessageRole
from ..schema import CompletionRequest

_MISSING = object()


def get_field(value: Any, *names: str, default: Any = None) -> Any:
    """Read the first present field among ``names`` from a mapping or object.

    Provider SDKs hand back either plain mappings or model objects whose
    fields may be absent or ``None``; both are treated as missing.
    """

    if value is None:
        return default
    for name in names:
        if isinstance(value, Mapping):
            found = value.get(name, _MISSING)
        else:
            found = getattr(value, name, _MISSING)
        if found is not _MISSING and found is not None:
            return found
    return default


def first_item(value: Any) -> Any:
    """Return the first element of a sequence, or ``None`` when there is none."""

    if value is None or isinstance(value, (str, bytes, bytearray, Mapping)):
        return None
    if isinstance(value, Sequence):
        return value[0] if value else None
    try:
        return next(iter(value), None)
    except TypeError:
        return None


def require_final_content(messages: Sequence[ChatMessage]) -> str:
    """Return the content of the turn that will be sent to the provider."""

    if not messages:
        raise ValidationError("No content provided")
    content = messages[-1].content
    if not content:
        raise ValidationError("No content provided")
    return content


def split_system_instruction(
    messages: Sequence[ChatMessage],
) -> tuple[str | None, list[ChatMessage]]:
    """Separate the system instruction from the conversation history.

    The first system message supplies the instruction. Every system message
    is dropped from the returned history, which also excludes the final turn.
    """

    instruction: str | None = None
    for message in messages:
        if message.role is MessageRole.SYSTEM:
            instruction = message.content
            break

    history = [
        message for message in messages[:-1] if message.role is not MessageRole.SYSTEM
    ]
    return instruction, history


def tuning_options(request: CompletionRequest, names: Mapping[str, str]) -> dict[str, Any]:
    """Translate request tuning parameters, omitting the ones left unset."""

    options: dict[str, Any] = {}
    for field_name, native_name in names.items():
        value = getattr(request, field_name)
        if value is not None:
            options[native_name] = value
    return options
