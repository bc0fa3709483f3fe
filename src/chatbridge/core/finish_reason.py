"""Provider-neutral finish reasons and per-provider mapping helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any


class FinishReason(str, Enum):
    """Why a model stopped generating, in the neutral vocabulary."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    FUNCTION_CALL = "function_call"


FinishReasonMapper = Callable[[Any], FinishReason]


def native_reason(value: Any) -> str | None:
    """Reduce a native reason (string, SDK enum member or ``None``) to a string."""

    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return None


def finish_reason_mapper(
    table: Mapping[str, FinishReason],
    *,
    default: FinishReason = FinishReason.STOP,
) -> FinishReasonMapper:
    """Return a total mapping function for a provider's reason vocabulary.

    Lookups are exact on the native string. Values missing from ``table``,
    values of an unexpected type and ``None`` all resolve to ``default``.
    """

    frozen = MappingProxyType(dict(table))

    def _map(value: Any) -> FinishReason:
        reason = native_reason(value)
        if reason is None:
            return default
        return frozen.get(reason, default)

    return _map


__all__ = ["FinishReason", "FinishReasonMapper", "finish_reason_mapper", "native_reason"]
