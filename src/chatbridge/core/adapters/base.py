"""Adapter interface shared by provider implementations."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from ..schema import ChatCompletion, CompletionRequest
from .stream import ChunkStream

Clock = Callable[[], int]


def wall_clock() -> int:
    """Return the current wall-clock time in whole seconds."""

    return int(time.time())


class ProviderAdapter(ABC):
    """Abstract interface for provider-specific adapters."""

    name: str = "provider"

    async def handle(self, request: CompletionRequest) -> ChatCompletion | ChunkStream:
        """Serve ``request`` as a single result or as a stream of chunks."""

        if request.stream:
            return await self.stream(request)
        return await self.complete(request)

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> ChatCompletion:
        """Send the conversation and return the provider's reply."""

    @abstractmethod
    async def stream(self, request: CompletionRequest) -> ChunkStream:
        """Open a streaming call and return its neutral chunk stream.

        Precondition failures are raised here, before any stream is handed
        back to the caller.
        """
