"""Route neutral requests to the adapter registered for their model."""

from __future__ import annotations

import logging

from .config import BridgeConfig
from .core.adapters import ChunkStream, GeminiAdapter, OpenAIAdapter, ProviderAdapter
from .core.errors import UnsupportedModelError
from .core.schema import ChatCompletion, CompletionRequest

LOGGER = logging.getLogger(__name__)


class AdapterDispatcher:
    """Registry of provider adapters keyed by model-name prefix."""

    def __init__(self) -> None:
        self._adapters: dict[str, ProviderAdapter] = {}

    def register(self, prefix: str, adapter: ProviderAdapter) -> None:
        """Serve models whose identifier starts with ``prefix`` with ``adapter``."""

        if not isinstance(prefix, str) or not prefix:
            raise ValueError("adapter prefix must be a non-empty string")
        previous = self._adapters.get(prefix)
        if previous is not None and previous is not adapter:
            LOGGER.warning(
                "replacing adapter %s with %s for prefix %r", previous.name, adapter.name, prefix
            )
        self._adapters[prefix] = adapter
        LOGGER.info("registered adapter %s for prefix %r", adapter.name, prefix)

    def prefixes(self) -> tuple[str, ...]:
        return tuple(sorted(self._adapters))

    def resolve(self, model: str) -> ProviderAdapter:
        """Return the adapter with the longest prefix matching ``model``."""

        matches = [prefix for prefix in self._adapters if model.startswith(prefix)]
        if not matches:
            raise UnsupportedModelError(f"no adapter registered for model {model!r}")
        return self._adapters[max(matches, key=len)]

    async def handle(self, request: CompletionRequest) -> ChatCompletion | ChunkStream:
        adapter = self.resolve(request.model)
        LOGGER.debug("dispatching model=%s to %s stream=%s", request.model, adapter.name, request.stream)
        return await adapter.handle(request)


def default_dispatcher(config: BridgeConfig | None = None) -> AdapterDispatcher:
    """Build a dispatcher serving every provider in ``config``."""

    config = config or BridgeConfig()
    adapters: dict[str, ProviderAdapter] = {
        "gemini": GeminiAdapter(credentials=config.provider("gemini").credentials),
        "openai": OpenAIAdapter(credentials=config.provider("openai").credentials),
    }

    dispatcher = AdapterDispatcher()
    for name, adapter in adapters.items():
        for prefix in config.provider(name).prefixes:
            dispatcher.register(prefix, adapter)
    return dispatcher


__all__ = ["AdapterDispatcher", "default_dispatcher"]
