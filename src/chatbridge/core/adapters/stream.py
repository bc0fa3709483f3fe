"""Canonical streaming iterator shared by provider adapters."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterable, Iterable
from typing import Any, AsyncIterator, List, Protocol

from ..errors import AdapterError
from ..schema import ChatCompletionChunk

LOGGER = logging.getLogger(__name__)


class StreamNormalizer(Protocol):
    def normalize_chunk(self, chunk: Any) -> ChatCompletionChunk:
        """Map one provider-specific chunk into one neutral chunk."""


class ChunkStream(AsyncIterator[ChatCompletionChunk]):
    """Async iterator turning a native chunk stream into neutral chunks.

    Every native chunk yields exactly one :class:`ChatCompletionChunk`, in
    arrival order and only once that chunk has arrived. The stream ends when
    the native stream is exhausted. Exhaustion, errors, :meth:`aclose` and
    leaving an ``async with`` block all release the native stream.
    """

    def __init__(self, source: Any, normalizer: StreamNormalizer) -> None:
        self._source = source
        self._iterator = _coerce_async_iterator(source)
        self._normalizer = normalizer
        self._closed = False
        self._close_lock = asyncio.Lock()
        self._emitted = 0

    def __aiter__(self) -> ChunkStream:
        return self

    async def __anext__(self) -> ChatCompletionChunk:
        if self._closed:
            raise StopAsyncIteration

        try:
            raw_chunk = await self._iterator.__anext__()
        except StopAsyncIteration:
            LOGGER.debug("native stream exhausted after %d chunks", self._emitted)
            await self.aclose()
            raise
        except BaseException:
            await self.aclose()
            raise

        try:
            chunk = self._normalizer.normalize_chunk(raw_chunk)
        except BaseException:
            await self.aclose()
            raise

        self._emitted += 1
        return chunk

    async def __aenter__(self) -> ChunkStream:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        """Whether the native stream has been released."""

        return self._closed

    async def aclose(self) -> None:
        """Release the native stream and prevent additional iteration."""

        async with self._close_lock:
            if self._closed:
                return
            self._closed = True

            for closer_name in ("aclose", "close"):
                closer = getattr(self._source, closer_name, None)
                if closer is None or not callable(closer):
                    continue
                result = closer()
                if inspect.isawaitable(result):
                    await result
                return

    close = aclose


def _coerce_async_iterator(source: Any) -> Any:
    if not isinstance(source, AsyncIterable):
        msg = "provider stream must support async iteration"
        raise AdapterError(msg)
    iterator = source.__aiter__()
    if not hasattr(iterator, "__anext__"):
        msg = "provider stream iterator must define '__anext__'"
        raise AdapterError(msg)
    return iterator


async def replay_stream(stream: ChunkStream) -> List[ChatCompletionChunk]:
    """Collect every chunk emitted by a stream, closing it afterwards."""

    chunks: List[ChatCompletionChunk] = []
    try:
        async for chunk in stream:
            chunks.append(chunk)
    finally:
        await stream.aclose()
    return chunks


def join_content(chunks: Iterable[ChatCompletionChunk]) -> str:
    """Concatenate the delta content of the first choice of each chunk."""

    return "".join(chunk.choices[0].delta.content for chunk in chunks if chunk.choices)


__all__ = ["ChunkStream", "StreamNormalizer", "join_content", "replay_stream"]
