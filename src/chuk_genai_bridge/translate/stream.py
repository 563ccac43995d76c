"""
Streaming Response Reconstructor
================================

Turns a sequence of chat-completions delta chunks into vendor-neutral
responses. Text fragments are emitted as they arrive. Function calls arrive
split across chunks (legacy ``function_call`` fragments, or ``tool_calls``
fragments correlated by ``index``) and are accumulated in a call window
until the window closes, then emitted exactly once with parsed arguments.

A window closes when a chunk finishes with ``function_call``/``tool_calls``,
when a chunk arrives without call fragments while calls are pending, or
when the stream ends with calls still pending.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from chuk_genai_bridge.core import (
    CallConvention,
    FinishReason,
    FunctionCall,
    GenerateContentResponse,
    Part,
    WireFunctionCallDelta,
    WireStreamChunk,
    WireToolCallDelta,
)

from .finish_reasons import is_call_finish, map_finish_reason
from .ids import CallIdFactory, new_call_id
from .response import build_response, parse_call_arguments

logger = logging.getLogger(__name__)


@dataclass
class PendingCall:
    """A function call whose fragments are still arriving."""

    convention: CallConvention
    id: str | None = None
    name: str | None = None
    arguments: str = ""

    def to_part(self, id_factory: CallIdFactory) -> Part | None:
        if not self.name:
            logger.debug(
                f"Dropping {self.convention.value} call without a name "
                f"({len(self.arguments)} argument chars)"
            )
            return None
        return Part(
            function_call=FunctionCall(
                id=self.id or id_factory(),
                name=self.name,
                args=parse_call_arguments(self.arguments, self.name),
            )
        )


@dataclass
class CallWindow:
    """In-flight calls for one window, under either convention."""

    legacy: PendingCall | None = None
    indexed: dict[int, PendingCall] = field(default_factory=dict)
    active: bool = False

    def add_legacy(self, fragment: WireFunctionCallDelta, id_factory: CallIdFactory) -> None:
        if self.legacy is None:
            self.legacy = PendingCall(CallConvention.LEGACY)
        if fragment.name:
            self.legacy.name = fragment.name
            if self.legacy.id is None:
                self.legacy.id = id_factory()
        if fragment.arguments:
            self.legacy.arguments += fragment.arguments
        self.active = True

    def add_indexed(self, fragment: WireToolCallDelta) -> None:
        call = self.indexed.get(fragment.index)
        if call is None:
            call = self.indexed[fragment.index] = PendingCall(CallConvention.INDEXED)
        if fragment.id:
            call.id = fragment.id
        if fragment.function is not None:
            if fragment.function.name:
                call.name = fragment.function.name
            if fragment.function.arguments:
                call.arguments += fragment.function.arguments
        self.active = True

    def flush(self, id_factory: CallIdFactory) -> list[Part]:
        """Finalize every pending call and reset the window."""
        pending = ([self.legacy] if self.legacy is not None else []) + list(
            self.indexed.values()
        )
        parts = [
            p for p in (call.to_part(id_factory) for call in pending) if p is not None
        ]

        self.legacy = None
        self.indexed = {}
        self.active = False
        return parts


class StreamReconstructor:
    """
    State machine for one streamed exchange.

    Each instance owns its call window; use a fresh instance per stream.
    """

    def __init__(self, id_factory: CallIdFactory = new_call_id):
        self.id_factory = id_factory
        self._window = CallWindow()
        self._last_index = 0

    @property
    def calls_active(self) -> bool:
        return self._window.active

    def feed(self, chunk: WireStreamChunk) -> GenerateContentResponse | None:
        """Consume one chunk; return a response if it produced any parts."""
        if not chunk.choices:
            return None

        choice = chunk.choices[0]
        delta = choice.delta
        self._last_index = choice.index
        parts: list[Part] = []

        if delta.content:
            parts.append(Part(text=delta.content))

        if delta.function_call is not None:
            self._window.add_legacy(delta.function_call, self.id_factory)

        for fragment in delta.tool_calls or []:
            self._window.add_indexed(fragment)

        if is_call_finish(choice.finish_reason) or (
            self._window.active and not delta.has_call_fragment
        ):
            parts.extend(self._window.flush(self.id_factory))

        if not parts:
            return None

        finish_reason = (
            map_finish_reason(choice.finish_reason) if choice.finish_reason else None
        )
        return build_response(parts, finish_reason, choice.index, chunk.usage)

    def finish(self) -> GenerateContentResponse | None:
        """Flush calls left pending by a stream that ended early."""
        if not self._window.active:
            return None

        parts = self._window.flush(self.id_factory)
        if not parts:
            return None

        logger.debug(f"Flushed {len(parts)} call(s) after stream end")
        return build_response(parts, FinishReason.STOP, self._last_index)


async def reconstruct_stream(
    chunks: AsyncIterable[dict[str, Any] | WireStreamChunk],
    id_factory: CallIdFactory = new_call_id,
) -> AsyncIterator[GenerateContentResponse]:
    """
    Lazily reconstruct responses from decoded stream chunks.

    Chunks that do not match the chunk shape are logged and skipped.
    Closing this generator closes ``chunks`` when it supports ``aclose``.
    """
    reconstructor = StreamReconstructor(id_factory)
    chunk_num = 0

    try:
        async for raw in chunks:
            chunk_num += 1
            if isinstance(raw, WireStreamChunk):
                chunk = raw
            else:
                try:
                    chunk = WireStreamChunk.model_validate(raw)
                except ValidationError as e:
                    logger.warning(f"Skipping malformed chunk #{chunk_num}: {e}")
                    continue

            response = reconstructor.feed(chunk)
            if response is not None:
                yield response

        tail = reconstructor.finish()
        if tail is not None:
            yield tail
    finally:
        aclose = getattr(chunks, "aclose", None)
        if aclose is not None:
            await aclose()
