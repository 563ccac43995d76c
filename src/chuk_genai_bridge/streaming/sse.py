"""
Server-Sent Event Framing
=========================

Decodes a chat-completions byte stream into JSON payloads. Lines look like
``data: <json>``; the ``[DONE]`` payload ends the stream. Payloads that
fail to decode are dropped with a warning. Invalid UTF-8 bytes are replaced
with U+FFFD rather than ending the stream.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

from chuk_genai_bridge.core import Default, MalformedFragment, SSEEvent, SSEPrefix, loads

logger = logging.getLogger(__name__)

_DATA_FIELD = SSEPrefix.DATA.value.rstrip()
_REPLACEMENT_CHAR = "\ufffd"

# returned by _parse_line for the [DONE] sentinel
DONE = object()


def _parse_line(line: str) -> Any:
    """Decode one line: a payload dict, ``DONE``, or None to skip it."""
    line = line.rstrip("\r")
    if not line or line.startswith(SSEPrefix.COMMENT.value):
        return None
    if not line.startswith(_DATA_FIELD):
        return None

    data = line[len(_DATA_FIELD) :].lstrip(" ")
    if _REPLACEMENT_CHAR in data:
        logger.warning(
            f"Invalid UTF-8 in SSE chunk replaced: {data[: Default.ERROR_BODY_PREVIEW]}"
        )
    if data == SSEEvent.DONE.value:
        return DONE

    try:
        payload = loads(data)
    except ValueError as e:
        logger.warning(
            f"Failed to parse SSE chunk: {e}, data: {data[: Default.ERROR_BODY_PREVIEW]}",
            exc_info=MalformedFragment(f"Undecodable SSE payload: {e}"),
        )
        return None

    if not isinstance(payload, dict):
        logger.warning(
            f"Ignoring non-object SSE payload: {data[: Default.ERROR_BODY_PREVIEW]}"
        )
        return None
    return payload


async def iter_sse_payloads(
    byte_chunks: AsyncIterable[bytes],
) -> AsyncIterator[dict[str, Any]]:
    """
    Yield decoded ``data:`` payloads from a byte stream.

    Partial lines are carried across byte chunks; a trailing line without a
    newline is still processed when the byte stream ends.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    buffer = ""

    try:
        async for chunk in byte_chunks:
            buffer += decoder.decode(chunk)
            *lines, buffer = buffer.split("\n")
            for line in lines:
                payload = _parse_line(line)
                if payload is DONE:
                    return
                if payload is not None:
                    yield payload

        buffer += decoder.decode(b"", final=True)
        payload = _parse_line(buffer)
        if payload is not None and payload is not DONE:
            yield payload
    finally:
        aclose = getattr(byte_chunks, "aclose", None)
        if aclose is not None:
            await aclose()
