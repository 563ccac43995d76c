# tests/conftest.py
"""
Shared fixtures for chuk-genai-bridge tests.
"""

from typing import Any

import pytest

from chuk_genai_bridge.translate import SequentialIds


@pytest.fixture
def seq_ids():
    """Deterministic call-id factory: call_1, call_2, ..."""
    return SequentialIds()


@pytest.fixture
def make_chunk():
    """Build a decoded chat-completions stream chunk."""

    def _make(
        content: str | None = None,
        tool_calls: list[dict[str, Any]] | None = None,
        function_call: dict[str, Any] | None = None,
        finish_reason: str | None = None,
        index: int = 0,
        usage: dict[str, int] | None = None,
    ) -> dict[str, Any]:
        delta: dict[str, Any] = {}
        if content is not None:
            delta["content"] = content
        if tool_calls is not None:
            delta["tool_calls"] = tool_calls
        if function_call is not None:
            delta["function_call"] = function_call
        chunk: dict[str, Any] = {
            "id": "chatcmpl-test",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "test-model",
            "choices": [
                {"index": index, "delta": delta, "finish_reason": finish_reason}
            ],
        }
        if usage is not None:
            chunk["usage"] = usage
        return chunk

    return _make


@pytest.fixture
def aiter_of():
    """Turn a list into an async iterator."""

    def _aiter(items):
        async def _gen():
            for item in items:
                yield item

        return _gen()

    return _aiter


@pytest.fixture
def weather_tool() -> dict[str, Any]:
    return {
        "functionDeclarations": [
            {
                "name": "get_weather",
                "description": "Get the weather for a city",
                "parametersJsonSchema": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                    "required": ["city"],
                },
            }
        ]
    }


@pytest.fixture
def completion_payload():
    """Build a complete (non-streaming) chat-completions response."""

    def _make(
        content: str | None = "pong",
        tool_calls: list[dict[str, Any]] | None = None,
        function_call: dict[str, Any] | None = None,
        finish_reason: str | None = "stop",
        usage: dict[str, int] | None = None,
    ) -> dict[str, Any]:
        message: dict[str, Any] = {"role": "assistant", "content": content}
        if tool_calls is not None:
            message["tool_calls"] = tool_calls
        if function_call is not None:
            message["function_call"] = function_call
        payload: dict[str, Any] = {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "test-model",
            "choices": [
                {"index": 0, "message": message, "finish_reason": finish_reason}
            ],
        }
        if usage is not None:
            payload["usage"] = usage
        return payload

    return _make
