# tests/translate/test_response.py
"""
Tests for non-streaming response reconstruction and finish-reason mapping
"""

import logging

import pytest

from chuk_genai_bridge.core import (
    FinishReason,
    GenerateContentRequest,
    MalformedFragment,
    ProtocolError,
    Role,
    WireResponse,
)
from chuk_genai_bridge.translate import (
    is_call_finish,
    map_finish_reason,
    reconstruct_response,
    translate_request,
)


class TestFinishReasonMapping:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("stop", FinishReason.STOP),
            ("length", FinishReason.MAX_TOKENS),
            ("function_call", FinishReason.STOP),
            ("tool_calls", FinishReason.STOP),
            ("content_filter", FinishReason.SAFETY),
            ("eos", FinishReason.OTHER),
            ("", FinishReason.OTHER),
            (None, FinishReason.OTHER),
        ],
    )
    def test_mapping(self, token, expected):
        assert map_finish_reason(token) is expected

    def test_call_tokens(self):
        assert is_call_finish("tool_calls")
        assert is_call_finish("function_call")
        assert not is_call_finish("stop")
        assert not is_call_finish(None)


class TestReconstructResponse:
    def test_text_round_trip(self, completion_payload):
        request = GenerateContentRequest.model_validate(
            {"contents": [{"role": "user", "parts": [{"text": "ping"}]}]}
        )
        wire = translate_request(request, "gpt-4o-mini")
        assert wire.messages[-1].content == "ping"

        response = reconstruct_response(completion_payload(content="pong"))

        candidate = response.candidates[0]
        assert candidate.content.role is Role.MODEL
        assert [p.text for p in candidate.content.parts] == ["pong"]
        assert candidate.finish_reason is FinishReason.STOP
        assert candidate.index == 0
        assert response.text == "pong"
        assert response.function_calls is None

    def test_zero_choices_raises(self):
        with pytest.raises(ProtocolError, match="No choices"):
            reconstruct_response({"id": "x", "choices": []})

    def test_missing_choices_raises(self):
        with pytest.raises(ProtocolError):
            reconstruct_response({"id": "x"})

    def test_non_object_payload_raises(self):
        with pytest.raises(ProtocolError):
            reconstruct_response(["not", "a", "response"])

    def test_accepts_validated_model(self, completion_payload):
        wire = WireResponse.model_validate(completion_payload(content="hi"))
        assert reconstruct_response(wire).text == "hi"

    def test_empty_content_emits_no_text_part(self, completion_payload):
        response = reconstruct_response(completion_payload(content=""))
        assert response.candidates[0].content.parts == []
        assert response.text is None

    def test_tool_calls(self, completion_payload, seq_ids):
        payload = completion_payload(
            content=None,
            finish_reason="tool_calls",
            tool_calls=[
                {
                    "id": "call_a",
                    "type": "function",
                    "function": {"name": "get_weather", "arguments": '{"city": "SF"}'},
                },
                {
                    "type": "function",
                    "function": {"name": "get_time", "arguments": ""},
                },
            ],
        )
        response = reconstruct_response(payload, seq_ids)

        calls = [p.function_call for p in response.candidates[0].content.parts]
        assert [(c.id, c.name, c.args) for c in calls] == [
            ("call_a", "get_weather", {"city": "SF"}),
            ("call_1", "get_time", {}),
        ]
        assert response.function_calls == calls
        assert response.candidates[0].finish_reason is FinishReason.STOP

    def test_malformed_arguments_degrade_to_empty(self, completion_payload, caplog):
        payload = completion_payload(
            content="Checking.",
            tool_calls=[
                {"id": "bad", "function": {"name": "broken", "arguments": '{"city": '}},
                {"id": "good", "function": {"name": "fine", "arguments": '{"a": 1}'}},
            ],
        )
        with caplog.at_level(logging.WARNING):
            response = reconstruct_response(payload)

        parts = response.candidates[0].content.parts
        assert parts[0].text == "Checking."
        assert parts[1].function_call.args == {}
        assert parts[2].function_call.args == {"a": 1}
        assert "broken" in caplog.text
        record = next(r for r in caplog.records if "broken" in r.getMessage())
        assert isinstance(record.exc_info[1], MalformedFragment)

    def test_non_object_arguments_degrade_to_empty(self, completion_payload):
        payload = completion_payload(
            content=None,
            tool_calls=[{"id": "c", "function": {"name": "f", "arguments": "[1, 2]"}}],
        )
        response = reconstruct_response(payload)
        assert response.function_calls[0].args == {}

    def test_legacy_function_call(self, completion_payload, seq_ids):
        payload = completion_payload(
            content=None,
            finish_reason="function_call",
            function_call={"name": "lookup", "arguments": '{"q": "x"}'},
        )
        response = reconstruct_response(payload, seq_ids)

        assert len(response.candidates[0].content.parts) == 1
        call = response.function_calls[0]
        assert (call.id, call.name, call.args) == ("call_1", "lookup", {"q": "x"})

    def test_tool_calls_take_precedence_over_legacy(self, completion_payload):
        payload = completion_payload(
            content=None,
            tool_calls=[{"id": "t", "function": {"name": "modern", "arguments": "{}"}}],
            function_call={"name": "legacy", "arguments": "{}"},
        )
        response = reconstruct_response(payload)
        assert [c.name for c in response.function_calls] == ["modern"]

    def test_usage_copied(self, completion_payload):
        payload = completion_payload(
            usage={"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}
        )
        usage = reconstruct_response(payload).usage_metadata
        assert usage.prompt_token_count == 10
        assert usage.candidates_token_count == 5
        assert usage.total_token_count == 15

    def test_usage_absent(self, completion_payload):
        assert reconstruct_response(completion_payload()).usage_metadata is None

    def test_unknown_finish_reason(self, completion_payload):
        response = reconstruct_response(completion_payload(finish_reason="eos"))
        assert response.candidates[0].finish_reason is FinishReason.OTHER

    def test_index_passed_through(self, completion_payload):
        payload = completion_payload()
        payload["choices"][0]["index"] = 3
        assert reconstruct_response(payload).candidates[0].index == 3
