# tests/core/test_models.py
"""
Tests for the vendor-neutral and wire models
"""

import pytest
from pydantic import ValidationError

from chuk_genai_bridge.core import (
    Content,
    GenerateContentConfig,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
    PartKind,
    Role,
    SystemInstruction,
    WireFunctionCall,
    WireMessage,
    WireRequest,
    WireRole,
    WireStreamChunk,
    WireToolCall,
)


class TestPartKind:
    def test_response_beats_call_and_text(self):
        part = Part.model_validate(
            {
                "text": "ignored",
                "functionCall": {"name": "f"},
                "functionResponse": {"name": "f", "response": {}},
            }
        )
        assert part.kind == PartKind.FUNCTION_RESPONSE

    def test_call_beats_text(self):
        part = Part(text="x", function_call={"name": "f"})
        assert part.kind == PartKind.FUNCTION_CALL

    def test_empty_text_is_text(self):
        assert Part(text="").kind == PartKind.TEXT

    def test_file_and_other(self):
        assert Part(file_data={"file_uri": "gs://a"}).kind == PartKind.FILE_DATA
        assert Part(inline_data={"mime_type": "image/png"}).kind == PartKind.OTHER


class TestSystemInstruction:
    def test_absent(self):
        resolved = SystemInstruction.resolve(None)
        assert resolved.source == "absent"
        assert resolved.text == ""

    def test_text(self):
        assert SystemInstruction.resolve("Be brief").text == "Be brief"

    def test_part(self):
        resolved = SystemInstruction.resolve(Part(text="Be brief"))
        assert (resolved.source, resolved.text) == ("part", "Be brief")

    def test_content_uses_first_part(self):
        content = Content(parts=[Part(text="first"), Part(text="second")])
        resolved = SystemInstruction.resolve(content)
        assert (resolved.source, resolved.text) == ("content", "first")

    def test_content_without_parts(self):
        assert SystemInstruction.resolve(Content(parts=[])).text == ""

    def test_config_coerces_dicts(self):
        as_content = GenerateContentConfig.model_validate(
            {"systemInstruction": {"role": "system", "parts": [{"text": "a"}]}}
        )
        as_part = GenerateContentConfig.model_validate(
            {"systemInstruction": {"text": "b"}}
        )
        assert isinstance(as_content.system_instruction, Content)
        assert isinstance(as_part.system_instruction, Part)

    def test_dict_text_wins_over_parts(self):
        config = GenerateContentConfig.model_validate(
            {"systemInstruction": {"text": "A", "parts": [{"text": "B"}]}}
        )
        assert SystemInstruction.resolve(config.system_instruction).text == "A"

    def test_dict_empty_text_falls_back_to_parts(self):
        config = GenerateContentConfig.model_validate(
            {"systemInstruction": {"text": "", "parts": [{"text": "B"}]}}
        )
        assert SystemInstruction.resolve(config.system_instruction).text == "B"


class TestRequestModels:
    def test_camel_case_aliases(self):
        request = GenerateContentRequest.model_validate(
            {
                "contents": [{"role": "model", "parts": [{"text": "hi"}]}],
                "config": {"topP": 0.9, "responseMimeType": "application/json"},
            }
        )
        assert request.contents[0].role == Role.MODEL
        assert request.config.top_p == 0.9
        assert request.config.response_mime_type == "application/json"

    def test_assistant_role_accepted(self):
        request = GenerateContentRequest.model_validate(
            {"contents": [{"role": "assistant", "parts": [{"text": "hi"}]}]}
        )
        assert request.contents[0].role == Role.ASSISTANT

    def test_request_frozen(self):
        request = GenerateContentRequest(contents=[])
        with pytest.raises(ValidationError):
            request.model = "x"


class TestResponseText:
    def test_concatenates_first_candidate(self):
        response = GenerateContentResponse.model_validate(
            {
                "candidates": [
                    {"content": {"role": "model", "parts": [{"text": "a"}, {"text": "b"}]}}
                ]
            }
        )
        assert response.text == "ab"

    def test_none_without_text(self):
        assert GenerateContentResponse().text is None


class TestWireMessage:
    def test_requires_exactly_one_carrier(self):
        with pytest.raises(ValidationError):
            WireMessage(role=WireRole.ASSISTANT)
        with pytest.raises(ValidationError):
            WireMessage(
                role=WireRole.ASSISTANT,
                content="text",
                function_call=WireFunctionCall(name="f", arguments="{}"),
            )

    def test_call_message_keeps_null_content(self):
        message = WireMessage(
            role=WireRole.ASSISTANT,
            tool_calls=[
                WireToolCall(
                    id="call_1", function=WireFunctionCall(name="f", arguments="{}")
                )
            ],
        )
        payload = message.to_payload()
        assert "content" in payload
        assert payload["content"] is None
        assert payload["tool_calls"][0]["type"] == "function"


class TestWireRequest:
    def test_unset_params_omitted(self):
        request = WireRequest(
            model="m", messages=[WireMessage(role=WireRole.USER, content="hi")]
        )
        assert request.to_payload() == {
            "model": "m",
            "messages": [{"role": "user", "content": "hi"}],
            "stream": False,
        }


class TestWireStreamChunk:
    def test_extras_ignored_and_defaults(self):
        chunk = WireStreamChunk.model_validate(
            {"object": "chat.completion.chunk", "system_fingerprint": "fp"}
        )
        assert chunk.choices == []

    def test_tool_call_index_defaults_to_zero(self):
        chunk = WireStreamChunk.model_validate(
            {"choices": [{"delta": {"tool_calls": [{"function": {"arguments": "{"}}]}}]}
        )
        delta = chunk.choices[0].delta
        assert delta.tool_calls[0].index == 0
        assert delta.has_call_fragment
