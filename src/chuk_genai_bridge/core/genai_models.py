"""
Vendor-Neutral Models
=====================

Pydantic models for the generation request/response shape the caller
speaks. Field names are snake_case; camelCase aliases are accepted so
payloads captured from the generative-language JSON API validate as-is.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import FinishReason, PartKind, Role

_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
)
_RESPONSE_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="ignore"
)


class FunctionCall(BaseModel):
    """A model-issued function call."""

    id: str | None = None
    name: str | None = None
    args: dict[str, Any] = Field(default_factory=dict)

    model_config = _RESPONSE_CONFIG


class FunctionResponse(BaseModel):
    """The caller's answer to a function call."""

    id: str | None = None
    name: str | None = None
    response: dict[str, Any] = Field(default_factory=dict)

    model_config = _REQUEST_CONFIG


class FileData(BaseModel):
    """Reference to a file by URI."""

    file_uri: str | None = None
    mime_type: str | None = None
    display_name: str | None = None

    model_config = _REQUEST_CONFIG


class Blob(BaseModel):
    """Inline binary data."""

    mime_type: str | None = None
    data: str | None = None

    model_config = _REQUEST_CONFIG


class Part(BaseModel):
    """One piece of a turn."""

    text: str | None = None
    function_call: FunctionCall | None = None
    function_response: FunctionResponse | None = None
    file_data: FileData | None = None
    inline_data: Blob | None = None

    model_config = _RESPONSE_CONFIG

    @property
    def kind(self) -> PartKind:
        if self.function_response is not None:
            return PartKind.FUNCTION_RESPONSE
        if self.function_call is not None:
            return PartKind.FUNCTION_CALL
        if self.text is not None:
            return PartKind.TEXT
        if self.file_data is not None:
            return PartKind.FILE_DATA
        return PartKind.OTHER


class Content(BaseModel):
    """A role-tagged turn."""

    role: Role = Role.USER
    parts: list[Part] = Field(default_factory=list)

    model_config = _RESPONSE_CONFIG


class SystemInstruction(BaseModel):
    """
    System instruction resolved to plain text.

    The caller may hand over a string, a part, or a whole content turn.
    ``resolve`` inspects the shape once and records which variant it saw.
    """

    source: Literal["absent", "text", "part", "content"] = "absent"
    text: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(cls, value: str | Part | Content | None) -> SystemInstruction:
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls(source="text", text=value)
        if isinstance(value, Part):
            return cls(source="part", text=value.text or "")
        first = value.parts[0].text if value.parts else None
        return cls(source="content", text=first or "")


class FunctionDeclaration(BaseModel):
    """A callable function offered to the model."""

    name: str | None = None
    description: str | None = None
    parameters: dict[str, Any] | None = None
    parameters_json_schema: dict[str, Any] | None = None

    model_config = _REQUEST_CONFIG


class Tool(BaseModel):
    """A group of function declarations."""

    function_declarations: list[FunctionDeclaration] | None = None

    model_config = _REQUEST_CONFIG


class GenerateContentConfig(BaseModel):
    """Optional generation settings."""

    system_instruction: str | Part | Content | None = None
    temperature: float | None = None
    top_p: float | None = None
    tools: list[Tool] | None = None
    response_mime_type: str | None = None
    response_json_schema: dict[str, Any] | None = None

    model_config = _REQUEST_CONFIG

    @field_validator("system_instruction", mode="before")
    @classmethod
    def _coerce_instruction(cls, v: Any) -> Any:
        # dicts are ambiguous between Part and Content; a non-empty "text" wins
        if isinstance(v, dict):
            if v.get("text") or "parts" not in v:
                return Part.model_validate(v)
            return Content.model_validate(v)
        return v


class GenerateContentRequest(BaseModel):
    """A complete vendor-neutral generation request."""

    contents: list[Content] = Field(default_factory=list)
    config: GenerateContentConfig | None = None
    model: str | None = None

    model_config = _REQUEST_CONFIG


class Candidate(BaseModel):
    """One generated answer."""

    content: Content
    finish_reason: FinishReason | None = None
    index: int = 0

    model_config = _RESPONSE_CONFIG


class UsageMetadata(BaseModel):
    """Token usage reported by the remote."""

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None

    model_config = _RESPONSE_CONFIG


class GenerateContentResponse(BaseModel):
    """A vendor-neutral generation response."""

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata | None = None
    function_calls: list[FunctionCall] | None = None

    model_config = _RESPONSE_CONFIG

    @property
    def text(self) -> str | None:
        """Concatenated text of the first candidate, or None if it has none."""
        if not self.candidates:
            return None
        texts = [p.text for p in self.candidates[0].content.parts if p.text is not None]
        return "".join(texts) if texts else None


class CountTokensResponse(BaseModel):
    """Estimated token count."""

    total_tokens: int

    model_config = _RESPONSE_CONFIG


class EmbedContentRequest(BaseModel):
    """Embedding request; accepted only so it can be refused explicitly."""

    contents: list[Content] = Field(default_factory=list)
    model: str | None = None

    model_config = _REQUEST_CONFIG
