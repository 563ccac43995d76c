"""
Wire Models
===========

Pydantic models for the OpenAI-style chat-completions dialect: the request
body the adapter sends, the complete response object, and the delta chunks
of a streamed response. Incoming models ignore provider-specific extras.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ToolChoice, ToolType, WireRole

_INCOMING = ConfigDict(extra="ignore")


# ================================================================
# Request side
# ================================================================


class WireFunctionCall(BaseModel):
    """Function name plus JSON-encoded arguments."""

    name: str
    arguments: str


class WireToolCall(BaseModel):
    """One tool call attached to an assistant message."""

    id: str
    type: ToolType = ToolType.FUNCTION
    function: WireFunctionCall


class WireMessage(BaseModel):
    """
    One outgoing chat message.

    Carries text content, a legacy function call, or a tool-call list;
    content must be null whenever call data is present.
    """

    role: WireRole
    content: str | None = None
    name: str | None = None
    function_call: WireFunctionCall | None = None
    tool_calls: list[WireToolCall] | None = None
    tool_call_id: str | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> WireMessage:
        carriers = [
            self.content is not None,
            self.function_call is not None,
            bool(self.tool_calls),
        ]
        if sum(carriers) != 1:
            raise ValueError(
                "message must carry exactly one of content, function_call, tool_calls"
            )
        return self

    def to_payload(self) -> dict[str, Any]:
        """Serialize, always keeping ``content`` (null for call messages)."""
        data = self.model_dump(mode="json", exclude_none=True)
        data["content"] = self.content
        return data


class WireFunction(BaseModel):
    """Function schema inside a tool declaration."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class WireTool(BaseModel):
    """Tool declaration."""

    type: ToolType = ToolType.FUNCTION
    function: WireFunction


class WireRequest(BaseModel):
    """Chat-completions request body."""

    model: str
    messages: list[WireMessage]
    stream: bool = False
    temperature: float | None = None
    top_p: float | None = None
    tools: list[WireTool] | None = None
    tool_choice: ToolChoice | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body with unset optional parameters omitted."""
        data = self.model_dump(mode="json", exclude_none=True)
        data["messages"] = [m.to_payload() for m in self.messages]
        return data


# ================================================================
# Response side
# ================================================================


class WireUsage(BaseModel):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None

    model_config = _INCOMING


class WireResponseFunctionCall(BaseModel):
    name: str | None = None
    arguments: str | None = None

    model_config = _INCOMING


class WireResponseToolCall(BaseModel):
    id: str | None = None
    type: str | None = None
    function: WireResponseFunctionCall = Field(
        default_factory=WireResponseFunctionCall
    )

    model_config = _INCOMING


class WireResponseMessage(BaseModel):
    role: str | None = None
    content: str | None = None
    function_call: WireResponseFunctionCall | None = None
    tool_calls: list[WireResponseToolCall] | None = None

    model_config = _INCOMING


class WireChoice(BaseModel):
    index: int = 0
    message: WireResponseMessage = Field(default_factory=WireResponseMessage)
    finish_reason: str | None = None

    model_config = _INCOMING


class WireResponse(BaseModel):
    """Complete (non-streaming) chat-completions response."""

    id: str | None = None
    model: str | None = None
    choices: list[WireChoice]
    usage: WireUsage | None = None

    model_config = _INCOMING


# ================================================================
# Stream side
# ================================================================


class WireFunctionCallDelta(BaseModel):
    """Legacy function-call fragment."""

    name: str | None = None
    arguments: str | None = None

    model_config = _INCOMING


class WireToolCallDelta(BaseModel):
    """Indexed tool-call fragment."""

    index: int = 0
    id: str | None = None
    type: str | None = None
    function: WireFunctionCallDelta | None = None

    model_config = _INCOMING


class WireDelta(BaseModel):
    role: str | None = None
    content: str | None = None
    function_call: WireFunctionCallDelta | None = None
    tool_calls: list[WireToolCallDelta] | None = None

    model_config = _INCOMING

    @property
    def has_call_fragment(self) -> bool:
        return self.function_call is not None or bool(self.tool_calls)


class WireStreamChoice(BaseModel):
    index: int = 0
    delta: WireDelta = Field(default_factory=WireDelta)
    finish_reason: str | None = None

    model_config = _INCOMING


class WireStreamChunk(BaseModel):
    """One decoded server-sent event of a streamed response."""

    id: str | None = None
    model: str | None = None
    choices: list[WireStreamChoice] = Field(default_factory=list)
    usage: WireUsage | None = None

    model_config = _INCOMING
