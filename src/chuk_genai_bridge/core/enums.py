"""
Core Enumerations
=================

Type-safe enums for roles, finish reasons, part kinds and call conventions.
Both sides of the bridge get their own vocabulary so that a wire token can
never be mistaken for a vendor-neutral value.
"""

from enum import Enum


class Role(str, Enum):
    """Vendor-neutral turn role."""

    USER = "user"
    MODEL = "model"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class WireRole(str, Enum):
    """Chat-completions message role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class WireFinishReason(str, Enum):
    """Chat-completions finish reason token."""

    STOP = "stop"
    LENGTH = "length"
    FUNCTION_CALL = "function_call"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"


class FinishReason(str, Enum):
    """Vendor-neutral finish reason."""

    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    OTHER = "OTHER"


class ToolType(str, Enum):
    """Tool/function call types."""

    FUNCTION = "function"


class ToolChoice(str, Enum):
    """Tool choice modes sent on the wire."""

    AUTO = "auto"


class PartKind(str, Enum):
    """Kind of a vendor-neutral content part."""

    TEXT = "text"
    FUNCTION_CALL = "function_call"
    FUNCTION_RESPONSE = "function_response"
    FILE_DATA = "file_data"
    OTHER = "other"


class CallConvention(str, Enum):
    """How a provider delivers function calls in a stream."""

    LEGACY = "legacy"
    INDEXED = "indexed"


class ErrorType(str, Enum):
    """Error categories attached to BridgeError."""

    PROTOCOL_ERROR = "protocol_error"
    TRANSPORT_ERROR = "transport_error"
    NETWORK_ERROR = "network_error"
    MALFORMED_FRAGMENT = "malformed_fragment"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    CONFIGURATION_ERROR = "configuration_error"
    API_ERROR = "api_error"
