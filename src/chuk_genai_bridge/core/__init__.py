"""
Core Types
==========

Enums, constants, JSON helpers, errors and both data models (vendor-neutral
and wire) shared by the translators and the client.
"""

from .constants import (
    ContentTypeValue,
    Default,
    HttpHeader,
    HttpMethod,
    OpenAIEndpoint,
    SSEEvent,
    SSEPrefix,
)
from .enums import (
    CallConvention,
    ErrorType,
    FinishReason,
    PartKind,
    Role,
    ToolChoice,
    ToolType,
    WireFinishReason,
    WireRole,
)
from .errors import (
    BridgeError,
    ConfigurationError,
    MalformedFragment,
    ProtocolError,
    TransportError,
    UnsupportedOperation,
)
from .genai_models import (
    Blob,
    Candidate,
    Content,
    CountTokensResponse,
    EmbedContentRequest,
    FileData,
    FunctionCall,
    FunctionDeclaration,
    FunctionResponse,
    GenerateContentConfig,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
    SystemInstruction,
    Tool,
    UsageMetadata,
)
from .json_utils import JSONDecodeError, dumps, loads, loads_object
from .wire_models import (
    WireChoice,
    WireDelta,
    WireFunction,
    WireFunctionCall,
    WireFunctionCallDelta,
    WireMessage,
    WireRequest,
    WireResponse,
    WireResponseFunctionCall,
    WireResponseMessage,
    WireResponseToolCall,
    WireStreamChoice,
    WireStreamChunk,
    WireTool,
    WireToolCall,
    WireToolCallDelta,
    WireUsage,
)

__all__ = [
    # constants
    "ContentTypeValue",
    "Default",
    "HttpHeader",
    "HttpMethod",
    "OpenAIEndpoint",
    "SSEEvent",
    "SSEPrefix",
    # enums
    "CallConvention",
    "ErrorType",
    "FinishReason",
    "PartKind",
    "Role",
    "ToolChoice",
    "ToolType",
    "WireFinishReason",
    "WireRole",
    # errors
    "BridgeError",
    "ConfigurationError",
    "MalformedFragment",
    "ProtocolError",
    "TransportError",
    "UnsupportedOperation",
    # vendor-neutral models
    "Blob",
    "Candidate",
    "Content",
    "CountTokensResponse",
    "EmbedContentRequest",
    "FileData",
    "FunctionCall",
    "FunctionDeclaration",
    "FunctionResponse",
    "GenerateContentConfig",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Part",
    "SystemInstruction",
    "Tool",
    "UsageMetadata",
    # json
    "JSONDecodeError",
    "dumps",
    "loads",
    "loads_object",
    # wire models
    "WireChoice",
    "WireDelta",
    "WireFunction",
    "WireFunctionCall",
    "WireFunctionCallDelta",
    "WireMessage",
    "WireRequest",
    "WireResponse",
    "WireResponseFunctionCall",
    "WireResponseMessage",
    "WireResponseToolCall",
    "WireStreamChoice",
    "WireStreamChunk",
    "WireTool",
    "WireToolCall",
    "WireToolCallDelta",
    "WireUsage",
]
