"""
chuk-genai-bridge
=================

Serve vendor-neutral generation requests from OpenAI-compatible
chat-completions endpoints, complete or streamed.

Usage:
    from chuk_genai_bridge import OpenAICompatibleContentGenerator, load_config

    async with OpenAICompatibleContentGenerator.from_config(load_config()) as gen:
        response = await gen.generate_content(request)
"""

from .clients import (
    ContentGenerator,
    LoggingContentGenerator,
    OpenAICompatibleContentGenerator,
)
from .config import BridgeConfig, ConfigLoader, load_config
from .core import (
    BridgeError,
    Content,
    FinishReason,
    FunctionCall,
    GenerateContentConfig,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
    ProtocolError,
    TransportError,
    UnsupportedOperation,
)
from .translate import (
    RequestTranslator,
    StreamReconstructor,
    reconstruct_response,
    reconstruct_stream,
    translate_request,
)

__version__ = "0.1.0"

__all__ = [
    "BridgeConfig",
    "BridgeError",
    "ConfigLoader",
    "Content",
    "ContentGenerator",
    "FinishReason",
    "FunctionCall",
    "GenerateContentConfig",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "LoggingContentGenerator",
    "OpenAICompatibleContentGenerator",
    "Part",
    "ProtocolError",
    "RequestTranslator",
    "StreamReconstructor",
    "TransportError",
    "UnsupportedOperation",
    "load_config",
    "reconstruct_response",
    "reconstruct_stream",
    "translate_request",
]
