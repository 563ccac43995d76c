"""
Wire Constants
==============

Keys, endpoints and defaults for the chat-completions dialect.
"""

from enum import Enum


class HttpHeader(str, Enum):
    """HTTP headers used by the transport."""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"


class ContentTypeValue(str, Enum):
    """Content type header values."""

    JSON = "application/json"


class HttpMethod(str, Enum):
    """HTTP methods."""

    POST = "POST"


class OpenAIEndpoint(str, Enum):
    """Chat-completions endpoints, relative to the API base."""

    CHAT_COMPLETIONS = "/chat/completions"


class SSEPrefix(str, Enum):
    """Server-sent event line prefixes."""

    DATA = "data: "
    COMMENT = ":"


class SSEEvent(str, Enum):
    """Server-sent event sentinel payloads."""

    DONE = "[DONE]"


class Default:
    """Default values."""

    TIMEOUT = 60.0
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    API_BASE = "https://api.openai.com/v1"
    USER_AGENT = "chuk-genai-bridge"
    JSON_MIME_TYPE = "application/json"
    CHARS_PER_TOKEN = 4
    UNKNOWN_CALL_ID = "unknown"
    UNKNOWN_FUNCTION_NAME = "unknown_function"
    UNKNOWN_FILE_NAME = "unknown"
    ERROR_BODY_PREVIEW = 200
