"""
Bridge Errors
=============

Error taxonomy for the adapter. Structural failures (``ProtocolError``,
``TransportError``) abort a single exchange; ``MalformedFragment`` is the
recovered kind and is normally logged rather than raised.
"""

from __future__ import annotations

from typing import Any

from .enums import ErrorType


class BridgeError(Exception):
    """Base class for all adapter errors."""

    default_type = ErrorType.API_ERROR

    def __init__(
        self,
        message: str,
        *,
        error_type: ErrorType | None = None,
        provider: str | None = None,
        **metadata: Any,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type or self.default_type
        self.provider = provider
        self.metadata = metadata

    def with_prefix(self, prefix: str) -> BridgeError:
        """Return a copy of this error with a provider-identifying prefix."""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.message = f"{prefix}{self.message}"
        clone.args = (clone.message,)
        return clone


class ProtocolError(BridgeError):
    """The wire payload violates the expected shape."""

    default_type = ErrorType.PROTOCOL_ERROR


class TransportError(BridgeError):
    """Non-2xx status, network failure, or missing stream body."""

    default_type = ErrorType.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


class MalformedFragment(BridgeError):
    """A chunk or accumulated argument buffer could not be decoded."""

    default_type = ErrorType.MALFORMED_FRAGMENT


class UnsupportedOperation(BridgeError):
    """The operation is not available on this adapter."""

    default_type = ErrorType.UNSUPPORTED_OPERATION


class ConfigurationError(BridgeError):
    """Configuration could not be loaded or validated."""

    default_type = ErrorType.CONFIGURATION_ERROR
