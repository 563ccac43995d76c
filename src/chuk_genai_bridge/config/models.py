"""
Configuration Models
====================

Type-safe Pydantic model for the adapter's connection settings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chuk_genai_bridge.core import Default


class BridgeConfig(BaseModel):
    """Settings for one OpenAI-compatible endpoint."""

    api_key: str = Field(..., description="Bearer token for the endpoint")
    api_base: str = Field(default=Default.API_BASE, description="API base URL")
    model: str = Field(..., description="Target model identifier")
    timeout: float = Field(
        default=Default.TIMEOUT, gt=0, description="Request timeout in seconds"
    )
    max_connections: int = Field(
        default=Default.MAX_CONNECTIONS, gt=0, description="Connection pool size"
    )
    max_keepalive: int = Field(
        default=Default.MAX_KEEPALIVE, ge=0, description="Keep-alive connections"
    )
    user_agent: str = Field(
        default=Default.USER_AGENT, description="User-Agent header value"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("api_key", "api_base", "model")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("api_base")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")
