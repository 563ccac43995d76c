"""
Async-Native Base Client
=========================

The ``ContentGenerator`` interface every generator implements, plus an
httpx-based transport with connection pooling, bearer auth and error
conversion shared by HTTP-backed generators.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any

import httpx

from chuk_genai_bridge.core import (
    ContentTypeValue,
    CountTokensResponse,
    Default,
    EmbedContentRequest,
    ErrorType,
    GenerateContentRequest,
    GenerateContentResponse,
    HttpHeader,
    HttpMethod,
    ProtocolError,
    TransportError,
    loads,
)

logger = logging.getLogger(__name__)


class ContentGenerator(ABC):
    """
    Abstract generator speaking the vendor-neutral model.
    """

    @abstractmethod
    async def generate_content(
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> GenerateContentResponse:
        """
        Generate one complete response.

        Raises:
            BridgeError: On protocol or transport failures
        """
        ...

    @abstractmethod
    def generate_content_stream(
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Generate a response incrementally.

        Yields:
            Responses as text and completed function calls become available
        """
        ...

    @abstractmethod
    async def count_tokens(self, request: GenerateContentRequest) -> CountTokensResponse:
        ...

    @abstractmethod
    async def embed_content(self, request: EmbedContentRequest) -> Any:
        ...


class AsyncHTTPClient:
    """
    Pooled httpx transport for JSON POST and streaming POST requests.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = Default.TIMEOUT,
        max_connections: int = Default.MAX_CONNECTIONS,
        max_keepalive: int = Default.MAX_KEEPALIVE,
        user_agent: str = Default.USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize async client with connection pool.

        Args:
            api_key: API authentication key
            base_url: Base URL for API
            timeout: Request timeout in seconds
            max_connections: Maximum number of connections in pool
            max_keepalive: Maximum number of keep-alive connections
            user_agent: User-Agent header value
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

        limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive,
        )

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            limits=limits,
            headers=self._get_default_headers(),
            transport=transport,
        )

        self._closed = False
        logger.debug(
            f"Initialized async client: base_url={self.base_url}, "
            f"max_connections={max_connections}"
        )

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for all requests."""
        return {
            HttpHeader.AUTHORIZATION.value: f"Bearer {self.api_key}",
            HttpHeader.CONTENT_TYPE.value: ContentTypeValue.JSON.value,
            HttpHeader.USER_AGENT.value: self.user_agent,
        }

    async def _post_json(
        self, endpoint: str, data: dict[str, Any], **kwargs: Any
    ) -> Any:
        """
        Helper for JSON POST requests.

        Raises:
            TransportError: On non-2xx status or network failure
            ProtocolError: If the body is not JSON
        """
        try:
            response = await self._client.post(endpoint, json=data, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._handle_http_error(e) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Network error: {e}", error_type=ErrorType.NETWORK_ERROR
            ) from e

        try:
            return loads(response.content)
        except ValueError as e:
            raise ProtocolError(f"Response body is not valid JSON: {e}") from e

    async def _stream_post(
        self, endpoint: str, data: dict[str, Any], **kwargs: Any
    ) -> AsyncIterator[bytes]:
        """
        Helper for streaming POST requests.

        Yields:
            Response body bytes as they arrive

        Raises:
            TransportError: On non-2xx status, network failure or empty body
        """
        try:
            async with self._client.stream(
                HttpMethod.POST.value, endpoint, json=data, **kwargs
            ) as response:
                if response.is_error:
                    await response.aread()
                response.raise_for_status()

                received = 0
                async for chunk in response.aiter_bytes():
                    received += len(chunk)
                    yield chunk

                if not received:
                    raise TransportError(
                        "No response body for streaming request",
                        status_code=response.status_code,
                    )

        except httpx.HTTPStatusError as e:
            raise self._handle_http_error(e) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Network error: {e}", error_type=ErrorType.NETWORK_ERROR
            ) from e

    def _handle_http_error(self, error: httpx.HTTPStatusError) -> TransportError:
        """
        Convert an HTTP status error, keeping the status and body text.
        """
        status = error.response.status_code
        body = error.response.text
        return TransportError(f"HTTP {status}: {body}", status_code=status, body=body)

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if not self._closed:
            await self._client.aclose()
            self._closed = True
            logger.debug("Closed async client")

    async def __aenter__(self) -> AsyncHTTPClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True) and hasattr(self, "_client"):
            logger.warning(
                f"{type(self).__name__} was not properly closed. "
                "Use 'async with' or call close()"
            )
