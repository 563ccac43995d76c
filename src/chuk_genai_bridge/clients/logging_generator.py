"""
Logging decorator for content generators.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from typing import Any

from chuk_genai_bridge.core import (
    CountTokensResponse,
    EmbedContentRequest,
    GenerateContentRequest,
    GenerateContentResponse,
)

from .base import ContentGenerator


class LoggingContentGenerator(ContentGenerator):
    """
    Wraps another ContentGenerator and logs requests, responses and errors.

    Errors are logged and re-raised unchanged. Streams are passed through
    lazily; a summary is logged once the stream is exhausted.
    """

    def __init__(
        self,
        wrapped: ContentGenerator,
        logger: logging.Logger | None = None,
        log_level: int = logging.INFO,
    ):
        self.wrapped = wrapped
        self.logger = logger or logging.getLogger(__name__)
        self.log_level = log_level

    def _log_request(self, request: GenerateContentRequest, prompt_id: str | None, stream: bool) -> None:
        self.logger.log(
            self.log_level,
            f"Request: prompt_id={prompt_id}, turns={len(request.contents)}, stream={stream}",
        )

    def _log_response(self, response: GenerateContentResponse, duration: float) -> None:
        parts = sum(len(c.content.parts) for c in response.candidates)
        calls = len(response.function_calls or [])
        usage = response.usage_metadata
        self.logger.log(
            self.log_level,
            f"Response: candidates={len(response.candidates)}, parts={parts}, "
            f"function_calls={calls}, "
            f"total_tokens={usage.total_token_count if usage else None}, "
            f"duration={duration:.2f}s",
        )

    def _log_error(self, error: Exception, duration: float) -> None:
        self.logger.error(
            f"Error after {duration:.2f}s: {type(error).__name__}: {error}"
        )

    async def generate_content(
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> GenerateContentResponse:
        self._log_request(request, user_prompt_id, stream=False)
        start = time.perf_counter()
        try:
            response = await self.wrapped.generate_content(request, user_prompt_id)
        except Exception as e:
            self._log_error(e, time.perf_counter() - start)
            raise
        self._log_response(response, time.perf_counter() - start)
        return response

    async def generate_content_stream(  # type: ignore[override]
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> AsyncIterator[GenerateContentResponse]:
        self._log_request(request, user_prompt_id, stream=True)
        start = time.perf_counter()
        emitted = 0
        stream = self.wrapped.generate_content_stream(request, user_prompt_id)
        try:
            async for response in stream:
                emitted += 1
                yield response
        except Exception as e:
            self._log_error(e, time.perf_counter() - start)
            raise
        finally:
            aclose = getattr(stream, "aclose", None)
            if aclose is not None:
                await aclose()
        self.logger.log(
            self.log_level,
            f"Stream complete: responses={emitted}, "
            f"duration={time.perf_counter() - start:.2f}s",
        )

    async def count_tokens(self, request: GenerateContentRequest) -> CountTokensResponse:
        return await self.wrapped.count_tokens(request)

    async def embed_content(self, request: EmbedContentRequest) -> Any:
        try:
            return await self.wrapped.embed_content(request)
        except Exception as e:
            self._log_error(e, 0.0)
            raise
