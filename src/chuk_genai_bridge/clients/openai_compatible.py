"""
OpenAI-Compatible Content Generator
===================================

Serves vendor-neutral generation requests from any endpoint that speaks the
chat-completions dialect: requests are translated, POSTed to
``/chat/completions`` and the answers (complete or streamed) are
reconstructed. No retries happen here; failures surface to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from chuk_genai_bridge.config import BridgeConfig
from chuk_genai_bridge.core import (
    BridgeError,
    CountTokensResponse,
    EmbedContentRequest,
    GenerateContentRequest,
    GenerateContentResponse,
    OpenAIEndpoint,
    TransportError,
    UnsupportedOperation,
)
from chuk_genai_bridge.streaming import iter_sse_payloads
from chuk_genai_bridge.tokens import estimate_tokens
from chuk_genai_bridge.translate import (
    CallIdFactory,
    RequestTranslator,
    new_call_id,
    reconstruct_response,
    reconstruct_stream,
)

from .base import AsyncHTTPClient, ContentGenerator

logger = logging.getLogger(__name__)

PROVIDER = "openai_compatible"
ERROR_PREFIX = "OpenAI API error: "
STREAM_ERROR_PREFIX = "OpenAI API streaming error: "


class OpenAICompatibleContentGenerator(AsyncHTTPClient, ContentGenerator):
    """
    ContentGenerator backed by a chat-completions endpoint.
    """

    def __init__(
        self,
        api_key: str,
        api_base: str,
        model: str,
        id_factory: CallIdFactory = new_call_id,
        **kwargs: Any,
    ):
        """
        Initialize the generator.

        Args:
            api_key: Bearer token
            api_base: API base URL (``/chat/completions`` is appended)
            model: Target model sent with every request
            id_factory: Source of synthesized call ids
            **kwargs: Transport options (timeout, max_connections, transport, ...)
        """
        super().__init__(api_key=api_key, base_url=api_base, **kwargs)
        self.model = model
        self.id_factory = id_factory
        self._translator = RequestTranslator(model, id_factory=id_factory)

        logger.info(
            f"Initialized OpenAI-compatible generator: model={model}, "
            f"api_base={self.base_url}"
        )

    @classmethod
    def from_config(
        cls, config: BridgeConfig, **kwargs: Any
    ) -> OpenAICompatibleContentGenerator:
        return cls(
            api_key=config.api_key,
            api_base=config.api_base,
            model=config.model,
            timeout=config.timeout,
            max_connections=config.max_connections,
            max_keepalive=config.max_keepalive,
            user_agent=config.user_agent,
            **kwargs,
        )

    async def generate_content(
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> GenerateContentResponse:
        payload = self._translator.translate(request, streaming=False).to_payload()

        logger.debug(
            f"Creating completion: prompt_id={user_prompt_id}, model={payload['model']}, "
            f"messages={len(payload['messages'])}, tools={len(payload.get('tools', []))}"
        )

        try:
            response = await self._post_json(
                OpenAIEndpoint.CHAT_COMPLETIONS.value, payload
            )
            return reconstruct_response(response, self.id_factory)
        except BridgeError as e:
            raise e.with_prefix(ERROR_PREFIX) from e

    async def generate_content_stream(  # type: ignore[override]
        self, request: GenerateContentRequest, user_prompt_id: str | None = None
    ) -> AsyncIterator[GenerateContentResponse]:
        payload = self._translator.translate(request, streaming=True).to_payload()

        logger.debug(
            f"Starting stream: prompt_id={user_prompt_id}, model={payload['model']}, "
            f"messages={len(payload['messages'])}"
        )

        stream = reconstruct_stream(
            iter_sse_payloads(
                self._stream_post(OpenAIEndpoint.CHAT_COMPLETIONS.value, payload)
            ),
            self.id_factory,
        )
        try:
            async for response in stream:
                yield response
        except BridgeError as e:
            raise e.with_prefix(STREAM_ERROR_PREFIX) from e
        except Exception as e:
            raise TransportError(
                f"{STREAM_ERROR_PREFIX}Streaming failed: {e}", provider=PROVIDER
            ) from e
        finally:
            await stream.aclose()

    async def count_tokens(self, request: GenerateContentRequest) -> CountTokensResponse:
        return estimate_tokens(request)

    async def embed_content(self, request: EmbedContentRequest) -> Any:
        raise UnsupportedOperation(
            "Embeddings not implemented for OpenAI-compatible APIs. "
            "Use a dedicated embedding service.",
            provider=PROVIDER,
        )
