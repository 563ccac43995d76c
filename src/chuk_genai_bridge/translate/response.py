"""
Response Reconstructor (non-streaming)
======================================

Maps one complete chat-completions response back onto the vendor-neutral
response model.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from chuk_genai_bridge.core import (
    Candidate,
    Content,
    Default,
    FinishReason,
    FunctionCall,
    GenerateContentResponse,
    MalformedFragment,
    Part,
    ProtocolError,
    Role,
    UsageMetadata,
    WireResponse,
    WireUsage,
    loads_object,
)

from .finish_reasons import map_finish_reason
from .ids import CallIdFactory, new_call_id

logger = logging.getLogger(__name__)


def parse_call_arguments(arguments: str | None, name: str | None = None) -> dict[str, Any]:
    """
    Parse an argument string, degrading to ``{}`` when it is not a JSON object.

    A malformed call never voids its siblings; the failure is logged instead.
    """
    try:
        return loads_object(arguments)
    except ValueError as e:
        preview = (arguments or "")[: Default.ERROR_BODY_PREVIEW]
        logger.warning(
            f"Malformed arguments for function call {name!r}: {e}, data: {preview}",
            exc_info=MalformedFragment(f"Arguments of {name!r} are not a JSON object"),
        )
        return {}


def usage_to_metadata(usage: WireUsage | None) -> UsageMetadata | None:
    if usage is None:
        return None
    return UsageMetadata(
        prompt_token_count=usage.prompt_tokens,
        candidates_token_count=usage.completion_tokens,
        total_token_count=usage.total_tokens,
    )


def build_response(
    parts: list[Part],
    finish_reason: FinishReason | None,
    index: int,
    usage: WireUsage | None = None,
) -> GenerateContentResponse:
    """Wrap parts in a single-candidate response with its call summary."""
    calls = [p.function_call for p in parts if p.function_call is not None]
    return GenerateContentResponse(
        candidates=[
            Candidate(
                content=Content(role=Role.MODEL, parts=parts),
                finish_reason=finish_reason,
                index=index,
            )
        ],
        usage_metadata=usage_to_metadata(usage),
        function_calls=calls or None,
    )


def reconstruct_response(
    payload: dict[str, Any] | WireResponse,
    id_factory: CallIdFactory = new_call_id,
) -> GenerateContentResponse:
    """
    Convert a chat-completions response.

    Only the first choice is reconstructed; its index is passed through.

    Raises:
        ProtocolError: If the payload has no choices or the wrong shape
    """
    if isinstance(payload, WireResponse):
        response = payload
    else:
        try:
            response = WireResponse.model_validate(payload)
        except ValidationError as e:
            raise ProtocolError(f"Invalid chat completion response: {e}") from e

    if not response.choices:
        raise ProtocolError("No choices in OpenAI response")

    choice = response.choices[0]
    message = choice.message
    parts: list[Part] = []

    if message.content:
        parts.append(Part(text=message.content))

    if message.tool_calls:
        for tc in message.tool_calls:
            parts.append(
                Part(
                    function_call=FunctionCall(
                        id=tc.id or id_factory(),
                        name=tc.function.name,
                        args=parse_call_arguments(tc.function.arguments, tc.function.name),
                    )
                )
            )
    elif message.function_call is not None:
        fc = message.function_call
        parts.append(
            Part(
                function_call=FunctionCall(
                    id=id_factory(),
                    name=fc.name,
                    args=parse_call_arguments(fc.arguments, fc.name),
                )
            )
        )

    logger.debug(
        f"Reconstructed response: parts={len(parts)}, "
        f"finish_reason={choice.finish_reason}, usage={response.usage is not None}"
    )

    return build_response(
        parts, map_finish_reason(choice.finish_reason), choice.index, response.usage
    )
