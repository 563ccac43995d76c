"""
Finish-reason mapping.

The vendor-neutral model has no "call requested" terminal state, so both
call tokens collapse to STOP; callers look for function-call parts instead.
"""

from __future__ import annotations

from chuk_genai_bridge.core import FinishReason, WireFinishReason

_FINISH_REASON_MAP: dict[str, FinishReason] = {
    WireFinishReason.STOP.value: FinishReason.STOP,
    WireFinishReason.LENGTH.value: FinishReason.MAX_TOKENS,
    WireFinishReason.FUNCTION_CALL.value: FinishReason.STOP,
    WireFinishReason.TOOL_CALLS.value: FinishReason.STOP,
    WireFinishReason.CONTENT_FILTER.value: FinishReason.SAFETY,
}

_CALL_FINISH_TOKENS = frozenset(
    {WireFinishReason.FUNCTION_CALL.value, WireFinishReason.TOOL_CALLS.value}
)


def map_finish_reason(token: str | None) -> FinishReason:
    """Map a wire finish token to the vendor-neutral reason. Total."""
    if token is None:
        return FinishReason.OTHER
    return _FINISH_REASON_MAP.get(token, FinishReason.OTHER)


def is_call_finish(token: str | None) -> bool:
    """True for ``function_call`` and ``tool_calls``."""
    return token in _CALL_FINISH_TOKENS
