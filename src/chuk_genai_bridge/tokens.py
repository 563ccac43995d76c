"""
Token estimation.

Chat-completions APIs have no counting endpoint, so counts are estimated
from character length (about four characters per token).
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from chuk_genai_bridge.core import (
    Content,
    CountTokensResponse,
    Default,
    GenerateContentRequest,
)


def extract_text(contents: Iterable[Content]) -> str:
    """Join every non-empty text part, each followed by a space."""
    text = ""
    for content in contents:
        for part in content.parts:
            if part.text:
                text += part.text + " "
    return text


def estimate_tokens(request: GenerateContentRequest) -> CountTokensResponse:
    text = extract_text(request.contents)
    return CountTokensResponse(
        total_tokens=math.ceil(len(text) / Default.CHARS_PER_TOKEN)
    )
