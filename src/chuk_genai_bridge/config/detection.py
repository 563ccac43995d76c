"""
API base detection from model names.

Used only when no base URL is configured. Order matters: the first
matching family wins.
"""

from __future__ import annotations

from chuk_genai_bridge.core import Default

_MODEL_API_BASES: list[tuple[tuple[str, ...], str]] = [
    (("deepseek", "ds-"), "https://api.deepseek.com"),
    (("gpt-", "openai"), "https://api.openai.com/v1"),
    (("claude", "anthropic"), "https://api.anthropic.com/v1"),
    (("groq", "mixtral", "llama"), "https://api.groq.com/openai/v1"),
    (("together", "/"), "https://api.together.xyz/v1"),
    (("mistral", "codellama"), "http://localhost:11434/v1"),
]


def detect_api_base(model: str) -> str:
    """Guess the API base for a model name."""
    name = model.lower()
    for markers, base in _MODEL_API_BASES:
        if any(marker in name for marker in markers):
            return base
    return Default.API_BASE
