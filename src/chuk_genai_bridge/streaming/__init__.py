"""Stream framing helpers."""

from .sse import iter_sse_payloads

__all__ = ["iter_sse_payloads"]
