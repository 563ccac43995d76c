"""
Call-id synthesis.

Remote providers do not always supply ids for the calls they issue, and
callers do not always supply ids for the calls they replay. Every id the
adapter invents comes from a ``CallIdFactory`` so tests can swap in a
deterministic one.
"""

from __future__ import annotations

import itertools
import time
import uuid
from collections.abc import Callable

CallIdFactory = Callable[[], str]


def new_call_id() -> str:
    """Timestamp plus random suffix, e.g. ``call_1760781234567_3f9a01bc``."""
    return f"call_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


class SequentialIds:
    """Deterministic factory yielding ``call_1``, ``call_2``, ..."""

    def __init__(self, prefix: str = "call_"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
