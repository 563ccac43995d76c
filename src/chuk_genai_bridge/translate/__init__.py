"""
Translation
===========

Request translation and response reconstruction between the vendor-neutral
model and the chat-completions dialect.
"""

from .finish_reasons import is_call_finish, map_finish_reason
from .ids import CallIdFactory, SequentialIds, new_call_id
from .request import RequestTranslator, translate_request
from .response import parse_call_arguments, reconstruct_response
from .stream import CallWindow, PendingCall, StreamReconstructor, reconstruct_stream

__all__ = [
    "CallIdFactory",
    "CallWindow",
    "PendingCall",
    "RequestTranslator",
    "SequentialIds",
    "StreamReconstructor",
    "is_call_finish",
    "map_finish_reason",
    "new_call_id",
    "parse_call_arguments",
    "reconstruct_response",
    "reconstruct_stream",
    "translate_request",
]
