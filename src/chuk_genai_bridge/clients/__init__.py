"""
Content Generators
==================
"""

from .base import AsyncHTTPClient, ContentGenerator
from .logging_generator import LoggingContentGenerator
from .openai_compatible import OpenAICompatibleContentGenerator

__all__ = [
    "AsyncHTTPClient",
    "ContentGenerator",
    "LoggingContentGenerator",
    "OpenAICompatibleContentGenerator",
]
