"""
Configuration
=============

Type-safe configuration using Pydantic models.
"""

from .detection import detect_api_base
from .loader import ConfigLoader, get_config, load_config, reset_config
from .models import BridgeConfig

__all__ = [
    "BridgeConfig",
    "ConfigLoader",
    "detect_api_base",
    "get_config",
    "load_config",
    "reset_config",
]
