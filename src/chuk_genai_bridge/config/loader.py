"""
Configuration Loader
====================

Loads adapter settings from an optional YAML file and the environment,
then validates them with Pydantic. Environment variables win over file
values; a ``.env`` file is read first without overriding the process
environment.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from chuk_genai_bridge.core import ConfigurationError

from .detection import detect_api_base
from .models import BridgeConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CHUK_GENAI_BRIDGE_CONFIG"

# field -> environment variables, first set one wins
ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "api_key": ("OPENAI_API_KEY",),
    "api_base": ("OPENAI_API_BASE",),
    "model": ("OPENAI_MODEL", "GEMINI_MODEL"),
}


class ConfigLoader:
    """
    Configuration loader with Pydantic validation.
    """

    def __init__(self, config_path: str | Path | None = None, load_env_file: bool = True):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to a YAML config file. If not provided,
                        searches standard locations.
            load_env_file: Read a ``.env`` file before consulting the environment
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: BridgeConfig | None = None
        if load_env_file:
            self._load_env()

    def _load_env(self) -> None:
        """Load environment variables from .env file."""
        env_candidates: list[Path] = [
            Path(".env"),
            Path(".env.local"),
            Path.home() / ".chuk_genai_bridge" / ".env",
        ]

        for env_path in env_candidates:
            if env_path.exists():
                logger.info(f"Loading environment from {env_path}")
                load_dotenv(env_path, override=False)
                break

    def _find_config_file(self) -> Path | None:
        """Find configuration file in standard locations."""
        if self.config_path:
            if not self.config_path.exists():
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            return self.config_path

        env_path_str = os.getenv(CONFIG_PATH_ENV)
        if env_path_str:
            path = Path(env_path_str)
            if path.exists():
                return path
            logger.warning(f"{CONFIG_PATH_ENV} points to missing file {path}")

        candidates = [
            Path("chuk_genai_bridge.yaml"),
            Path("config/chuk_genai_bridge.yaml"),
            Path.home() / ".chuk_genai_bridge" / "config.yaml",
        ]

        for candidate in candidates:
            if candidate.exists():
                return candidate

        return None

    def _read_file(self) -> dict[str, Any]:
        config_file = self._find_config_file()
        if config_file is None:
            logger.debug("No config file found, using environment only")
            return {}

        logger.info(f"Loading configuration from {config_file}")
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

        if not data:
            logger.warning(f"Empty config file: {config_file}")
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a mapping")
        return data

    @staticmethod
    def _apply_env(data: dict[str, Any]) -> dict[str, Any]:
        merged = dict(data)
        for field_name, env_names in ENV_OVERRIDES.items():
            for env_name in env_names:
                value = os.getenv(env_name)
                if value:
                    merged[field_name] = value
                    break
        return merged

    def load(self) -> BridgeConfig:
        """
        Load and validate configuration.

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If required settings are missing or invalid
        """
        if self._config:
            return self._config

        data = self._apply_env(self._read_file())

        if not data.get("api_key"):
            raise ConfigurationError(
                "OpenAI API key is required for OpenAI-compatible APIs"
            )
        if not data.get("model"):
            raise ConfigurationError("OpenAI model is required for OpenAI-compatible APIs")
        if not data.get("api_base"):
            data["api_base"] = detect_api_base(data["model"])
            logger.info(f"Detected API base {data['api_base']} for model {data['model']}")

        try:
            self._config = BridgeConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.info(
            f"Configuration loaded: model={self._config.model}, "
            f"api_base={self._config.api_base}"
        )
        return self._config

    def reload(self) -> BridgeConfig:
        """Reload configuration from file and environment."""
        self._config = None
        return self.load()


# Global config loader instance
_global_loader: ConfigLoader | None = None


def load_config(config_path: str | Path | None = None) -> BridgeConfig:
    """
    Load global configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Validated configuration
    """
    global _global_loader

    if _global_loader is None or config_path:
        _global_loader = ConfigLoader(config_path)

    return _global_loader.load()


def get_config() -> BridgeConfig:
    """Get current global configuration (loads if needed)."""
    return load_config()


def reset_config() -> None:
    """Forget the cached global configuration."""
    global _global_loader
    _global_loader = None
