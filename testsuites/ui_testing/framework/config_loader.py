"""
================================================================================
Configuration Loader
================================================================================

Raw key lookup behind load_settings(): config/config.yaml first, with any
key overridable from the environment (`timeouts.slider_ready_ms` is read
from TIMEOUTS_SLIDER_READY_MS when set).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Process-wide view of config/config.yaml plus environment overrides.

    Lookup order for `get("lt.username")`: LT_USERNAME, then the YAML value,
    then the caller's default. Environment strings are coerced to the type of
    the default (bool, int, float).
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Only the first construction per process reads `config_path`."""
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(
                f"No config file at {self._config_path}; "
                f"built-in defaults and environment only"
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e

        if not isinstance(self._config, dict):
            raise ConfigurationError(f"Top level of {self._config_path} must be a mapping")
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value for a dotted key such as "timeouts.message_check_ms".

        Args:
            key: Dotted path into the YAML document
            default: Returned when neither environment nor YAML has the key;
                     its type drives coercion of environment strings

        Returns:
            Environment value, YAML value or `default`
        """
        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            return self._convert_type(env_value, default)

        node: Any = self._config
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                return default
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """Copy of a top-level YAML mapping (e.g. "paths"), empty when absent."""
        return dict(self._config.get(section) or {})

    def reload(self) -> None:
        """Re-read the YAML file (environment is always read live)."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @staticmethod
    def _convert_type(value: str, reference: Any) -> Any:
        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        for kind in (int, float):
            if isinstance(reference, kind):
                try:
                    return kind(value)
                except ValueError:
                    return value
        return value

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide instance so the next ConfigLoader() re-reads the file."""
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
]
