"""
================================================================================
Configuration Loader
================================================================================

Settings for the UI suites come from config/config.yaml, and any dotted key
can be overridden from the environment:

    browser              <- BROWSER
    ui.base_url          <- UI_BASE_URL
    ui.wait_timeout_ms   <- UI_WAIT_TIMEOUT_MS

Environment values are strings; they are coerced to the type of the default
passed to `get()` (bool / int / float) when one is given.

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


PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"

_TRUTHY = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """The configuration file exists but cannot be used."""


def env_var_for(key: str) -> str:
    """Environment variable that overrides a dotted key (ui.base_url -> UI_BASE_URL)."""
    return key.replace(".", "_").upper()


def coerce_env_value(raw: str, like: Any) -> Any:
    """Convert an environment string to the type of `like`; unparsable values stay strings."""
    if isinstance(like, bool):
        return raw.strip().lower() in _TRUTHY
    for kind in (int, float):
        if isinstance(like, kind):
            try:
                return kind(raw)
            except ValueError:
                logger.warning(f"Cannot read {raw!r} as {kind.__name__}; using it as text")
                return raw
    return raw


class ConfigLoader:
    """
    Process-wide access to the suite configuration.

    Lookup order for `get(key)`: environment variable, YAML value, default.

    Usage:
        >>> ConfigLoader().get("browser", "chrome")
        'chrome'
        >>> ConfigLoader().get("ui.max_retries", 3)
        3
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
            instance._data = instance._read()
            cls._instance = instance
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, Any]:
        if not self._path.is_file():
            logger.warning(f"No configuration file at {self._path}; using defaults and environment")
            return {}

        try:
            data = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{self._path} must hold a mapping at the top level, got {type(data).__name__}"
            )
        logger.debug(f"Loaded configuration from: {self._path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value for a dotted key.

        Args:
            key: Dotted path, e.g. "ui.base_url"
            default: Returned when neither environment nor file has the key;
                also decides how an environment value is converted
        """
        raw = os.environ.get(env_var_for(key))
        if raw is not None:
            return raw if default is None else coerce_env_value(raw, default)

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """Top-level mapping such as `ui` or `logging` (empty when absent)."""
        value = self._data.get(section)
        return dict(value) if isinstance(value, dict) else {}

    def reload(self) -> None:
        """Re-read the YAML file (environment is always read live)."""
        self._data = self._read()
        logger.info(f"Configuration reloaded from: {self._path}")

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next ConfigLoader() reads afresh."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "coerce_env_value",
    "env_var_for",
]
