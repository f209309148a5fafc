"""Configuration loader for YAML files.

This module loads the search settings (reference data locations, ranking
limits) with support for nested access, defaults and layered overrides.

Typical usage example:
    from aerolens.core.config import ConfigLoader

    config = ConfigLoader.load_default()
    limit = config.get("search.default_limit", default=5)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from aerolens.core.resource_path import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "settings.yaml"


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, dot-notation access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> full_scan = config.get("search.full_scan", default=False)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data
        self.source: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        config = cls(data)
        config.source = path
        return config

    @classmethod
    def load_default(cls) -> "ConfigLoader":
        """Load the settings bundled with the package.

        Returns:
            ConfigLoader for config/settings.yaml.
        """
        return cls.load(get_config_path(DEFAULT_SETTINGS_FILE))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g. "search.default_limit").
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from. Its values win.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def resolve_path(self, key: str, base_dir: Path) -> Path | None:
        """Resolve a path-valued setting.

        Relative paths are taken relative to ``base_dir``.

        Args:
            key: Configuration key holding a path.
            base_dir: Directory for relative paths.

        Returns:
            Absolute path, or None if the key is unset.
        """
        value = self.get(key)
        if value is None:
            return None

        path = Path(value).expanduser()
        if not path.is_absolute():
            path = base_dir / path
        return path

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary."""
        return self._data.copy()
