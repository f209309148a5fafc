"""Logging setup for the search core.

Library modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves. Applications embedding the search core call
``initialize_logging`` once at startup to attach handlers and apply
per-component levels from a YAML file.

Typical usage example:
    from aerolens.core.logging_system import initialize_logging, get_logger

    initialize_logging("config/logging.yaml")
    log = get_logger("aerolens.search")
    log.debug("Classified %r as %s", raw, intent.kind)
"""

import logging
import time
from pathlib import Path
from typing import Any

import yaml

from aerolens.core.resource_path import get_config_path

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def initialize_logging(config_path: str | Path | None = None, log_dir: str | Path | None = None) -> None:
    """Initialize the logging system from YAML configuration.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, the bundled config/logging.yaml is used when present,
            otherwise built-in defaults.
        log_dir: Overrides the directory used for the file handler.

    Raises:
        LoggingError: If the configuration file cannot be read.

    Examples:
        >>> initialize_logging()
        >>> get_logger("aerolens.airports").info("Logging initialized")
    """
    global _logging_config, _initialized

    if config_path is None:
        bundled = get_config_path("logging.yaml")
        config_path = bundled if bundled.exists() else None

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        _logging_config = _merge_with_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if log_dir is not None:
        _logging_config["log_dir"] = str(log_dir)

    _configure_root_logger()
    _apply_component_levels()
    _loggers_cache.clear()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "file": {
            "enabled": False,
            "filename": "aerolens.log",
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _merge_with_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(_logging_config.get("level", "INFO")))

    root_logger.handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_dir / file_config.get("filename", "aerolens.log"),
            mode="a",
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _apply_component_levels() -> None:
    for name, component in _logging_config.get("components", {}).items():
        logger = logging.getLogger(name)
        if not component.get("enabled", True):
            logger.disabled = True
            continue
        logger.disabled = False
        if "level" in component:
            logger.setLevel(_level(component["level"]))


def _level(name: str | int) -> int:
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component, initializing logging on first use.

    Args:
        name: Logger name (typically a dotted module path).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings in log calls.
    """
    if not _initialized:
        initialize_logging()

    if name not in _loggers_cache:
        _loggers_cache[name] = logging.getLogger(name)
    return _loggers_cache[name]


def shutdown_logging() -> None:
    """Flush handlers and forget cached loggers."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
