#!/usr/bin/env python3
"""
Configuration management for cli-helptext.

Supports:
- YAML configuration files
- Environment variable overrides
- Default values
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import CONFIG_FILE_CANDIDATES, DEFAULT_LOG_LEVEL, ENV_PREFIX
from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class HelpTextConfig:
    """Rendering options with defaults."""

    # List subcommands by name; False keeps declaration order
    sort_subcommands: bool = True
    # Merge ancestor options into a command's OPTIONS section
    inherit_options: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "HelpTextConfig":
        """Load configuration from file and environment."""
        values: Dict[str, Any] = {}

        if config_path is not None:
            if not Path(config_path).exists():
                raise ConfigurationError(
                    "Config file does not exist",
                    config_key="config_path",
                    config_value=config_path,
                )
            values.update(cls._load_from_file(config_path))
        else:
            found = cls._find_config_file()
            if found:
                values.update(cls._load_from_file(found))

        values.update(cls._load_from_env())
        return cls(**values)

    @staticmethod
    def _find_config_file() -> Optional[str]:
        """Find config file in standard locations."""
        for candidate in CONFIG_FILE_CANDIDATES:
            path = os.path.expanduser(candidate)
            if Path(path).exists():
                return path
        return None

    @classmethod
    def _load_from_file(cls, config_path: str) -> Dict[str, Any]:
        """Load known keys from a YAML file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in config file {config_path}",
                config_key="config_path",
                config_value=config_path,
                cause=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read config file {config_path}: {e}",
                config_key="config_path",
                config_value=config_path,
                cause=e,
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a mapping",
                config_key="config_path",
                config_value=config_path,
            )

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, config_path)
                continue
            values[key] = cls._coerce(key, value)

        logger.debug("Loaded config from %s: %s", config_path, values)
        return values

    @classmethod
    def _load_from_env(cls) -> Dict[str, Any]:
        """Load configuration from CLI_HELPTEXT_* environment variables."""
        values: Dict[str, Any] = {}
        for f in fields(cls):
            env_var = f"{ENV_PREFIX}{f.name.upper()}"
            raw = os.getenv(env_var)
            if raw is None:
                continue
            try:
                values[f.name] = cls._coerce(f.name, raw)
            except ConfigurationError as e:
                logger.warning("Skipping %s: %s", env_var, e)
        return values

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        if key in ("sort_subcommands", "inherit_options"):
            if isinstance(value, bool):
                return value
            lowered = str(value).strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ConfigurationError(
                "Expected a boolean", config_key=key, config_value=value
            )
        if key == "log_level":
            level = str(value).upper()
            if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                raise ConfigurationError(
                    "Unknown log level", config_key=key, config_value=value
                )
            return level
        return value
