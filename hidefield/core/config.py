#!/usr/bin/env python3
"""Hierarchical configuration manager for HideField.

This module provides configuration management with:
- Precedence hierarchy (defaults, file, environment, CLI, runtime)
- YAML configuration files
- Environment variable overrides (HIDEFIELD_*)
- Dot-path access to nested keys
- Deep merge of all sources
- Typed settings for the visibility plugin

Example:
    >>> config = ConfigManager()
    >>> config.load_file("hidefield.yaml")
    >>> config.get("hidefield.attributes.show")
    'graphql.show'
    >>> config.get_settings().hide_relations_by_default
    True
"""

import copy
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hidefield.core.constants import DEFAULT_CONFIG, ConfigKey, ErrorCode
from hidefield.core.validators import ValidationError, validate_config

ENV_PREFIX = "HIDEFIELD_"
ROOT_KEY = "hidefield"


class ConfigSource(Enum):
    """Configuration source precedence levels."""

    COMPILED_DEFAULTS = 1  # Lowest precedence
    USER_CONFIG = 2
    ENVIRONMENT = 3
    CLI_ARGS = 4
    RUNTIME = 5  # Highest precedence


class ConfigError(Exception):
    """Configuration error."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


@dataclass(frozen=True)
class PluginSettings:
    """Resolved settings consumed by the visibility plugin."""

    show_attribute: str
    hide_attribute: str
    hide_relations_by_default: bool = True
    output_format: str = "yaml"
    log_level: str = "INFO"
    log_file: Optional[str] = None


class ConfigManager:
    """Hierarchical configuration manager.

    Manages configuration from multiple sources with precedence:
    1. Compiled defaults (lowest)
    2. User config file (YAML)
    3. Environment variables (HIDEFIELD_*)
    4. CLI arguments
    5. Runtime updates (highest)
    """

    DEFAULT_CONFIG = {ROOT_KEY: DEFAULT_CONFIG}

    def __init__(self, config_file: Optional[str] = None, load_environment: bool = True):
        """Initialize configuration manager.

        Args:
            config_file: Optional config file to load
            load_environment: Whether to read HIDEFIELD_* variables
        """
        self._config: Dict[ConfigSource, Dict[str, Any]] = {}
        self._config[ConfigSource.COMPILED_DEFAULTS] = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_file(config_file)

        if load_environment:
            self._load_environment()

    def load_file(self, file_path: str, source: ConfigSource = ConfigSource.USER_CONFIG) -> None:
        """Load configuration from YAML file.

        Args:
            file_path: Path to YAML config file
            source: Configuration source level

        Raises:
            ConfigError: If file cannot be loaded or parsed
        """
        path = Path(file_path).expanduser().resolve()

        if not path.exists():
            raise ConfigError(f"Config file not found: {file_path}", ErrorCode.NOT_FOUND)

        try:
            with open(path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error in {file_path}: {e}", ErrorCode.INVALID_INPUT)
        except UnicodeDecodeError as e:
            raise ConfigError(f"Config file {file_path} is not valid UTF-8: {e}", ErrorCode.INVALID_INPUT)
        except OSError as e:
            raise ConfigError(f"Error loading config {file_path}: {e}", ErrorCode.INTERNAL_ERROR)

        if not isinstance(config_data, dict):
            raise ConfigError(f"Invalid config format in {file_path}", ErrorCode.INVALID_INPUT)

        self._config[source] = config_data

    def load_dict(self, config_data: Dict[str, Any], source: ConfigSource = ConfigSource.RUNTIME) -> None:
        """Load configuration from dictionary.

        Args:
            config_data: Configuration dictionary
            source: Configuration source level
        """
        self._config[source] = copy.deepcopy(config_data)

    def _load_environment(self) -> None:
        """Load configuration from environment variables.

        Nested keys are separated by a double underscore:
        HIDEFIELD_RELATIONS__HIDE_BY_DEFAULT=false
        """
        env_config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            parts = key[len(ENV_PREFIX):].lower().split("__")
            if not all(parts):
                continue

            current = env_config
            for part in parts[:-1]:
                current = current.setdefault(part, {})
                if not isinstance(current, dict):
                    break
            else:
                current[parts[-1]] = self._parse_env_value(value)

        if env_config:
            self._config[ConfigSource.ENVIRONMENT] = {ROOT_KEY: env_config}

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value.

        Args:
            value: String value from environment

        Returns:
            Parsed value (bool, int, float, or str)
        """
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Dot-separated key path (e.g., "hidefield.attributes.show")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        for source in sorted(self._config.keys(), key=lambda s: s.value, reverse=True):
            value = self._get_nested(self._config[source], key)
            if value is not None:
                return value

        return default

    def _get_nested(self, config: Dict[str, Any], key: str) -> Optional[Any]:
        """Get value from nested dictionary using dot notation."""
        current: Any = config

        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            if part not in current:
                return None
            current = current[part]

        return current

    def get_all(self) -> Dict[str, Any]:
        """Get merged configuration from all sources.

        Returns:
            Merged configuration dictionary
        """
        merged: Dict[str, Any] = {}

        # Merge from lowest to highest precedence
        for source in sorted(self._config.keys(), key=lambda s: s.value):
            merged = self._deep_merge(merged, self._config[source])

        return merged

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def validate(self) -> bool:
        """Validate the merged ``hidefield`` section.

        Raises:
            ConfigError: If validation fails
        """
        try:
            return validate_config(self.get_all().get(ROOT_KEY, {}))
        except ValidationError as e:
            raise ConfigError(str(e), e.error_code)

    def get_settings(self) -> PluginSettings:
        """Validate the configuration and resolve it into typed settings.

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.validate()
        section = self.get_all().get(ROOT_KEY, {})

        attributes = section.get(ConfigKey.ATTRIBUTES, {})
        relations = section.get(ConfigKey.RELATIONS, {})
        output = section.get(ConfigKey.OUTPUT, {})
        logging_config = section.get(ConfigKey.LOGGING, {})

        return PluginSettings(
            show_attribute=attributes[ConfigKey.SHOW],
            hide_attribute=attributes[ConfigKey.HIDE],
            hide_relations_by_default=relations.get(ConfigKey.HIDE_BY_DEFAULT, True),
            output_format=output.get(ConfigKey.FORMAT, "yaml"),
            log_level=str(logging_config.get(ConfigKey.LEVEL, "INFO")).upper(),
            log_file=logging_config.get(ConfigKey.FILE),
        )
