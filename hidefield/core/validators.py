"""
HideField Core: Input Validators.

This module provides validation functions for the plugin configuration
and for attribute names given by the user.
"""
import re
from typing import Any, Dict

from hidefield.core.constants import OUTPUT_FORMATS, ConfigKey, ErrorCode

_ATTRIBUTE_NAME = re.compile(r"^@?[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_config(config: Dict[str, Any]) -> bool:
    """Validate the ``hidefield`` configuration section.

    Args:
        config: Configuration dictionary (contents of the ``hidefield`` key)

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ValidationError("Configuration must be a dictionary")

    if ConfigKey.ATTRIBUTES in config:
        validate_attributes_config(config[ConfigKey.ATTRIBUTES])

    if ConfigKey.RELATIONS in config:
        relations = config[ConfigKey.RELATIONS]
        if not isinstance(relations, dict):
            raise ValidationError("Relations configuration must be a dictionary")
        hide_by_default = relations.get(ConfigKey.HIDE_BY_DEFAULT, True)
        if not isinstance(hide_by_default, bool):
            raise ValidationError("relations.hide_by_default must be a boolean")

    if ConfigKey.OUTPUT in config:
        output = config[ConfigKey.OUTPUT]
        if not isinstance(output, dict):
            raise ValidationError("Output configuration must be a dictionary")
        fmt = output.get(ConfigKey.FORMAT, "yaml")
        if fmt not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Invalid output format: {fmt}. Must be one of {', '.join(OUTPUT_FORMATS)}"
            )

    if ConfigKey.LOGGING in config:
        validate_logging_config(config[ConfigKey.LOGGING])

    return True


def validate_attributes_config(attributes: Dict[str, Any]) -> bool:
    """Validate the attribute name mapping.

    Raises:
        ValidationError: If an attribute name is malformed or both names collide
    """
    if not isinstance(attributes, dict):
        raise ValidationError("Attributes configuration must be a dictionary")

    for key in (ConfigKey.SHOW, ConfigKey.HIDE):
        if key in attributes:
            validate_attribute_name(attributes[key])

    show = attributes.get(ConfigKey.SHOW)
    hide = attributes.get(ConfigKey.HIDE)
    if show is not None and hide is not None and show.lstrip("@") == hide.lstrip("@"):
        raise ValidationError(
            f"Show and hide attributes must differ, both are '{show}'", ErrorCode.CONFLICT
        )

    return True


def validate_attribute_name(name: Any) -> bool:
    """Validate a dotted attribute name such as ``graphql.show``.

    Args:
        name: Attribute name, optionally prefixed with ``@``

    Returns:
        True if valid

    Raises:
        ValidationError: If the name is not a dotted identifier
    """
    if not isinstance(name, str) or not name:
        raise ValidationError("Attribute name must be a non-empty string")

    if not _ATTRIBUTE_NAME.match(name):
        raise ValidationError(f"Invalid attribute name: {name}")

    return True


def validate_logging_config(logging_config: Dict[str, Any]) -> bool:
    """Validate logging configuration.

    Raises:
        ValidationError: If the level or file entry is invalid
    """
    if not isinstance(logging_config, dict):
        raise ValidationError("Logging configuration must be a dictionary")

    level = logging_config.get(ConfigKey.LEVEL, "INFO")
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ValidationError(
            f"Invalid log level: {level}. Must be one of {', '.join(_LOG_LEVELS)}"
        )

    log_file = logging_config.get(ConfigKey.FILE)
    if log_file is not None and not isinstance(log_file, str):
        raise ValidationError("logging.file must be a string path")

    return True
