"""
HideField Core: Constants and Type Definitions

This module provides system-wide constants, error codes, configuration keys
and the fixed tokens of the @HideField comment syntax.
"""
from enum import IntEnum

# Version information
HIDEFIELD_VERSION = "1.0.0"

# Prefix used in log messages and diagnostics
LOG_TAG = "[HideField]"


# Error codes (0-9 range)
class ErrorCode(IntEnum):
    """Standardized error codes for HideField operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad schema document, invalid configuration
    NOT_FOUND = 2  # File or resource doesn't exist
    PERMISSION_DENIED = 3  # Insufficient permissions
    CONFLICT = 4  # Conflicting declarations
    INTERNAL_ERROR = 5  # Unexpected I/O or internal failure


# Downstream comment syntax
COMMENT_PREFIX = "///"
HIDE_FIELD_MARKER = "@HideField"

# Default attribute names recognised on fields
DEFAULT_SHOW_ATTRIBUTE = "graphql.show"
DEFAULT_HIDE_ATTRIBUTE = "graphql.hide"

# Output formats understood by the CLI
OUTPUT_FORMATS = ("yaml", "prisma")


# Configuration keys
class ConfigKey:
    """Configuration key constants."""

    # Top-level keys
    ATTRIBUTES = "attributes"
    RELATIONS = "relations"
    OUTPUT = "output"
    LOGGING = "logging"

    # Attribute names
    SHOW = "show"
    HIDE = "hide"

    # Relation handling
    HIDE_BY_DEFAULT = "hide_by_default"

    # Output configuration
    FORMAT = "format"

    # Logging configuration
    LEVEL = "level"
    FILE = "file"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ATTRIBUTES: {
        ConfigKey.SHOW: DEFAULT_SHOW_ATTRIBUTE,
        ConfigKey.HIDE: DEFAULT_HIDE_ATTRIBUTE,
    },
    ConfigKey.RELATIONS: {
        ConfigKey.HIDE_BY_DEFAULT: True,
    },
    ConfigKey.OUTPUT: {
        ConfigKey.FORMAT: "yaml",
    },
    ConfigKey.LOGGING: {
        ConfigKey.LEVEL: "INFO",
        ConfigKey.FILE: None,
    },
}
