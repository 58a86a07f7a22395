#!/usr/bin/env python3
"""Command-line interface for HideField.

This module provides the CLI for annotating schema documents:
- Argument parsing and validation
- Configuration file loading and merging with arguments
- Logging setup
- Help and version information

Example:
    >>> from hidefield.cli import parse_arguments
    >>> args = parse_arguments(["schema.yaml", "--format", "prisma"])
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from hidefield.core.config import ROOT_KEY, ConfigError, ConfigManager, ConfigSource, PluginSettings
from hidefield.core.constants import HIDEFIELD_VERSION, OUTPUT_FORMATS, ErrorCode
from hidefield.core.logging import Logger, get_logger, set_global_logger

DESCRIPTION = "HideField - compile GraphQL field visibility attributes into @HideField comments"


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        super().__init__(message)
        self.error_code = error_code


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Argument list to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace

    Raises:
        SystemExit: On invalid arguments or --help/--version
        CLIError: If referenced files do not exist
    """
    parser = argparse.ArgumentParser(
        prog="hidefield",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Annotate a schema document and print it
  hidefield schema.yaml

  # Write Prisma-style output to a file
  hidefield schema.yaml --format prisma --output schema.prisma

  # Use a configuration file and keep unannotated relations visible
  hidefield schema.yaml --config hidefield.yaml --no-default-hide
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {HIDEFIELD_VERSION}",
    )

    parser.add_argument(
        "schema",
        metavar="SCHEMA",
        type=str,
        help="Schema document (YAML)",
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        type=str,
        help="Configuration file path (YAML format)",
    )

    # Output options
    output_group = parser.add_argument_group("output options")

    output_group.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Write the annotated schema to FILE (default: stdout)",
    )

    output_group.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: yaml)",
    )

    # Attribute options
    attr_group = parser.add_argument_group("attribute options")

    attr_group.add_argument(
        "--show-attribute",
        metavar="NAME",
        type=str,
        help="Name of the show attribute (default: graphql.show)",
    )

    attr_group.add_argument(
        "--hide-attribute",
        metavar="NAME",
        type=str,
        help="Name of the hide attribute (default: graphql.hide)",
    )

    attr_group.add_argument(
        "--no-default-hide",
        action="store_true",
        help="Do not hide relations that carry no visibility attribute",
    )

    # Logging options
    log_group = parser.add_argument_group("logging options")

    log_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        type=str,
        help="Also write log messages to FILE",
    )

    parsed = parser.parse_args(args)

    _validate_arguments(parsed)

    return parsed


def _validate_arguments(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Raises:
        CLIError: If validation fails
    """
    schema_path = Path(args.schema)

    if not schema_path.exists():
        raise CLIError(f"Schema file does not exist: {args.schema}", ErrorCode.NOT_FOUND)

    if not schema_path.is_file():
        raise CLIError(f"Schema path is not a file: {args.schema}")

    if args.config:
        config_path = Path(args.config)

        if not config_path.exists():
            raise CLIError(f"Configuration file does not exist: {args.config}", ErrorCode.NOT_FOUND)

        if not config_path.is_file():
            raise CLIError(f"Configuration path is not a file: {args.config}")


def build_config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build configuration dictionary from command-line arguments.

    Only options given on the command line are included, so file and
    environment values are not overridden by argument defaults.

    Returns:
        Configuration dictionary for ConfigManager
    """
    section: Dict[str, Any] = {}

    attributes = {}
    if args.show_attribute:
        attributes["show"] = args.show_attribute
    if args.hide_attribute:
        attributes["hide"] = args.hide_attribute
    if attributes:
        section["attributes"] = attributes

    if args.no_default_hide:
        section["relations"] = {"hide_by_default": False}

    if args.format:
        section["output"] = {"format": args.format}

    logging_config = {}
    if args.debug:
        logging_config["level"] = "DEBUG"
    if args.log_file:
        logging_config["file"] = args.log_file
    if logging_config:
        section["logging"] = logging_config

    return {ROOT_KEY: section}


def load_settings(args: argparse.Namespace) -> PluginSettings:
    """
    Resolve settings from defaults, config file, environment and arguments.

    Raises:
        CLIError: If the configuration cannot be loaded or is invalid
    """
    try:
        config = ConfigManager(args.config)
        config.load_dict(build_config_from_args(args), ConfigSource.CLI_ARGS)
        return config.get_settings()
    except ConfigError as e:
        raise CLIError(f"Invalid configuration: {e}", e.error_code)


def setup_logging(settings: PluginSettings) -> Logger:
    """
    Setup logging based on resolved settings.

    Returns:
        Configured logger instance, also installed as the global logger

    Raises:
        CLIError: If the log file cannot be opened
    """
    logger = Logger("hidefield", level=settings.log_level)

    if settings.log_file:
        try:
            logger.add_handler(logger.create_file_handler(settings.log_file))
        except OSError as e:
            raise CLIError(f"Cannot open log file {settings.log_file}: {e}")

    set_global_logger(logger)
    return logger


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Handles argument parsing and configuration, then passes control to
    hidefield.main for the actual run.
    """
    try:
        args = parse_arguments(argv)
        settings = load_settings(args)
        logger = setup_logging(settings)

        from hidefield.main import run_hidefield

        return run_hidefield(args, settings, logger)

    except CLIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        get_logger().exception(f"Unexpected error: {e}", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
