#!/usr/bin/env python3
"""Run HideField over a schema document.

This module handles:
- Loading the schema document
- Applying visibility attributes
- Rendering the annotated schema (YAML document or Prisma-style text)
- Writing the result to a file or stdout

Example:
    >>> from hidefield.main import run_hidefield
    >>> run_hidefield(args, settings, logger)
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from hidefield.core.config import PluginSettings
from hidefield.core.logging import Logger
from hidefield.plugin import VisibilityPlugin
from hidefield.render.template import RenderError, SchemaRenderer
from hidefield.schema.loader import SchemaError, dump_schema, load_schema
from hidefield.schema.model import Schema


def render_output(schema: Schema, output_format: str) -> str:
    """Render the annotated schema in the requested format."""
    if output_format == "prisma":
        return SchemaRenderer().render(schema)
    return dump_schema(schema)


def write_output(text: str, output: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to the ``output`` file, or to ``stream`` (stdout)."""
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        (stream or sys.stdout).write(text)


def run_hidefield(args: argparse.Namespace, settings: PluginSettings, logger: Logger) -> int:
    """
    Annotate the schema named by ``args.schema``.

    Args:
        args: Parsed command-line arguments
        settings: Resolved plugin settings
        logger: Logger instance

    Returns:
        Exit code (0 on success, 1 on error)
    """
    try:
        schema = load_schema(args.schema)
    except SchemaError as e:
        logger.error(f"Failed to load schema: {e}", path=args.schema, code=int(e.error_code))
        return 1

    plugin = VisibilityPlugin(
        show_attribute=settings.show_attribute,
        hide_attribute=settings.hide_attribute,
        hide_relations_by_default=settings.hide_relations_by_default,
        logger=logger,
    )
    plugin.apply(schema)

    try:
        text = render_output(schema, settings.output_format)
    except RenderError as e:
        logger.error(f"Failed to render schema: {e}")
        return 1

    try:
        write_output(text, args.output)
    except OSError as e:
        logger.error(f"Failed to write output: {e}", path=args.output)
        return 1

    if args.output:
        logger.debug("Wrote annotated schema", path=args.output, format=settings.output_format)

    return 0
