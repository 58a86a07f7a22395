"""HideField schema rendering."""

from .template import SCHEMA_TEMPLATE, RenderError, SchemaRenderer

__all__ = [
    "SCHEMA_TEMPLATE",
    "RenderError",
    "SchemaRenderer",
]
