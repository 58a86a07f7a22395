#!/usr/bin/env python3
"""Render an annotated schema as Prisma-style text using Jinja2.

Each model becomes a block listing its fields, with the field's comments
(including any @HideField directive) on the lines above it:

    model Book {
      /// @HideField({ input: true, output: true })
      author Author
      title  String
    }

Example:
    >>> renderer = SchemaRenderer()
    >>> print(renderer.render(schema))
"""

from typing import Any, Dict, Optional

import jinja2

from hidefield.schema.model import Field, Schema

SCHEMA_TEMPLATE = """\
{%- for enum in enums %}
enum {{ enum }} {}
{% endfor %}
{%- for model in models %}
model {{ model.name }} {
{%- for field in model.fields %}
{%- for comment in field.comments %}
  {{ comment }}
{%- endfor %}
  {{ field.name.ljust(model.width) }} {{ field.type }}
  {%- if field.attributes %} {{ field.attributes | join(' ') }}{% endif %}
{%- endfor %}
}
{% endfor %}"""


class RenderError(Exception):
    """Error while rendering a schema."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def _field_type(model_field: Field) -> str:
    suffix = "[]" if model_field.is_list else ""
    suffix += "?" if model_field.optional else ""
    return f"{model_field.type}{suffix}"


class SchemaRenderer:
    """Render schemas through a Jinja2 template."""

    def __init__(self, template: str = SCHEMA_TEMPLATE, **kwargs):
        """Initialize renderer.

        Args:
            template: Jinja2 template source
            **kwargs: Additional Jinja2 environment options
        """
        self._template_source = template
        self._jinja_options = kwargs
        self._env: Optional[jinja2.Environment] = None

    def _get_environment(self) -> jinja2.Environment:
        """Get or create the Jinja2 environment."""
        if self._env is None:
            options = {"keep_trailing_newline": True, "undefined": jinja2.StrictUndefined}
            options.update(self._jinja_options)
            self._env = jinja2.Environment(**options)
        return self._env

    def build_context(self, schema: Schema) -> Dict[str, Any]:
        """Flatten the schema into plain template variables."""
        models = []
        for model in schema.models:
            fields = [
                {
                    "name": f.name,
                    "type": _field_type(f),
                    "attributes": [a.to_source() for a in f.attributes],
                    "comments": list(f.comments),
                }
                for f in model.fields
            ]
            width = max((len(f["name"]) for f in fields), default=0)
            models.append({"name": model.name, "fields": fields, "width": width})

        return {"enums": list(schema.enums), "models": models}

    def render(self, schema: Schema) -> str:
        """Render ``schema`` to text.

        Raises:
            RenderError: If the template fails to render
        """
        try:
            template = self._get_environment().from_string(self._template_source)
            return template.render(**self.build_context(schema)).lstrip("\n")
        except jinja2.TemplateError as e:
            raise RenderError(f"Template error: {e}")
