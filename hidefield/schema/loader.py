#!/usr/bin/env python3
"""Load and dump schema documents.

A schema document is YAML describing models, their fields and the
attributes on each field:

    enums: [Role]
    models:
      - name: Book
        fields:
          - name: author
            type: Author
            attributes: ["@graphql.show(query: true)"]
          - name: reviews
            type: Review[]

Attributes are either invocation strings or mappings of the form
``{name: graphql.hide, args: {create: true}}``. A field is a relation when
its type names a declared model.

Example:
    >>> schema = load_schema("schema.yaml")
    >>> [m.name for m in schema.models]
    ['Book', 'Author']
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from hidefield.core.constants import ErrorCode
from hidefield.schema.model import Attribute, AttributeArg, DataModel, Field, Literal, Schema

_ATTRIBUTE_RE = re.compile(
    r"^\s*@?(?P<name>[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)\s*"
    r"(?:\((?P<args>.*)\))?\s*$",
    re.DOTALL,
)
_ARG_RE = re.compile(
    r"\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*:\s*"
    r"(?P<value>\"[^\"]*\"|'[^']*'|[^,\s][^,]*?)\s*(?:,|$)"
)
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")


class SchemaError(Exception):
    """Malformed schema document."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


def _parse_value(text: str) -> Any:
    if text == "true":
        return True
    if text == "false":
        return False
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    if _NUMBER_RE.match(text):
        return float(text) if "." in text else int(text)
    return text


def parse_attribute(text: str) -> Attribute:
    """Parse an invocation such as ``@graphql.hide(create: true)``.

    Raises:
        SchemaError: If the invocation cannot be parsed
    """
    match = _ATTRIBUTE_RE.match(text)
    if not match:
        raise SchemaError(f"Invalid attribute: {text!r}")

    args: List[AttributeArg] = []
    raw_args = (match.group("args") or "").strip()

    position = 0
    while position < len(raw_args):
        arg_match = _ARG_RE.match(raw_args, position)
        if not arg_match or arg_match.end() == position:
            raise SchemaError(f"Invalid attribute arguments in {text!r}")
        value = Literal.from_value(_parse_value(arg_match.group("value").strip()))
        args.append(AttributeArg(arg_match.group("name"), value))
        position = arg_match.end()

    return Attribute(name=match.group("name"), args=args)


def _attribute_from_data(data: Union[str, Dict[str, Any]], where: str) -> Attribute:
    if isinstance(data, str):
        return parse_attribute(data)

    if not isinstance(data, dict) or not isinstance(data.get("name"), str):
        raise SchemaError(f"Attribute on {where} must be a string or a mapping with a name")

    raw_args = data.get("args") or {}
    if isinstance(raw_args, dict):
        items = list(raw_args.items())
    elif isinstance(raw_args, list):
        items = []
        for item in raw_args:
            if not isinstance(item, dict) or "name" not in item:
                raise SchemaError(f"Attribute argument on {where} must have a name")
            items.append((item["name"], item.get("value")))
    else:
        raise SchemaError(f"Attribute arguments on {where} must be a mapping or a list")

    args = [AttributeArg(str(name), Literal.from_value(value)) for name, value in items]
    return Attribute(name=data["name"], args=args)


def _split_type(type_name: str) -> Tuple[str, bool, bool]:
    """Strip ``[]`` and ``?`` modifiers from a declared type."""
    optional = type_name.endswith("?")
    base = type_name.rstrip("?")
    is_list = base.endswith("[]")
    if is_list:
        base = base[:-2]
    return base, is_list, optional


def schema_from_dict(data: Dict[str, Any]) -> Schema:
    """Build a schema from a parsed document.

    Raises:
        SchemaError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise SchemaError("Schema document must be a mapping")

    raw_models = data.get("models") or []
    enums = data.get("enums") or []
    if not isinstance(raw_models, list):
        raise SchemaError("'models' must be a list")
    if not isinstance(enums, list) or not all(isinstance(e, str) for e in enums):
        raise SchemaError("'enums' must be a list of names")

    model_names = set()
    for raw_model in raw_models:
        if not isinstance(raw_model, dict) or not isinstance(raw_model.get("name"), str):
            raise SchemaError("Every model must be a mapping with a name")
        if raw_model["name"] in model_names:
            raise SchemaError(f"Duplicate model: {raw_model['name']}", ErrorCode.CONFLICT)
        model_names.add(raw_model["name"])

    schema = Schema(enums=list(enums))
    for raw_model in raw_models:
        model = DataModel(name=raw_model["name"])

        for raw_field in raw_model.get("fields") or []:
            if not isinstance(raw_field, dict):
                raise SchemaError(f"Fields of {model.name} must be mappings")
            name = raw_field.get("name")
            declared = raw_field.get("type")
            if not isinstance(name, str) or not isinstance(declared, str):
                raise SchemaError(f"Field of {model.name} needs a name and a type")

            where = f"{model.name}.{name}"
            base, is_list, optional = _split_type(declared)
            attributes = [
                _attribute_from_data(item, where) for item in raw_field.get("attributes") or []
            ]
            comments = raw_field.get("comments") or []
            if not isinstance(comments, list):
                raise SchemaError(f"Comments of {where} must be a list")

            model.fields.append(
                Field(
                    name=name,
                    type=base,
                    model=model.name,
                    is_relation=base in model_names,
                    is_list=is_list or bool(raw_field.get("list", False)),
                    optional=optional or bool(raw_field.get("optional", False)),
                    attributes=attributes,
                    comments=[str(c) for c in comments],
                )
            )

        schema.models.append(model)

    return schema


def load_schema(file_path: Union[str, Path]) -> Schema:
    """Load a schema document from a YAML file.

    Raises:
        SchemaError: If the file is missing, unreadable or malformed
    """
    path = Path(file_path).expanduser()

    if not path.exists():
        raise SchemaError(f"Schema file not found: {file_path}", ErrorCode.NOT_FOUND)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaError(f"YAML parse error in {file_path}: {e}")
    except UnicodeDecodeError as e:
        raise SchemaError(f"Schema file {file_path} is not valid UTF-8: {e}")
    except PermissionError as e:
        raise SchemaError(f"Permission denied reading {file_path}: {e}", ErrorCode.PERMISSION_DENIED)
    except OSError as e:
        raise SchemaError(f"Failed to read schema file {file_path}: {e}", ErrorCode.INTERNAL_ERROR)

    return schema_from_dict(data or {})


def schema_to_dict(schema: Schema) -> Dict[str, Any]:
    """Convert a schema back to a document, keeping declaration order."""
    models = []
    for model in schema.models:
        fields = []
        for model_field in model.fields:
            entry: Dict[str, Any] = {"name": model_field.name, "type": model_field.type}
            if model_field.is_list:
                entry["list"] = True
            if model_field.optional:
                entry["optional"] = True
            if model_field.attributes:
                entry["attributes"] = [a.to_source() for a in model_field.attributes]
            if model_field.comments:
                entry["comments"] = list(model_field.comments)
            fields.append(entry)
        models.append({"name": model.name, "fields": fields})

    document: Dict[str, Any] = {}
    if schema.enums:
        document["enums"] = list(schema.enums)
    document["models"] = models
    return document


def dump_schema(schema: Schema) -> str:
    """Serialize a schema to a YAML document."""
    return yaml.safe_dump(
        schema_to_dict(schema), sort_keys=False, default_flow_style=False, allow_unicode=True
    )
