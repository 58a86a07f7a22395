"""HideField schema model and document loading."""

from .loader import (
    SchemaError,
    dump_schema,
    load_schema,
    parse_attribute,
    schema_from_dict,
    schema_to_dict,
)
from .model import (
    Attribute,
    AttributeArg,
    AttributeKind,
    DataModel,
    Field,
    Literal,
    LiteralKind,
    Schema,
)

__all__ = [
    # Model
    "Schema",
    "DataModel",
    "Field",
    "Attribute",
    "AttributeArg",
    "AttributeKind",
    "Literal",
    "LiteralKind",
    # Documents
    "SchemaError",
    "load_schema",
    "schema_from_dict",
    "schema_to_dict",
    "dump_schema",
    "parse_attribute",
]
