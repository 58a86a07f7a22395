#!/usr/bin/env python3
"""In-memory schema model consumed by the visibility plugin.

Only what the plugin needs is modelled:
- Schema: model and enum declarations, in declaration order
- DataModel: a model with its fields
- Field: name, declared type, relation flag, attributes, comments
- Attribute / AttributeArg / Literal: attribute invocations on a field
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class LiteralKind(Enum):
    """Discriminator of an attribute argument value."""

    BOOLEAN = "BooleanLiteral"
    LITERAL = "LiteralExpr"  # Any other literal (string, number, ...)


@dataclass(frozen=True)
class Literal:
    """A literal attribute argument value."""

    kind: LiteralKind
    value: Any

    @classmethod
    def boolean(cls, value: bool) -> "Literal":
        return cls(LiteralKind.BOOLEAN, value)

    @classmethod
    def from_value(cls, value: Any) -> "Literal":
        """Wrap a plain Python value, booleans become boolean literals."""
        if isinstance(value, bool):
            return cls(LiteralKind.BOOLEAN, value)
        return cls(LiteralKind.LITERAL, value)

    def is_true(self) -> bool:
        """Whether the literal is the boolean ``true``."""
        return self.value is True


@dataclass(frozen=True)
class AttributeArg:
    """A named argument of an attribute invocation."""

    name: str
    value: Literal


@dataclass
class Attribute:
    """An attribute invocation such as ``@graphql.show(query: true)``."""

    name: str
    args: List[AttributeArg] = field(default_factory=list)

    @property
    def bare_name(self) -> str:
        """Attribute name without the leading ``@``."""
        return self.name.lstrip("@")

    def to_source(self) -> str:
        """Render the invocation back to schema syntax."""
        rendered = []
        for arg in self.args:
            value = arg.value.value
            if isinstance(value, bool):
                text = "true" if value else "false"
            elif isinstance(value, str):
                text = f'"{value}"'
            else:
                text = str(value)
            rendered.append(f"{arg.name}: {text}")
        return f"@{self.bare_name}({', '.join(rendered)})"


class AttributeKind(Enum):
    """Classification of a field's visibility attribute."""

    SHOW = "show"
    HIDE = "hide"
    UNRECOGNIZED = "unrecognized"


@dataclass
class Field:
    """A field of a model declaration.

    ``is_relation`` is true when the declared type is another model;
    scalars, enums and scalar lists are not relations.
    """

    name: str
    type: str
    model: str = ""
    is_relation: bool = False
    is_list: bool = False
    optional: bool = False
    attributes: List[Attribute] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return f"{self.model}.{self.name}"

    def find_attribute(self, name: str) -> Optional[Attribute]:
        """Find the first attribute named ``name`` (``@`` prefix optional)."""
        wanted = name.lstrip("@")
        for attribute in self.attributes:
            if attribute.bare_name == wanted:
                return attribute
        return None

    def visibility_attribute(
        self, show_name: str, hide_name: str
    ) -> Tuple[AttributeKind, Optional[Attribute]]:
        """Resolve which visibility attribute governs this field.

        A show attribute takes precedence over a hide attribute.
        """
        show = self.find_attribute(show_name)
        if show is not None:
            return AttributeKind.SHOW, show

        hide = self.find_attribute(hide_name)
        if hide is not None:
            return AttributeKind.HIDE, hide

        return AttributeKind.UNRECOGNIZED, None


@dataclass
class DataModel:
    """A model declaration."""

    name: str
    fields: List[Field] = field(default_factory=list)


@dataclass
class Schema:
    """Model and enum declarations of one schema, in declaration order."""

    models: List[DataModel] = field(default_factory=list)
    enums: List[str] = field(default_factory=list)

    def model_names(self) -> List[str]:
        return [model.name for model in self.models]

    def get_model(self, name: str) -> Optional[DataModel]:
        for model in self.models:
            if model.name == name:
                return model
        return None

    def iter_fields(self) -> Iterator[Tuple[DataModel, Field]]:
        """Yield every (model, field) pair in declaration order."""
        for model in self.models:
            for model_field in model.fields:
                yield model, model_field

    def comments_by_field(self) -> Dict[str, List[str]]:
        """Map ``Model.field`` to a copy of its comment list."""
        return {f.qualified_name: list(f.comments) for _, f in self.iter_fields()}
