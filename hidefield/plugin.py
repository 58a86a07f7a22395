#!/usr/bin/env python3
"""Attach @HideField directives to the fields of a schema.

For every field of every model, in declaration order:
- a show attribute is compiled with the inclusive compiler
- otherwise a hide attribute is compiled with the exclusive compiler
- otherwise relations are hidden everywhere and other fields left alone

At most one directive is attached per field. A field that already carries
a @HideField comment is left untouched, so re-running is harmless.

Example:
    >>> summary = apply_visibility(schema)
    >>> summary.hidden_relations
    2
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hidefield.core.constants import DEFAULT_HIDE_ATTRIBUTE, DEFAULT_SHOW_ATTRIBUTE, LOG_TAG
from hidefield.core.logging import Logger, LogLevel, get_logger
from hidefield.rules.contexts import VALID_CONTEXTS, ContextSet, describe, parse_contexts
from hidefield.rules.directives import HIDE_EVERYWHERE, Directive, format_directive, has_directive
from hidefield.rules.engine import compile_hide, compile_show
from hidefield.schema.model import Attribute, AttributeKind, Field, Schema


class DiagnosticKind(Enum):
    """Advisory problems found while processing attributes."""

    UNKNOWN_CONTEXT = "unknown_context"
    VACUOUS_HIDE = "vacuous_hide"


@dataclass(frozen=True)
class Diagnostic:
    """A warning raised for one field."""

    kind: DiagnosticKind
    model: str
    field: str
    message: str


@dataclass
class VisibilitySummary:
    """Counters and diagnostics of one pass over a schema."""

    shown_relations: int = 0
    hidden_relations: int = 0
    hidden_fields: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.shown_relations + self.hidden_relations + self.hidden_fields

    def format(self) -> str:
        """Render the summary block logged at the end of a pass."""
        return (
            f"{LOG_TAG} Processed {self.total} field(s)\n"
            f"   Shown relations:              {self.shown_relations} field(s)\n"
            f"   Hidden relations (default):   {self.hidden_relations} field(s)\n"
            f"   Hidden fields:                {self.hidden_fields} field(s)"
        )


class VisibilityPlugin:
    """Compile visibility attributes of a schema into @HideField comments."""

    def __init__(
        self,
        show_attribute: str = DEFAULT_SHOW_ATTRIBUTE,
        hide_attribute: str = DEFAULT_HIDE_ATTRIBUTE,
        hide_relations_by_default: bool = True,
        logger: Optional[Logger] = None,
    ):
        """Initialize plugin.

        Args:
            show_attribute: Name of the inclusive attribute
            hide_attribute: Name of the exclusive attribute
            hide_relations_by_default: Hide relations that carry no attribute
            logger: Logger for diagnostics and the summary line
        """
        self.show_attribute = show_attribute.lstrip("@")
        self.hide_attribute = hide_attribute.lstrip("@")
        self.hide_relations_by_default = hide_relations_by_default
        self.logger = logger or get_logger()

    def apply(self, schema: Schema) -> VisibilitySummary:
        """Annotate every field of ``schema`` in place.

        Returns:
            Counters and diagnostics for this pass
        """
        summary = VisibilitySummary()

        for model in schema.models:
            with self.logger.add_context(model=model.name):
                for model_field in model.fields:
                    self._process_field(model_field, summary)

        if summary.total > 0:
            self.logger.info(summary.format())

        return summary

    def _process_field(self, model_field: Field, summary: VisibilitySummary) -> None:
        kind, attribute = model_field.visibility_attribute(
            self.show_attribute, self.hide_attribute
        )

        if kind is AttributeKind.SHOW:
            parsed = self._parse(model_field, attribute, summary)
            self._attach(model_field, compile_show(parsed))
            if model_field.is_relation:
                summary.shown_relations += 1
            return

        if kind is AttributeKind.HIDE:
            parsed = self._parse(model_field, attribute, summary)
            directive = compile_hide(parsed)
            if directive is not None:
                self._attach(model_field, directive)
                if not model_field.is_relation:
                    summary.hidden_fields += 1
                return
            self._warn_vacuous_hide(model_field, summary)

        if model_field.is_relation and self.hide_relations_by_default:
            self._attach(model_field, HIDE_EVERYWHERE)
            summary.hidden_relations += 1

    def _parse(
        self, model_field: Field, attribute: Attribute, summary: VisibilitySummary
    ) -> ContextSet:
        parsed = parse_contexts(attribute.args)

        for name in parsed.unknown:
            message = (
                f"{LOG_TAG} Unknown parameter \"{name}\" in @{attribute.bare_name}() "
                f"on {model_field.qualified_name}. Valid: {', '.join(VALID_CONTEXTS)}"
            )
            summary.diagnostics.append(
                Diagnostic(DiagnosticKind.UNKNOWN_CONTEXT, model_field.model, model_field.name, message)
            )
            self.logger.warning(message, field=model_field.name)

        if self.logger.is_enabled_for(LogLevel.DEBUG):
            self.logger.debug(
                f"@{attribute.bare_name}({describe(parsed.contexts)})", field=model_field.name
            )
        return parsed

    def _warn_vacuous_hide(self, model_field: Field, summary: VisibilitySummary) -> None:
        message = (
            f"{LOG_TAG} @{self.hide_attribute}() without contexts on "
            f"{model_field.qualified_name}. Use @{self.hide_attribute}() to hide everywhere "
            f"or @{self.hide_attribute}(query: true, create: true) for specific contexts"
        )
        summary.diagnostics.append(
            Diagnostic(DiagnosticKind.VACUOUS_HIDE, model_field.model, model_field.name, message)
        )
        self.logger.warning(message, field=model_field.name)

    def _attach(self, model_field: Field, directive: Optional[Directive]) -> None:
        comment = format_directive(directive)
        if comment is None or has_directive(model_field.comments):
            return
        model_field.comments.append(comment)


def apply_visibility(
    schema: Schema,
    show_attribute: str = DEFAULT_SHOW_ATTRIBUTE,
    hide_attribute: str = DEFAULT_HIDE_ATTRIBUTE,
    hide_relations_by_default: bool = True,
    logger: Optional[Logger] = None,
) -> VisibilitySummary:
    """Annotate ``schema`` in place and return the pass summary."""
    plugin = VisibilityPlugin(
        show_attribute=show_attribute,
        hide_attribute=hide_attribute,
        hide_relations_by_default=hide_relations_by_default,
        logger=logger,
    )
    return plugin.apply(schema)
