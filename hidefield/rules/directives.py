#!/usr/bin/env python3
"""Exclusion directives and their @HideField rendering.

A compiled directive is one of:
- SimpleDirective: coarse input/output switches
- PatternDirective: a match pattern over generated type names
- None: nothing to hide, no comment is emitted

Example:
    >>> format_directive(SimpleDirective(input=False, output=True))
    '/// @HideField({ input: false, output: true })'
    >>> format_directive(PatternDirective((Fragment.CREATE_INPUT,)))
    "/// @HideField({ match: '*(*Create*Input)' })"
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from hidefield.core.constants import COMMENT_PREFIX, HIDE_FIELD_MARKER
from hidefield.rules.patterns import Fragment, join_fragments


@dataclass(frozen=True)
class SimpleDirective:
    """Hide a field from all inputs and/or all outputs."""

    input: Optional[bool] = None
    output: Optional[bool] = None


@dataclass(frozen=True)
class PatternDirective:
    """Hide a field from the type names matched by its fragments."""

    fragments: Tuple[Fragment, ...]

    def __post_init__(self):
        if not self.fragments:
            raise ValueError("PatternDirective needs at least one fragment")

    @property
    def expression(self) -> str:
        return join_fragments(self.fragments)


Directive = Union[SimpleDirective, PatternDirective]

HIDE_EVERYWHERE = SimpleDirective(input=True, output=True)
HIDE_OUTPUT = SimpleDirective(input=False, output=True)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def format_directive(directive: Optional[Directive]) -> Optional[str]:
    """Render a directive as a ``/// @HideField(...)`` comment.

    Args:
        directive: Compiled directive, or None

    Returns:
        The comment text, or None when there is nothing to hide
    """
    if directive is None:
        return None

    if isinstance(directive, PatternDirective):
        return f"{COMMENT_PREFIX} {HIDE_FIELD_MARKER}({{ match: '{directive.expression}' }})"

    parts: List[str] = []
    if directive.input is not None:
        parts.append(f"input: {_bool(directive.input)}")
    if directive.output is not None:
        parts.append(f"output: {_bool(directive.output)}")

    # No switch set means hide everywhere
    if not parts:
        parts = ["input: true", "output: true"]

    return f"{COMMENT_PREFIX} {HIDE_FIELD_MARKER}({{ {', '.join(parts)} }})"


def has_directive(comments: List[str]) -> bool:
    """Check whether a comment list already carries a @HideField directive."""
    return any(HIDE_FIELD_MARKER in comment for comment in comments)
