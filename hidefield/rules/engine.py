#!/usr/bin/env python3
"""Compile visibility contexts into exclusion directives.

Two attribute forms are supported:
- show: the contexts where the field stays visible (inclusive form)
- hide: the contexts where the field is removed (exclusive form)

The two forms are derived independently. Hiding ``query`` also hides the
filter and sort-order inputs, while showing ``read`` without ``query``
only needs the filter input excluded.

Example:
    >>> compile_inclusive({Context.QUERY})
    PatternDirective(fragments=(<Fragment.CREATE_INPUT: ...>, <Fragment.UPDATE_INPUT: ...>))
    >>> compile_exclusive({Context.READ})
    SimpleDirective(input=False, output=True)
"""

from typing import AbstractSet, List, Optional

from hidefield.rules.contexts import Context, ContextSet, normalize
from hidefield.rules.directives import (
    HIDE_EVERYWHERE,
    HIDE_OUTPUT,
    Directive,
    PatternDirective,
)
from hidefield.rules.patterns import Fragment


def compile_inclusive(shown: AbstractSet[Context]) -> Optional[Directive]:
    """Derive the directive for a field visible only in ``shown``.

    Args:
        shown: Contexts where the field must remain visible

    Returns:
        Directive hiding the field everywhere else, or None if it is
        visible everywhere (including when ``shown`` is empty)
    """
    shown = normalize(shown)
    if not shown:
        return None

    has_query = Context.QUERY in shown
    has_read = Context.READ in shown
    has_create = Context.CREATE in shown
    has_update = Context.UPDATE in shown

    hide_output = not has_query and not has_read
    hide_filters = has_read and not has_query

    fragments: List[Fragment] = []
    if hide_filters:
        fragments.append(Fragment.WHERE_INPUT)
    if not has_create:
        fragments.append(Fragment.CREATE_INPUT)
    if not has_update:
        fragments.append(Fragment.UPDATE_INPUT)

    if not hide_output and has_create and has_update and not hide_filters:
        return None

    # Only the output is missing
    if hide_output and has_create and has_update:
        return HIDE_OUTPUT

    return PatternDirective(tuple(fragments))


def compile_exclusive(hidden: AbstractSet[Context]) -> Optional[Directive]:
    """Derive the directive for a field removed from ``hidden``.

    Args:
        hidden: Contexts where the field must be excluded

    Returns:
        Directive for those contexts, or None when ``hidden`` is empty
    """
    hidden = normalize(hidden)
    if not hidden:
        return None

    has_query = Context.QUERY in hidden
    has_read = Context.READ in hidden
    has_create = Context.CREATE in hidden
    has_update = Context.UPDATE in hidden

    hide_output = has_query or has_read

    fragments: List[Fragment] = []
    if has_query:
        fragments.append(Fragment.WHERE_INPUT)
        fragments.append(Fragment.ORDER_BY_INPUT)
    if has_create:
        fragments.append(Fragment.CREATE_INPUT)
    if has_update:
        fragments.append(Fragment.UPDATE_INPUT)

    if hide_output and has_create and has_update and Fragment.WHERE_INPUT in fragments:
        return HIDE_EVERYWHERE

    if hide_output and not has_create and not has_update:
        return HIDE_OUTPUT

    if not hide_output:
        return PatternDirective(tuple(fragments))

    # Output plus some inputs: filters and sort order go away with the output
    remaining = tuple(fragment for fragment in fragments if not fragment.output_coupled)
    return PatternDirective(remaining + (Fragment.OUTPUT,))


def compile_show(parsed: ContextSet) -> Optional[Directive]:
    """Compile a parsed show attribute.

    ``show()`` without arguments, or with no flag set to true, leaves the
    field visible everywhere.
    """
    if not parsed.explicit:
        return None
    return compile_inclusive(parsed.contexts)


def compile_hide(parsed: ContextSet) -> Optional[Directive]:
    """Compile a parsed hide attribute.

    ``hide()`` without arguments hides the field everywhere. With arguments
    but no flag set to true the result is None, which callers report.
    """
    if not parsed.explicit:
        return HIDE_EVERYWHERE
    return compile_exclusive(parsed.contexts)
