#!/usr/bin/env python3
"""Visibility contexts and their parsing from attribute arguments.

A visibility attribute names the contexts a field applies to:
- query: query results plus filters (output + WhereInput)
- read: query results only (output, no WhereInput)
- create: create forms (CreateInput)
- update: update forms (UpdateInput)

Example:
    >>> parsed = parse_contexts([AttributeArg("query", Literal.boolean(True))])
    >>> parsed.contexts
    frozenset({<Context.QUERY: 'query'>})
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, FrozenSet, Iterable, Sequence, Tuple

from hidefield.schema.model import AttributeArg


class Context(Enum):
    """A surface of the generated GraphQL API a field can appear on."""

    QUERY = "query"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"


VALID_CONTEXTS: Tuple[str, ...] = tuple(c.value for c in Context)

ALL_CONTEXTS: FrozenSet[Context] = frozenset(Context)


def normalize(contexts: Iterable[Context]) -> FrozenSet[Context]:
    """Apply the query/read precedence rule.

    ``query`` covers everything ``read`` does plus filters, so ``read`` is
    dropped whenever both are present.
    """
    result = frozenset(contexts)
    if Context.QUERY in result and Context.READ in result:
        result = result - {Context.READ}
    return result


@dataclass(frozen=True)
class ContextSet:
    """Contexts parsed from one attribute invocation.

    Attributes:
        contexts: Contexts whose flag was literally ``true``
        explicit: Whether the invocation carried any arguments at all
        unknown: Argument names that are not a known context, in order
    """

    contexts: FrozenSet[Context] = frozenset()
    explicit: bool = False
    unknown: Tuple[str, ...] = ()


def parse_contexts(args: Sequence[AttributeArg]) -> ContextSet:
    """Extract contexts from attribute arguments.

    Only arguments whose literal value is boolean ``true`` contribute;
    ``false`` and non-boolean values are ignored. Unknown names are
    collected so the caller can report them.

    Args:
        args: Arguments of the attribute invocation, in source order

    Returns:
        Parsed context set
    """
    if not args:
        return ContextSet()

    contexts = set()
    unknown = []

    for arg in args:
        if arg.name not in VALID_CONTEXTS:
            unknown.append(arg.name)
            continue

        if arg.value.is_true():
            contexts.add(Context(arg.name))

    return ContextSet(contexts=frozenset(contexts), explicit=True, unknown=tuple(unknown))


def describe(contexts: AbstractSet[Context]) -> str:
    """Render contexts in declaration order, e.g. ``query, create``."""
    return ", ".join(c.value for c in Context if c in contexts)
