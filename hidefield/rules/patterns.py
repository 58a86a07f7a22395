#!/usr/bin/env python3
"""Match-pattern fragments for @HideField directives.

Each fragment selects a family of generated DTO type names. Several
fragments are combined with the extglob alternation ``@(a|b)``; a single
fragment is emitted bare. Patterns are only emitted here, never evaluated.

Example:
    >>> join_fragments([Fragment.CREATE_INPUT, Fragment.UPDATE_INPUT])
    '@(*(*Create*Input)|*(*Update*Input))'
"""

from enum import Enum
from typing import Iterable


class Fragment(Enum):
    """A type-name fragment understood by the downstream generator."""

    WHERE_INPUT = "*(Where*Input)"  # Filters
    ORDER_BY_INPUT = "*(*OrderBy*Input)"  # Sort order
    CREATE_INPUT = "*(*Create*Input)"  # Create forms
    UPDATE_INPUT = "*(*Update*Input)"  # Update forms
    OUTPUT = "(Output)"  # Query results, mixed hide case only

    @property
    def output_coupled(self) -> bool:
        """Whether the fragment only exists alongside query output."""
        return self in (Fragment.WHERE_INPUT, Fragment.ORDER_BY_INPUT)


def join_fragments(fragments: Iterable[Fragment]) -> str:
    """Combine fragments into one match expression.

    Args:
        fragments: Fragments in emission order

    Returns:
        The bare fragment, or ``@(f1|f2|...)`` for more than one

    Raises:
        ValueError: If no fragment is given
    """
    values = [fragment.value for fragment in fragments]
    if not values:
        raise ValueError("At least one fragment is required")
    if len(values) == 1:
        return values[0]
    return f"@({'|'.join(values)})"
