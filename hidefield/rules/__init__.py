"""HideField Rules System.

This module turns visibility attributes into @HideField directives:
- Context / ContextSet: the four visibility contexts and their parsing
- Fragment: match-pattern fragments for generated DTO type names
- SimpleDirective / PatternDirective: compiled exclusion directives
- compile_show / compile_hide: the inclusive and exclusive compilers
"""

from .contexts import ALL_CONTEXTS, VALID_CONTEXTS, Context, ContextSet, normalize, parse_contexts
from .directives import (
    HIDE_EVERYWHERE,
    HIDE_OUTPUT,
    Directive,
    PatternDirective,
    SimpleDirective,
    format_directive,
    has_directive,
)
from .engine import compile_exclusive, compile_hide, compile_inclusive, compile_show
from .patterns import Fragment, join_fragments

__all__ = [
    # Contexts
    "Context",
    "ContextSet",
    "VALID_CONTEXTS",
    "ALL_CONTEXTS",
    "normalize",
    "parse_contexts",
    # Patterns
    "Fragment",
    "join_fragments",
    # Directives
    "Directive",
    "SimpleDirective",
    "PatternDirective",
    "HIDE_EVERYWHERE",
    "HIDE_OUTPUT",
    "format_directive",
    "has_directive",
    # Compilers
    "compile_inclusive",
    "compile_exclusive",
    "compile_show",
    "compile_hide",
]
