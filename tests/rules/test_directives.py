"""Tests for exclusion directives and their rendering."""
import pytest

from hidefield.rules.directives import (
    HIDE_EVERYWHERE,
    HIDE_OUTPUT,
    PatternDirective,
    SimpleDirective,
    format_directive,
    has_directive,
)
from hidefield.rules.patterns import Fragment


class TestFormatDirective:
    """Tests for format_directive."""

    def test_none_renders_nothing(self):
        assert format_directive(None) is None

    def test_hide_everywhere(self):
        assert format_directive(HIDE_EVERYWHERE) == "/// @HideField({ input: true, output: true })"

    def test_hide_output(self):
        assert format_directive(HIDE_OUTPUT) == "/// @HideField({ input: false, output: true })"

    def test_input_only(self):
        assert format_directive(SimpleDirective(input=True)) == "/// @HideField({ input: true })"

    def test_output_only(self):
        assert format_directive(SimpleDirective(output=False)) == "/// @HideField({ output: false })"

    def test_empty_simple_hides_everywhere(self):
        assert format_directive(SimpleDirective()) == "/// @HideField({ input: true, output: true })"

    def test_single_fragment_pattern(self):
        directive = PatternDirective((Fragment.UPDATE_INPUT,))
        assert format_directive(directive) == "/// @HideField({ match: '*(*Update*Input)' })"

    def test_alternation_pattern(self):
        directive = PatternDirective(
            (Fragment.WHERE_INPUT, Fragment.CREATE_INPUT, Fragment.UPDATE_INPUT)
        )
        assert (
            format_directive(directive)
            == "/// @HideField({ match: '@(*(Where*Input)|*(*Create*Input)|*(*Update*Input))' })"
        )


class TestPatternDirective:
    """Tests for PatternDirective."""

    def test_expression(self):
        directive = PatternDirective((Fragment.CREATE_INPUT, Fragment.OUTPUT))
        assert directive.expression == "@(*(*Create*Input)|(Output))"

    def test_requires_fragments(self):
        with pytest.raises(ValueError):
            PatternDirective(())

    def test_equality(self):
        assert PatternDirective((Fragment.CREATE_INPUT,)) == PatternDirective(
            (Fragment.CREATE_INPUT,)
        )


class TestHasDirective:
    """Tests for has_directive."""

    def test_empty(self):
        assert has_directive([]) is False

    def test_other_comments(self):
        assert has_directive(["/// The author of the book"]) is False

    def test_existing_directive(self):
        assert has_directive(["/// doc", "/// @HideField({ output: true })"]) is True
