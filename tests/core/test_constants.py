"""Tests for constants and configuration defaults."""
import pytest

from hidefield.core.constants import (
    COMMENT_PREFIX,
    DEFAULT_CONFIG,
    DEFAULT_HIDE_ATTRIBUTE,
    DEFAULT_SHOW_ATTRIBUTE,
    HIDE_FIELD_MARKER,
    HIDEFIELD_VERSION,
    OUTPUT_FORMATS,
    ConfigKey,
    ErrorCode,
)


class TestErrorCodes:
    """Test error code definitions."""

    def test_error_codes_unique(self):
        """All error codes must have unique values."""
        codes = [e.value for e in ErrorCode]
        assert len(codes) == len(set(codes))

    def test_success_is_zero(self):
        """SUCCESS code must be 0 for exit status compatibility."""
        assert ErrorCode.SUCCESS == 0

    def test_error_codes_in_range(self):
        """All error codes must be in 0-9 range."""
        for code in ErrorCode:
            assert 0 <= code.value <= 9


class TestCommentSyntax:
    """Test the fixed tokens of the downstream comment syntax."""

    def test_comment_prefix(self):
        assert COMMENT_PREFIX == "///"

    def test_marker(self):
        assert HIDE_FIELD_MARKER == "@HideField"


class TestDefaults:
    """Test default configuration values."""

    def test_version_format(self):
        """Version is a dotted triple."""
        assert len(HIDEFIELD_VERSION.split(".")) == 3

    def test_default_attribute_names(self):
        assert DEFAULT_SHOW_ATTRIBUTE == "graphql.show"
        assert DEFAULT_HIDE_ATTRIBUTE == "graphql.hide"

    def test_default_config_attributes(self):
        attributes = DEFAULT_CONFIG[ConfigKey.ATTRIBUTES]
        assert attributes[ConfigKey.SHOW] == DEFAULT_SHOW_ATTRIBUTE
        assert attributes[ConfigKey.HIDE] == DEFAULT_HIDE_ATTRIBUTE

    def test_relations_hidden_by_default(self):
        assert DEFAULT_CONFIG[ConfigKey.RELATIONS][ConfigKey.HIDE_BY_DEFAULT] is True

    @pytest.mark.parametrize("fmt", ["yaml", "prisma"])
    def test_output_formats(self, fmt):
        assert fmt in OUTPUT_FORMATS

    def test_default_output_format_is_known(self):
        assert DEFAULT_CONFIG[ConfigKey.OUTPUT][ConfigKey.FORMAT] in OUTPUT_FORMATS
