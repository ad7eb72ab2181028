"""Tests for tsbridge.options module."""

import pytest

from tsbridge.options import (
    DEFAULT_FORMATTING_OPTIONS,
    DEFAULT_JSON_OPTIONS,
    FormattingOptions,
)


class TestFormattingOptions:
    """Test renderer options."""

    def test_defaults(self) -> None:
        """Test two-space indent and identity name modifiers."""
        assert DEFAULT_FORMATTING_OPTIONS.indent_width == 2
        assert DEFAULT_FORMATTING_OPTIONS.indent == "  "
        assert DEFAULT_FORMATTING_OPTIONS.interface_name("Point") == "Point"
        assert DEFAULT_FORMATTING_OPTIONS.type_name("Shape") == "Shape"

    def test_name_modifiers(self) -> None:
        """Test interface and type modifiers are applied separately."""
        options = FormattingOptions(
            indent_width=4,
            interface_name_modifier=lambda name: f"I{name}",
            type_name_modifier=str.upper,
        )
        assert options.indent == "    "
        assert options.interface_name("Point") == "IPoint"
        assert options.type_name("Shape") == "SHAPE"

    def test_negative_indent_rejected(self) -> None:
        """Test a negative indent width is a ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            FormattingOptions(indent_width=-1)

    @pytest.mark.parametrize("width", [2.0, "2", True])
    def test_non_int_indent_rejected(self, width: object) -> None:
        """Test a non-int indent width is a TypeError."""
        with pytest.raises(TypeError):
            FormattingOptions(indent_width=width)  # type: ignore[arg-type]


class TestJSONOptions:
    """Test host encoding options."""

    def test_defaults_are_identity(self) -> None:
        """Test default modifiers leave names untouched."""
        assert DEFAULT_JSON_OPTIONS.field_label_modifier("userName") == "userName"
        assert DEFAULT_JSON_OPTIONS.constructor_tag_modifier("Red") == "Red"
