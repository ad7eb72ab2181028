"""Tests for tsbridge.declarations module."""

import pytest

from tsbridge.declarations import (
    Declaration,
    Field,
    InterfaceDeclaration,
    RawDeclaration,
    TypeAlternatives,
)


class TestDeclarationTags:
    """Test variant tag registration."""

    def test_builtin_tags(self) -> None:
        """Test each variant registers under its tag."""
        assert InterfaceDeclaration.tag == "interface"
        assert TypeAlternatives.tag == "alternatives"
        assert RawDeclaration.tag == "raw"
        assert Declaration.registry["interface"] is InterfaceDeclaration

    def test_duplicate_tag_rejected(self) -> None:
        """Test a second variant cannot reuse a registered tag."""
        with pytest.raises(ValueError, match="already registered"):

            class Shadow(Declaration, tag="raw"):
                text: str

        assert Declaration.registry["raw"] is RawDeclaration


class TestStructuralEquality:
    """Test declarations behave as values."""

    def test_equal_when_fields_equal(self) -> None:
        """Test separately built declarations compare and hash equal."""
        a = InterfaceDeclaration("Point", (), (Field(False, "x", "number"),))
        b = InterfaceDeclaration("Point", (), (Field(False, "x", "number"),))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_variants_never_equal(self) -> None:
        """Test an interface and alternatives with the same name differ."""
        assert InterfaceDeclaration("Shape") != TypeAlternatives("Shape")

    def test_member_order_matters(self) -> None:
        """Test members are compared in order."""
        x = Field(False, "x", "number")
        y = Field(False, "y", "number")
        assert InterfaceDeclaration("P", (), (x, y)) != InterfaceDeclaration("P", (), (y, x))

    def test_frozen(self) -> None:
        """Test declarations are immutable."""
        decl = RawDeclaration("type Id = string;")
        with pytest.raises((AttributeError, TypeError)):
            decl.text = "other"  # type: ignore[misc]


class TestOrdering:
    """Test total ordering across variants."""

    def test_sorted_by_tag_then_fields(self) -> None:
        """Test sorting groups by variant tag, then by field values."""
        decls = [
            RawDeclaration("type Id = string;"),
            InterfaceDeclaration("B"),
            InterfaceDeclaration("A"),
            TypeAlternatives("E", (), ("number",)),
        ]
        assert sorted(decls) == [
            TypeAlternatives("E", (), ("number",)),
            InterfaceDeclaration("A"),
            InterfaceDeclaration("B"),
            RawDeclaration("type Id = string;"),
        ]

    def test_field_ordering(self) -> None:
        """Test fields order by optional flag, then name, then type."""
        assert Field(False, "b", "string") < Field(True, "a", "string")
        assert Field(False, "a", "string") < Field(False, "b", "number")
