"""Tests for declaration codecs and the JSON format adapter."""

import json

import pytest

from tsbridge import formats
from tsbridge.builtins import EITHER_DECLARATIONS
from tsbridge.closure import collect_declarations
from tsbridge.codecs import from_builtins, to_builtins
from tsbridge.declarations import Field, InterfaceDeclaration, RawDeclaration, TypeAlternatives
from tsbridge.formats.json import from_json, to_json
from tsbridge.synthesis import RecordField, register_record


class TestToBuiltins:
    """Test converting declarations to builtins."""

    def test_interface(self) -> None:
        """Test interfaces become tagged dicts with member dicts."""
        decl = InterfaceDeclaration("ILeft", ("T",), (Field(False, "Left", "T"),))
        assert to_builtins(decl) == {
            "tag": "interface",
            "name": "ILeft",
            "generic_parameters": ["T"],
            "members": [{"optional": False, "name": "Left", "type_expression": "T"}],
        }

    def test_alternatives_and_raw(self) -> None:
        """Test the other variants."""
        assert to_builtins(TypeAlternatives("Color", (), ('"Red"',))) == {
            "tag": "alternatives",
            "name": "Color",
            "generic_parameters": [],
            "alternatives": ['"Red"'],
        }
        assert to_builtins(RawDeclaration("type Id = string;")) == {
            "tag": "raw",
            "text": "type Id = string;",
        }

    def test_sequence(self) -> None:
        """Test a declaration sequence becomes a list."""
        result = to_builtins(EITHER_DECLARATIONS)
        assert [item["tag"] for item in result] == ["alternatives", "interface", "interface"]

    def test_unsupported(self) -> None:
        """Test non-declaration values are rejected."""
        with pytest.raises(TypeError):
            to_builtins(42)  # type: ignore[arg-type]


class TestFromBuiltins:
    """Test rebuilding declarations from builtins."""

    def test_round_trip_either(self) -> None:
        """Test the Either declarations survive a builtins round trip."""
        assert from_builtins(to_builtins(EITHER_DECLARATIONS)) == EITHER_DECLARATIONS

    def test_single_declaration(self) -> None:
        """Test a dict decodes to one declaration."""
        assert from_builtins({"tag": "raw", "text": "x"}) == RawDeclaration("x")

    def test_missing_tag(self) -> None:
        """Test a dict without tag raises KeyError."""
        with pytest.raises(KeyError):
            from_builtins({"text": "x"})

    def test_unknown_tag(self) -> None:
        """Test an unknown tag raises ValueError."""
        with pytest.raises(ValueError, match="Unknown tag"):
            from_builtins({"tag": "enum", "name": "E"})


class TestJSONFormat:
    """Test the JSON adapter."""

    def test_to_json_is_array(self) -> None:
        """Test declarations serialize to a JSON array."""
        register_record("point", [RecordField("x", "double"), RecordField("label", "maybe[text]")])
        text = to_json(collect_declarations("point"), indent=None)
        assert json.loads(text) == [
            {
                "tag": "interface",
                "name": "point",
                "generic_parameters": [],
                "members": [
                    {"optional": False, "name": "x", "type_expression": "number"},
                    {"optional": True, "name": "label", "type_expression": "string"},
                ],
            },
        ]

    def test_json_round_trip(self) -> None:
        """Test a collected closure survives JSON."""
        register_record("reply", [RecordField("value", "either[int, list[char]]")])
        decls = collect_declarations("reply")
        assert from_json(to_json(decls)) == decls

    def test_package_exports_hand_off(self) -> None:
        """Test the formats package hands a closure to a renderer as tagged objects."""
        register_record("reply", [RecordField("ok", "bool")])
        decls = collect_declarations("reply")
        payload = formats.to_json(decls, indent=None)
        assert json.loads(payload) == [
            {
                "tag": "interface",
                "name": "reply",
                "generic_parameters": [],
                "members": [{"optional": False, "name": "ok", "type_expression": "boolean"}],
            },
        ]
        assert formats.from_json(payload) == decls

    def test_from_json_requires_array(self) -> None:
        """Test a top-level object is rejected."""
        with pytest.raises(ValueError, match="JSON array"):
            from_json('{"tag": "raw", "text": "x"}')
