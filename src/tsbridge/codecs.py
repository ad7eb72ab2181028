"""Conversion of declarations to and from JSON-compatible builtins.

Declarations are tagged dicts: ``{"tag": "<variant tag>", ...fields}``.
Members are plain dicts of their fields. Tuples become lists.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from tsbridge.declarations import Declaration, Field

_TAG_KEY = "tag"


def to_builtins(obj: Declaration | Field | Sequence[Declaration]) -> Any:
    """Convert declarations to JSON-compatible Python builtins."""
    if isinstance(obj, Declaration):
        result: dict[str, Any] = {_TAG_KEY: obj.tag}
        for f in fields(obj):
            result[f.name] = to_builtins(getattr(obj, f.name))
        return result

    if isinstance(obj, Field):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}

    if isinstance(obj, str):
        return obj

    if isinstance(obj, Sequence):
        return [to_builtins(item) for item in obj]

    msg = f"Cannot convert {type(obj).__name__} to builtins"
    raise TypeError(msg)


def from_builtins(data: Any) -> Declaration | tuple[Declaration, ...]:
    """Rebuild a declaration, or a tuple of them from a list.

    Raises:
        KeyError: If a declaration dict has no 'tag' field.
        ValueError: If the tag is unknown.

    """
    if isinstance(data, list):
        return tuple(_deserialize_declaration(item) for item in data)
    return _deserialize_declaration(data)


def _deserialize_declaration(data: Any) -> Declaration:
    if not isinstance(data, dict):
        msg = f"Expected a declaration object, got {type(data).__name__}"
        raise ValueError(msg)
    if _TAG_KEY not in data:
        msg = f"Missing required '{_TAG_KEY}' field"
        raise KeyError(msg)
    tag = data[_TAG_KEY]
    declaration_cls = Declaration.registry.get(tag)
    if declaration_cls is None:
        msg = f"Unknown tag '{tag}'"
        raise ValueError(msg)

    field_values: dict[str, Any] = {}
    for f in fields(declaration_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "members":
            value = tuple(Field(**member) for member in value)
        elif isinstance(value, list):
            value = tuple(value)
        field_values[f.name] = value
    return declaration_cls(**field_values)
