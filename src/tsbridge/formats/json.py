"""JSON format adapter."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import cast

from tsbridge.codecs import from_builtins, to_builtins
from tsbridge.declarations import Declaration


def to_json(declarations: Sequence[Declaration], *, indent: int | None = 2) -> str:
    """Serialize a sequence of declarations to a JSON array.

    Args:
        declarations: Declarations to serialize, in emission order
        indent: JSON indentation level (default 2, None for compact)

    Returns:
        JSON string representation

    """
    return json.dumps(to_builtins(declarations), indent=indent)


def from_json(s: str) -> tuple[Declaration, ...]:
    """Deserialize a JSON array back into declarations.

    Raises:
        ValueError: If the JSON is not an array of tagged declarations
        KeyError: If a declaration is missing its 'tag' field

    """
    data = json.loads(s)
    if not isinstance(data, list):
        msg = "Expected a JSON array of declarations"
        raise ValueError(msg)
    return cast("tuple[Declaration, ...]", from_builtins(data))
