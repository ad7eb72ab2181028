"""Options shared with the derivation step and the renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def _identity(name: str) -> str:
    return name


@dataclass(frozen=True)
class FormattingOptions:
    """Rendering options handed to the declaration renderer.

    Name modifiers are applied at render time only. Generation and closure
    collection always work on the untransformed names.
    """

    indent_width: int = 2
    interface_name_modifier: Callable[[str], str] = _identity
    type_name_modifier: Callable[[str], str] = _identity

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            msg = f"indent_width must be an int, got {type(self.indent_width).__name__}"
            raise TypeError(msg)
        if self.indent_width < 0:
            msg = f"indent_width must be non-negative, got {self.indent_width}"
            raise ValueError(msg)

    @property
    def indent(self) -> str:
        return " " * self.indent_width

    def interface_name(self, name: str) -> str:
        return self.interface_name_modifier(name)

    def type_name(self, name: str) -> str:
        return self.type_name_modifier(name)


@dataclass(frozen=True)
class JSONOptions:
    """How the host encoder names things on the wire.

    Attributes:
        field_label_modifier: Maps a host field name to its JSON key.
        constructor_tag_modifier: Maps a nullary constructor name to the
            string the encoder writes for it.

    """

    field_label_modifier: Callable[[str], str] = _identity
    constructor_tag_modifier: Callable[[str], str] = _identity


DEFAULT_FORMATTING_OPTIONS = FormattingOptions()
DEFAULT_JSON_OPTIONS = JSONOptions()
