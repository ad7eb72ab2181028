"""Top-level TypeScript declaration records.

Declarations are plain values: two declarations built separately with the
same fields compare equal and hash alike, which is what lets the closure
collector suppress duplicates.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from functools import total_ordering
from typing import Any, ClassVar, dataclass_transform


@dataclass(frozen=True, order=True)
class Field:
    """One interface member: ``name?: type_expression``."""

    optional: bool
    name: str
    type_expression: str


@total_ordering
@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class Declaration:
    """Base for declaration variants, registered by tag."""

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[Declaration]]] = {}

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Register declaration subclass under its tag."""
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__.lower()

        if (existing := Declaration.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        Declaration.registry[cls.tag] = cls

    def sort_key(self) -> tuple[Any, ...]:
        return (self.tag, astuple(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class InterfaceDeclaration(Declaration, tag="interface"):
    """A structural record: ``interface Name<T> { members }``."""

    name: str
    generic_parameters: tuple[str, ...] = ()
    members: tuple[Field, ...] = ()


class TypeAlternatives(Declaration, tag="alternatives"):
    """A tagged union: ``type Name<T> = A | B``."""

    name: str
    generic_parameters: tuple[str, ...] = ()
    alternatives: tuple[str, ...] = ()


class RawDeclaration(Declaration, tag="raw"):
    """Hand-written declaration text, emitted as is."""

    text: str
