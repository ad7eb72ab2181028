"""Registry entries: bindings for concrete types and constructors for applied ones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Protocol

from tsbridge.declarations import Declaration
from tsbridge.typeids import TypeId


class SpecialTag(Enum):
    """Out-of-band metadata that changes how containers compose a type."""

    CHARACTER = "character"


@dataclass(frozen=True)
class TypeBinding:
    """How one host type maps to TypeScript.

    Attributes:
        type_expression: Rendered reference to the type, e.g. ``"string[]"``.
        declarations: Top-level declarations the type needs to exist.
        is_optional: Mark fields of this type with ``?`` instead of widening
            the expression.
        special_tag: Composition hint for enclosing containers.
        parent_types: Canonical ids of the types this one depends on. Only the
            closure collector follows them.

    """

    type_expression: str
    declarations: tuple[Declaration, ...] = ()
    is_optional: bool = False
    special_tag: SpecialTag | None = None
    parent_types: frozenset[str] = field(default_factory=frozenset)

    def as_reference(self) -> TypeBinding:
        """Drop declarations and parents, keeping what a reference needs."""
        return TypeBinding(
            type_expression=self.type_expression,
            is_optional=self.is_optional,
            special_tag=self.special_tag,
        )


class Resolver(Protocol):
    """Resolves a type id to a reference binding.

    Type variables resolve in the caller's scope unless ``type_params``
    names a different set.
    """

    def __call__(
        self,
        type_id: TypeId,
        type_params: frozenset[str] | None = None,
    ) -> TypeBinding: ...


class TypeConstructor(ABC):
    """Builds bindings for applied identities ``name[arg, ...]`` of one arity.

    ``resolve`` hands back reference bindings for arguments (no declarations),
    so a constructor can only depend on its arguments' expressions, optional
    flags and special tags. Their declarations are reached through
    ``parent_types``.

    A constructor that sets ``shares_declarations`` emits the same
    declarations for every application, so the closure collector needs to
    expand only one of them.
    """

    shares_declarations: ClassVar[bool] = False

    name: str
    arity: int

    @abstractmethod
    def apply(
        self,
        args: tuple[TypeId, ...],
        resolve: Resolver,
        *,
        full: bool,
    ) -> TypeBinding:
        """Build the binding for ``name[args]``.

        When ``full`` is False only the reference part has to be correct and
        the constructor should skip building declarations.
        """
        ...


def element_expression(binding: TypeBinding) -> str:
    """Expression for a binding used inside another type.

    Optionality only becomes ``?`` at the field level; anywhere else an
    optional type is the value or ``null``.
    """
    if binding.is_optional:
        return f"{binding.type_expression} | null"
    return binding.type_expression


def array_of(binding: TypeBinding) -> str:
    """``T[]``, parenthesising unions so the suffix binds to the whole type."""
    expression = element_expression(binding)
    if " | " in expression:
        expression = f"({expression})"
    return f"{expression}[]"
