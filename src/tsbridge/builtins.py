"""Built-in bindings for primitives and the standard containers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from tsbridge.bindings import (
    Resolver,
    SpecialTag,
    TypeBinding,
    TypeConstructor,
    array_of,
    element_expression,
)
from tsbridge.declarations import Field, InterfaceDeclaration, TypeAlternatives
from tsbridge.typeids import TypeId

STRING = TypeBinding("string")
NUMBER = TypeBinding("number")
BOOLEAN = TypeBinding("boolean")
CHARACTER = TypeBinding("string", special_tag=SpecialTag.CHARACTER)
ANY = TypeBinding("any")

PRIMITIVES: dict[str, TypeBinding] = {
    "text": STRING,
    "string": STRING,
    "integer": NUMBER,
    "int": NUMBER,
    "int8": NUMBER,
    "int16": NUMBER,
    "int32": NUMBER,
    "int64": NUMBER,
    "word": NUMBER,
    "float": NUMBER,
    "double": NUMBER,
    "scientific": NUMBER,
    "bool": BOOLEAN,
    "char": CHARACTER,
    "value": ANY,
}

# Left/Right are the tag keys the host encoder writes for Either values.
EITHER_DECLARATIONS = (
    TypeAlternatives("Either", ("T1", "T2"), ("ILeft<T1>", "IRight<T2>")),
    InterfaceDeclaration("ILeft", ("T",), (Field(False, "Left", "T"),)),
    InterfaceDeclaration("IRight", ("T",), (Field(False, "Right", "T"),)),
)


@dataclass(frozen=True)
class BuiltinConstructor(TypeConstructor):
    """Constructor whose binding depends only on its arguments' references."""

    name: str
    arity: int
    build: Callable[[tuple[TypeBinding, ...]], TypeBinding]

    def apply(
        self,
        args: tuple[TypeId, ...],
        resolve: Resolver,
        *,
        full: bool,
    ) -> TypeBinding:
        binding = self.build(tuple(resolve(arg) for arg in args))
        if not full:
            return binding.as_reference()
        return replace(
            binding,
            parent_types=binding.parent_types | {str(arg) for arg in args},
        )


def _list(args: tuple[TypeBinding, ...]) -> TypeBinding:
    (element,) = args
    if element.special_tag is SpecialTag.CHARACTER and not element.is_optional:
        return STRING
    return TypeBinding(array_of(element))


def _set(args: tuple[TypeBinding, ...]) -> TypeBinding:
    # Sets encode as JSON arrays; the character collapse is list-only.
    (element,) = args
    return TypeBinding(array_of(element))


def _maybe(args: tuple[TypeBinding, ...]) -> TypeBinding:
    (inner,) = args
    return TypeBinding(element_expression(inner), is_optional=True)


def _tuple(args: tuple[TypeBinding, ...]) -> TypeBinding:
    return TypeBinding(f"[{', '.join(element_expression(arg) for arg in args)}]")


def _either(args: tuple[TypeBinding, ...]) -> TypeBinding:
    left, right = args
    return TypeBinding(
        f"Either<{element_expression(left)}, {element_expression(right)}>",
        declarations=EITHER_DECLARATIONS,
    )


CONSTRUCTORS: tuple[BuiltinConstructor, ...] = (
    BuiltinConstructor("list", 1, _list),
    BuiltinConstructor("set", 1, _set),
    BuiltinConstructor("maybe", 1, _maybe),
    BuiltinConstructor("tuple", 2, _tuple),
    BuiltinConstructor("tuple", 3, _tuple),
    BuiltinConstructor("either", 2, _either),
)
