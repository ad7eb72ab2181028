"""Declaration synthesis from record and sum type metadata.

The derivation step describes each host type as a record (named fields) or a
sum (constructors with an optional payload). This module turns that metadata
into interface and alternatives declarations, resolving field and payload
types through the registry, and wraps it into registry entries so the
declarations are built lazily at lookup time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from tsbridge.bindings import Resolver, TypeBinding, TypeConstructor, element_expression
from tsbridge.declarations import Field, InterfaceDeclaration, TypeAlternatives
from tsbridge.errors import MalformedMetadataError
from tsbridge.options import DEFAULT_JSON_OPTIONS, JSONOptions
from tsbridge.registry import TypeRegistry
from tsbridge.typeids import TypeId, as_type_id, substitute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordField:
    """Metadata for one record field.

    Attributes:
        name: Host field name.
        type_id: Identity of the field's type.
        optional: Explicit optional marker, used when the type itself is not
            optional.
        json_key: Key the encoder writes instead of the (modified) field name.

    """

    name: str
    type_id: TypeId
    optional: bool | None = None
    json_key: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_id", as_type_id(self.type_id))


@dataclass(frozen=True)
class SumCase:
    """One sum type constructor; ``payload=None`` for a nullary constructor."""

    name: str
    payload: TypeId | None = None

    def __post_init__(self) -> None:
        if self.payload is not None:
            object.__setattr__(self, "payload", as_type_id(self.payload))


def _require_name(kind: str, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        msg = f"{kind} name must be a non-empty string, got {value!r}"
        raise MalformedMetadataError(msg)


def _check_type_params(owner: str, type_params: tuple[str, ...]) -> None:
    for param in type_params:
        _require_name("Type parameter", param)
    if len(set(type_params)) != len(type_params):
        msg = f"Duplicate type parameters for '{owner}': {type_params}"
        raise MalformedMetadataError(msg)


def _scoped(resolve: Resolver | None, type_params: tuple[str, ...]) -> Resolver:
    scope = frozenset(type_params)
    if resolve is None:
        return lambda tid, _=None: TypeRegistry.reference(tid, scope)
    return lambda tid, _=None: resolve(tid, scope)


def synthesize_interface(
    name: str,
    fields: Iterable[RecordField],
    type_params: Iterable[str] = (),
    json_options: JSONOptions | None = None,
    *,
    resolve: Resolver | None = None,
) -> InterfaceDeclaration:
    """Build the interface declaration for a record type.

    A field is optional when its type's binding is optional, otherwise when
    its explicit ``optional`` marker says so. Member order follows field order.

    Raises:
        MalformedMetadataError: On empty names or duplicate type parameters.
        UnregisteredTypeError: If a field's type has no registry entry.

    """
    _require_name("Record", name)
    params = tuple(type_params)
    _check_type_params(name, params)
    options = json_options or DEFAULT_JSON_OPTIONS
    lookup = _scoped(resolve, params)

    members: list[Field] = []
    for record_field in fields:
        _require_name("Field", record_field.name)
        binding = lookup(record_field.type_id)
        key = record_field.json_key
        if key is None:
            key = options.field_label_modifier(record_field.name)
        if not key:
            msg = f"Field '{record_field.name}' of '{name}' maps to an empty JSON key"
            raise MalformedMetadataError(msg)
        members.append(
            Field(
                optional=binding.is_optional or bool(record_field.optional),
                name=key,
                type_expression=binding.type_expression,
            ),
        )
    return InterfaceDeclaration(name, params, tuple(members))


def synthesize_alternatives(
    name: str,
    cases: Iterable[SumCase],
    type_params: Iterable[str] = (),
    json_options: JSONOptions | None = None,
    *,
    resolve: Resolver | None = None,
) -> TypeAlternatives:
    """Build the alternatives declaration for a sum type.

    A case with a payload contributes the payload's type expression; a
    nullary case contributes the string literal type of its encoded tag.

    Raises:
        MalformedMetadataError: On empty names, duplicate type parameters or
            a sum without cases.
        UnregisteredTypeError: If a payload type has no registry entry.

    """
    _require_name("Sum type", name)
    params = tuple(type_params)
    _check_type_params(name, params)
    options = json_options or DEFAULT_JSON_OPTIONS
    lookup = _scoped(resolve, params)

    alternatives: list[str] = []
    for case in cases:
        _require_name("Constructor", case.name)
        if case.payload is None:
            alternatives.append(json.dumps(options.constructor_tag_modifier(case.name)))
        else:
            alternatives.append(element_expression(lookup(case.payload)))
    if not alternatives:
        msg = f"Sum type '{name}' has no constructors"
        raise MalformedMetadataError(msg)
    return TypeAlternatives(name, params, tuple(alternatives))


def _reference_expression(
    name: str,
    args: tuple[TypeId, ...],
    resolve: Resolver,
) -> str:
    if not args:
        return name
    rendered = ", ".join(element_expression(resolve(arg)) for arg in args)
    return f"{name}<{rendered}>"


def _parents(
    type_ids: Iterable[TypeId],
    type_params: tuple[str, ...],
    args: tuple[TypeId, ...],
) -> frozenset[str]:
    substitutions = dict(zip(type_params, args, strict=True))
    parents = {str(substitute(tid, substitutions)) for tid in type_ids}
    # Arguments count even when no field uses their parameter.
    return frozenset(parents | {str(arg) for arg in args})


@dataclass(frozen=True)
class RecordDefinition(TypeConstructor):
    """Registry entry for a record type, generic over ``type_params``."""

    shares_declarations: ClassVar[bool] = True

    name: str
    fields: tuple[RecordField, ...]
    type_params: tuple[str, ...] = ()
    json_options: JSONOptions = DEFAULT_JSON_OPTIONS

    @property
    def arity(self) -> int:
        return len(self.type_params)

    def apply(
        self,
        args: tuple[TypeId, ...],
        resolve: Resolver,
        *,
        full: bool,
    ) -> TypeBinding:
        expression = _reference_expression(self.name, args, resolve)
        if not full:
            return TypeBinding(expression)
        declaration = synthesize_interface(
            self.name,
            self.fields,
            self.type_params,
            self.json_options,
            resolve=resolve,
        )
        return TypeBinding(
            expression,
            declarations=(declaration,),
            parent_types=_parents(
                (f.type_id for f in self.fields),
                self.type_params,
                args,
            ),
        )


@dataclass(frozen=True)
class SumDefinition(TypeConstructor):
    """Registry entry for a sum type, generic over ``type_params``."""

    shares_declarations: ClassVar[bool] = True

    name: str
    cases: tuple[SumCase, ...]
    type_params: tuple[str, ...] = ()
    json_options: JSONOptions = DEFAULT_JSON_OPTIONS

    @property
    def arity(self) -> int:
        return len(self.type_params)

    def apply(
        self,
        args: tuple[TypeId, ...],
        resolve: Resolver,
        *,
        full: bool,
    ) -> TypeBinding:
        expression = _reference_expression(self.name, args, resolve)
        if not full:
            return TypeBinding(expression)
        declaration = synthesize_alternatives(
            self.name,
            self.cases,
            self.type_params,
            self.json_options,
            resolve=resolve,
        )
        return TypeBinding(
            expression,
            declarations=(declaration,),
            parent_types=_parents(
                (c.payload for c in self.cases if c.payload is not None),
                self.type_params,
                args,
            ),
        )


def register_record(
    name: str,
    fields: Iterable[RecordField],
    *,
    type_params: Iterable[str] = (),
    json_options: JSONOptions | None = None,
) -> RecordDefinition:
    """Register a record type; its interface is synthesized on lookup."""
    _require_name("Record", name)
    params = tuple(type_params)
    _check_type_params(name, params)
    definition = RecordDefinition(
        name,
        tuple(fields),
        params,
        json_options or DEFAULT_JSON_OPTIONS,
    )
    for record_field in definition.fields:
        _require_name("Field", record_field.name)
    TypeRegistry.register_constructor(definition)
    logger.debug("Registered record %s with %d fields", name, len(definition.fields))
    return definition


def register_sum(
    name: str,
    cases: Iterable[SumCase],
    *,
    type_params: Iterable[str] = (),
    json_options: JSONOptions | None = None,
) -> SumDefinition:
    """Register a sum type; its alternatives are synthesized on lookup."""
    _require_name("Sum type", name)
    params = tuple(type_params)
    _check_type_params(name, params)
    definition = SumDefinition(
        name,
        tuple(cases),
        params,
        json_options or DEFAULT_JSON_OPTIONS,
    )
    if not definition.cases:
        msg = f"Sum type '{name}' has no constructors"
        raise MalformedMetadataError(msg)
    for case in definition.cases:
        _require_name("Constructor", case.name)
    TypeRegistry.register_constructor(definition)
    logger.debug("Registered sum %s with %d cases", name, len(definition.cases))
    return definition
