"""Process-wide registry mapping host type identities to TypeScript bindings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar

from tsbridge import builtins
from tsbridge.bindings import TypeBinding, TypeConstructor
from tsbridge.errors import ConflictingBindingError, UnregisteredTypeError
from tsbridge.typeids import TypeId, TypeLike, as_type_id

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Registry of bindings and type constructors.

    Exact bindings are keyed by canonical type id text, constructors by
    ``(name, arity)``. Lookups check exact bindings first, so a specific
    instantiation such as ``list[point]`` can override its constructor.

    The registry is filled once, before any generation runs, and only read
    afterwards. Registration is idempotent: registering an equal entry again
    is a no-op, registering a different one is an error.

    Usage:
        TypeRegistry.register("utc_time", TypeBinding("string"))
        TypeRegistry.lookup("list[utc_time]").type_expression  # "string[]"
    """

    _bindings: ClassVar[dict[str, TypeBinding]] = {}
    _constructors: ClassVar[dict[tuple[str, int], TypeConstructor]] = {}

    @classmethod
    def register(cls, type_id: TypeLike, binding: TypeBinding) -> None:
        """Bind an exact type identity.

        Raises:
            ConflictingBindingError: If a different binding is already
                registered for the identity, or a nullary constructor such
                as a record already claims it.

        """
        tid = as_type_id(type_id)
        key = str(tid)
        claimed = cls._constructors.get((tid.head, 0)) if not tid.args else None
        if claimed is not None:
            raise ConflictingBindingError(key, claimed, binding)
        existing = cls._bindings.get(key)
        if existing is not None:
            if existing != binding:
                raise ConflictingBindingError(key, existing, binding)
            return
        cls._bindings[key] = binding
        logger.debug("Registered binding %s -> %s", key, binding.type_expression)

    @classmethod
    def register_constructor(cls, constructor: TypeConstructor) -> None:
        """Bind a constructor for every identity ``name[...]`` of its arity.

        Raises:
            ConflictingBindingError: If a different constructor is already
                registered for the same name and arity, or a nullary
                constructor's name already has an exact binding.

        """
        key = (constructor.name, constructor.arity)
        claimed = cls._bindings.get(constructor.name) if not constructor.arity else None
        if claimed is not None:
            raise ConflictingBindingError(constructor.name, claimed, constructor)
        existing = cls._constructors.get(key)
        if existing is not None:
            if existing != constructor:
                raise ConflictingBindingError(
                    f"{constructor.name}/{constructor.arity}",
                    existing,
                    constructor,
                )
            return
        cls._constructors[key] = constructor
        logger.debug("Registered constructor %s/%d", *key)

    @classmethod
    def lookup(cls, type_id: TypeLike) -> TypeBinding:
        """Full binding for a type, declarations included.

        Raises:
            UnregisteredTypeError: If the type, or any argument needed to
                build its expression, has no entry.

        """
        return cls._resolve(as_type_id(type_id), frozenset(), full=True)

    @classmethod
    def reference(
        cls,
        type_id: TypeLike,
        type_params: Iterable[str] = (),
    ) -> TypeBinding:
        """Binding without declarations, enough to refer to the type.

        Names in ``type_params`` are type variables in scope: each resolves
        to a binding whose expression is the variable name itself.
        """
        return cls._resolve(as_type_id(type_id), frozenset(type_params), full=False)

    @classmethod
    def is_registered(cls, type_id: TypeLike) -> bool:
        """Check whether an exact binding or a matching constructor exists."""
        tid = as_type_id(type_id)
        return str(tid) in cls._bindings or (tid.head, tid.arity) in cls._constructors

    @classmethod
    def shared_definition(cls, type_id: TypeLike) -> TypeConstructor | None:
        """Constructor for an applied id whose applications share declarations.

        Returns None for nullary ids, for ids with an exact binding (those win
        in :meth:`lookup` too) and for constructors that build per-application
        declarations.
        """
        tid = as_type_id(type_id)
        if not tid.args or str(tid) in cls._bindings:
            return None
        constructor = cls._constructors.get((tid.head, tid.arity))
        if constructor is None or not constructor.shares_declarations:
            return None
        return constructor

    @classmethod
    def unregister(cls, type_id: TypeLike) -> bool:
        """Remove an exact binding, or the constructor matching the id's arity.

        Returns:
            True if an entry was removed, False otherwise.

        """
        tid = as_type_id(type_id)
        if cls._bindings.pop(str(tid), None) is not None:
            return True
        return cls._constructors.pop((tid.head, tid.arity), None) is not None

    @classmethod
    def clear(cls) -> None:
        """Clear the registry and re-register builtins."""
        cls._bindings.clear()
        cls._constructors.clear()
        _register_builtins()

    @classmethod
    def _resolve(
        cls,
        tid: TypeId,
        type_params: frozenset[str],
        *,
        full: bool,
    ) -> TypeBinding:
        if not tid.args and tid.head in type_params:
            return TypeBinding(tid.head)

        if (binding := cls._bindings.get(str(tid))) is not None:
            return binding if full else binding.as_reference()

        constructor = cls._constructors.get((tid.head, tid.arity))
        if constructor is None:
            raise UnregisteredTypeError(str(tid))

        def resolve(
            arg: TypeId,
            scope: frozenset[str] | None = None,
        ) -> TypeBinding:
            return cls._resolve(
                arg,
                type_params if scope is None else scope,
                full=False,
            )

        return constructor.apply(tid.args, resolve, full=full)


def _register_builtins() -> None:
    """Pre-register primitive bindings and container constructors."""
    for name, binding in builtins.PRIMITIVES.items():
        TypeRegistry.register(name, binding)
    for constructor in builtins.CONSTRUCTORS:
        TypeRegistry.register_constructor(constructor)


# Register builtins on module load
_register_builtins()
