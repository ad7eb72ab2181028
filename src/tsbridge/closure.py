"""Transitive closure of declarations reachable from root types."""

from __future__ import annotations

import logging

from tsbridge.bindings import TypeBinding
from tsbridge.declarations import Declaration
from tsbridge.registry import TypeRegistry
from tsbridge.typeids import TypeLike, as_type_id, canonical

logger = logging.getLogger(__name__)


def collect_bindings(*roots: TypeLike) -> dict[str, TypeBinding]:
    """Full bindings of every type reachable from roots, in visit order.

    Traversal is depth-first from each root in turn and visits each
    canonical type id once, so cyclic type graphs terminate. Parent types are
    visited in sorted order to keep the result deterministic.

    Record and sum definitions declare the same thing for every application,
    so only the first application of each is expanded. Later applications
    contribute just their arguments, which keeps polymorphically recursive
    types such as ``nest[T]`` holding ``nest[list[T]]`` finite.

    Raises:
        UnregisteredTypeError: If any reachable type has no registry entry.
            Nothing is returned in that case.

    """
    visited: dict[str, TypeBinding] = {}
    expanded: set[tuple[str, int]] = set()
    skipped: set[str] = set()
    stack = [canonical(root) for root in reversed(roots)]
    while stack:
        type_id = stack.pop()
        if type_id in visited or type_id in skipped:
            continue
        definition = TypeRegistry.shared_definition(type_id)
        if definition is not None:
            key = (definition.name, definition.arity)
            if key in expanded:
                skipped.add(type_id)
                args = sorted({str(arg) for arg in as_type_id(type_id).args})
                stack.extend(reversed(args))
                logger.debug("Skipped %s, %s/%d already expanded", type_id, *key)
                continue
            expanded.add(key)
        binding = TypeRegistry.lookup(type_id)
        visited[type_id] = binding
        parents = sorted({canonical(parent) for parent in binding.parent_types})
        stack.extend(parent for parent in reversed(parents) if parent not in visited)
    return visited


def collect_declarations(*roots: TypeLike) -> tuple[Declaration, ...]:
    """All declarations needed by roots, each structurally distinct one once.

    Declarations of types closer to a root come first.
    """
    bindings = collect_bindings(*roots)
    seen: set[Declaration] = set()
    result: list[Declaration] = []
    for binding in bindings.values():
        for declaration in binding.declarations:
            if declaration not in seen:
                seen.add(declaration)
                result.append(declaration)
    logger.debug(
        "Collected %d declarations from %d types for %d roots",
        len(result),
        len(bindings),
        len(roots),
    )
    return tuple(result)
