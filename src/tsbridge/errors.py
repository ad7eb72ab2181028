"""Errors raised while building bindings and collecting declarations.

Every error aborts the current generation run. Nothing here is retried or
downgraded to a warning: the caller fixes the registration or the metadata
and runs generation again.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all tsbridge errors."""


class UnregisteredTypeError(GenerationError, LookupError):
    """A type reachable from a root has no registry entry."""

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"No TypeScript binding registered for '{type_id}'")


class ConflictingBindingError(GenerationError, ValueError):
    """Two different entries were registered for the same type identity."""

    def __init__(self, type_id: str, existing: object, new: object) -> None:
        self.type_id = type_id
        self.existing = existing
        self.new = new
        super().__init__(
            f"'{type_id}' is already registered to {existing!r}; "
            f"refusing to replace it with {new!r}",
        )


class MalformedMetadataError(GenerationError, ValueError):
    """Type metadata supplied by the caller is structurally invalid."""
