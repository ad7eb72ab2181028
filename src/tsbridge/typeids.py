"""Structured host type identities.

A type identity is a head name applied to zero or more argument identities,
written ``head`` or ``head[arg, ...]``. The canonical text form is the
registry key, so ``either[int,text]`` and ``either[int, text]`` name the
same type.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from tsbridge.errors import MalformedMetadataError

_TOKEN = re.compile(r"\s*(?:([^\s\[\],]+)|(.))")


@dataclass(frozen=True)
class TypeId:
    """A host type identity: ``list[maybe[integer]]`` → TypeId("list", (...,))."""

    head: str
    args: tuple[TypeId, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.head
        return f"{self.head}[{', '.join(str(arg) for arg in self.args)}]"

    @property
    def arity(self) -> int:
        return len(self.args)


TypeLike: TypeAlias = TypeId | str


def type_id(head: str, *args: TypeLike) -> TypeId:
    """Build a TypeId from a head and argument identities or their text."""
    return TypeId(head, tuple(as_type_id(arg) for arg in args))


def as_type_id(value: TypeLike) -> TypeId:
    """Coerce text or a TypeId into a TypeId."""
    if isinstance(value, TypeId):
        return value
    return parse_type_id(value)


def canonical(value: TypeLike) -> str:
    """Canonical text form used as the registry key."""
    return str(as_type_id(value))


def parse_type_id(text: str) -> TypeId:
    """Parse ``head[arg, ...]`` text into a TypeId.

    Raises:
        MalformedMetadataError: If the text is empty, has unbalanced brackets,
            empty argument lists or trailing input.

    """
    tokens = _tokenize(text)
    result, pos = _parse(tokens, 0, text)
    if pos != len(tokens):
        msg = f"Unexpected trailing input in type identifier '{text}'"
        raise MalformedMetadataError(msg)
    return result


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    for match in _TOKEN.finditer(text):
        name, punct = match.groups()
        if name is not None:
            tokens.append(name)
        elif punct is not None and not punct.isspace():
            tokens.append(punct)
    return tokens


def _parse(tokens: list[str], pos: int, text: str) -> tuple[TypeId, int]:
    if pos >= len(tokens) or tokens[pos] in "[],":
        msg = f"Expected a type name at position {pos} in '{text}'"
        raise MalformedMetadataError(msg)
    head = tokens[pos]
    pos += 1
    if pos >= len(tokens) or tokens[pos] != "[":
        return TypeId(head), pos

    args: list[TypeId] = []
    pos += 1
    while True:
        arg, pos = _parse(tokens, pos, text)
        args.append(arg)
        if pos >= len(tokens):
            msg = f"Unclosed '[' in type identifier '{text}'"
            raise MalformedMetadataError(msg)
        if tokens[pos] == "]":
            return TypeId(head, tuple(args)), pos + 1
        if tokens[pos] != ",":
            msg = f"Expected ',' or ']' in type identifier '{text}'"
            raise MalformedMetadataError(msg)
        pos += 1


def substitute(tid: TypeId, substitutions: Mapping[str, TypeId]) -> TypeId:
    """Recursively replace nullary heads named in substitutions."""
    if not tid.args:
        return substitutions.get(tid.head, tid)
    return TypeId(tid.head, tuple(substitute(arg, substitutions) for arg in tid.args))
