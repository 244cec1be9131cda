"""
Summary: Node types describing a self-describing metadata reply and fallible accessors over them.
Why: Let the field extractor walk variant/array/dict-entry wrappers without touching D-Bus objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(slots=True, frozen=True)
class Primitive:
    """A scalar leaf (string, number, boolean or object path)."""

    value: str | int | float | bool


@dataclass(slots=True, frozen=True)
class Sequence:
    """An ordered list of nodes (arrays and structs)."""

    items: tuple[Node, ...] = ()


@dataclass(slots=True, frozen=True)
class Keyed:
    """An ordered array of dict entries."""

    entries: tuple[tuple[str, Node], ...] = ()


@dataclass(slots=True, frozen=True)
class Variant:
    """Wrapper around exactly one node.

    ``signature`` records the runtime type of ``inner`` as a D-Bus type
    signature (``"s"``, ``"as"``, ``"a{sv}"`` ...).
    """

    inner: Node
    signature: str = ""


Node: TypeAlias = Primitive | Sequence | Keyed | Variant


def unwrap_variant(node: Node | None) -> Node | None:
    """Return the node wrapped by a variant, or ``None`` for anything else."""

    match node:
        case Variant(inner=inner):
            return inner
        case _:
            return None


def as_keyed(node: Node | None) -> Keyed | None:
    """Return ``node`` if it is an array of dict entries."""

    match node:
        case Keyed():
            return node
        case _:
            return None


def lookup(node: Node | None, key: str) -> Node | None:
    """Linear-scan the dict entries of ``node`` for ``key``.

    The first matching entry wins. Non-keyed nodes and missing keys yield
    ``None``.
    """

    keyed = as_keyed(node)
    if keyed is None:
        return None
    for entry_key, value in keyed.entries:
        if entry_key == key:
            return value
    return None


def first_item(node: Node | None) -> Node | None:
    """Return the first element of a sequence; empty or non-sequence nodes yield ``None``."""

    match node:
        case Sequence(items=items) if items:
            return items[0]
        case _:
            return None


def as_string(node: Node | None) -> str | None:
    """Read a string leaf. Numbers, booleans and containers yield ``None``."""

    match node:
        case Primitive(value=str() as value):
            return value
        case _:
            return None


__all__ = [
    "Keyed",
    "Node",
    "Primitive",
    "Sequence",
    "Variant",
    "as_keyed",
    "as_string",
    "first_item",
    "lookup",
    "unwrap_variant",
]
