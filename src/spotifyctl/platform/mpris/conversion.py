"""
Summary: Convert dbus-python reply values into playback reply nodes.
Why: dbus-python flattens variants into a ``variant_level`` attribute; the extractor needs them as explicit wrappers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from spotifyctl.features.playback.domain.reply import Keyed, Node, Primitive, Sequence, Variant

# dbus-python scalar class name -> D-Bus type code
_SCALAR_SIGNATURES: Final[dict[str, str]] = {
    "String": "s",
    "ObjectPath": "o",
    "Signature": "g",
    "Boolean": "b",
    "Byte": "y",
    "Int16": "n",
    "UInt16": "q",
    "Int32": "i",
    "UInt32": "u",
    "Int64": "x",
    "UInt64": "t",
    "Double": "d",
    "UnixFd": "h",
}


def signature_of(value: Any) -> str:
    """Best-effort D-Bus signature of a dbus-python (or plain Python) value."""

    type_name = type(value).__name__
    if type_name in _SCALAR_SIGNATURES:
        return _SCALAR_SIGNATURES[type_name]

    declared = getattr(value, "signature", None)
    if isinstance(value, Mapping):
        return f"a{{{declared}}}" if declared else "a{sv}"
    if isinstance(value, tuple):
        return "(" + "".join(signature_of(item) for item in value) + ")"
    if isinstance(value, list):
        return f"a{declared}" if declared else "av"
    if isinstance(value, bool):
        return "b"
    if isinstance(value, str):
        return "s"
    if isinstance(value, int):
        return "x"
    if isinstance(value, float):
        return "d"
    return "v"


def _convert(value: Any) -> Node:
    if isinstance(value, Mapping):
        return Keyed(tuple((str(key), to_node(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(to_node(item) for item in value))
    if isinstance(value, bytes):
        return Sequence(tuple(Primitive(byte) for byte in value))
    if isinstance(value, (str, int, float)):
        return Primitive(_plain_scalar(value))
    raise TypeError(f"Unsupported D-Bus value of type {type(value).__name__}")


def _plain_scalar(value: str | int | float) -> str | int | float | bool:
    """Strip dbus-python subclasses down to builtin scalars."""

    if type(value).__name__ == "Boolean" or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    return float(value)


def to_node(value: Any) -> Node:
    """Convert one dbus-python value, re-creating ``variant_level`` wrappers.

    Args:
        value: A value as returned by a dbus-python method call.

    Returns:
        Node: The equivalent node tree; each variant level becomes one
        ``Variant`` wrapper, outermost first.

    Raises:
        TypeError: If the value is not a D-Bus marshallable type.
    """
    node = _convert(value)
    signature = signature_of(value)
    for _ in range(int(getattr(value, "variant_level", 0) or 0)):
        node = Variant(node, signature)
        signature = "v"
    return node


__all__ = ["signature_of", "to_node"]
