"""Pure playback domain: reply nodes, status formatting and player commands."""

from __future__ import annotations

from .commands import PlayerCommand
from .formatter import (
    ARTIST_TOKEN,
    DEFAULT_FORMAT,
    DEFAULT_PLACEHOLDER,
    DEFAULT_TRUNC,
    TITLE_TOKEN,
    FormatConfig,
    FormatError,
    MarkerTooLongError,
    format_status,
    truncate,
)
from .reply import Keyed, Node, Primitive, Sequence, Variant

__all__ = [
    "ARTIST_TOKEN",
    "DEFAULT_FORMAT",
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_TRUNC",
    "FormatConfig",
    "FormatError",
    "Keyed",
    "MarkerTooLongError",
    "Node",
    "PlayerCommand",
    "Primitive",
    "Sequence",
    "TITLE_TOKEN",
    "Variant",
    "format_status",
    "truncate",
]
