"""
Summary: Pull the artist and title strings out of an MPRIS metadata reply.
Why: Structural mismatches must degrade to ``None`` so the formatter can fall back to its placeholder.
"""

from __future__ import annotations

from typing import Final

from spotifyctl.shared.track_metadata import TrackMetadata

from ..domain.reply import Node, as_string, first_item, lookup, unwrap_variant

TITLE_KEY: Final[str] = "xesam:title"
ARTIST_KEY: Final[str] = "xesam:artist"

# Reply layout (Properties.Get on org.mpris.MediaPlayer2.Player "Metadata"):
#   variant array [
#      dict entry( string "xesam:title"  variant string "{title}" )
#      dict entry( string "xesam:artist" variant array [ string "{artist}" ] )
#      ...
#   ]


def _entry_value(reply: Node, key: str) -> Node | None:
    """Walk variant -> dict-entry array -> entry[key] -> variant."""

    return unwrap_variant(lookup(unwrap_variant(reply), key))


def extract_title(reply: Node) -> str | None:
    """Return ``xesam:title`` or ``None`` when missing or mistyped."""

    return as_string(_entry_value(reply, TITLE_KEY))


def extract_artist(reply: Node) -> str | None:
    """Return the first ``xesam:artist`` entry.

    Artists are published as a list of strings; only the first one is used.
    An empty list yields ``None``.
    """
    return as_string(first_item(_entry_value(reply, ARTIST_KEY)))


def extract_track_metadata(reply: Node) -> TrackMetadata:
    """Extract both fields, each walk starting again from the reply root."""

    return TrackMetadata(title=extract_title(reply), artist=extract_artist(reply))


__all__ = [
    "ARTIST_KEY",
    "TITLE_KEY",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
]
