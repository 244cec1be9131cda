"""Playback use cases: status rendering, metadata extraction and transport control."""

from __future__ import annotations

from .control import send_player_command
from .extraction import extract_artist, extract_title, extract_track_metadata
from .ports import PlayerTransportPort, TransportError
from .status import StatusReporter

__all__ = [
    "PlayerTransportPort",
    "StatusReporter",
    "TransportError",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
    "send_player_command",
]
