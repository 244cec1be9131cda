"""Playback feature facade."""

from __future__ import annotations

from .domain import FormatConfig, FormatError, MarkerTooLongError, PlayerCommand, format_status
from .usecases import (
    PlayerTransportPort,
    StatusReporter,
    TransportError,
    extract_artist,
    extract_title,
    extract_track_metadata,
    send_player_command,
)

__all__ = [
    "FormatConfig",
    "FormatError",
    "MarkerTooLongError",
    "PlayerCommand",
    "PlayerTransportPort",
    "StatusReporter",
    "TransportError",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
    "format_status",
    "send_player_command",
]
