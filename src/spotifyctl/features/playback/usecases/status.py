"""Status use case: one metadata query, one extraction pass, one format pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from spotifyctl.platform.logging import logger
from spotifyctl.shared.track_metadata import TrackMetadata

from ..domain.formatter import FormatConfig, format_status
from .extraction import extract_track_metadata
from .ports import PlayerTransportPort


@final
@dataclass(slots=True)
class StatusReporter:
    """Render the player's current track as a status line."""

    transport: PlayerTransportPort

    def current_track(self) -> TrackMetadata:
        """Query the player and extract artist/title.

        Raises:
            TransportError: If the player cannot be reached.
        """
        reply = self.transport.query_metadata()
        metadata = extract_track_metadata(reply)
        logger.debug("Extracted metadata: artist=%r title=%r", metadata.artist, metadata.title)
        return metadata

    def render(self, config: FormatConfig) -> str:
        """Query, extract and format.

        Raises:
            TransportError: If the player cannot be reached.
            FormatError: If the configured budgets cannot hold the marker.
        """
        metadata = self.current_track()
        return format_status(metadata.artist, metadata.title, config)


__all__ = ["StatusReporter"]
