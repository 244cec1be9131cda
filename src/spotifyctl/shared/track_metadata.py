# Where: spotifyctl.shared.track_metadata
# What: Artist/title pair read from a player's metadata reply.
# Why: Give the extractor and the formatter a single value to hand around.

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TrackMetadata:
    """Metadata for the track currently loaded in the player."""

    title: str | None = None
    artist: str | None = None


__all__ = ["TrackMetadata"]
