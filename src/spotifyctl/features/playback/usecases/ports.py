"""Ports for playback use cases.

Where: features/playback/usecases.
What: Protocol describing the media-player transport plus its error type.
Why: Decouple use cases from the D-Bus adapter while keeping tests injectable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.commands import PlayerCommand
from ..domain.reply import Node


class TransportError(Exception):
    """Talking to the media player failed (IPC error, timeout, player gone)."""

    message: str
    player_missing: bool

    def __init__(self, message: str, *, player_missing: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.player_missing = player_missing


@runtime_checkable
class PlayerTransportPort(Protocol):
    """Port for one player reachable over the session bus."""

    def query_metadata(self) -> Node:
        """Fetch the player's ``Metadata`` property as a reply node tree."""
        ...

    def send_command(self, command: PlayerCommand) -> None:
        """Invoke a transport-control method; the reply carries no data."""
        ...


__all__ = ["PlayerTransportPort", "TransportError"]
