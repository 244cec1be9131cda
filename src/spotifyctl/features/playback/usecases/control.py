"""Transport-control use case."""

from __future__ import annotations

from spotifyctl.platform.logging import logger

from ..domain.commands import PlayerCommand
from .ports import PlayerTransportPort


def send_player_command(transport: PlayerTransportPort, command: PlayerCommand) -> None:
    """Fire ``command`` at the player.

    Raises:
        TransportError: If the call fails or times out.
    """
    logger.debug(
        "Sending %s to player",
        command.method_name,
        extra={"player_event": "player.command", "command": command.value},
    )
    transport.send_command(command)


__all__ = ["send_player_command"]
