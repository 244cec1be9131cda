"""src/spotifyctl/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse transport error reporting across status and control commands.
"""

from abc import ABC, abstractmethod

from spotifyctl.features.playback.usecases.ports import PlayerTransportPort, TransportError
from spotifyctl.platform.logging import logger
from spotifyctl.ui.cli.args.options import ControlArgs, StatusArgs


class CommandExecutor(ABC):
    """Base class for commands that talk to the player."""

    args: StatusArgs | ControlArgs
    transport: PlayerTransportPort

    def __init__(self, args: StatusArgs | ControlArgs, transport: PlayerTransportPort) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            transport: Connection to the player.
        """
        self.args = args
        self.transport = transport

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: Whether the command succeeded.
        """
        pass

    def report_transport_error(self, error: TransportError) -> None:
        """Log a transport failure.

        With ``--quiet`` a player that is not running is only logged at
        debug level; every other failure is reported.
        """
        if error.player_missing and self.args.quiet:
            logger.debug(
                "Player not running: %s",
                error.message,
                extra={"player_event": "player.missing", "player": self.args.player},
            )
            return

        event = "player.missing" if error.player_missing else "player.error"
        logger.error(
            "%s",
            error.message,
            extra={"player_event": event, "player": self.args.player},
        )
