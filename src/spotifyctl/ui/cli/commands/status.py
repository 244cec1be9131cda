"""Status command implementation."""

from typing import final

from typing_extensions import override

from spotifyctl.features.playback.domain.formatter import FormatError
from spotifyctl.features.playback.usecases.ports import PlayerTransportPort, TransportError
from spotifyctl.features.playback.usecases.status import StatusReporter
from spotifyctl.platform.logging import logger
from spotifyctl.ui.cli.args.options import StatusArgs
from spotifyctl.ui.cli.commands.executor import CommandExecutor
from spotifyctl.ui.cli.display.status import StatusDisplay


@final
class StatusCommand(CommandExecutor):
    """Print the current track as a status line."""

    args: StatusArgs
    reporter: StatusReporter
    display: StatusDisplay

    def __init__(
        self,
        args: StatusArgs,
        transport: PlayerTransportPort,
        display: StatusDisplay | None = None,
    ) -> None:
        """Initialize status command.

        Args:
            args: Command line arguments.
            transport: Connection to the player.
            display: Output target for the status line.
        """
        super().__init__(args, transport)
        self.args = args
        self.reporter = StatusReporter(transport)
        self.display = display if display is not None else StatusDisplay()

    @override
    def execute(self) -> bool:
        """Render and print the status line; nothing is printed on failure."""

        try:
            line = self.reporter.render(self.args.format_config)
        except TransportError as e:
            self.report_transport_error(e)
            return False
        except FormatError as e:
            logger.error("%s", e, extra={"player_event": "format.error"})
            return False

        self.display.show_status(line)
        return True
