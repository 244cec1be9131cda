"""Transport-control command implementation."""

from typing import final

from typing_extensions import override

from spotifyctl.features.playback.usecases.control import send_player_command
from spotifyctl.features.playback.usecases.ports import PlayerTransportPort, TransportError
from spotifyctl.ui.cli.args.options import ControlArgs
from spotifyctl.ui.cli.commands.executor import CommandExecutor


@final
class ControlCommand(CommandExecutor):
    """Send play/pause/playpause/next/previous to the player."""

    args: ControlArgs

    def __init__(self, args: ControlArgs, transport: PlayerTransportPort) -> None:
        super().__init__(args, transport)
        self.args = args

    @override
    def execute(self) -> bool:
        try:
            send_player_command(self.transport, self.args.command)
        except TransportError as e:
            self.report_transport_error(e)
            return False
        return True
