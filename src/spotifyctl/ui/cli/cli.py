"""Command line interface for spotifyctl."""

import sys
from collections.abc import Callable, Sequence
from typing import final

from spotifyctl.features.playback.usecases.ports import PlayerTransportPort
from spotifyctl.platform.logging import logger
from spotifyctl.ui.cli.args import ArgumentParser
from spotifyctl.ui.cli.args.options import CLIArgs, HelpArgs, StatusArgs
from spotifyctl.ui.cli.commands import ControlCommand, StatusCommand
from spotifyctl.ui.cli.display import StatusDisplay

TransportFactory = Callable[[str, int], PlayerTransportPort]


def connect_player(player: str, timeout_ms: int) -> PlayerTransportPort:
    """Build the D-Bus transport for ``player``."""

    # dbus-python is only needed once a command talks to the player.
    from spotifyctl.platform.mpris.client import MprisClient

    return MprisClient(player=player, timeout_ms=timeout_ms)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            transport_factory: Builds the player transport (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, HelpArgs):
                StatusDisplay().show_help(ArgumentParser.create_parser().format_help())
                return

            factory = transport_factory if transport_factory is not None else connect_player
            transport = factory(args.player, args.timeout_ms)

            command = (
                StatusCommand(args, transport)
                if isinstance(args, StatusArgs)
                else ControlCommand(args, transport)
            )
            if not command.execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from the command processor, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
