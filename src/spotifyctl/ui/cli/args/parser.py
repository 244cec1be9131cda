"""Command line argument parser."""

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final, final

from spotifyctl.config.config import Config
from spotifyctl.features.playback.domain.commands import PlayerCommand
from spotifyctl.features.playback.domain.formatter import (
    ARTIST_TOKEN,
    DEFAULT_FORMAT,
    DEFAULT_TRUNC,
    TITLE_TOKEN,
)
from spotifyctl.platform.logging import logger, setup_logger
from spotifyctl.ui.cli.args.options import CLIArgs, ControlArgs, HelpArgs, StatusArgs

_PROG: Final[str] = "spotifyctl"

_EXAMPLES: Final[str] = f"""\
examples:
  spotifyctl status --format '{ARTIST_TOKEN}: {TITLE_TOKEN}' \\
      --max-length 30 --max-artist-length 10 --max-title-length 20 --trunc '...'
    Artist 'Eminem' and title 'Sing For The Moment' print
    'Eminem: Sing For The Moment' since the full output fits in 30 characters.

  spotifyctl status --format '{ARTIST_TOKEN}: {TITLE_TOKEN}' \\
      --max-length 20 --max-artist-length 10 --max-title-length 10 --trunc '...'
    The same track prints 'Eminem: Sing Fo...' since the full output is
    longer than 20 characters, so the title is cut to 10.

  spotifyctl status --max-title-length 13 --trunc '...'
    The same track prints 'Eminem: Sing For T...'. Without --max-length the
    artist and title limits always apply.
"""


def _positive_int(label: str) -> Callable[[str], int]:
    """Build an argparse ``type`` callable accepting only positive integers."""

    def convert(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value <= 0:
            raise argparse.ArgumentTypeError(f"{label} must be a positive integer!")
        return value

    return convert


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def _common_options() -> argparse.ArgumentParser:
        """Options accepted both before and after the subcommand.

        Defaults are suppressed so a value given before the subcommand is not
        overwritten by the subparser; unset options fall back to the config.
        """
        common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
        _ = common.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Hide errors caused by the player not running",
        )
        _ = common.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug diagnostics on stderr",
        )
        _ = common.add_argument(
            "--player",
            type=str,
            metavar="NAME",
            help="MPRIS player to talk to (org.mpris.MediaPlayer2.NAME). Default: spotify",
        )
        _ = common.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Read defaults from this TOML file instead of the user config",
        )
        return common

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = ArgumentParser._common_options()
        formatting = ArgumentParser._format_options()
        parser = argparse.ArgumentParser(
            prog=_PROG,
            description="Print the playing track for status bars and control MPRIS players.",
            epilog=_EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[common, formatting],
        )

        subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")

        _ = subparsers.add_parser(
            "status",
            help="Print the title and artist of the current track",
            parents=[common, formatting],
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=_EXAMPLES,
        )

        control_help = {
            PlayerCommand.PLAY: "Start playback",
            PlayerCommand.PAUSE: "Pause playback",
            PlayerCommand.PLAYPAUSE: "Toggle between play and pause",
            PlayerCommand.NEXT: "Skip to the next track",
            PlayerCommand.PREVIOUS: "Go back to the previous track",
        }
        for command in PlayerCommand:
            _ = subparsers.add_parser(command.value, help=control_help[command], parents=[common])

        _ = subparsers.add_parser(
            "help", help="Show this help message and examples", parents=[common]
        )

        return parser

    @staticmethod
    def _format_options() -> argparse.ArgumentParser:
        """Formatting options of ``status``, also accepted before the subcommand.

        Defaults are suppressed for the same reason as in ``_common_options``.
        """
        parser = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
        _ = parser.add_argument(
            "--max-artist-length",
            type=_positive_int("Artist length"),
            metavar="N",
            help=(
                "Maximum length of the artist name. With --max-length this only applies "
                "when the full output is longer than max-length. Default: no limit"
            ),
        )
        _ = parser.add_argument(
            "--max-title-length",
            type=_positive_int("Title length"),
            metavar="N",
            help=(
                "Maximum length of the track title. With --max-length this only applies "
                "when the full output is longer than max-length. Default: no limit"
            ),
        )
        _ = parser.add_argument(
            "--max-length",
            type=_positive_int("Max length"),
            metavar="N",
            help=(
                "Maximum length of the whole output. Works best as the sum of the artist "
                "and title limits. Default: no limit"
            ),
        )
        _ = parser.add_argument(
            "--format",
            type=str,
            metavar="FORMAT",
            help=(
                f"Output template; {ARTIST_TOKEN} and {TITLE_TOKEN} are replaced by the "
                f"artist name and track title. Default: '{DEFAULT_FORMAT}'"
            ),
        )
        _ = parser.add_argument(
            "--trunc",
            type=str,
            metavar="STRING",
            help=(
                "Marker appended to anything cut to its maximum length. Counts toward "
                f"the limits and may be empty. Default: '{DEFAULT_TRUNC}'"
            ),
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argparse rejects the input.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        command: str = parsed_args.command
        if command == "help":
            return HelpArgs(command="help")

        config_path = getattr(parsed_args, "config", None)
        configuration = Config.load(Path(config_path).expanduser() if config_path else None)

        is_quiet = bool(getattr(parsed_args, "quiet", configuration.quiet))
        is_verbose = bool(getattr(parsed_args, "verbose", False))
        player: str = getattr(parsed_args, "player", configuration.player)

        if is_verbose:
            log_level = logging.DEBUG
        elif is_quiet:
            log_level = logging.ERROR
        else:
            log_level = logging.WARNING

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if command == "status":
            format_config = configuration.format_config(
                max_artist_length=getattr(parsed_args, "max_artist_length", None),
                max_title_length=getattr(parsed_args, "max_title_length", None),
                max_length=getattr(parsed_args, "max_length", None),
                format=getattr(parsed_args, "format", None),
                trunc=getattr(parsed_args, "trunc", None),
            )
            logger.debug("Status formatting: %s", format_config)
            return StatusArgs(
                command="status",
                player=player,
                timeout_ms=configuration.timeout_ms,
                quiet=is_quiet,
                verbose=is_verbose,
                format_config=format_config,
            )

        return ControlArgs(
            command=PlayerCommand.from_user_input(command),
            player=player,
            timeout_ms=configuration.timeout_ms,
            quiet=is_quiet,
            verbose=is_verbose,
        )


__all__ = ["ArgumentParser"]
