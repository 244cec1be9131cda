"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from spotifyctl.features.playback.domain.commands import PlayerCommand
from spotifyctl.features.playback.domain.formatter import FormatConfig


@final
@dataclass(slots=True)
class StatusArgs:
    """Command line arguments for the ``status`` subcommand."""

    command: Literal["status"]
    player: str
    timeout_ms: int
    quiet: bool
    verbose: bool
    format_config: FormatConfig


@final
@dataclass(slots=True)
class ControlArgs:
    """Command line arguments for ``play``, ``pause``, ``playpause``, ``next`` and ``previous``."""

    command: PlayerCommand
    player: str
    timeout_ms: int
    quiet: bool
    verbose: bool


@final
@dataclass(slots=True)
class HelpArgs:
    """Command line arguments for the ``help`` subcommand."""

    command: Literal["help"]


CLIArgs = StatusArgs | ControlArgs | HelpArgs

__all__ = ["CLIArgs", "ControlArgs", "HelpArgs", "StatusArgs"]
