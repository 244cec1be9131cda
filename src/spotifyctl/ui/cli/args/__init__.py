"""Command line argument handling package."""

from spotifyctl.ui.cli.args.options import CLIArgs, ControlArgs, HelpArgs, StatusArgs
from spotifyctl.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ControlArgs", "HelpArgs", "StatusArgs"]
