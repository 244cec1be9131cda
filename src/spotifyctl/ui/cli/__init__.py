"""Command line interface package."""

from spotifyctl.ui.cli.cli import CommandProcessor, connect_player, main

__all__ = ["CommandProcessor", "connect_player", "main"]
