"""Console output for the CLI."""

from spotifyctl.ui.cli.display.status import StatusDisplay

__all__ = ["StatusDisplay"]
