"""src/spotifyctl/ui/cli/display/status.py
What: Write the rendered status line and help text to stdout.
Why: Status bars read stdout verbatim, so nothing may be styled or wrapped.
"""

from __future__ import annotations

from typing import final

from rich.console import Console


@final
class StatusDisplay:
    """Plain stdout output for status lines and usage text."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize status display.

        Args:
            console: Console to write to. Defaults to an unstyled stdout console.
        """
        self.console = console if console is not None else Console(
            soft_wrap=True,
            highlight=False,
            markup=False,
            emoji=False,
        )

    def show_status(self, line: str) -> None:
        """Write one status line exactly as rendered, bypassing rich's text rendering."""

        _ = self.console.file.write(f"{line}\n")
        self.console.file.flush()

    def show_help(self, text: str) -> None:
        """Print usage text."""

        self.console.print(text.rstrip("\n"), soft_wrap=True, highlight=False, markup=False)
