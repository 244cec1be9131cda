"""Rich handler rendering player events with icons.

Where: platform/logging/handlers.py
What: RichHandler subclass that styles records tagged with a ``player_event`` extra.
Why: Keep diagnostics compact on stderr while stdout carries only the status line.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class StatusRichHandler(RichHandler):
    """Custom Rich handler for spotifyctl diagnostics."""

    _PLAYER_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "player.query": ("🎧", "blue"),
        "player.command": ("⏯️", "cyan"),
        "player.missing": ("💤", "yellow"),
        "player.error": ("❌", "red"),
        "format.error": ("⛔", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_player_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying a ``player_event`` extra."""

        event = getattr(record, "player_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PLAYER_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        player = getattr(record, "player", None)
        if player:
            _ = text.append(f"[{player}] ", style=Style(color="magenta"))

        _ = text.append(message, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for player events."""

        player_text = self._render_player_message(record, message)
        if player_text is not None:
            return player_text

        return super().render_message(record, message)


__all__ = ["StatusRichHandler"]
