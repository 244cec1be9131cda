"""Transport-control commands understood by MPRIS players."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class PlayerCommand(StrEnum):
    """CLI command names for the ``org.mpris.MediaPlayer2.Player`` methods."""

    PLAY = "play"
    PAUSE = "pause"
    PLAYPAUSE = "playpause"
    NEXT = "next"
    PREVIOUS = "previous"

    @property
    def method_name(self) -> str:
        """Name of the MPRIS method invoked for this command."""

        return _METHOD_NAMES[self]

    @staticmethod
    def from_user_input(value: str) -> "PlayerCommand":
        """Translate raw CLI input into the matching command."""

        normalized = value.strip().lower()
        for command in PlayerCommand:
            if command.value == normalized:
                return command
        valid: Final[str] = ", ".join(c.value for c in PlayerCommand)
        msg = f"Unsupported player command '{value}'. Valid options: {valid}"
        raise ValueError(msg)


_METHOD_NAMES: Final[dict[PlayerCommand, str]] = {
    PlayerCommand.PLAY: "Play",
    PlayerCommand.PAUSE: "Pause",
    PlayerCommand.PLAYPAUSE: "PlayPause",
    PlayerCommand.NEXT: "Next",
    PlayerCommand.PREVIOUS: "Previous",
}


__all__ = ["PlayerCommand"]
