"""
Summary: Render artist/title into a length-bounded status template with an exact truncation marker.
Why: Keep the truncation rules pure and deterministic so status bars get reproducible output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final

ARTIST_TOKEN: Final[str] = "%artist%"
TITLE_TOKEN: Final[str] = "%title%"

DEFAULT_FORMAT: Final[str] = f"{ARTIST_TOKEN}: {TITLE_TOKEN}"
DEFAULT_TRUNC: Final[str] = "..."
DEFAULT_PLACEHOLDER: Final[str] = "Spotify"

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    f"{re.escape(ARTIST_TOKEN)}|{re.escape(TITLE_TOKEN)}"
)


class FormatError(Exception):
    """Raised when a status line cannot be rendered."""


class MarkerTooLongError(FormatError):
    """The truncation marker does not fit inside a length budget."""

    _FIELD_LABELS: ClassVar[dict[str, str]] = {
        "artist": "max artist length",
        "title": "max title length",
        "output": "max output length",
    }

    budget: str
    max_length: int
    marker: str

    def __init__(self, budget: str, max_length: int, marker: str) -> None:
        self.budget = budget
        self.max_length = max_length
        self.marker = marker
        label = self._FIELD_LABELS.get(budget, f"max {budget} length")
        super().__init__(
            f"Failed to truncate {budget}: the trunc string {marker!r} "
            f"({len(marker)} characters) is longer than the {label} ({max_length}). "
            f"Please make sure the trunc string is smaller than the {label}."
        )


@dataclass(slots=True, frozen=True)
class FormatConfig:
    """Formatting options for one status rendering.

    ``None`` budgets are unbounded.
    """

    max_artist_length: int | None = None
    max_title_length: int | None = None
    max_length: int | None = None
    format: str = DEFAULT_FORMAT
    trunc: str = DEFAULT_TRUNC
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        for name in ("max_artist_length", "max_title_length", "max_length"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be a positive integer; received {value}")


def truncate(text: str, max_length: int | None, marker: str, *, budget: str = "output") -> str:
    """Cut ``text`` down to ``max_length`` characters, ending with ``marker``.

    Args:
        text: Text to shorten.
        max_length: Character budget, ``None`` for unbounded.
        marker: Suffix marking the cut; counts toward the budget.
        budget: Name of the budget, reported when the marker cannot fit.

    Returns:
        str: ``text`` unchanged when it fits, otherwise exactly ``max_length``
        characters ending with ``marker``.

    Raises:
        MarkerTooLongError: If ``text`` must be cut and ``marker`` alone is
            longer than ``max_length``.
    """
    if max_length is None or len(text) <= max_length:
        return text
    if len(marker) > max_length:
        raise MarkerTooLongError(budget, max_length, marker)
    return text[: max_length - len(marker)] + marker


def substitute_tokens(template: str, artist: str, title: str) -> str:
    """Replace every token in one left-to-right pass; replacements are not re-scanned."""

    values = {ARTIST_TOKEN: artist, TITLE_TOKEN: title}
    return _TOKEN_PATTERN.sub(lambda match: values[match.group(0)], template)


def estimate_length(template: str, artist: str, title: str) -> int:
    """Length of ``template`` once both tokens are substituted at full length."""

    artist_delta = len(artist) - len(ARTIST_TOKEN)
    title_delta = len(title) - len(TITLE_TOKEN)
    return (
        len(template)
        + template.count(ARTIST_TOKEN) * artist_delta
        + template.count(TITLE_TOKEN) * title_delta
    )


def format_status(artist: str | None, title: str | None, config: FormatConfig) -> str:
    """Render the status line for ``artist`` and ``title``.

    Field budgets are applied whenever the total budget is unbounded or the
    untruncated rendering would exceed it; otherwise the values are used at
    full length.

    Raises:
        MarkerTooLongError: If a budget that has to be enforced is shorter
            than the truncation marker.
    """
    artist = artist or ""
    title = title or ""

    if not artist and not title:
        return config.placeholder

    untruncated_length = estimate_length(config.format, artist, title)

    if config.max_length is None or untruncated_length > config.max_length:
        short_title = truncate(title, config.max_title_length, config.trunc, budget="title")
        short_artist = truncate(artist, config.max_artist_length, config.trunc, budget="artist")
        rendered = substitute_tokens(config.format, short_artist, short_title)
        return truncate(rendered, config.max_length, config.trunc, budget="output")

    return substitute_tokens(config.format, artist, title)


__all__ = [
    "ARTIST_TOKEN",
    "DEFAULT_FORMAT",
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_TRUNC",
    "FormatConfig",
    "FormatError",
    "MarkerTooLongError",
    "TITLE_TOKEN",
    "estimate_length",
    "format_status",
    "substitute_tokens",
    "truncate",
]
