"""Configuration management for spotifyctl."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from spotifyctl.config.paths import default_config_path
from spotifyctl.features.playback.domain.formatter import (
    DEFAULT_FORMAT,
    DEFAULT_PLACEHOLDER,
    DEFAULT_TRUNC,
    FormatConfig,
)
from spotifyctl.platform.logging import logger

DEFAULT_PLAYER: Final[str] = "spotify"
DEFAULT_TIMEOUT_MS: Final[int] = 10_000

_LENGTH_KEYS: Final[tuple[str, ...]] = ("max_artist_length", "max_title_length", "max_length")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration.

    Values act as defaults for the command line; any option given on the
    command line wins.
    """

    # Status template and truncation
    format: str = DEFAULT_FORMAT
    trunc: str = DEFAULT_TRUNC
    placeholder: str = DEFAULT_PLACEHOLDER
    max_artist_length: int | None = None
    max_title_length: int | None = None
    max_length: int | None = None

    # MPRIS player name, as in org.mpris.MediaPlayer2.<player>
    player: str = DEFAULT_PLAYER
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    # Hide "player not running" errors
    quiet: bool = False

    # Log file path (optional)
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate numeric limits."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        for key in _LENGTH_KEYS:
            value = getattr(self, key)
            if value is not None and (not isinstance(value, int) or value <= 0):
                raise ValueError(f"{key} must be a positive integer; received {value!r}")

        if not isinstance(self.timeout_ms, int) or self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be a positive integer; received {self.timeout_ms!r}")

        if not self.player.strip():
            raise ValueError("player must not be empty")

    def format_config(
        self,
        *,
        max_artist_length: int | None = None,
        max_title_length: int | None = None,
        max_length: int | None = None,
        format: str | None = None,
        trunc: str | None = None,
    ) -> FormatConfig:
        """Build the immutable formatting options, preferring explicit overrides.

        ``None`` means "not given" and falls back to the configured value.
        """
        return FormatConfig(
            max_artist_length=(
                max_artist_length if max_artist_length is not None else self.max_artist_length
            ),
            max_title_length=(
                max_title_length if max_title_length is not None else self.max_title_length
            ),
            max_length=max_length if max_length is not None else self.max_length,
            format=format if format is not None else self.format,
            trunc=trunc if trunc is not None else self.trunc,
            placeholder=self.placeholder,
        )

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a value is out of range.
        """
        target = config_file if config_file is not None else default_config_path()

        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                for key in sorted(set(config_dict) - known):
                    logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
                    del config_dict[key]

                instance = cls(**config_dict)
                logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
                logger.debug("No configuration file at %s; using defaults", target)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance


__all__ = ["Config", "DEFAULT_PLAYER", "DEFAULT_TIMEOUT_MS"]
